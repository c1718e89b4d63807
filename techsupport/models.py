# techsupport/models.py
# Defines the standard data classes (models) for the application.

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from .errors import InvalidArgument


@dataclass(frozen=True)
class ByKey:
    """A reference to a row by its storage key (CustomerID, ProductCode, TechID)."""
    key: Union[int, str]


@dataclass(frozen=True)
class ByName:
    """A reference to a row by its human-entered Name, resolved by the DAL."""
    name: str


Ref = Union[ByKey, ByName]


@dataclass(frozen=True)
class Customer:
    customer_id: int
    name: str


@dataclass(frozen=True)
class Product:
    product_code: str
    name: str


@dataclass(frozen=True)
class Technician:
    tech_id: int
    name: str


@dataclass(frozen=True)
class Registration:
    customer_id: int
    product_code: str


def _ref_name(ref: Optional[Ref]) -> Optional[str]:
    return ref.name if isinstance(ref, ByName) else None


def _ref_key(ref: Optional[Ref]):
    return ref.key if isinstance(ref, ByKey) else None


@dataclass
class Incident:
    """
    A tech support incident report.
    This class is the "contract" between the Data Access Layer and the
    controller. Customer, product and technician are each referenced either
    by key or by name; the DAL resolves names to keys when it needs them.
    """
    title: str
    description: str
    customer: Optional[Ref] = None
    product: Optional[Ref] = None
    technician: Optional[Ref] = None
    date_opened: Optional[datetime] = None
    date_closed: Optional[datetime] = None
    incident_id: Optional[int] = None
    # Joined display names, filled in when the incident is read from the db.
    display_names: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def new(cls, title: str, description: str, customer_id: int, **kwargs) -> "Incident":
        """Builds an incident for a known customer, rejecting invalid values."""
        if not title:
            raise InvalidArgument("Incident title cannot be null or empty", "title")
        if not description:
            raise InvalidArgument("Incident description cannot be null or empty", "description")
        if customer_id is None or customer_id < 1:
            raise InvalidArgument("Invalid CustomerID", "customer_id")
        return cls(title=title, description=description, customer=ByKey(customer_id), **kwargs)

    @property
    def is_closed(self) -> bool:
        return self.date_closed is not None

    @property
    def customer_id(self) -> Optional[int]:
        return _ref_key(self.customer)

    @property
    def product_code(self) -> Optional[str]:
        return _ref_key(self.product)

    @property
    def tech_id(self) -> Optional[int]:
        return _ref_key(self.technician)

    @property
    def customer_name(self) -> Optional[str]:
        return _ref_name(self.customer) or self.display_names.get('customer')

    @property
    def product_name(self) -> Optional[str]:
        return _ref_name(self.product) or self.display_names.get('product')

    @property
    def technician_name(self) -> Optional[str]:
        return _ref_name(self.technician) or self.display_names.get('technician')

    def to_dict(self) -> dict:
        """Flat view of the incident, for DataFrames on the Streamlit pages."""
        return {
            'IncidentID': self.incident_id,
            'ProductCode': self.product_code,
            'Product': self.product_name,
            'DateOpened': self.date_opened,
            'DateClosed': self.date_closed,
            'Customer': self.customer_name,
            'Technician': self.technician_name,
            'Title': self.title,
            'Description': self.description,
        }

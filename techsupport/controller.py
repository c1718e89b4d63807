# techsupport/controller.py
# Single entry point used by the Streamlit pages to reach the TechSupport db.

from typing import List, Optional

from .dal_incident import IncidentDAL
from .dal_lookup import CustomerDAL, ProductDAL, TechnicianDAL
from .dal_registration import RegistrationDAL
from .db import TechSupportDB
from .errors import InvalidArgument
from .models import Incident
from . import validator


class TechSupportController:
    """
    Mediator between the presentation layer and the DALs.
    Only guard checks happen here; everything else is passed through.
    """
    def __init__(self, db):
        self.incident_dal = IncidentDAL(db)
        self.customer_dal = CustomerDAL(db)
        self.technician_dal = TechnicianDAL(db)
        self.product_dal = ProductDAL(db)
        self.registration_dal = RegistrationDAL(db)

    @classmethod
    def from_config(cls, config_path: str = 'config.ini') -> "TechSupportController":
        return cls(TechSupportDB.from_config(config_path))

    # --- Incidents ---

    def add_open_incident(self, incident: Incident):
        validator.validate_not_null(incident)
        self.incident_dal.add_open_incident(incident)

    def is_incident_closed(self, incident: Incident) -> bool:
        validator.validate_not_null(incident)
        return self.incident_dal.is_incident_closed(incident)

    def close_incident(self, old_incident: Incident, new_incident: Incident):
        validator.validate_exists(old_incident)
        validator.validate_exists(new_incident)
        self.incident_dal.close_open_incident(old_incident, new_incident)

    def update_incident(self, old_incident: Incident, new_incident: Incident):
        validator.validate_exists(old_incident)
        validator.validate_exists(new_incident)
        self.incident_dal.update_incident(old_incident, new_incident)

    def get_open_incidents(self) -> List[Incident]:
        return self.incident_dal.get_open_incidents()

    def get_incident_by_id(self, incident: Incident) -> Optional[Incident]:
        validator.validate_not_null(incident)
        return self.incident_dal.get_incident_by_id(incident)

    def get_last_incident_id(self) -> int:
        return self.incident_dal.get_last_incident_id()

    # --- Customers, technicians, products ---

    def get_customer_names(self) -> List[str]:
        return self.customer_dal.get_customer_names()

    def get_technician_names(self) -> List[str]:
        return self.technician_dal.get_technician_names()

    def get_product_names(self) -> List[str]:
        return self.product_dal.get_product_names()

    # --- Registrations ---

    def product_is_registered_to_customer(self, incident: Incident) -> bool:
        """True if the incident's product is registered to its customer, both given by name."""
        validator.validate_not_null(incident)
        if not incident.customer_name:
            raise InvalidArgument("Customer name cannot be null or empty", "customer_name")
        if not incident.product_name:
            raise InvalidArgument("Product name cannot be null or empty", "product_name")
        return self.registration_dal.product_is_registered_to_customer(
            incident.customer_name, incident.product_name
        )

# techsupport/validator.py
# Guard checks run before the DALs touch the database.

from .errors import InvalidArgument
from .models import ByKey, ByName


def validate_not_null(incident):
    """Raises InvalidArgument if the incident is None."""
    if incident is None:
        raise InvalidArgument("Incident cannot be null", "incident")


def validate_exists(incident):
    """
    Checks that an incident passed to update/close is present.
    Only a null check; the row itself is located later by the DAL.
    """
    validate_not_null(incident)


def validate_name(value, param_name: str):
    if value is None or not str(value).strip():
        raise InvalidArgument(f"{param_name} cannot be null or empty", param_name)


def _ref_is_set(ref) -> bool:
    if isinstance(ref, ByName):
        return bool(ref.name)
    if isinstance(ref, ByKey):
        if isinstance(ref.key, int):
            return ref.key > 0
        return bool(ref.key)
    return False


def has_required_new_fields(incident) -> bool:
    """True if the incident carries everything needed to insert it as open."""
    return (
        _ref_is_set(incident.customer)
        and _ref_is_set(incident.product)
        and incident.date_opened is not None
        and bool(incident.title)
        and bool(incident.description)
    )

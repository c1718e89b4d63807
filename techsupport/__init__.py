from .controller import TechSupportController
from .db import TechSupportDB
from .errors import InvalidArgument, NotFound, StorageFault, TechSupportError
from .models import ByKey, ByName, Customer, Incident, Product, Registration, Technician

__all__ = [
    "TechSupportController", "TechSupportDB",
    "InvalidArgument", "NotFound", "StorageFault", "TechSupportError",
    "ByKey", "ByName", "Customer", "Incident", "Product", "Registration", "Technician",
]

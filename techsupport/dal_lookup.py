# techsupport/dal_lookup.py
# Read-only DALs for the Customers, Products and Technicians tables.

from typing import List

from .db import BaseDAL
from .models import Customer, Product, Technician


class CustomerDAL(BaseDAL):

    def get_customer_names(self) -> List[str]:
        """Retrieves customer names from the TechSupport db."""
        with self._get_connection("get_customer_names") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute("SELECT Name FROM Customers ORDER BY Name;")
            return [row[0] for row in cursor.fetchall()]

    def get_customers(self) -> List[Customer]:
        with self._get_connection("get_customers") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute("SELECT CustomerID, Name FROM Customers ORDER BY Name;")
            return [Customer(customer_id=row[0], name=row[1]) for row in cursor.fetchall()]


class ProductDAL(BaseDAL):

    def get_product_names(self) -> List[str]:
        """Retrieves product names from the TechSupport db."""
        with self._get_connection("get_product_names") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute("SELECT Name FROM Products ORDER BY Name;")
            return [row[0] for row in cursor.fetchall()]

    def get_products(self) -> List[Product]:
        with self._get_connection("get_products") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute("SELECT ProductCode, Name FROM Products ORDER BY Name;")
            return [Product(product_code=row[0], name=row[1]) for row in cursor.fetchall()]


class TechnicianDAL(BaseDAL):

    def get_technician_names(self) -> List[str]:
        """Retrieves technician names from the TechSupport db."""
        with self._get_connection("get_technician_names") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute("SELECT Name FROM Technicians ORDER BY Name;")
            return [row[0] for row in cursor.fetchall()]

    def get_technicians(self) -> List[Technician]:
        with self._get_connection("get_technicians") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute("SELECT TechID, Name FROM Technicians ORDER BY Name;")
            return [Technician(tech_id=row[0], name=row[1]) for row in cursor.fetchall()]

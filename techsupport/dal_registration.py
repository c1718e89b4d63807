# techsupport/dal_registration.py
# Data Access Layer for the Registrations table.

from .db import BaseDAL
from . import validator


class RegistrationDAL(BaseDAL):
    """Answers whether a customer has registered a product."""

    def product_is_registered_to_customer(self, customer_name: str, product_name: str) -> bool:
        """
        Checks if the named product is registered to the named customer.
        Both names are required; nothing is cached between calls.
        """
        validator.validate_name(customer_name, "customer_name")
        validator.validate_name(product_name, "product_name")

        sql = """
            SELECT COUNT(*)
            FROM Registrations r
            JOIN Customers c ON r.CustomerID = c.CustomerID
            JOIN Products p ON r.ProductCode = p.ProductCode
            WHERE c.Name = %s AND p.Name = %s;
        """
        with self._get_connection("product_is_registered_to_customer") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute(sql, (customer_name, product_name))
            result = cursor.fetchone()
            return bool(result and result[0])

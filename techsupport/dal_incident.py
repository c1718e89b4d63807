# techsupport/dal_incident.py
# Data Access Layer for the Incidents table of the TechSupport database.

import logging
from typing import List, Optional

from .db import BaseDAL
from .errors import InvalidArgument, NotFound
from .models import ByKey, ByName, Incident
from . import validator

logger = logging.getLogger(__name__)

SELECT_INCIDENTS = """
    SELECT
        i.IncidentID, i.CustomerID, i.ProductCode, i.TechID,
        i.DateOpened, i.DateClosed, i.Title, i.Description,
        c.Name AS Customer, p.Name AS Product, t.Name AS Technician
    FROM Incidents i
    LEFT JOIN Customers c ON i.CustomerID = c.CustomerID
    LEFT JOIN Products p ON i.ProductCode = p.ProductCode
    LEFT JOIN Technicians t ON i.TechID = t.TechID
"""


def _row_to_incident(row: dict) -> Incident:
    return Incident(
        incident_id=row['IncidentID'],
        title=row['Title'],
        description=row['Description'],
        customer=ByKey(row['CustomerID']) if row['CustomerID'] is not None else None,
        product=ByKey(row['ProductCode']) if row['ProductCode'] is not None else None,
        technician=ByKey(row['TechID']) if row['TechID'] is not None else None,
        date_opened=row['DateOpened'],
        date_closed=row['DateClosed'],
        display_names={
            'customer': row['Customer'],
            'product': row['Product'],
            'technician': row['Technician'],
        },
    )


class IncidentDAL(BaseDAL):
    """Handles all reads and writes of incidents."""

    def get_open_incidents(self) -> List[Incident]:
        """Returns every incident that has not been closed yet."""
        sql = SELECT_INCIDENTS + " WHERE i.DateClosed IS NULL;"
        with self._get_connection("get_open_incidents") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute(sql)
            return [_row_to_incident(row) for row in self._fetch_dicts(cursor)]

    def get_incident_by_id(self, incident: Incident) -> Optional[Incident]:
        """Looks up the full incident for an incident carrying only its id."""
        validator.validate_not_null(incident)
        if incident.incident_id is None:
            raise InvalidArgument("Incident has no IncidentID", "incident")
        sql = SELECT_INCIDENTS + " WHERE i.IncidentID = %s;"
        with self._get_connection("get_incident_by_id") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute(sql, (incident.incident_id,))
            rows = self._fetch_dicts(cursor)
        return _row_to_incident(rows[0]) if rows else None

    def get_last_incident_id(self) -> int:
        """Returns the highest IncidentID, or 0 when there are no incidents."""
        with self._get_connection("get_last_incident_id") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute("SELECT MAX(IncidentID) FROM Incidents;")
            result = cursor.fetchone()
            return result[0] if result and result[0] is not None else 0

    def is_incident_closed(self, incident: Incident) -> bool:
        validator.validate_not_null(incident)
        if incident.incident_id is None:
            raise InvalidArgument("Incident has no IncidentID", "incident")
        with self._get_connection("is_incident_closed") as cnxn:
            cursor = cnxn.cursor()
            cursor.execute("SELECT DateClosed FROM Incidents WHERE IncidentID = %s;", (incident.incident_id,))
            result = cursor.fetchone()
        if result is None:
            raise NotFound("Incident", incident.incident_id)
        return result[0] is not None

    def add_open_incident(self, incident: Incident):
        """
        Inserts a new open incident.
        Customer and product may be given by name; they are resolved to
        CustomerID / ProductCode before the insert. The new IncidentID is not
        returned, use get_last_incident_id() for it.
        """
        validator.validate_not_null(incident)
        if not validator.has_required_new_fields(incident):
            raise InvalidArgument("Invalid incident. One or more values are either null or invalid", "incident")

        sql = """
            INSERT INTO Incidents (CustomerID, ProductCode, DateOpened, Title, Description)
            VALUES (%s, %s, %s, %s, %s);
        """
        with self._get_connection("add_open_incident") as cnxn:
            cursor = cnxn.cursor()
            customer_id = self._resolve_customer_id(cursor, incident.customer)
            product_code = self._resolve_product_code(cursor, incident.product)
            cursor.execute(sql, (customer_id, product_code, incident.date_opened,
                                 incident.title, incident.description))
        logger.info(f"Added open incident '{incident.title}' for customer {customer_id}, product {product_code}.")

    def close_open_incident(self, old_incident: Incident, new_incident: Incident):
        """
        Closes the incident located by old_incident's id, writing the close
        date, description and technician of new_incident. The technician is
        left unchanged when new_incident has none.
        """
        validator.validate_exists(old_incident)
        validator.validate_exists(new_incident)
        incident_id = self._require_id(old_incident)
        if new_incident.date_closed is None:
            raise InvalidArgument("A closed incident needs a DateClosed", "new_incident")
        if not new_incident.description:
            raise InvalidArgument("Incident description cannot be null or empty", "new_incident")

        sql = """
            UPDATE Incidents
            SET TechID = COALESCE(%s, TechID), DateClosed = %s, Description = %s
            WHERE IncidentID = %s;
        """
        with self._get_connection("close_open_incident") as cnxn:
            cursor = cnxn.cursor()
            tech_id = self._resolve_tech_id(cursor, new_incident.technician)
            cursor.execute(sql, (tech_id, new_incident.date_closed, new_incident.description, incident_id))
            if cursor.rowcount == 0:
                raise NotFound("Incident", incident_id)
        logger.info(f"Closed incident {incident_id} (technician {tech_id}).")

    def update_incident(self, old_incident: Incident, new_incident: Incident):
        """Overwrites the editable fields of the incident located by old_incident's id."""
        validator.validate_exists(old_incident)
        validator.validate_exists(new_incident)
        incident_id = self._require_id(old_incident)
        if not new_incident.title or not new_incident.description:
            raise InvalidArgument("Incident title and description cannot be null or empty", "new_incident")

        sql = """
            UPDATE Incidents
            SET Title = %s, Description = %s, TechID = %s,
                DateOpened = COALESCE(%s, DateOpened), DateClosed = %s
            WHERE IncidentID = %s;
        """
        with self._get_connection("update_incident") as cnxn:
            cursor = cnxn.cursor()
            tech_id = self._resolve_tech_id(cursor, new_incident.technician)
            cursor.execute(sql, (new_incident.title, new_incident.description, tech_id,
                                 new_incident.date_opened, new_incident.date_closed, incident_id))
            if cursor.rowcount == 0:
                raise NotFound("Incident", incident_id)
        logger.info(f"Updated incident {incident_id}.")

    # --- Name resolution, done per call on the caller's connection ---

    @staticmethod
    def _require_id(incident: Incident) -> int:
        if incident.incident_id is None:
            raise InvalidArgument("Incident has no IncidentID", "old_incident")
        return incident.incident_id

    @staticmethod
    def _lookup(cursor, sql: str, value, kind: str):
        if value is None or value == "":
            raise InvalidArgument(f"Cannot use null or empty {kind.lower()} name", kind.lower())
        cursor.execute(sql, (value,))
        result = cursor.fetchone()
        if result is None:
            raise NotFound(kind, value)
        return result[0]

    # Keys are checked too, so no incident points at a missing row.

    def _resolve_customer_id(self, cursor, ref) -> int:
        if isinstance(ref, ByName):
            return self._lookup(cursor, "SELECT CustomerID FROM Customers WHERE Name = %s;", ref.name, "Customer")
        return self._lookup(cursor, "SELECT CustomerID FROM Customers WHERE CustomerID = %s;", ref.key, "Customer")

    def _resolve_product_code(self, cursor, ref) -> str:
        if isinstance(ref, ByName):
            return self._lookup(cursor, "SELECT ProductCode FROM Products WHERE Name = %s;", ref.name, "Product")
        return self._lookup(cursor, "SELECT ProductCode FROM Products WHERE ProductCode = %s;", ref.key, "Product")

    def _resolve_tech_id(self, cursor, ref) -> Optional[int]:
        if ref is None:
            return None
        if isinstance(ref, ByName):
            return self._lookup(cursor, "SELECT TechID FROM Technicians WHERE Name = %s;", ref.name, "Technician")
        return self._lookup(cursor, "SELECT TechID FROM Technicians WHERE TechID = %s;", ref.key, "Technician")

# techsupport/db.py
# Connection handling for the TechSupport database.

import configparser
import logging
from contextlib import contextmanager

import pytds

from .errors import StorageFault

logger = logging.getLogger(__name__)


class TechSupportDB:
    """
    Opens connections to the TechSupport SQL Server database using pytds.
    Passed into every DAL so tests can swap in a different database.
    """
    Error = pytds.Error

    def __init__(self, server: str, database: str, user: str, password: str, port: int = 1433):
        self.server = server
        self.port = port
        self.database = database
        self.user = user
        self.password = password

    @classmethod
    def from_config(cls, config_path: str = 'config.ini') -> "TechSupportDB":
        config = configparser.ConfigParser()
        config.read(config_path)
        db_config = config['techsupport_db']

        server_and_port = db_config['server'].split(',')
        server = server_and_port[0]
        port = int(server_and_port[1]) if len(server_and_port) > 1 else 1433
        return cls(
            server=server, port=port, database=db_config['database'],
            user=db_config['user'], password=db_config['password']
        )

    def get_connection(self):
        """Establishes and returns a new database connection."""
        return pytds.connect(
            server=self.server, port=self.port, database=self.database,
            user=self.user, password=self.password,
            autocommit=True
        )


class BaseDAL:
    """Shared plumbing for the DAL classes: one connection per call."""

    def __init__(self, db):
        self.db = db

    @contextmanager
    def _get_connection(self, operation: str):
        """Yields a fresh connection, turning driver errors into StorageFault."""
        try:
            with self.db.get_connection() as cnxn:
                yield cnxn
        except self.db.Error as ex:
            logger.error(f"Database query failed in {operation}. Error: {ex}")
            raise StorageFault(f"{operation} failed: {ex}") from ex

    @staticmethod
    def _fetch_dicts(cursor):
        cols = [desc[0] for desc in cursor.description]
        return [dict(zip(cols, row)) for row in cursor.fetchall()]

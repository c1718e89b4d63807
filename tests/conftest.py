"""
Shared fixtures: an SQLite copy of the TechSupport schema behind the same
get_connection() / Error interface as TechSupportDB.
"""

import sqlite3
from datetime import datetime

import pytest

sqlite3.register_adapter(datetime, lambda value: value.isoformat(" "))
sqlite3.register_converter("TIMESTAMP", lambda raw: datetime.fromisoformat(raw.decode()))

SCHEMA = """
CREATE TABLE Customers (CustomerID INTEGER PRIMARY KEY, Name TEXT NOT NULL);
CREATE TABLE Products (ProductCode TEXT PRIMARY KEY, Name TEXT NOT NULL);
CREATE TABLE Technicians (TechID INTEGER PRIMARY KEY, Name TEXT NOT NULL);
CREATE TABLE Registrations (
    CustomerID INTEGER NOT NULL REFERENCES Customers(CustomerID),
    ProductCode TEXT NOT NULL REFERENCES Products(ProductCode),
    PRIMARY KEY (CustomerID, ProductCode)
);
CREATE TABLE Incidents (
    IncidentID INTEGER PRIMARY KEY AUTOINCREMENT,
    CustomerID INTEGER NOT NULL REFERENCES Customers(CustomerID),
    ProductCode TEXT NOT NULL REFERENCES Products(ProductCode),
    TechID INTEGER REFERENCES Technicians(TechID),
    DateOpened TIMESTAMP NOT NULL,
    DateClosed TIMESTAMP,
    Title TEXT NOT NULL,
    Description TEXT NOT NULL
);
"""

OPENED_AT = datetime(2026, 1, 5, 9, 30)
CLOSED_AT = datetime(2026, 1, 8, 16, 0)


class SQLiteCursor:
    """Translates the pyformat placeholders used by the DALs into qmark."""

    def __init__(self, cursor, log):
        self._cursor = cursor
        self._log = log

    def execute(self, sql, params=()):
        self._log.append(sql)
        return self._cursor.execute(sql.replace('%s', '?'), params)

    def __getattr__(self, name):
        return getattr(self._cursor, name)


class SQLiteConnection:

    def __init__(self, db):
        self._db = db
        self._cnxn = sqlite3.connect(db.path, detect_types=sqlite3.PARSE_DECLTYPES, isolation_level=None)
        self._cnxn.execute("PRAGMA foreign_keys = ON;")

    def cursor(self):
        return SQLiteCursor(self._cnxn.cursor(), self._db.queries)

    def close(self):
        self._cnxn.close()
        self._db.closed += 1

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class SQLiteDB:
    Error = sqlite3.Error

    def __init__(self, path):
        self.path = str(path)
        self.opened = 0
        self.closed = 0
        self.queries = []

    def get_connection(self):
        self.opened += 1
        return SQLiteConnection(self)

    def execute(self, sql, params=()):
        """Runs a statement outside the DALs, for arranging and checking rows."""
        cnxn = sqlite3.connect(self.path, detect_types=sqlite3.PARSE_DECLTYPES, isolation_level=None)
        try:
            return cnxn.execute(sql, params).fetchall()
        finally:
            cnxn.close()

    def count_incidents(self) -> int:
        return self.execute("SELECT COUNT(*) FROM Incidents")[0][0]


class BrokenDB:
    """A database whose every connection attempt fails."""
    Error = sqlite3.Error

    def get_connection(self):
        raise sqlite3.OperationalError("unable to open database file")


@pytest.fixture
def db(tmp_path):
    database = SQLiteDB(tmp_path / "techsupport.db")
    cnxn = sqlite3.connect(database.path, isolation_level=None)
    try:
        cnxn.executescript(SCHEMA)
        cnxn.executemany("INSERT INTO Customers VALUES (?, ?)", [
            (1, "Kaitlyn Anthony"), (2, "Kenzie Quinn"), (3, "Anton Mauro"),
        ])
        cnxn.executemany("INSERT INTO Products VALUES (?, ?)", [
            ("DRAFT10", "Draft Manager 1.0"),
            ("LEAG10", "League Scheduler 1.0"),
            ("TRNY10", "Tournament Master 1.0"),
        ])
        cnxn.executemany("INSERT INTO Technicians VALUES (?, ?)", [
            (11, "Alison Diaz"), (12, "Jason Lee"),
        ])
        cnxn.execute("INSERT INTO Registrations VALUES (1, 'DRAFT10')")
        cnxn.execute(
            "INSERT INTO Incidents (CustomerID, ProductCode, TechID, DateOpened, DateClosed, Title, Description) "
            "VALUES (1, 'DRAFT10', NULL, ?, NULL, 'Could not install', 'Setup fails with error 1603.')",
            (OPENED_AT,),
        )
        cnxn.execute(
            "INSERT INTO Incidents (CustomerID, ProductCode, TechID, DateOpened, DateClosed, Title, Description) "
            "VALUES (2, 'LEAG10', 11, ?, ?, 'Error importing data', 'Import wizard crashes.')",
            (OPENED_AT, CLOSED_AT),
        )
    finally:
        cnxn.close()
    return database


@pytest.fixture
def broken_db():
    return BrokenDB()

"""Tests for the registration check and the name listers."""

import pytest

from techsupport.dal_lookup import CustomerDAL, ProductDAL, TechnicianDAL
from techsupport.dal_registration import RegistrationDAL
from techsupport.errors import InvalidArgument, StorageFault
from techsupport.models import Customer, Product, Technician


class TestRegistrationCheck:

    def test_registered(self, db):
        assert RegistrationDAL(db).product_is_registered_to_customer("Kaitlyn Anthony", "Draft Manager 1.0")

    def test_not_registered(self, db):
        assert not RegistrationDAL(db).product_is_registered_to_customer("Kenzie Quinn", "Draft Manager 1.0")

    def test_unknown_names(self, db):
        assert not RegistrationDAL(db).product_is_registered_to_customer("Nobody", "Nothing")

    def test_new_registration_seen_on_next_call(self, db):
        dal = RegistrationDAL(db)
        assert not dal.product_is_registered_to_customer("Anton Mauro", "Tournament Master 1.0")
        db.execute("INSERT INTO Registrations VALUES (3, 'TRNY10')")
        assert dal.product_is_registered_to_customer("Anton Mauro", "Tournament Master 1.0")

    @pytest.mark.parametrize("customer, product", [
        ("", "Draft Manager 1.0"),
        (None, "Draft Manager 1.0"),
        ("Kaitlyn Anthony", ""),
        ("Kaitlyn Anthony", None),
    ])
    def test_empty_names_rejected_before_query(self, db, customer, product):
        with pytest.raises(InvalidArgument):
            RegistrationDAL(db).product_is_registered_to_customer(customer, product)
        assert db.opened == 0
        assert db.queries == []

    def test_storage_fault(self, broken_db):
        with pytest.raises(StorageFault):
            RegistrationDAL(broken_db).product_is_registered_to_customer("a", "b")


class TestLookups:

    def test_customer_names(self, db):
        assert CustomerDAL(db).get_customer_names() == ["Anton Mauro", "Kaitlyn Anthony", "Kenzie Quinn"]

    def test_customers(self, db):
        assert Customer(2, "Kenzie Quinn") in CustomerDAL(db).get_customers()

    def test_product_names(self, db):
        assert set(ProductDAL(db).get_product_names()) == {
            "Draft Manager 1.0", "League Scheduler 1.0", "Tournament Master 1.0",
        }

    def test_products(self, db):
        assert Product("LEAG10", "League Scheduler 1.0") in ProductDAL(db).get_products()

    def test_technician_names(self, db):
        assert TechnicianDAL(db).get_technician_names() == ["Alison Diaz", "Jason Lee"]

    def test_technicians(self, db):
        assert TechnicianDAL(db).get_technicians() == [Technician(11, "Alison Diaz"), Technician(12, "Jason Lee")]

    def test_each_call_closes_its_connection(self, db):
        CustomerDAL(db).get_customer_names()
        TechnicianDAL(db).get_technician_names()
        assert db.opened == db.closed == 2

import sqlite3
import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from shared.helpers.exception_handler import describe_integrity_error, setup_exception_handlers


class PgIntegrityError(Exception):
    """Stands in for a driver error that carries a SQLSTATE code."""

    def __init__(self, pgcode, message):
        super().__init__(message)
        self.pgcode = pgcode


def integrity_error(orig):
    return IntegrityError("INSERT INTO sds (supplier_id) VALUES (?)", {}, orig)


class TestDescribeIntegrityError(unittest.TestCase):

    def test_not_null_is_a_required_value(self):
        status, code, _ = describe_integrity_error(
            integrity_error(sqlite3.IntegrityError("NOT NULL constraint failed: sds.supplier_id")))
        self.assertEqual(status, 422)
        self.assertEqual(code, "203")

        status, code, _ = describe_integrity_error(
            integrity_error(PgIntegrityError("23502", 'null value in column "supplier_id"')))
        self.assertEqual((status, code), (422, "203"))

    def test_foreign_key_is_invalid_input(self):
        status, code, _ = describe_integrity_error(
            integrity_error(sqlite3.IntegrityError("FOREIGN KEY constraint failed")))
        self.assertEqual((status, code), (400, "202"))

        status, code, _ = describe_integrity_error(
            integrity_error(PgIntegrityError("23503", "insert or update violates a constraint")))
        self.assertEqual((status, code), (400, "202"))

    def test_unique_is_a_duplicate(self):
        status, code, _ = describe_integrity_error(
            integrity_error(sqlite3.IntegrityError("UNIQUE constraint failed: products.product_code")))
        self.assertEqual((status, code), (409, "204"))

        status, code, _ = describe_integrity_error(
            integrity_error(PgIntegrityError("23505", "duplicate key value violates unique constraint")))
        self.assertEqual((status, code), (409, "204"))


def _app_raising(orig):
    app = FastAPI()
    setup_exception_handlers(app)

    @app.post("/items")
    def create_item():
        raise integrity_error(orig)

    return TestClient(app)


def test_not_null_violation_response():
    client = _app_raising(sqlite3.IntegrityError("NOT NULL constraint failed: sds.supplier_id"))

    resp = client.post("/items")
    assert resp.status_code == 422
    assert resp.json()["status_code"] == "203"
    assert resp.json()["message"] == "A required value is missing"


def test_unique_violation_response():
    client = _app_raising(sqlite3.IntegrityError("UNIQUE constraint failed: suppliers.supplier_name"))

    resp = client.post("/items")
    assert resp.status_code == 409
    assert resp.json()["status_code"] == "204"

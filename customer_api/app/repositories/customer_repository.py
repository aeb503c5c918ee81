"""
Data access for the ``customers`` table.

Every method opens its own connection, runs one statement and closes
the connection again, so no state is shared between requests.  All
queries use parameterized statements.

Email uniqueness is enforced by the ``ux_customers_email_address``
index; an ``IntegrityError`` raised by it is translated into
``DuplicateEmailError`` so callers do not depend on ``sqlite3``.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from dataclasses import replace
from typing import List, Optional
from uuid import UUID

from customer_api.app.core.db import get_connection
from customer_api.app.core.exceptions import DuplicateEmailError
from customer_api.app.models.customer import Customer

logger = logging.getLogger(__name__)

_COLUMNS = "id, phone_number, first_name, middle_name, last_name, email_address"


class CustomerRepository:
    """Persistence operations for ``Customer`` entities."""

    def create(self, customer: Customer) -> Customer:
        """Insert ``customer`` and return it with its id populated.

        A fresh UUID is generated when ``customer.id`` is ``None``.
        """
        if customer.id is None:
            customer = replace(customer, id=uuid.uuid4())
        conn = get_connection()
        try:
            conn.execute(
                f"INSERT INTO customers ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                self._params(customer),
            )
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            self._check_duplicate_email(exc, customer)
            raise
        finally:
            conn.close()
        return customer

    def find_by_id(self, customer_id: UUID) -> Optional[Customer]:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM customers WHERE id = ?",
                (str(customer_id),),
            ).fetchone()
            return Customer.from_row(row) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[Customer]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM customers ORDER BY rowid"
            ).fetchall()
            return [Customer.from_row(row) for row in rows]
        finally:
            conn.close()

    def save(self, customer: Customer) -> Customer:
        """Insert or update ``customer`` keyed by its id."""
        if customer.id is None:
            return self.create(customer)
        conn = get_connection()
        try:
            conn.execute(
                f"""
                INSERT INTO customers ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    phone_number = excluded.phone_number,
                    first_name = excluded.first_name,
                    middle_name = excluded.middle_name,
                    last_name = excluded.last_name,
                    email_address = excluded.email_address
                """,
                self._params(customer),
            )
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            self._check_duplicate_email(exc, customer)
            raise
        finally:
            conn.close()
        return customer

    def exists_by_id(self, customer_id: UUID) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM customers WHERE id = ?", (str(customer_id),)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def exists_by_email(self, email_address: str) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM customers WHERE email_address = ?", (email_address,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def delete_by_id(self, customer_id: UUID) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM customers WHERE id = ?", (str(customer_id),))
            conn.commit()
        finally:
            conn.close()

    def delete_all(self) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM customers")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _params(customer: Customer) -> tuple:
        return (
            str(customer.id),
            customer.phone_number,
            customer.first_name,
            customer.middle_name,
            customer.last_name,
            customer.email_address,
        )

    @staticmethod
    def _check_duplicate_email(exc: sqlite3.IntegrityError, customer: Customer) -> None:
        # SQLite reports the offending column, e.g.
        # "UNIQUE constraint failed: customers.email_address".
        if "customers.email_address" in str(exc):
            logger.warning("Unique index rejected email %s", customer.email_address)
            raise DuplicateEmailError(customer.email_address) from exc

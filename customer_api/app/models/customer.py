"""Customer entity as stored in the ``customers`` table."""

import sqlite3
from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass
class Customer:
    """A single customer record.

    ``id`` is ``None`` until the repository assigns one on insert.
    """

    phone_number: str
    first_name: str
    last_name: str
    email_address: str
    middle_name: Optional[str] = None
    id: Optional[UUID] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Customer":
        return cls(
            id=UUID(row["id"]),
            phone_number=row["phone_number"],
            first_name=row["first_name"],
            middle_name=row["middle_name"],
            last_name=row["last_name"],
            email_address=row["email_address"],
        )

"""
Pydantic schema for employee records.

An employee has a store-assigned integer ``id`` and three text fields.
An ``id`` of ``0`` (or a missing ``id``) marks a record that has not
been persisted yet.  On the wire the fields use camelCase names
(``firstName``, ``lastName``); snake_case names are accepted on input
as well.
"""

import sqlite3

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Employee(BaseModel):
    """Schema for an employee record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int = Field(0, ge=0, description="Store-assigned identifier; 0 means not yet persisted")
    first_name: str = Field(..., description="Employee first name")
    last_name: str = Field(..., description="Employee last name")
    email: str = Field(..., description="Employee e-mail address")

    @property
    def is_new(self) -> bool:
        return not self.id

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Employee":
        """Convert a database row to an ``Employee`` instance."""
        return cls(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )

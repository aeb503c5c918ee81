"""
Pydantic schema for the customer transfer representation.

The same shape is used for request and response bodies.  Fields are
camelCase on the wire (``firstName``, ``emailAddress``...) and
snake_case in Python.  ``id`` is assigned by the server: it is ignored
on create and taken from the URL on update.

Validation runs before any service code is reached.  A missing, null
or blank required field, a phone number that is not exactly ten digits or
a malformed email address fails the request with HTTP 400.
"""

import re
from typing import Optional
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

PHONE_NUMBER_PATTERN = re.compile(r"[0-9]{10}")

_MANDATORY_MESSAGES = {
    "phone_number": "Phone number is mandatory",
    "first_name": "First name is mandatory",
    "last_name": "Last name is mandatory",
    "email_address": "Email address is mandatory",
}


class CustomerDTO(BaseModel):
    """Wire representation of a customer."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[UUID] = Field(None, description="Server-assigned identifier")
    phone_number: str = Field(..., alias="phoneNumber", examples=["0987654321"])
    first_name: str = Field(..., alias="firstName", examples=["Jane"])
    middle_name: Optional[str] = Field(None, alias="middleName")
    last_name: str = Field(..., alias="lastName", examples=["Smith"])
    email_address: str = Field(..., alias="emailAddress", examples=["jane.smith@example.com"])

    @field_validator("phone_number", "first_name", "last_name", "email_address", mode="before")
    @classmethod
    def check_mandatory(cls, value, info: ValidationInfo):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(_MANDATORY_MESSAGES[info.field_name])
        return value

    @field_validator("phone_number")
    @classmethod
    def check_phone_number(cls, value: str) -> str:
        if not PHONE_NUMBER_PATTERN.fullmatch(value):
            raise ValueError("Phone number must be exactly 10 digits")
        return value

    @field_validator("email_address")
    @classmethod
    def check_email_address(cls, value: str) -> str:
        try:
            # Dotless hosts (e.g. "jane@mailhost") are allowed; special-use
            # names such as "localhost" are still rejected by email-validator.
            validate_email(value, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError:
            raise ValueError("Email should be valid")
        return value

    @classmethod
    def mandatory_message(cls, wire_name: str) -> Optional[str]:
        """Message for an absent required field, looked up by its wire name."""
        for name, field in cls.model_fields.items():
            if field.alias == wire_name or name == wire_name:
                return _MANDATORY_MESSAGES.get(name)
        return None

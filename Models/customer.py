# Models/customer.py
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

TEXT_FIELDS = ("name", "address", "phone", "email", "country", "contact")


class Customer(BaseModel):
    """A fully materialized customer record as held in the store."""

    # Primary identifier, None only when a client sent a malformed id
    id: Optional[Union[int, float]] = None

    # Company information
    name: str
    address: str
    phone: str
    email: str

    # Timestamps
    lastupdate: str

    country: str

    # Status
    active: bool

    contact: str

    def __repr__(self):
        return f"<Customer {self.id} {self.name}>"


class CustomerPayload(BaseModel):
    """Partial customer data as sent by a client, every field optional."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, float, str]] = None
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    lastupdate: Optional[str] = None
    country: Optional[str] = None
    active: Optional[bool] = None
    contact: Optional[str] = None

    @field_validator(*TEXT_FIELDS, "lastupdate", mode="before")
    @classmethod
    def numbers_as_text(cls, value):
        # Front ends often send phone numbers and the like as JSON numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

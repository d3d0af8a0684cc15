# Services/errors.py
from typing import Optional, Union


class CustomerError(Exception):
    """Base class for errors caused by what the client sent."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInput(CustomerError):
    """The body (update) or query (delete) did not identify a customer."""

    def __init__(self, source: str):
        label = "Body" if source == "body" else "Query"
        super().__init__(f"{label} was not sent!")
        self.source = source


class RecordNotFound(CustomerError):
    """No customer in the store has the requested id."""

    def __init__(self, record_id: Optional[Union[int, float, str]], source: str):
        super().__init__("ID was not found!")
        self.record_id = record_id
        self.source = source

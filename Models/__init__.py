# Models/__init__.py
from .customer import Customer, CustomerPayload, TEXT_FIELDS

__all__ = [
    'Customer',
    'CustomerPayload',
    'TEXT_FIELDS'
]

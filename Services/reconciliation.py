# Services/reconciliation.py
import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Union

from Models import Customer, CustomerPayload
from Services.customer_factory import (
    NOT_FOUND,
    DefaultStrategy,
    generate,
    source_id,
    timestamp,
    validate,
)
from Services.errors import MissingInput, RecordNotFound
from database import CustomerStore

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    UPDATE = "update"
    DELETE = "delete"


def reconcile(
    store: CustomerStore,
    body: Optional[CustomerPayload],
    query: Optional[CustomerPayload],
    mode: Mode,
    strategy: Union[DefaultStrategy, str] = DefaultStrategy.FALSY,
    now: Optional[Callable[[], datetime]] = None,
) -> Customer:
    """Update or delete the customer identified by the request.

    An update identifies the customer through the body, a delete through
    the query string. The returned record is the edited customer, or for a
    delete the customer as it was removed.
    """
    source_name = "body" if mode is Mode.UPDATE else "query"
    source = body if mode is Mode.UPDATE else query

    if source_id(source) is None:
        raise MissingInput(source_name)

    index = validate(store, source)
    if index == NOT_FOUND:
        raise RecordNotFound(source_id(source), source_name)

    edited = generate(
        store,
        body,
        preserve_id=True,
        fallback_id=source_id(query),
        strategy=strategy,
        now=now,
    )
    edited.lastupdate = timestamp(now)

    if mode is Mode.UPDATE:
        store.replace(index, edited)
        logger.info("Updated customer %s at position %d", edited.id, index)
    else:
        store.remove(index)
        logger.info("Deleted customer %s at position %d", edited.id, index)

    return edited

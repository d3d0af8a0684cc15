# Services/customer_factory.py
"""
Building and locating customer records.

``generate`` turns a partial client payload into a complete ``Customer``,
filling every missing field with a placeholder. ``validate`` finds where a
customer sits in the store. Neither function mutates the store; committing
records is left to the router and ``Services.reconciliation``.
"""
import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from Models import Customer, CustomerPayload
from database import CustomerStore

NOT_FOUND = -1

DEFAULTS = {
    "name": "No Name",
    "address": "No Address",
    "phone": "No Phone",
    "email": "No Email",
    "country": "No Country",
    "active": True,
    "contact": "No Contact",
}

Number = Union[int, float]
Source = Union[CustomerPayload, Mapping[str, Any], None]


class DefaultStrategy(str, Enum):
    """How to decide whether a payload field was supplied.

    FALSY treats "", 0, False and None as missing, which means ``active``
    can never be switched off. PRESENCE only treats omitted or null fields
    as missing.
    """

    FALSY = "falsy"
    PRESENCE = "presence"


def timestamp(now: Optional[Callable[[], datetime]] = None) -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    moment = now() if now else datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_id(value: Any) -> Optional[Number]:
    """Parse a client supplied id; anything that is not a finite number gives None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            return int(value)
    return value


def id_text(value: Any) -> str:
    """Render an id as text so 1, 1.0 and "1" compare equal."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def source_id(source: Source) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        value = source.get("id")
    else:
        value = getattr(source, "id", None)
    if value == "":
        return None
    return value


def _supplied(value: Any, strategy: DefaultStrategy) -> bool:
    if strategy is DefaultStrategy.PRESENCE:
        return value is not None
    return bool(value)


def generate(
    store: CustomerStore,
    payload: Optional[CustomerPayload] = None,
    preserve_id: bool = False,
    fallback_id: Any = None,
    strategy: Union[DefaultStrategy, str] = DefaultStrategy.FALSY,
    now: Optional[Callable[[], datetime]] = None,
) -> Customer:
    """Create a customer object from ``payload``.

    With ``preserve_id`` the id comes from the payload, or from
    ``fallback_id`` (the query string id) when the payload has none. It is
    not checked against the store here; see ``validate``. Otherwise a new
    id one above the current maximum is assigned.
    """
    strategy = DefaultStrategy(strategy)
    payload = payload or CustomerPayload()

    # The id is never subject to the defaulting strategy: 0 is a real id
    if not preserve_id:
        record_id = store.next_id()
    else:
        record_id = source_id(payload)
        if record_id is None:
            record_id = fallback_id

    fields = {}
    for name, default in DEFAULTS.items():
        value = getattr(payload, name)
        fields[name] = value if _supplied(value, strategy) else default

    lastupdate = payload.lastupdate
    if not _supplied(lastupdate, strategy):
        lastupdate = timestamp(now)

    return Customer(id=parse_id(record_id), lastupdate=lastupdate, **fields)


def validate(store: CustomerStore, source: Source) -> int:
    """Return the index of the customer identified by ``source``, or NOT_FOUND."""
    wanted = source_id(source)
    if wanted is None:
        return NOT_FOUND

    wanted = id_text(wanted)
    for index, customer in enumerate(store):
        if id_text(customer.id) == wanted:
            return index
    return NOT_FOUND

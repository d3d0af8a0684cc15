# database.py
import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from fastapi import Request

from Models import Customer

logger = logging.getLogger(__name__)


class CustomerStore:
    """Ordered in-memory collection of customers.

    Nothing is ever written back to disk; every restart begins again from
    the seed file.
    """

    def __init__(self, customers: Optional[Iterable[Customer]] = None):
        self._customers: List[Customer] = list(customers or [])

    def __len__(self) -> int:
        return len(self._customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    def __getitem__(self, index: int) -> Customer:
        return self._customers[index]

    def snapshot(self) -> List[Customer]:
        return list(self._customers)

    def ids(self) -> List[Union[int, float]]:
        return [c.id for c in self._customers if c.id is not None]

    def next_id(self) -> int:
        ids = self.ids()
        # Tom databas: första kunden får id 1
        if not ids:
            return 1
        return max(ids) + 1

    def append(self, customer: Customer) -> Customer:
        self._customers.append(customer)
        return customer

    def replace(self, index: int, customer: Customer) -> Customer:
        self._customers[index] = customer
        return customer

    def remove(self, index: int) -> Customer:
        return self._customers.pop(index)

    def seed(self, customers: Iterable[Customer]) -> None:
        self._customers = list(customers)


def load_seed(path: Union[str, Path]) -> List[Customer]:
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array of customers")
    return [Customer.model_validate(item) for item in raw]


def init_db(store: CustomerStore, seed_file: Union[str, Path]) -> None:
    store.seed(load_seed(seed_file))
    logger.info("Loaded %d customers from %s", len(store), seed_file)


# Dependency för FastAPI
def get_store(request: Request) -> CustomerStore:
    return request.app.state.store

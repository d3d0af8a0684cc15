# Services/customer_router.py
from fastapi import APIRouter, Body, Depends, Query, Request
from pydantic import BaseModel
from typing import List, Optional
import logging
import math
import sys

from Models import Customer, CustomerPayload
from Services.customer_factory import DefaultStrategy, generate, id_text
from Services.reconciliation import Mode, reconcile
from database import CustomerStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


class CustomerList(BaseModel):
    customers: List[Customer] = []


def get_strategy(request: Request) -> DefaultStrategy:
    return DefaultStrategy(request.app.state.settings.default_strategy)


# Helper functions
def slice_count(qty: str) -> int:
    """Turn a ``qty`` query value into a slice end; non-numeric text gives 0."""
    try:
        count = float(qty)
    except ValueError:
        return 0
    if math.isnan(count):
        return 0
    if math.isinf(count):
        return sys.maxsize if count > 0 else -sys.maxsize
    return int(count)


def query_payload(customer_id: Optional[str]) -> Optional[CustomerPayload]:
    if customer_id is None:
        return None
    return CustomerPayload(id=customer_id)


# API Endpoints
@router.get("", response_model=CustomerList)
async def list_customers(
    id: Optional[str] = Query(default=None, description="Only the customer with this id"),
    qty: Optional[str] = Query(default=None, description="Return at most this many customers"),
    store: CustomerStore = Depends(get_store)
):
    result = store.snapshot()

    if id:
        result = [c for c in result if id_text(c.id) == id]

    if qty:
        result = result[:slice_count(qty)]

    return CustomerList(customers=result)


@router.post("", response_model=Customer)
async def create_customer(
    customer: Optional[CustomerPayload] = Body(default=None),
    store: CustomerStore = Depends(get_store),
    strategy: DefaultStrategy = Depends(get_strategy)
):
    new_customer = generate(store, customer, strategy=strategy)
    store.append(new_customer)
    logger.info("Created customer %s", new_customer.id)
    return new_customer


@router.put("", response_model=Customer)
async def update_customer(
    customer: Optional[CustomerPayload] = Body(default=None),
    id: Optional[str] = Query(default=None),
    store: CustomerStore = Depends(get_store),
    strategy: DefaultStrategy = Depends(get_strategy)
):
    return reconcile(store, customer, query_payload(id), Mode.UPDATE, strategy=strategy)


@router.delete("", response_model=Customer)
async def delete_customer(
    id: Optional[str] = Query(default=None),
    customer: Optional[CustomerPayload] = Body(default=None),
    store: CustomerStore = Depends(get_store),
    strategy: DefaultStrategy = Depends(get_strategy)
):
    return reconcile(store, customer, query_payload(id), Mode.DELETE, strategy=strategy)

"""
Customer business rules.

INVARIANTS:
- No two customers share an email (checked here, enforced again by the DB constraint)
- id is assigned by the store, never taken from the request
- An update must change at least one field; staged values are applied only
  after every check has passed
"""

from __future__ import annotations

import logging
from typing import Any

from app.crm.errors import DuplicateResourceError, RequestValidationError, ResourceNotFoundError
from app.crm.modules.customers.models import Customer
from app.crm.modules.customers.schemas import CustomerRegistrationRequest, CustomerUpdateRequest
from app.crm.modules.customers.store import CustomerStore

logger = logging.getLogger(__name__)


def _not_found(customer_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(f"customer with id [{customer_id}] not found")


class CustomerService:
    """
    Validates customer requests and delegates persistence to a CustomerStore.
    """

    def __init__(self, store: CustomerStore):
        self.store = store

    def list_customers(self) -> list[Customer]:
        return self.store.list_all()

    def get_customer(self, customer_id: int) -> Customer:
        customer = self.store.find_by_id(customer_id)
        if customer is None:
            raise _not_found(customer_id)
        return customer

    def add_customer(self, request: CustomerRegistrationRequest) -> Customer:
        if self.store.exists_by_email(request.email):
            logger.warning("Rejected customer create: email in use")
            raise DuplicateResourceError("email already exists")

        customer = Customer(
            name=request.name,
            email=request.email,
            age=request.age,
            gender=request.gender,
        )
        self.store.insert(customer)
        logger.info("Created customer id=%s", customer.id)
        return customer

    def remove_customer_by_id(self, customer_id: int) -> None:
        if not self.store.exists_by_id(customer_id):
            raise _not_found(customer_id)
        self.store.delete_by_id(customer_id)
        logger.info("Deleted customer id=%s", customer_id)

    def update_customer(self, customer_id: int, request: CustomerUpdateRequest) -> Customer:
        customer = self.get_customer(customer_id)

        staged: dict[str, Any] = {}
        for attr in ("name", "email", "age"):
            new = getattr(request, attr)
            if new is not None and new != getattr(customer, attr):
                staged[attr] = new

        if "email" in staged and self.store.exists_by_email(staged["email"]):
            logger.warning("Rejected update of customer id=%s: email in use", customer_id)
            raise DuplicateResourceError("email already taken")

        if not staged:
            logger.warning("Rejected update of customer id=%s: no changes", customer_id)
            raise RequestValidationError("No data changes found")

        for attr, value in staged.items():
            setattr(customer, attr, value)
        self.store.update(customer)
        logger.info("Updated customer id=%s fields=%s", customer_id, sorted(staged))
        return customer

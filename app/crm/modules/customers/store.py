"""Customer persistence: the store interface and its SQLAlchemy implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlalchemy import delete, exists, select
from sqlalchemy.orm import Session

from app.crm.modules.customers.models import Customer


class CustomerStore(ABC):
    """
    Persistence boundary for Customer records.

    The service only talks to this interface, so tests can swap in a mock.
    """

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """List all customers."""

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Customer | None:
        """Get customer by id, or None."""

    @abstractmethod
    def exists_by_id(self, customer_id: int) -> bool:
        pass

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    def insert(self, customer: Customer) -> None:
        """Persist a new customer. Assigns customer.id."""

    @abstractmethod
    def update(self, customer: Customer) -> None:
        """Overwrite the stored record with the same id."""

    @abstractmethod
    def delete_by_id(self, customer_id: int) -> None:
        pass


class SqlCustomerStore(CustomerStore):
    """
    SQLAlchemy-backed store.

    Never commits: the caller owns the transaction (request handler or session_scope).
    """

    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> list[Customer]:
        return list(self.session.scalars(select(Customer).order_by(Customer.id.asc())))

    def find_by_id(self, customer_id: int) -> Customer | None:
        return self.session.get(Customer, customer_id)

    def exists_by_id(self, customer_id: int) -> bool:
        return bool(self.session.scalar(select(exists().where(Customer.id == customer_id))))

    def exists_by_email(self, email: str) -> bool:
        return bool(self.session.scalar(select(exists().where(Customer.email == email))))

    def insert(self, customer: Customer) -> None:
        self.session.add(customer)
        self.session.flush()

    def update(self, customer: Customer) -> None:
        self.session.merge(customer)
        self.session.flush()

    def delete_by_id(self, customer_id: int) -> None:
        self.session.execute(
            delete(Customer).where(Customer.id == customer_id),
            execution_options={"synchronize_session": "fetch"},
        )

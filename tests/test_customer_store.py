"""SqlCustomerStore against a throwaway SQLite database."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.crm.models import Base
from app.crm.modules.customers.models import Customer, Gender, Role
from app.crm.modules.customers.store import SqlCustomerStore


@pytest.fixture()
def session(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path/'store.db'}")
    Base.metadata.create_all(bind=engine)
    sm = sessionmaker(bind=engine, class_=Session, autoflush=False, expire_on_commit=False)
    s = sm()
    try:
        yield s
    finally:
        s.close()
        engine.dispose()


@pytest.fixture()
def store(session):
    return SqlCustomerStore(session)


def _customer(name: str, email: str, age: int = 30, gender: Gender = Gender.FEMALE) -> Customer:
    return Customer(name=name, email=email, age=age, gender=gender)


def test_insert_assigns_id_and_default_role(store, session):
    c = _customer("Alex", "alex@mailservice.com")
    store.insert(c)
    session.commit()

    assert c.id is not None
    assert c.role == Role.USER
    assert store.find_by_id(c.id) is c


def test_list_all_ordered_by_id(store, session):
    for i in range(3):
        store.insert(_customer(f"C{i}", f"c{i}@mailservice.com"))
    session.commit()

    ids = [c.id for c in store.list_all()]
    assert ids == sorted(ids)
    assert len(ids) == 3


def test_exists_checks(store, session):
    c = _customer("Alex", "alex@mailservice.com")
    store.insert(c)
    session.commit()

    assert store.exists_by_id(c.id) is True
    assert store.exists_by_id(c.id + 100) is False
    assert store.exists_by_email("alex@mailservice.com") is True
    assert store.exists_by_email("nobody@mailservice.com") is False


def test_find_missing_returns_none(store):
    assert store.find_by_id(12345) is None


def test_update_overwrites_record(store, session):
    c = _customer("Alex", "alex@mailservice.com")
    store.insert(c)
    session.commit()

    c.name = "Alexandra"
    c.age = 31
    store.update(c)
    session.commit()
    session.expunge_all()

    reloaded = store.find_by_id(c.id)
    assert reloaded.name == "Alexandra"
    assert reloaded.age == 31
    assert reloaded.email == "alex@mailservice.com"


def test_delete_by_id(store, session):
    keep = _customer("Keep", "keep@mailservice.com")
    gone = _customer("Gone", "gone@mailservice.com")
    store.insert(keep)
    store.insert(gone)
    session.commit()

    store.delete_by_id(gone.id)
    session.commit()

    assert store.exists_by_id(gone.id) is False
    assert [c.id for c in store.list_all()] == [keep.id]


def test_unique_email_enforced_by_database(store, session):
    store.insert(_customer("One", "same@mailservice.com"))
    with pytest.raises(IntegrityError):
        store.insert(_customer("Two", "same@mailservice.com"))
    session.rollback()

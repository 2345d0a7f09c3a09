from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.crm.db import db_session
from app.crm.modules.customers.models import Customer
from app.crm.modules.customers.schemas import CustomerRegistrationRequest, CustomerUpdateRequest
from app.crm.modules.customers.service import CustomerService
from app.crm.modules.customers.store import SqlCustomerStore

bp = Blueprint("customers", __name__)


def _service() -> CustomerService:
    return CustomerService(SqlCustomerStore(db_session()))


def customer_to_dict(c: Customer) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "email": c.email,
        "gender": c.gender.name if c.gender else None,
        "age": c.age,
        "role": c.role.name if c.role else None,
    }


# ---------- List ----------
@bp.get("/customers")
def customers_list():
    return jsonify([customer_to_dict(c) for c in _service().list_customers()])


# ---------- Detail ----------
@bp.get("/customers/<int:customer_id>")
def customer_detail(customer_id: int):
    return jsonify(customer_to_dict(_service().get_customer(customer_id)))


# ---------- Create ----------
@bp.post("/customers")
def customers_create():
    payload = CustomerRegistrationRequest.from_payload(request.get_json(silent=True))
    customer = _service().add_customer(payload)
    db_session().commit()
    return jsonify(customer_to_dict(customer)), 201


# ---------- Update ----------
@bp.put("/customers/<int:customer_id>")
def customer_update(customer_id: int):
    payload = CustomerUpdateRequest.from_payload(request.get_json(silent=True))
    customer = _service().update_customer(customer_id, payload)
    db_session().commit()
    return jsonify(customer_to_dict(customer))


# ---------- Delete ----------
@bp.delete("/customers/<int:customer_id>")
def customer_delete(customer_id: int):
    _service().remove_customer_by_id(customer_id)
    db_session().commit()
    return "", 204

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base shared by all module models.

    Module models register on Base.metadata when imported; app.crm.create_app
    imports every module, so the metadata is complete once the app exists.
    """

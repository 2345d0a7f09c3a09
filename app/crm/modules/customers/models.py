from __future__ import annotations

import enum

from sqlalchemy import Enum as SAEnum, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.crm.models import Base


class Gender(enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class Role(enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"


class Customer(Base):
    __tablename__ = "customer"
    __table_args__ = (
        UniqueConstraint("email", name="customer_email_unique"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    gender: Mapped[Gender] = mapped_column(
        SAEnum(Gender, name="gender", native_enum=False, length=16),
        nullable=False,
    )

    # Not read by any business logic yet; reserved for authorization.
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, name="role"),
        nullable=False,
        default=Role.USER,
        server_default=Role.USER.value,
    )

    def __repr__(self) -> str:
        return f"Customer(id={self.id!r}, email={self.email!r})"

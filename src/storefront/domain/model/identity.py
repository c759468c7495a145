"""The acting identity and its closed role tag."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError


class Role(Enum):
    CUSTOMER = "customer"
    ADMINISTRATOR = "administrator"

    @staticmethod
    def parse(value: str | Role) -> Role:
        if isinstance(value, Role):
            return value
        normalized = str(value).strip().lower()
        if normalized == "admin":
            return Role.ADMINISTRATOR
        try:
            return Role(normalized)
        except ValueError:
            raise ValidationError(f"Unknown role '{value}'") from None


@dataclass(frozen=True)
class Identity:
    """Who is acting. Issued and verified outside the domain."""

    user_id: str
    role: Role

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise ValidationError("Identity requires a user id")

    @property
    def is_administrator(self) -> bool:
        return self.role is Role.ADMINISTRATOR

    @staticmethod
    def customer(user_id: str) -> Identity:
        return Identity(user_id=user_id, role=Role.CUSTOMER)

    @staticmethod
    def administrator(user_id: str) -> Identity:
        return Identity(user_id=user_id, role=Role.ADMINISTRATOR)

"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the request boundaries (HTTP and CLI) can catch them uniformly and turn
them into a structured ``kind`` + ``message`` response.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "error"
    status_code = 400

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class ValidationError(DomainException):
    """Malformed input or a violated business rule."""

    kind = "validation"


class EmptyCartError(ValidationError):
    """Checkout was attempted with nothing in the cart."""

    kind = "empty_cart"

    def __init__(self, message: str = "Cart is empty") -> None:
        super().__init__(message)


class AuthenticationError(DomainException):
    """The caller could not be identified."""

    kind = "authentication"
    status_code = 401


class AuthorizationError(DomainException):
    """The acting identity's role may not invoke the operation."""

    kind = "authorization"
    status_code = 403


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = "not_found"
    status_code = 404


class InsufficientStockError(DomainException):
    """Requested quantity exceeds what the stock ledger can supply."""

    kind = "insufficient_stock"

    def __init__(
        self,
        product_id: str,
        requested: int,
        available: int,
        product_title: str | None = None,
    ) -> None:
        self.product_id = product_id
        self.requested = requested
        self.available = available
        self.product_title = product_title
        label = product_title or product_id
        super().__init__(
            f"Insufficient stock for {label}. "
            f"Available: {available}, Requested: {requested}"
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            product_id=self.product_id,
            requested=self.requested,
            available=self.available,
        )
        return data


class TransientStoreError(DomainException):
    """The store of record could not complete the transaction.

    Nothing was applied; the whole operation is safe to retry.
    """

    kind = "transient"
    status_code = 503

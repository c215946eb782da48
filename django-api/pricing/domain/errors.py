"""Domain error codes for the pricing module."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    INVALID_TICKET_TYPE_ID = "INVALID_TICKET_TYPE_ID"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    PROMO_CODE_NOT_FOUND = "PROMO_CODE_NOT_FOUND"
    PROMO_CODE_INACTIVE = "PROMO_CODE_INACTIVE"
    PROMO_CODE_NOT_YET_VALID = "PROMO_CODE_NOT_YET_VALID"
    PROMO_CODE_EXPIRED = "PROMO_CODE_EXPIRED"
    PROMO_CODE_USAGE_LIMIT = "PROMO_CODE_USAGE_LIMIT"
    PROMO_CODE_NOT_APPLICABLE = "PROMO_CODE_NOT_APPLICABLE"
    MINIMUM_ORDER_NOT_MET = "MINIMUM_ORDER_NOT_MET"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class TicketTypeNotFoundError(DomainError):
    """Raised when a ticket type is not found."""

    def __init__(self, ticket_type_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_TYPE_NOT_FOUND,
            message="Ticket type not found",
        )
        object.__setattr__(self, "ticket_type_id", ticket_type_id)


class InvalidTicketTypeIdError(DomainError):
    """Raised when a ticket type ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE_ID,
            message="Invalid ticket type ID format",
        )


class InvalidQuantityError(DomainError):
    """Raised when an order asks for fewer than one ticket."""

    def __init__(self, quantity: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QUANTITY,
            message="Quantity must be at least 1",
        )
        object.__setattr__(self, "quantity", quantity)


class PromoCodeError(DomainError):
    """Base class for promo codes that cannot be applied to an order."""


class PromoCodeNotFoundError(PromoCodeError):
    """Raised when a promo code does not exist."""

    def __init__(self, code: str) -> None:
        super().__init__(
            code=ErrorCode.PROMO_CODE_NOT_FOUND,
            message="Promo code is not valid",
        )
        object.__setattr__(self, "promo_code", code)


class PromoCodeInactiveError(PromoCodeError):
    """Raised when a promo code has been deactivated."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROMO_CODE_INACTIVE,
            message="Promo code is not active",
        )


class PromoCodeNotYetValidError(PromoCodeError):
    """Raised when a promo code is used before its validity window opens."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROMO_CODE_NOT_YET_VALID,
            message="Promo code is not valid yet",
        )


class PromoCodeExpiredError(PromoCodeError):
    """Raised when a promo code is used after it expired."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROMO_CODE_EXPIRED,
            message="Promo code has expired",
        )


class PromoCodeUsageLimitError(PromoCodeError):
    """Raised when a promo code has no uses left."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROMO_CODE_USAGE_LIMIT,
            message="Promo code has reached its usage limit",
        )


class PromoCodeNotApplicableError(PromoCodeError):
    """Raised when a promo code is scoped to a different ticket type."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROMO_CODE_NOT_APPLICABLE,
            message="Promo code is not valid for this ticket type",
        )


class MinimumOrderNotMetError(PromoCodeError):
    """Raised when an order is below the promo code minimum amount."""

    def __init__(self, min_order_amount: Decimal) -> None:
        super().__init__(
            code=ErrorCode.MINIMUM_ORDER_NOT_MET,
            message=f"Minimum order amount is {min_order_amount}",
        )
        object.__setattr__(self, "min_order_amount", min_order_amount)

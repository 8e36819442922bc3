"""Shared domain module - Exceptions and types."""

from payment_lifecycle.shared.domain.context import PaymentContext
from payment_lifecycle.shared.domain.exceptions import (
    DateParseError,
    ErrorCode,
    InvalidArgumentError,
    PayeeResolutionError,
    PaymentError,
    PaymentNotFoundError,
    RecordNotFoundError,
    TransactionNotFoundError,
)

__all__ = [
    "PaymentContext",
    "DateParseError",
    "ErrorCode",
    "InvalidArgumentError",
    "PayeeResolutionError",
    "PaymentError",
    "PaymentNotFoundError",
    "RecordNotFoundError",
    "TransactionNotFoundError",
]

"""Payment infrastructure module."""

from payment_lifecycle.features.payments.infrastructure.repository import (
    PaymentRepository,
)

__all__ = ["PaymentRepository"]

"""Payment use cases."""

from payment_lifecycle.features.payments.application.use_cases.payment_lifecycle import (
    PaymentLifecycleManager,
)

__all__ = ["PaymentLifecycleManager"]

"""Payment application ports."""

from payment_lifecycle.features.payments.application.ports.date_service_port import (
    DateServicePort,
)
from payment_lifecycle.features.payments.application.ports.payee_port import (
    PayeeIntegrationPort,
)
from payment_lifecycle.features.payments.application.ports.persistence_port import (
    PaymentPersistencePort,
)

__all__ = [
    "DateServicePort",
    "PayeeIntegrationPort",
    "PaymentPersistencePort",
]

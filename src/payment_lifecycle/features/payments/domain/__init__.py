"""Payment domain entities and value objects."""

from payment_lifecycle.features.payments.domain.entities import (
    AccountData,
    CancellationEntryDetail,
    DuplicateCheckResponse,
    PayeeDetails,
    PaymentCancellationData,
    PaymentEntity,
    PaymentEntryEntity,
    PaymentInitiationData,
    PaymentInitiationEntryData,
    RecurringData,
    RequestData,
    TransactionEntity,
)
from payment_lifecycle.features.payments.domain.enums import (
    PayeeCategory,
    PaymentStatus,
    TransactionStatus,
)
from payment_lifecycle.features.payments.domain.status_rules import (
    STATUS_RULES,
    StatusRule,
    derive_payment_status,
)

__all__ = [
    "AccountData",
    "CancellationEntryDetail",
    "DuplicateCheckResponse",
    "PayeeDetails",
    "PaymentCancellationData",
    "PaymentEntity",
    "PaymentEntryEntity",
    "PaymentInitiationData",
    "PaymentInitiationEntryData",
    "RecurringData",
    "RequestData",
    "TransactionEntity",
    "PayeeCategory",
    "PaymentStatus",
    "TransactionStatus",
    "STATUS_RULES",
    "StatusRule",
    "derive_payment_status",
]

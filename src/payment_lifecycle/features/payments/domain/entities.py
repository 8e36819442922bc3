"""Payment domain entities and request value objects."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar

from payment_lifecycle.features.payments.domain.enums import (
    PayeeCategory,
    PaymentStatus,
    TransactionStatus,
)

T = TypeVar("T")


@dataclass
class PaymentEntity:
    """Payment record."""

    id: int | None = None
    client_id: str | None = None
    user_id: str | None = None
    status: PaymentStatus | None = None
    created_by: str | None = None
    created_timestamp: datetime | None = None
    updated_timestamp: datetime | None = None


@dataclass
class PaymentEntryEntity:
    """One line item of a payment.

    ``payment_id`` is a back-reference; sequence numbers are unique
    within a payment.
    """

    payment_id: int | None = None
    sequence_no: int | None = None
    created_by: str | None = None

    payee_category: PayeeCategory | None = None
    payee_id: int | None = None
    payee_type_id: int | None = None

    transaction_amt: Decimal = Decimal("0")
    currency: str | None = None
    ccy_amt: Decimal = Decimal("0")
    debit_account_number: str | None = None
    credit_account_number: str | None = None

    payment_date: datetime | None = None
    created_timestamp: datetime | None = None


@dataclass
class TransactionEntity:
    """Processing record derived from a payment request."""

    id: int | None = None
    payment_id: int | None = None
    status: TransactionStatus | None = None
    client_id: str | None = None
    user_id: str | None = None
    created_timestamp: datetime | None = None


@dataclass
class AccountData:
    """Debit or credit leg of an entry."""

    account_number: str | None = None
    currency: str | None = None
    ccy_amt: Decimal = Decimal("0")


@dataclass
class RecurringData:
    """Recurring schedule attached to an initiation request."""

    recurring: bool = False
    frequency: str | None = None
    end_date: str | None = None


@dataclass
class PaymentInitiationEntryData:
    """Request-side description of one entry."""

    debit_account_data: AccountData | None = None
    credit_account_data: AccountData | None = None
    transaction_amt: Decimal = Decimal("0")
    payee_category: PayeeCategory | None = None
    payee_id: int | None = None
    payee_type_id: int | None = None
    payment_date: str | None = None
    sequence_no: int | None = None


@dataclass
class PaymentInitiationData:
    """Payment initiation request body."""

    entries: list[PaymentInitiationEntryData] = field(default_factory=list)
    hold: bool = False
    recurring_data: RecurringData | None = None


@dataclass
class RequestData(Generic[T]):
    """Envelope around an inbound request body."""

    request: T | None = None
    request_id: str | None = None


@dataclass
class CancellationEntryDetail:
    """Per-entry detail attached to a cancellation."""

    sequence_no: int | None = None
    transaction_amt: Decimal = Decimal("0")
    currency: str | None = None
    payee_id: int | None = None
    payee_name: str | None = None
    payee_account_number: str | None = None
    payee_bank_name: str | None = None
    resolved: bool = False


@dataclass
class PaymentCancellationData:
    """Cancellation record for a payment."""

    payment_id: int | None = None
    client_id: str | None = None
    reason: str | None = None
    details: list[CancellationEntryDetail] = field(default_factory=list)


@dataclass
class PayeeDetails:
    """Payee metadata returned by the payee integration service."""

    payee_id: int
    name: str | None = None
    account_number: str | None = None
    bank_name: str | None = None


@dataclass(frozen=True)
class DuplicateCheckResponse:
    """Identifies a previously stored entry that matches a new one."""

    payment_id: str
    sequence_no: str

    @classmethod
    def from_entry(cls, entry: PaymentEntryEntity) -> "DuplicateCheckResponse":
        """Build a response from a stored entry."""
        return cls(payment_id=str(entry.payment_id), sequence_no=str(entry.sequence_no))

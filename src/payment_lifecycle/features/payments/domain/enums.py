"""Payment domain enums."""

from enum import Enum


class PaymentStatus(str, Enum):
    """Payment status enum.

    Values are the four-letter codes stored in the payments table.
    """

    COMPLETE = "COMP"
    IN_PROGRESS = "INPR"
    HOLD = "HOLD"
    RECURRING_PENDING = "RECP"
    CANCELLED = "CANC"
    FAILED = "FAIL"


class TransactionStatus(str, Enum):
    """Transaction status enum."""

    IN_PROGRESS = "INPR"
    COMPLETE = "COMP"
    FAILED = "FAIL"
    CANCELLED = "CANC"


class PayeeCategory(str, Enum):
    """Payee categories used by the duplicate check."""

    PERSONAL = "P"
    BUSINESS = "B"
    INTERNAL = "I"

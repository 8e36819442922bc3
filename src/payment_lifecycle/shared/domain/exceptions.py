"""Domain exceptions for the payment lifecycle service."""

from enum import Enum


class ErrorCode(str, Enum):
    """User-facing error codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    PAYMENT_NOT_FOUND = "PAYMENT_NOT_FOUND"
    DATE_PARSE_ERROR = "DATE_PARSE_ERROR"
    PAYEE_RESOLUTION_FAILED = "PAYEE_RESOLUTION_FAILED"


class PaymentError(Exception):
    """Base exception for payment errors."""

    error_code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str, error_code: ErrorCode | None = None) -> None:
        if error_code is not None:
            self.error_code = error_code
        super().__init__(message)


class InvalidArgumentError(PaymentError):
    """Raised when a required input is missing or malformed."""

    error_code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Invalid argument '{argument}'")


class RecordNotFoundError(PaymentError):
    """Raised when a record is absent or belongs to another client.

    Both cases share one message so callers cannot probe for records
    owned by other clients.
    """

    error_code = ErrorCode.PAYMENT_NOT_FOUND
    record_type = "Record"

    def __init__(self, record_id: int | str) -> None:
        self.record_id = record_id
        super().__init__(f"{self.record_type} with ID '{record_id}' not found")


class PaymentNotFoundError(RecordNotFoundError):
    """Raised when a payment is not found."""

    record_type = "Payment"


class TransactionNotFoundError(RecordNotFoundError):
    """Raised when a transaction is not found."""

    record_type = "Transaction"


class DateParseError(PaymentError):
    """Raised when a date string cannot be parsed."""

    error_code = ErrorCode.DATE_PARSE_ERROR

    def __init__(self, value: str | None) -> None:
        self.value = value
        super().__init__(f"Unable to parse date '{value}'")


class PayeeResolutionError(PaymentError):
    """Raised when the payee integration service cannot resolve a payee."""

    error_code = ErrorCode.PAYEE_RESOLUTION_FAILED

    def __init__(self, payee_id: int | None, message: str) -> None:
        self.payee_id = payee_id
        super().__init__(f"Payee '{payee_id}' could not be resolved: {message}")

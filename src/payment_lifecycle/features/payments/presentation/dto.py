"""Payment DTOs for API requests/responses."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from payment_lifecycle.features.payments.domain.entities import (
    AccountData,
    PaymentEntity,
    PaymentInitiationData,
    PaymentInitiationEntryData,
    RecurringData,
    TransactionEntity,
)
from payment_lifecycle.features.payments.domain.enums import (
    PayeeCategory,
    PaymentStatus,
    TransactionStatus,
)


class AccountDataRequest(BaseModel):
    """Debit or credit leg of an entry."""

    model_config = ConfigDict(populate_by_name=True)

    account_number: str | None = Field(None, alias="accountNumber")
    currency: str | None = Field(None, max_length=3)
    ccy_amt: Decimal = Field(default=Decimal("0"), alias="ccyAmt")

    def to_domain(self) -> AccountData:
        return AccountData(
            account_number=self.account_number,
            currency=self.currency.upper() if self.currency else None,
            ccy_amt=self.ccy_amt,
        )


class InitiationEntryRequest(BaseModel):
    """One entry of a payment initiation request."""

    # Allow both camelCase (transactionAmt) and snake_case (transaction_amt)
    model_config = ConfigDict(populate_by_name=True)

    debit_account_data: AccountDataRequest | None = Field(None, alias="debitAccountData")
    credit_account_data: AccountDataRequest | None = Field(None, alias="creditAccountData")
    transaction_amt: Decimal = Field(..., gt=0, alias="transactionAmt")
    payee_category: PayeeCategory | None = Field(None, alias="payeeCategory")
    payee_id: int | None = Field(None, alias="payeeId")
    payee_type_id: int | None = Field(None, alias="payeeTypeId")
    payment_date: str | None = Field(None, alias="paymentDate")
    sequence_no: int | None = Field(None, alias="sequenceNo")

    @field_validator("transaction_amt", mode="before")
    @classmethod
    def parse_amount(cls, v: Any) -> Any:
        """Route floats through str so 10.1 stays 10.1 and not its binary value."""
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    def to_domain(self) -> PaymentInitiationEntryData:
        return PaymentInitiationEntryData(
            debit_account_data=(
                self.debit_account_data.to_domain() if self.debit_account_data else None
            ),
            credit_account_data=(
                self.credit_account_data.to_domain() if self.credit_account_data else None
            ),
            transaction_amt=self.transaction_amt,
            payee_category=self.payee_category,
            payee_id=self.payee_id,
            payee_type_id=self.payee_type_id,
            payment_date=self.payment_date,
            sequence_no=self.sequence_no,
        )


class RecurringDataRequest(BaseModel):
    """Recurring schedule of a payment."""

    model_config = ConfigDict(populate_by_name=True)

    recurring: bool = False
    frequency: str | None = None
    end_date: str | None = Field(None, alias="endDate")


class PaymentInitiationRequest(BaseModel):
    """Payment initiation body, as submitted for a duplicate check."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "hold": False,
                "entries": [
                    {
                        "transactionAmt": "10.00",
                        "payeeCategory": "P",
                        "payeeId": 1,
                        "payeeTypeId": 1,
                        "paymentDate": "2026-10-19",
                        "debitAccountData": {"accountNumber": "3300112233", "currency": "USD"},
                    }
                ],
            }
        },
    )

    entries: list[InitiationEntryRequest] = Field(default_factory=list)
    hold: bool = False
    recurring_data: RecurringDataRequest | None = Field(None, alias="recurringData")

    def to_domain(self) -> PaymentInitiationData:
        return PaymentInitiationData(
            entries=[entry.to_domain() for entry in self.entries],
            hold=self.hold,
            recurring_data=(
                RecurringData(
                    recurring=self.recurring_data.recurring,
                    frequency=self.recurring_data.frequency,
                    end_date=self.recurring_data.end_date,
                )
                if self.recurring_data
                else None
            ),
        )


class PaymentResponse(BaseModel):
    """Payment response."""

    id: int
    client_id: str
    user_id: str
    status: PaymentStatus
    created_by: str | None = None
    created_timestamp: datetime | None = None
    updated_timestamp: datetime | None = None

    @classmethod
    def from_domain(cls, payment: PaymentEntity) -> "PaymentResponse":
        return cls(
            id=payment.id,
            client_id=payment.client_id,
            user_id=payment.user_id,
            status=payment.status,
            created_by=payment.created_by,
            created_timestamp=payment.created_timestamp,
            updated_timestamp=payment.updated_timestamp,
        )


class TransactionResponse(BaseModel):
    """Transaction response."""

    id: int
    payment_id: int | None = None
    status: TransactionStatus
    client_id: str
    user_id: str
    created_timestamp: datetime | None = None

    @classmethod
    def from_domain(cls, transaction: TransactionEntity) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            payment_id=transaction.payment_id,
            status=transaction.status,
            client_id=transaction.client_id,
            user_id=transaction.user_id,
            created_timestamp=transaction.created_timestamp,
        )


class DuplicateCheckResult(BaseModel):
    """A previously stored entry matching the submitted payment."""

    model_config = ConfigDict(populate_by_name=True)

    payment_id: str = Field(..., alias="paymentId")
    sequence_no: str = Field(..., alias="sequenceNo")

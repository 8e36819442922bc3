"""Payment persistence port (interface)."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal

from payment_lifecycle.features.payments.domain.entities import (
    PaymentEntity,
    PaymentEntryEntity,
    TransactionEntity,
)
from payment_lifecycle.features.payments.domain.enums import PayeeCategory


class PaymentPersistencePort(ABC):
    """
    Abstract read/write access to payment records.

    Implementations:
    - PaymentRepository (async SQLAlchemy)
    """

    @abstractmethod
    async def get_payment_by_id(self, payment_id: int) -> PaymentEntity | None:
        """Load a payment, or None when it does not exist."""
        pass

    @abstractmethod
    async def get_transaction_by_id(
        self, transaction_id: int
    ) -> TransactionEntity | None:
        """Load a transaction, or None when it does not exist."""
        pass

    @abstractmethod
    async def get_duplicate_payment_entries(
        self,
        client_id: str,
        payee_category: PayeeCategory | None,
        amount: Decimal,
        payee_id: int | None,
        payee_type_id: int | None,
        from_date: datetime | None,
        to_date: datetime | None,
    ) -> list[PaymentEntryEntity]:
        """
        Find stored entries matching the duplicate-check key.

        A None date bound leaves that side of the window open.
        Rows are returned most recent first.
        """
        pass

    @abstractmethod
    async def save_payment(self, payment: PaymentEntity) -> PaymentEntity:
        """Persist a new payment and return it with its id."""
        pass

    @abstractmethod
    async def save_payment_entry(self, entry: PaymentEntryEntity) -> PaymentEntryEntity:
        """Persist a new payment entry."""
        pass

    @abstractmethod
    async def save_transaction(self, transaction: TransactionEntity) -> TransactionEntity:
        """Persist a new transaction and return it with its id."""
        pass

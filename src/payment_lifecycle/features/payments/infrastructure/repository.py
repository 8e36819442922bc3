"""Payment repository for database operations."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from payment_lifecycle.features.payments.application.ports import PaymentPersistencePort
from payment_lifecycle.features.payments.domain.entities import (
    PaymentEntity,
    PaymentEntryEntity,
    TransactionEntity,
)
from payment_lifecycle.features.payments.domain.enums import PayeeCategory, PaymentStatus
from payment_lifecycle.shared.infrastructure.database.models import (
    PaymentEntryModel,
    PaymentModel,
    TransactionModel,
)

logger = logging.getLogger(__name__)

# Payments in these states never count as duplicates.
_CLOSED_STATUSES = (PaymentStatus.CANCELLED.value, PaymentStatus.FAILED.value)


def _matches(column: Any, value: Any) -> Any:
    """Equality that also matches NULL against None."""
    return column.is_(None) if value is None else column == value


class PaymentRepository(PaymentPersistencePort):
    """
    Payment repository using async SQLAlchemy.

    Writes are flushed, not committed; the session owner commits.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_payment_by_id(self, payment_id: int) -> Optional[PaymentEntity]:
        """
        Get a payment by its ID.

        Args:
            payment_id: ID of the payment

        Returns:
            Payment if found, None otherwise
        """
        result = await self._session.execute(
            select(PaymentModel).where(PaymentModel.id == payment_id)
        )
        model = result.scalar_one_or_none()
        return model.to_domain() if model else None

    async def get_transaction_by_id(
        self, transaction_id: int
    ) -> Optional[TransactionEntity]:
        """
        Get a transaction by its ID.

        Args:
            transaction_id: ID of the transaction

        Returns:
            Transaction if found, None otherwise
        """
        result = await self._session.execute(
            select(TransactionModel).where(TransactionModel.id == transaction_id)
        )
        model = result.scalar_one_or_none()
        return model.to_domain() if model else None

    async def get_duplicate_payment_entries(
        self,
        client_id: str,
        payee_category: PayeeCategory | None,
        amount: Decimal,
        payee_id: int | None,
        payee_type_id: int | None,
        from_date: datetime | None,
        to_date: datetime | None,
    ) -> List[PaymentEntryEntity]:
        """
        Find entries of the client's open payments that match the key.

        Args:
            client_id: Owning client
            payee_category: Payee category to match
            amount: Exact transaction amount
            payee_id: Payee to match
            payee_type_id: Payee type to match
            from_date: Earliest payment date, open when None
            to_date: Latest payment date, open when None

        Returns:
            Matching entries, most recent first
        """
        category = payee_category.value if payee_category else None
        query = (
            select(PaymentEntryModel)
            .join(PaymentModel, PaymentModel.id == PaymentEntryModel.payment_id)
            .where(
                PaymentModel.client_id == client_id,
                PaymentModel.status.not_in(_CLOSED_STATUSES),
                _matches(PaymentEntryModel.payee_category, category),
                PaymentEntryModel.transaction_amt == amount,
                _matches(PaymentEntryModel.payee_id, payee_id),
                _matches(PaymentEntryModel.payee_type_id, payee_type_id),
            )
        )
        if from_date is not None:
            query = query.where(PaymentEntryModel.payment_date >= from_date)
        if to_date is not None:
            query = query.where(PaymentEntryModel.payment_date <= to_date)

        query = query.order_by(
            PaymentEntryModel.created_timestamp.desc(),
            PaymentEntryModel.payment_id.desc(),
            PaymentEntryModel.sequence_no,
        )

        result = await self._session.execute(query)
        models = result.scalars().all()
        return [m.to_domain() for m in models]

    async def save_payment(self, payment: PaymentEntity) -> PaymentEntity:
        """
        Create a new payment in the database.

        Args:
            payment: Payment entity to persist

        Returns:
            The persisted payment with its generated ID
        """
        model = PaymentModel.from_domain(payment)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        logger.info("Payment stored", extra={"payment_id": model.id})
        return model.to_domain()

    async def save_payment_entry(self, entry: PaymentEntryEntity) -> PaymentEntryEntity:
        """Create a new payment entry in the database."""
        model = PaymentEntryModel.from_domain(entry)
        self._session.add(model)
        await self._session.flush()
        return model.to_domain()

    async def save_transaction(self, transaction: TransactionEntity) -> TransactionEntity:
        """Create a new transaction in the database."""
        model = TransactionModel.from_domain(transaction)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        logger.info(
            "Transaction stored",
            extra={"transaction_id": model.id, "payment_id": model.payment_id},
        )
        return model.to_domain()

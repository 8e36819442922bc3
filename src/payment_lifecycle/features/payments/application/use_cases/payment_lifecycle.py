"""Payment lifecycle manager - population, scoped fetch and duplicate check."""

import logging
from datetime import datetime

from payment_lifecycle.features.payments.application.criteria import get_criteria_date
from payment_lifecycle.features.payments.application.ports import (
    DateServicePort,
    PayeeIntegrationPort,
    PaymentPersistencePort,
)
from payment_lifecycle.features.payments.domain.entities import (
    CancellationEntryDetail,
    DuplicateCheckResponse,
    PaymentCancellationData,
    PaymentEntity,
    PaymentEntryEntity,
    PaymentInitiationData,
    PaymentInitiationEntryData,
    RequestData,
    TransactionEntity,
)
from payment_lifecycle.features.payments.domain.enums import TransactionStatus
from payment_lifecycle.features.payments.domain.status_rules import derive_payment_status
from payment_lifecycle.shared.domain.context import PaymentContext
from payment_lifecycle.shared.domain.exceptions import (
    InvalidArgumentError,
    PaymentNotFoundError,
    TransactionNotFoundError,
)

logger = logging.getLogger(__name__)


class PaymentLifecycleManager:
    """
    Decision logic between request data and persisted payment records.

    Holds no per-request state; the caller's identity always arrives as a
    PaymentContext and is the only source of client and user ids on
    created records.
    """

    def __init__(
        self,
        persistence: PaymentPersistencePort,
        date_service: DateServicePort,
        payee_service: PayeeIntegrationPort,
        duplicate_window_days: int = 3,
    ) -> None:
        self._persistence = persistence
        self._date_service = date_service
        self._payee_service = payee_service
        self._duplicate_window_days = duplicate_window_days

    # ------------------------------------------------------------------
    # Entity population
    # ------------------------------------------------------------------

    def populate_payment_entity(
        self,
        context: PaymentContext,
        payment: PaymentEntity,
        request: RequestData[PaymentInitiationData],
    ) -> None:
        """Stamp ownership, audit fields and derived status onto a new payment."""
        if payment is None:
            raise InvalidArgumentError("payment")
        if request is None or request.request is None:
            raise InvalidArgumentError("request")

        payment.client_id = context.client_id
        payment.user_id = context.user_id
        payment.created_by = context.user_id
        payment.created_timestamp = self._date_service.get_application_timestamp()
        payment.status = derive_payment_status(request.request)

    def populate_payment_entry_entity(
        self,
        context: PaymentContext,
        entity: PaymentEntryEntity,
        entry: PaymentInitiationEntryData,
    ) -> None:
        """
        Copy an initiation entry onto a new entry record.

        A zero debit ``ccy_amt`` means no converted amount was supplied, so
        the transaction amount is taken as already in the debit currency.
        """
        if entity is None:
            raise InvalidArgumentError("entity")
        if entry is None:
            raise InvalidArgumentError("entry")

        entity.created_by = context.user_id

        debit = entry.debit_account_data
        if debit is not None:
            if not debit.ccy_amt:
                debit.ccy_amt = entry.transaction_amt
            entity.ccy_amt = debit.ccy_amt
            entity.currency = debit.currency
            entity.debit_account_number = debit.account_number
        if entry.credit_account_data is not None:
            entity.credit_account_number = entry.credit_account_data.account_number

        entity.transaction_amt = entry.transaction_amt
        entity.payee_category = entry.payee_category
        entity.payee_id = entry.payee_id
        entity.payee_type_id = entry.payee_type_id
        entity.payment_date = self.get_criteria_date(entry.payment_date, 0)
        if entry.sequence_no is not None:
            entity.sequence_no = entry.sequence_no

    def populate_transaction_entity(
        self,
        context: PaymentContext,
        entity: TransactionEntity,
        request: RequestData[PaymentInitiationData] | None,
    ) -> None:
        """Initialize a transaction record in progress, owned by the caller."""
        if entity is None:
            raise InvalidArgumentError("entity")

        entity.status = TransactionStatus.IN_PROGRESS
        entity.client_id = context.client_id
        entity.user_id = context.user_id
        entity.created_timestamp = self._date_service.get_application_timestamp()

    async def populate_additional_details(
        self,
        cancellation: PaymentCancellationData,
        initiation: PaymentInitiationData,
    ) -> None:
        """
        Attach one detail per initiation entry to a cancellation.

        Payee lookups that fail are logged and leave that detail unresolved;
        the remaining entries are still processed.
        """
        if cancellation is None:
            raise InvalidArgumentError("cancellation")
        if initiation is None:
            raise InvalidArgumentError("initiation")

        for entry in initiation.entries or []:
            detail = CancellationEntryDetail(
                sequence_no=entry.sequence_no,
                transaction_amt=entry.transaction_amt,
                currency=entry.debit_account_data.currency if entry.debit_account_data else None,
                payee_id=entry.payee_id,
            )
            try:
                payee = await self._payee_service.resolve_payee(
                    cancellation.client_id,
                    entry.payee_category,
                    entry.payee_id,
                    entry.payee_type_id,
                )
            except Exception:
                logger.warning(
                    "Payee resolution failed for cancellation entry",
                    extra={
                        "payment_id": cancellation.payment_id,
                        "payee_id": entry.payee_id,
                        "sequence_no": entry.sequence_no,
                    },
                    exc_info=True,
                )
            else:
                detail.payee_name = payee.name
                detail.payee_account_number = payee.account_number
                detail.payee_bank_name = payee.bank_name
                detail.resolved = True
            cancellation.details.append(detail)

    # ------------------------------------------------------------------
    # Fetch with client scoping
    # ------------------------------------------------------------------

    async def fetch_payment(
        self,
        payment_id: int,
        client_id: str | None,
        context: PaymentContext | None = None,
    ) -> PaymentEntity:
        """Load a payment owned by ``client_id``."""
        payment = await self._persistence.get_payment_by_id(payment_id)
        if payment is None or payment.client_id != client_id:
            logger.info(
                "Payment not visible to client",
                extra={
                    "payment_id": payment_id,
                    "client_id": client_id,
                    "user_id": context.user_id if context else None,
                },
            )
            raise PaymentNotFoundError(payment_id)
        return payment

    async def fetch_transaction(
        self,
        transaction_id: int,
        payment_id: int | None,
        client_id: str | None,
        context: PaymentContext | None = None,
    ) -> TransactionEntity:
        """Load a transaction owned by ``client_id``, optionally under ``payment_id``."""
        transaction = await self._persistence.get_transaction_by_id(transaction_id)
        if (
            transaction is None
            or transaction.client_id != client_id
            or (payment_id is not None and transaction.payment_id != payment_id)
        ):
            logger.info(
                "Transaction not visible to client",
                extra={
                    "transaction_id": transaction_id,
                    "payment_id": payment_id,
                    "client_id": client_id,
                    "user_id": context.user_id if context else None,
                },
            )
            raise TransactionNotFoundError(transaction_id)
        return transaction

    # ------------------------------------------------------------------
    # Duplicate detection
    # ------------------------------------------------------------------

    async def check_duplicate_payment(
        self,
        client_id: str,
        user_id: str,
        initiation: PaymentInitiationData,
    ) -> DuplicateCheckResponse | None:
        """
        Find a stored entry matching any entry of a new payment.

        Entries are checked in request order and the first stored match
        wins. No match returns None.
        """
        if initiation is None:
            raise InvalidArgumentError("initiation")

        for entry in initiation.entries or []:
            from_date = self.get_criteria_date(
                entry.payment_date, -self._duplicate_window_days
            )
            to_date = self.get_criteria_date(
                entry.payment_date, self._duplicate_window_days
            )
            matches = await self._persistence.get_duplicate_payment_entries(
                client_id,
                entry.payee_category,
                entry.transaction_amt,
                entry.payee_id,
                entry.payee_type_id,
                from_date,
                to_date,
            )
            if matches:
                response = DuplicateCheckResponse.from_entry(matches[0])
                logger.info(
                    "Duplicate payment entry found",
                    extra={
                        "client_id": client_id,
                        "user_id": user_id,
                        "payment_id": response.payment_id,
                        "sequence_no": response.sequence_no,
                    },
                )
                return response
        return None

    def get_criteria_date(self, date_string: str | None, offset_days: int) -> datetime | None:
        """Duplicate-search window bound, or None when it cannot be resolved."""
        return get_criteria_date(self._date_service, date_string, offset_days)

"""Payment ORM models for SQLAlchemy."""

from decimal import Decimal

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    PrimaryKeyConstraint,
    String,
)

from payment_lifecycle.shared.infrastructure.database.connection import Base
from payment_lifecycle.features.payments.domain.entities import (
    PaymentEntity,
    PaymentEntryEntity,
    TransactionEntity,
)
from payment_lifecycle.features.payments.domain.enums import (
    PayeeCategory,
    PaymentStatus,
    TransactionStatus,
)


class PaymentModel(Base):
    """
    Payment ORM model.

    Maps to the 'payments' table. ``status`` holds the four-letter
    PaymentStatus code.
    """

    __tablename__ = "payments"

    id = Column("payment_id", Integer, primary_key=True, autoincrement=True)
    client_id = Column(String(64), nullable=False, index=True)
    user_id = Column(String(64), nullable=False)
    status = Column(String(4), nullable=False)
    created_by = Column(String(64), nullable=True)
    created_timestamp = Column(DateTime(timezone=True), nullable=True)
    updated_timestamp = Column(DateTime(timezone=True), nullable=True)

    def to_domain(self) -> PaymentEntity:
        """Convert ORM model to domain entity."""
        return PaymentEntity(
            id=self.id,
            client_id=self.client_id,
            user_id=self.user_id,
            status=PaymentStatus(self.status) if self.status else None,
            created_by=self.created_by,
            created_timestamp=self.created_timestamp,
            updated_timestamp=self.updated_timestamp,
        )

    @classmethod
    def from_domain(cls, payment: PaymentEntity) -> "PaymentModel":
        """Create ORM model from domain entity."""
        return cls(
            id=payment.id,
            client_id=payment.client_id,
            user_id=payment.user_id,
            status=payment.status.value if payment.status else None,
            created_by=payment.created_by,
            created_timestamp=payment.created_timestamp,
            updated_timestamp=payment.updated_timestamp,
        )


class PaymentEntryModel(Base):
    """
    Payment entry ORM model.

    Maps to 'payment_entries'; (payment_id, sequence_no) is the key, so the
    database enforces sequence uniqueness within a payment.
    """

    __tablename__ = "payment_entries"
    __table_args__ = (PrimaryKeyConstraint("payment_id", "sequence_no"),)

    payment_id = Column(Integer, ForeignKey("payments.payment_id"), nullable=False)
    sequence_no = Column(Integer, nullable=False)
    created_by = Column(String(64), nullable=True)

    payee_category = Column(String(1), nullable=True)
    payee_id = Column(BigInteger, nullable=True)
    payee_type_id = Column(BigInteger, nullable=True)

    transaction_amt = Column(Numeric(18, 2), nullable=False)
    currency = Column(String(3), nullable=True)
    ccy_amt = Column(Numeric(18, 2), nullable=True)
    debit_account_number = Column(String(64), nullable=True)
    credit_account_number = Column(String(64), nullable=True)

    payment_date = Column(DateTime(timezone=True), nullable=True, index=True)
    created_timestamp = Column(DateTime(timezone=True), nullable=True)

    def to_domain(self) -> PaymentEntryEntity:
        """Convert ORM model to domain entity."""
        return PaymentEntryEntity(
            payment_id=self.payment_id,
            sequence_no=self.sequence_no,
            created_by=self.created_by,
            payee_category=PayeeCategory(self.payee_category) if self.payee_category else None,
            payee_id=self.payee_id,
            payee_type_id=self.payee_type_id,
            transaction_amt=Decimal(str(self.transaction_amt)),
            currency=self.currency,
            ccy_amt=Decimal(str(self.ccy_amt)) if self.ccy_amt is not None else Decimal("0"),
            debit_account_number=self.debit_account_number,
            credit_account_number=self.credit_account_number,
            payment_date=self.payment_date,
            created_timestamp=self.created_timestamp,
        )

    @classmethod
    def from_domain(cls, entry: PaymentEntryEntity) -> "PaymentEntryModel":
        """Create ORM model from domain entity."""
        return cls(
            payment_id=entry.payment_id,
            sequence_no=entry.sequence_no,
            created_by=entry.created_by,
            payee_category=entry.payee_category.value if entry.payee_category else None,
            payee_id=entry.payee_id,
            payee_type_id=entry.payee_type_id,
            transaction_amt=entry.transaction_amt,
            currency=entry.currency,
            ccy_amt=entry.ccy_amt,
            debit_account_number=entry.debit_account_number,
            credit_account_number=entry.credit_account_number,
            payment_date=entry.payment_date,
            created_timestamp=entry.created_timestamp,
        )


class TransactionModel(Base):
    """Transaction ORM model. Maps to the 'transactions' table."""

    __tablename__ = "transactions"

    id = Column("transaction_id", Integer, primary_key=True, autoincrement=True)
    payment_id = Column(Integer, ForeignKey("payments.payment_id"), nullable=True)
    status = Column(String(4), nullable=False)
    client_id = Column(String(64), nullable=False, index=True)
    user_id = Column(String(64), nullable=False)
    created_timestamp = Column(DateTime(timezone=True), nullable=True)

    def to_domain(self) -> TransactionEntity:
        """Convert ORM model to domain entity."""
        return TransactionEntity(
            id=self.id,
            payment_id=self.payment_id,
            status=TransactionStatus(self.status) if self.status else None,
            client_id=self.client_id,
            user_id=self.user_id,
            created_timestamp=self.created_timestamp,
        )

    @classmethod
    def from_domain(cls, transaction: TransactionEntity) -> "TransactionModel":
        """Create ORM model from domain entity."""
        return cls(
            id=transaction.id,
            payment_id=transaction.payment_id,
            status=transaction.status.value if transaction.status else None,
            client_id=transaction.client_id,
            user_id=transaction.user_id,
            created_timestamp=transaction.created_timestamp,
        )

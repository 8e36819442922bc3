"""Test configuration."""
import os
from collections.abc import AsyncIterator
from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Settings are read at import time, so point them at test backends first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PAYEE_SERVICE_URL", "http://payees.test")

from payment_lifecycle.features.payments.application.ports import (  # noqa: E402
    DateServicePort,
    PayeeIntegrationPort,
    PaymentPersistencePort,
)
from payment_lifecycle.features.payments.application.use_cases import (  # noqa: E402
    PaymentLifecycleManager,
)
from payment_lifecycle.features.payments.domain.entities import (  # noqa: E402
    AccountData,
    PaymentInitiationEntryData,
)
from payment_lifecycle.features.payments.domain.enums import PayeeCategory  # noqa: E402
from payment_lifecycle.shared.domain.context import PaymentContext  # noqa: E402
from payment_lifecycle.shared.infrastructure.database import Base, models  # noqa: E402,F401
from payment_lifecycle.shared.infrastructure.date_service import SystemDateService  # noqa: E402

FIXED_NOW = datetime(2026, 10, 19, 9, 30, tzinfo=UTC)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def context() -> PaymentContext:
    return PaymentContext(client_id="CLIENT1", user_id="USER1", approval_flag=False)


@pytest.fixture
def persistence() -> MagicMock:
    return create_autospec(PaymentPersistencePort, instance=True)


@pytest.fixture
def date_service() -> MagicMock:
    """Clock pinned at FIXED_NOW that parses like the real service."""
    service = create_autospec(DateServicePort, instance=True)
    service.get_application_timestamp.return_value = FIXED_NOW
    service.parse_timestamp.side_effect = SystemDateService().parse_timestamp
    return service


@pytest.fixture
def payee_service() -> MagicMock:
    service = create_autospec(PayeeIntegrationPort, instance=True)
    service.resolve_payee = AsyncMock()
    return service


@pytest.fixture
def manager(persistence, date_service, payee_service) -> PaymentLifecycleManager:
    return PaymentLifecycleManager(
        persistence=persistence,
        date_service=date_service,
        payee_service=payee_service,
        duplicate_window_days=3,
    )


@pytest.fixture
def make_entry():
    """Factory for initiation entries."""

    def _factory(
        *,
        amount: str = "10.00",
        ccy_amt: str = "0",
        payee_id: int = 1,
        payee_type_id: int = 1,
        category: PayeeCategory = PayeeCategory.PERSONAL,
        payment_date: str | None = "2026-10-19",
        sequence_no: int | None = 1,
    ) -> PaymentInitiationEntryData:
        return PaymentInitiationEntryData(
            debit_account_data=AccountData(
                account_number="3300112233", currency="USD", ccy_amt=Decimal(ccy_amt)
            ),
            credit_account_data=AccountData(account_number="7700445566", currency="USD"),
            transaction_amt=Decimal(amount),
            payee_category=category,
            payee_id=payee_id,
            payee_type_id=payee_type_id,
            payment_date=payment_date,
            sequence_no=sequence_no,
        )

    return _factory


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW

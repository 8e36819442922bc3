"""Payment API router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from payment_lifecycle.features.payments.application.ports import (
    DateServicePort,
    PayeeIntegrationPort,
    PaymentPersistencePort,
)
from payment_lifecycle.features.payments.application.use_cases import (
    PaymentLifecycleManager,
)
from payment_lifecycle.features.payments.infrastructure.repository import (
    PaymentRepository,
)
from payment_lifecycle.features.payments.presentation.dto import (
    DuplicateCheckResult,
    PaymentInitiationRequest,
    PaymentResponse,
    TransactionResponse,
)
from payment_lifecycle.shared.core.settings import get_settings
from payment_lifecycle.shared.domain.context import PaymentContext
from payment_lifecycle.shared.infrastructure.database import get_db_session
from payment_lifecycle.shared.infrastructure.date_service import get_date_service
from payment_lifecycle.shared.infrastructure.http_clients import get_payee_client
from payment_lifecycle.shared.presentation.api_response import APIResponse

router = APIRouter()


def get_payment_context(
    client_id: Annotated[str, Header(alias="X-Client-Id")],
    user_id: Annotated[str, Header(alias="X-User-Id")],
    approval_flag: Annotated[bool, Header(alias="X-Approval-Flag")] = False,
) -> PaymentContext:
    """
    Dependency for the caller's context.

    The identity headers are set by the authentication gateway in front of
    this service.
    """
    return PaymentContext(client_id=client_id, user_id=user_id, approval_flag=approval_flag)


async def get_payment_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PaymentPersistencePort:
    """Dependency for getting the payment repository."""
    return PaymentRepository(session)


def get_date_service_dependency() -> DateServicePort:
    """Dependency for getting the date service."""
    return get_date_service()


def get_payee_service() -> PayeeIntegrationPort:
    """Dependency for getting the payee integration client."""
    return get_payee_client()


def get_lifecycle_manager(
    repo: Annotated[PaymentPersistencePort, Depends(get_payment_repository)],
    date_service: Annotated[DateServicePort, Depends(get_date_service_dependency)],
    payee_service: Annotated[PayeeIntegrationPort, Depends(get_payee_service)],
) -> PaymentLifecycleManager:
    """Dependency for getting the lifecycle manager."""
    return PaymentLifecycleManager(
        persistence=repo,
        date_service=date_service,
        payee_service=payee_service,
        duplicate_window_days=get_settings().duplicate_check_window_days,
    )


@router.post(
    "/duplicate-check",
    response_model=APIResponse[DuplicateCheckResult],
    summary="Check a payment for duplicates",
    description="""
    Look for a stored entry matching any entry of the submitted payment.

    - Entries are checked in order; the first match is returned
    - `data` is null when no duplicate exists
    """,
)
async def check_duplicate(
    request: PaymentInitiationRequest,
    context: Annotated[PaymentContext, Depends(get_payment_context)],
    manager: Annotated[PaymentLifecycleManager, Depends(get_lifecycle_manager)],
) -> APIResponse[DuplicateCheckResult]:
    """Check a payment initiation for duplicates."""
    duplicate = await manager.check_duplicate_payment(
        context.client_id, context.user_id, request.to_domain()
    )
    if duplicate is None:
        return APIResponse.ok(data=None, message="No duplicate payment found")

    return APIResponse.ok(
        data=DuplicateCheckResult(
            payment_id=duplicate.payment_id,
            sequence_no=duplicate.sequence_no,
        ),
        message="Duplicate payment found",
    )


@router.get(
    "/{payment_id}",
    response_model=APIResponse[PaymentResponse],
    summary="Get payment by ID",
    description="Retrieve a payment owned by the calling client.",
)
async def get_payment(
    payment_id: int,
    context: Annotated[PaymentContext, Depends(get_payment_context)],
    manager: Annotated[PaymentLifecycleManager, Depends(get_lifecycle_manager)],
) -> APIResponse[PaymentResponse]:
    """Get a payment by ID."""
    payment = await manager.fetch_payment(payment_id, context.client_id, context)
    return APIResponse.ok(data=PaymentResponse.from_domain(payment))


@router.get(
    "/{payment_id}/transactions/{transaction_id}",
    response_model=APIResponse[TransactionResponse],
    summary="Get transaction by ID",
    description="Retrieve a transaction of a payment owned by the calling client.",
)
async def get_transaction(
    payment_id: int,
    transaction_id: int,
    context: Annotated[PaymentContext, Depends(get_payment_context)],
    manager: Annotated[PaymentLifecycleManager, Depends(get_lifecycle_manager)],
) -> APIResponse[TransactionResponse]:
    """Get a transaction by ID."""
    transaction = await manager.fetch_transaction(
        transaction_id, payment_id, context.client_id, context
    )
    return APIResponse.ok(data=TransactionResponse.from_domain(transaction))

"""Shared infrastructure module."""

from payment_lifecycle.shared.infrastructure.database import (
    get_db_session,
    init_db,
    close_db,
)
from payment_lifecycle.shared.infrastructure.date_service import (
    SystemDateService,
    get_date_service,
)
from payment_lifecycle.shared.infrastructure.http_clients import (
    PayeeIntegrationClient,
    get_payee_client,
)

__all__ = [
    "get_db_session",
    "init_db",
    "close_db",
    "SystemDateService",
    "get_date_service",
    "PayeeIntegrationClient",
    "get_payee_client",
]

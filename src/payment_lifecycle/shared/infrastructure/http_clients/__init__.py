"""HTTP clients for external services."""

from payment_lifecycle.shared.infrastructure.http_clients.payee_client import (
    PayeeIntegrationClient,
    get_payee_client,
)

__all__ = ["PayeeIntegrationClient", "get_payee_client"]

"""HTTP client for the payee integration service."""

import logging

import httpx

from payment_lifecycle.features.payments.application.ports import PayeeIntegrationPort
from payment_lifecycle.features.payments.domain.entities import PayeeDetails
from payment_lifecycle.features.payments.domain.enums import PayeeCategory
from payment_lifecycle.shared.core.settings import get_settings
from payment_lifecycle.shared.domain.exceptions import PayeeResolutionError

logger = logging.getLogger(__name__)


class PayeeIntegrationClient(PayeeIntegrationPort):
    """
    HTTP client for the payee integration service.

    Payees are owned by that service; this client only reads them. Every
    failure is reported as PayeeResolutionError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.payee_service_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.payee_service_timeout
        self._transport = transport

    async def resolve_payee(
        self,
        client_id: str | None,
        payee_category: PayeeCategory | None,
        payee_id: int | None,
        payee_type_id: int | None,
    ) -> PayeeDetails:
        """
        Fetch a payee for a client.

        Args:
            client_id: Owning client
            payee_category: Payee category, sent as a filter
            payee_id: Payee to resolve
            payee_type_id: Payee type, sent as a filter

        Returns:
            Resolved payee details
        """
        if payee_id is None:
            raise PayeeResolutionError(payee_id, "missing payee id")

        url = f"{self._base_url}/api/v1/clients/{client_id}/payees/{payee_id}"
        params: dict[str, str] = {}
        if payee_category is not None:
            params["category"] = payee_category.value
        if payee_type_id is not None:
            params["payeeTypeId"] = str(payee_type_id)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(
                    url,
                    params=params,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TimeoutException as exc:
            raise PayeeResolutionError(payee_id, "timeout") from exc
        except httpx.RequestError as exc:
            raise PayeeResolutionError(payee_id, str(exc)) from exc

        if response.status_code != 200:
            logger.warning(
                "Payee lookup failed",
                extra={"payee_id": payee_id, "status_code": response.status_code},
            )
            raise PayeeResolutionError(payee_id, f"HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise PayeeResolutionError(payee_id, "invalid JSON") from exc
        payee = data.get("data", data) if isinstance(data, dict) else None
        if not isinstance(payee, dict):
            raise PayeeResolutionError(payee_id, "unexpected response format")

        return PayeeDetails(
            payee_id=payee_id,
            name=payee.get("name", payee.get("payeeName")),
            account_number=payee.get("accountNumber"),
            bank_name=payee.get("bankName"),
        )


# Singleton instance
_client: PayeeIntegrationClient | None = None


def get_payee_client() -> PayeeIntegrationClient:
    """Get singleton payee integration client instance."""
    global _client
    if _client is None:
        _client = PayeeIntegrationClient()
    return _client

"""Payee integration port (interface)."""

from abc import ABC, abstractmethod

from payment_lifecycle.features.payments.domain.entities import PayeeDetails
from payment_lifecycle.features.payments.domain.enums import PayeeCategory


class PayeeIntegrationPort(ABC):
    """
    Resolves payee metadata.

    Implementations:
    - PayeeIntegrationClient (HTTP)
    """

    @abstractmethod
    async def resolve_payee(
        self,
        client_id: str | None,
        payee_category: PayeeCategory | None,
        payee_id: int | None,
        payee_type_id: int | None,
    ) -> PayeeDetails:
        """
        Look up a payee.

        Raises PayeeResolutionError when the payee cannot be resolved.
        """
        pass

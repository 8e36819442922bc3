"""Request-scoped caller context."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentContext:
    """Identifies the acting client and user for one request.

    Supplied by the authentication layer. Every record created while
    serving the request takes its client and user ids from here.
    """

    client_id: str
    user_id: str
    approval_flag: bool = False

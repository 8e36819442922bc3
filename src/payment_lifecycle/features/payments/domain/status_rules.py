"""Payment status derivation.

Rules are evaluated in order and the first matching predicate decides the
status. New payment types are added as rows, above ``DEFAULT_STATUS``
in priority.
"""

from dataclasses import dataclass
from typing import Callable

from payment_lifecycle.features.payments.domain.entities import PaymentInitiationData
from payment_lifecycle.features.payments.domain.enums import PaymentStatus


@dataclass(frozen=True)
class StatusRule:
    """A predicate paired with the status it selects."""

    name: str
    applies: Callable[[PaymentInitiationData], bool]
    status: PaymentStatus


def _is_hold(data: PaymentInitiationData) -> bool:
    return bool(data.hold)


def _is_recurring(data: PaymentInitiationData) -> bool:
    return data.recurring_data is not None and bool(data.recurring_data.recurring)


STATUS_RULES: tuple[StatusRule, ...] = (
    StatusRule("hold", _is_hold, PaymentStatus.HOLD),
    StatusRule("recurring", _is_recurring, PaymentStatus.RECURRING_PENDING),
)

DEFAULT_STATUS = PaymentStatus.COMPLETE


def derive_payment_status(
    data: PaymentInitiationData,
    rules: tuple[StatusRule, ...] = STATUS_RULES,
) -> PaymentStatus:
    """Return the status of the first rule that applies, else the default."""
    for rule in rules:
        if rule.applies(data):
            return rule.status
    return DEFAULT_STATUS

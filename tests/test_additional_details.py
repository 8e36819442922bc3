"""Cancellation enrichment with payee details."""
from decimal import Decimal

import pytest

from payment_lifecycle.features.payments.domain.entities import (
    PayeeDetails,
    PaymentCancellationData,
    PaymentInitiationData,
)
from payment_lifecycle.shared.domain.exceptions import InvalidArgumentError, PayeeResolutionError


@pytest.mark.anyio
async def test_single_entry_does_not_raise(manager, payee_service, make_entry):
    payee_service.resolve_payee.return_value = PayeeDetails(payee_id=1, name="Jane Roe")
    cancellation = PaymentCancellationData(payment_id=99, client_id="CLIENT1")

    await manager.populate_additional_details(
        cancellation, PaymentInitiationData(entries=[make_entry()])
    )

    assert len(cancellation.details) == 1


@pytest.mark.anyio
async def test_empty_entries_leave_cancellation_untouched(manager, payee_service):
    cancellation = PaymentCancellationData(payment_id=99)

    await manager.populate_additional_details(cancellation, PaymentInitiationData())

    assert cancellation.details == []
    payee_service.resolve_payee.assert_not_awaited()


@pytest.mark.anyio
async def test_details_are_filled_from_payee_service(manager, payee_service, make_entry):
    payee_service.resolve_payee.return_value = PayeeDetails(
        payee_id=42, name="Acme Supplies", account_number="****6789", bank_name="First Bank"
    )
    cancellation = PaymentCancellationData(payment_id=99, client_id="CLIENT1")

    await manager.populate_additional_details(
        cancellation, PaymentInitiationData(entries=[make_entry(amount="25.50", payee_id=42, sequence_no=4)])
    )

    detail = cancellation.details[0]
    assert detail.resolved is True
    assert detail.payee_name == "Acme Supplies"
    assert detail.payee_account_number == "****6789"
    assert detail.payee_bank_name == "First Bank"
    assert detail.sequence_no == 4
    assert detail.transaction_amt == Decimal("25.50")
    assert detail.currency == "USD"
    payee_service.resolve_payee.assert_awaited_once()
    assert payee_service.resolve_payee.await_args.args[0] == "CLIENT1"


@pytest.mark.anyio
async def test_failed_lookup_does_not_stop_remaining_entries(manager, payee_service, make_entry):
    payee_service.resolve_payee.side_effect = [
        PayeeResolutionError(1, "HTTP 404"),
        RuntimeError("unexpected"),
        PayeeDetails(payee_id=3, name="Third"),
    ]
    cancellation = PaymentCancellationData(payment_id=99, client_id="CLIENT1")
    entries = [make_entry(payee_id=i, sequence_no=i) for i in (1, 2, 3)]

    await manager.populate_additional_details(cancellation, PaymentInitiationData(entries=entries))

    assert [d.sequence_no for d in cancellation.details] == [1, 2, 3]
    assert [d.resolved for d in cancellation.details] == [False, False, True]
    assert cancellation.details[2].payee_name == "Third"
    assert payee_service.resolve_payee.await_count == 3


@pytest.mark.anyio
async def test_missing_cancellation_is_rejected(manager):
    with pytest.raises(InvalidArgumentError):
        await manager.populate_additional_details(None, PaymentInitiationData())

"""Population of new payment, entry and transaction records."""
from decimal import Decimal

import pytest

from payment_lifecycle.features.payments.domain.entities import (
    PaymentEntity,
    PaymentEntryEntity,
    PaymentInitiationData,
    RecurringData,
    RequestData,
    TransactionEntity,
)
from payment_lifecycle.features.payments.domain.enums import (
    PayeeCategory,
    PaymentStatus,
    TransactionStatus,
)
from payment_lifecycle.features.payments.domain.status_rules import (
    StatusRule,
    derive_payment_status,
)
from payment_lifecycle.shared.domain.exceptions import ErrorCode, InvalidArgumentError


def _request(hold: bool = False, recurring: bool | None = None) -> RequestData[PaymentInitiationData]:
    recurring_data = RecurringData(recurring=recurring) if recurring is not None else None
    return RequestData(request=PaymentInitiationData(hold=hold, recurring_data=recurring_data))


def test_populate_payment_sets_client_fields_and_complete_status(manager, context, fixed_now):
    payment = PaymentEntity()

    manager.populate_payment_entity(context, payment, _request(hold=False, recurring=False))

    assert payment.client_id == "CLIENT1"
    assert payment.user_id == "USER1"
    assert payment.created_by == "USER1"
    assert payment.created_timestamp == fixed_now
    assert payment.status == PaymentStatus.COMPLETE
    assert payment.status.value == "COMP"


@pytest.mark.parametrize(
    ("hold", "recurring", "expected"),
    [
        (True, True, PaymentStatus.HOLD),
        (True, False, PaymentStatus.HOLD),
        (True, None, PaymentStatus.HOLD),
        (False, True, PaymentStatus.RECURRING_PENDING),
        (False, False, PaymentStatus.COMPLETE),
        (False, None, PaymentStatus.COMPLETE),
    ],
)
def test_payment_status_priority(manager, context, hold, recurring, expected):
    payment = PaymentEntity()

    manager.populate_payment_entity(context, payment, _request(hold=hold, recurring=recurring))

    assert payment.status == expected


def test_populate_payment_ignores_client_in_existing_record(manager, context):
    payment = PaymentEntity(client_id="SPOOFED", user_id="SPOOFED")

    manager.populate_payment_entity(context, payment, _request())

    assert payment.client_id == "CLIENT1"
    assert payment.user_id == "USER1"


@pytest.mark.parametrize("request_data", [None, RequestData(request=None)])
def test_populate_payment_rejects_missing_request(manager, context, request_data):
    with pytest.raises(InvalidArgumentError) as exc_info:
        manager.populate_payment_entity(context, PaymentEntity(), request_data)

    assert exc_info.value.error_code == ErrorCode.INVALID_ARGUMENT


def test_populate_payment_rejects_missing_payment(manager, context):
    with pytest.raises(InvalidArgumentError):
        manager.populate_payment_entity(context, None, _request())


def test_extra_status_rule_takes_priority_when_listed_first():
    rules = (
        StatusRule("cancel", lambda data: True, PaymentStatus.CANCELLED),
        StatusRule("hold", lambda data: data.hold, PaymentStatus.HOLD),
    )

    assert derive_payment_status(PaymentInitiationData(hold=True), rules) == PaymentStatus.CANCELLED


def test_populate_entry_defaults_ccy_amt_from_transaction_amount(manager, context, make_entry):
    entity = PaymentEntryEntity()
    entry = make_entry(amount="100.00", ccy_amt="0")

    manager.populate_payment_entry_entity(context, entity, entry)

    assert entry.debit_account_data.ccy_amt == Decimal("100.00")
    assert entity.ccy_amt == Decimal("100.00")
    assert entity.created_by == "USER1"


def test_populate_entry_keeps_explicit_ccy_amt(manager, context, make_entry):
    entity = PaymentEntryEntity()
    entry = make_entry(amount="100.00", ccy_amt="91.37")

    manager.populate_payment_entry_entity(context, entity, entry)

    assert entry.debit_account_data.ccy_amt == Decimal("91.37")
    assert entity.ccy_amt == Decimal("91.37")
    assert entity.transaction_amt == Decimal("100.00")


def test_populate_entry_copies_payee_and_account_fields(manager, context, make_entry):
    entity = PaymentEntryEntity(payment_id=99)
    entry = make_entry(payee_id=42, payee_type_id=7, category=PayeeCategory.BUSINESS, sequence_no=3)

    manager.populate_payment_entry_entity(context, entity, entry)

    assert entity.payment_id == 99
    assert entity.sequence_no == 3
    assert entity.payee_category == PayeeCategory.BUSINESS
    assert entity.payee_id == 42
    assert entity.payee_type_id == 7
    assert entity.currency == "USD"
    assert entity.debit_account_number == "3300112233"
    assert entity.credit_account_number == "7700445566"
    assert entity.payment_date is not None
    assert entity.payment_date.date().isoformat() == "2026-10-19"


def test_populate_entry_with_unparsable_date_leaves_payment_date_empty(manager, context, make_entry):
    entity = PaymentEntryEntity()

    manager.populate_payment_entry_entity(context, entity, make_entry(payment_date="19/10/2026??"))

    assert entity.payment_date is None


def test_populate_transaction_sets_in_progress_and_clock_timestamp(
    manager, context, date_service, fixed_now
):
    entity = TransactionEntity()

    manager.populate_transaction_entity(context, entity, RequestData())

    assert entity.status == TransactionStatus.IN_PROGRESS
    assert entity.client_id == "CLIENT1"
    assert entity.user_id == "USER1"
    assert entity.created_timestamp == fixed_now
    date_service.get_application_timestamp.assert_called_once_with()

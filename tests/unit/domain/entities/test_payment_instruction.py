"""Tests for the PaymentInstruction aggregate.

Tests cover:
- PaymentInstruction.create() type normalization (amount, optional text)
- No field-level validation at construction
- Immutability and value equality
"""

from decimal import Decimal

import pytest

from qrbill_core.domain.entities import PaymentInstruction
from qrbill_core.domain.value_objects import AccountIdentifier, Payee, Payer, ReferenceKind

# =============================================================================
# PaymentInstruction.create() Factory Tests
# =============================================================================


class TestPaymentInstructionCreate:
    def test_create_keeps_all_fields(
        self, account: AccountIdentifier, payee: Payee, payer: Payer
    ) -> None:
        instruction = PaymentInstruction.create(
            account=account,
            payee=payee,
            payer=payer,
            amount=Decimal("199.95"),
            currency="CHF",
            reference_kind=ReferenceKind.SCOR,
            reference="RF18539007547034",
            additional_info="Invoice 123",
        )

        assert instruction.account == account
        assert instruction.payee == payee
        assert instruction.payer == payer
        assert instruction.amount == Decimal("199.95")
        assert instruction.currency == "CHF"
        assert instruction.reference_kind is ReferenceKind.SCOR
        assert instruction.reference == "RF18539007547034"
        assert instruction.additional_info == "Invoice 123"

    def test_create_defaults_to_no_reference(
        self, account: AccountIdentifier, payee: Payee, payer: Payer
    ) -> None:
        instruction = PaymentInstruction.create(
            account=account, payee=payee, payer=payer, amount="10.00", currency="CHF"
        )

        assert instruction.reference_kind is ReferenceKind.NON
        assert instruction.reference is None
        assert instruction.additional_info is None

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (199.95, Decimal("199.95")),
            (200, Decimal("200")),
            ("199.953", Decimal("199.953")),
        ],
    )
    def test_create_converts_amount_to_decimal(
        self,
        account: AccountIdentifier,
        payee: Payee,
        payer: Payer,
        amount: float | int | str,
        expected: Decimal,
    ) -> None:
        instruction = PaymentInstruction.create(
            account=account, payee=payee, payer=payer, amount=amount, currency="CHF"
        )

        assert isinstance(instruction.amount, Decimal)
        assert instruction.amount == expected

    def test_create_turns_blank_optional_text_into_none(
        self, account: AccountIdentifier, payee: Payee, payer: Payer
    ) -> None:
        instruction = PaymentInstruction.create(
            account=account,
            payee=payee,
            payer=payer,
            amount=Decimal("1.00"),
            currency="CHF",
            reference="   ",
            additional_info="",
        )

        assert instruction.reference is None
        assert instruction.additional_info is None


class TestPaymentInstructionNoValidation:
    """create() accepts business-rule violations; validate_instruction() catches them."""

    def test_create_accepts_negative_amount(
        self, account: AccountIdentifier, payee: Payee, payer: Payer
    ) -> None:
        instruction = PaymentInstruction.create(
            account=account, payee=payee, payer=payer, amount=Decimal("-5"), currency="CHF"
        )

        assert instruction.amount == Decimal("-5")

    def test_create_accepts_unknown_currency(
        self, account: AccountIdentifier, payee: Payee, payer: Payer
    ) -> None:
        instruction = PaymentInstruction.create(
            account=account, payee=payee, payer=payer, amount=Decimal("5"), currency="XYZ"
        )

        assert instruction.currency == "XYZ"

    def test_create_accepts_reference_inconsistent_with_kind(
        self, account: AccountIdentifier, payee: Payee, payer: Payer
    ) -> None:
        instruction = PaymentInstruction.create(
            account=account,
            payee=payee,
            payer=payer,
            amount=Decimal("5"),
            currency="CHF",
            reference_kind=ReferenceKind.QRR,
            reference="not a reference",
        )

        assert instruction.reference == "not a reference"


# =============================================================================
# Immutability and Equality Tests
# =============================================================================


class TestPaymentInstructionImmutability:
    def test_instruction_is_frozen(self, instruction: PaymentInstruction) -> None:
        with pytest.raises(AttributeError):
            instruction.amount = Decimal("1.00")  # type: ignore[misc]


class TestPaymentInstructionEquality:
    def test_instructions_with_same_fields_are_equal(
        self, account: AccountIdentifier, payee: Payee, payer: Payer
    ) -> None:
        kwargs = dict(account=account, payee=payee, payer=payer, amount="12.50", currency="CHF")

        assert PaymentInstruction.create(**kwargs) == PaymentInstruction.create(**kwargs)

    def test_instructions_with_different_amounts_are_not_equal(
        self, instruction: PaymentInstruction, account: AccountIdentifier, payee: Payee, payer: Payer
    ) -> None:
        other = PaymentInstruction.create(
            account=account,
            payee=payee,
            payer=payer,
            amount=Decimal("199.96"),
            currency="CHF",
            additional_info="Invoice 123",
        )

        assert instruction != other

"""Shared pytest fixtures for the test suite."""

from decimal import Decimal

import pytest

from qrbill_core.domain.entities import PaymentInstruction
from qrbill_core.domain.value_objects import AccountIdentifier, Payee, Payer, ReferenceKind

VALID_IBAN = "CH9300762011623852957"


@pytest.fixture
def account() -> AccountIdentifier:
    """The reference Swiss IBAN used across the QR-bill examples."""
    return AccountIdentifier.from_string(VALID_IBAN)


@pytest.fixture
def payee() -> Payee:
    return Payee(
        name="Max Mustermann",
        street="Musterstrasse 37",
        postal_code="6000",
        city="Luzern",
        country="CH",
    )


@pytest.fixture
def payer() -> Payer:
    return Payer(
        name="Alexandra Alexis",
        street="Musterweg 1",
        postal_code="8000",
        city="Zürich",
        country="CH",
    )


@pytest.fixture
def instruction(account: AccountIdentifier, payee: Payee, payer: Payer) -> PaymentInstruction:
    """The end-to-end example bill: CHF 199.95, note "Invoice 123"."""
    return PaymentInstruction.create(
        account=account,
        payee=payee,
        payer=payer,
        amount=Decimal("199.95"),
        currency="CHF",
        reference_kind=ReferenceKind.NON,
        reference=None,
        additional_info="Invoice 123",
    )

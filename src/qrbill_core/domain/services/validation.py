"""Opt-in business rule checks for PaymentInstruction.

PaymentInstruction.create() deliberately accepts anything well-typed.
This module is the separate validation pass: call validate_instruction()
before encoding when the input comes from an untrusted source.

Reference checksums come from python-stdnum:
    - QRR: stdnum.ch.esr (27 digits, recursive mod-10 check digit)
    - SCOR: stdnum.iso11649 (RF + two check digits, mod 97)
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from stdnum import iso11649
from stdnum.ch import esr

from qrbill_core.domain.exceptions import (
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidReferenceError,
    InvalidTextFieldError,
)
from qrbill_core.domain.value_objects import ReferenceKind

if TYPE_CHECKING:
    from qrbill_core.domain.entities import PaymentInstruction

ALLOWED_CURRENCIES = frozenset({"CHF", "EUR"})
MAX_AMOUNT = Decimal("999999999.99")
QRR_LENGTH = 27
LINE_BREAKS = ("\r", "\n")
PARTY_FIELDS = ("name", "street", "postal_code", "city", "country")


def validate_amount(amount: Decimal) -> None:
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {amount}")
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be greater than 0, got {amount}")
    if amount > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount cannot exceed {MAX_AMOUNT}, got {amount}")


def validate_currency(currency: str) -> None:
    if currency not in ALLOWED_CURRENCIES:
        raise InvalidCurrencyError(
            f"Currency must be one of {sorted(ALLOWED_CURRENCIES)}, got {currency!r}"
        )


def validate_reference(kind: ReferenceKind, reference: str | None) -> None:
    """Check that ``reference`` has the shape its ``kind`` requires."""
    if kind is ReferenceKind.NON:
        if reference is not None:
            raise InvalidReferenceError("Reference kind NON does not allow a reference")
        return

    if reference is None:
        raise InvalidReferenceError(f"Reference kind {kind.value} requires a reference")

    compact = "".join(reference.split())
    if kind is ReferenceKind.QRR:
        # esr.compact() strips leading zeros and fails on an all-zero value
        if len(compact) != QRR_LENGTH or not compact.strip("0") or not esr.is_valid(compact):
            raise InvalidReferenceError(f"Invalid QRR reference: {reference!r}")
    elif kind is ReferenceKind.SCOR:
        if not iso11649.is_valid(compact):
            raise InvalidReferenceError(f"Invalid SCOR reference: {reference!r}")


def validate_single_line(field: str, value: str | None) -> None:
    if value is not None and any(char in value for char in LINE_BREAKS):
        raise InvalidTextFieldError(f"{field} must not contain line breaks: {value!r}")


def validate_text_fields(instruction: PaymentInstruction) -> None:
    """Check that every free-text field fits on one payload line."""
    for role, party in (("payee", instruction.payee), ("payer", instruction.payer)):
        for name in PARTY_FIELDS:
            validate_single_line(f"{role}.{name}", getattr(party, name))
    validate_single_line("reference", instruction.reference)
    validate_single_line("additional_info", instruction.additional_info)


def validate_instruction(instruction: PaymentInstruction) -> None:
    """Run every business rule check against ``instruction``.

    Args:
        instruction: The instruction to check.

    Raises:
        InvalidAmountError: Amount not positive, not finite or too large.
        InvalidCurrencyError: Currency other than CHF or EUR.
        InvalidTextFieldError: A text field contains a CR or LF.
        InvalidReferenceError: Reference text inconsistent with its kind.
    """
    validate_text_fields(instruction)
    validate_amount(instruction.amount)
    validate_currency(instruction.currency)
    validate_reference(instruction.reference_kind, instruction.reference)

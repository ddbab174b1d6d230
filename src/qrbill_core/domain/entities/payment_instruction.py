"""PaymentInstruction aggregate.

Everything the QR payload and the printed bill need, in one immutable
object. Construction normalizes types but does not judge business rules;
see domain.services.validation for the opt-in checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from qrbill_core.domain.value_objects import ReferenceKind

if TYPE_CHECKING:
    from qrbill_core.domain.value_objects import AccountIdentifier, Payee, Payer


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    return value if value.strip() else None


def _to_decimal(amount: Decimal | int | float | str) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    # str() first so 199.95 stays 199.95 rather than its binary expansion
    return Decimal(str(amount))


@dataclass(frozen=True, slots=True)
class PaymentInstruction:
    """Structured payment instruction behind a Swiss QR-bill.

    Owns its account and parties by value. Optional text fields are None
    when absent, never an empty string, so the encoder has one absence
    case to handle.

    Use the create() factory to get type normalization; direct
    construction is allowed for callers that already hold exact types.
    """

    account: AccountIdentifier
    payee: Payee
    payer: Payer
    amount: Decimal
    currency: str
    reference_kind: ReferenceKind
    reference: str | None
    additional_info: str | None

    @classmethod
    def create(
        cls,
        account: AccountIdentifier,
        payee: Payee,
        payer: Payer,
        amount: Decimal | int | float | str,
        currency: str,
        reference_kind: ReferenceKind = ReferenceKind.NON,
        reference: str | None = None,
        additional_info: str | None = None,
    ) -> PaymentInstruction:
        """Factory method to create a PaymentInstruction.

        Args:
            account: Validated creditor account.
            payee: Creditor contact.
            payer: Debtor contact.
            amount: Amount to pay; converted to Decimal.
            currency: Three-letter currency code, taken as given.
            reference_kind: Declared reference scheme.
            reference: Reference text, if any.
            additional_info: Free-text note (unstructured message), if any.

        Returns:
            A new PaymentInstruction. Blank optional text becomes None.

        Note:
            No field-level validation happens here. The AccountIdentifier
            is already valid by construction; run validate_instruction()
            for amount, currency and reference checks.
        """
        return cls(
            account=account,
            payee=payee,
            payer=payer,
            amount=_to_decimal(amount),
            currency=currency,
            reference_kind=reference_kind,
            reference=_optional_text(reference),
            additional_info=_optional_text(additional_info),
        )

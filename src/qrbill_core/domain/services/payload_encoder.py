"""Swiss QR-bill payload encoder.

Turns a PaymentInstruction into the newline-separated text block that is
rendered into the QR code. The line layout is fixed: 31 lines from the
"SPC" header to the "EPD" trailer, with empty lines for every field that
is absent or not used (structured address lines, ultimate creditor).

Reference handling has two modes:

    LITERAL   always "NON" and an empty reference line, whatever the
              instruction declares. Byte-compatible with existing output.
    STANDARD  the declared ReferenceKind and its reference text.

The encoder is a total function. It validates nothing and raises nothing
for a PaymentInstruction built through the domain constructors.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from typing import TYPE_CHECKING

from qrbill_core.domain.value_objects import ReferenceKind

if TYPE_CHECKING:
    from qrbill_core.domain.entities import PaymentInstruction
    from qrbill_core.domain.value_objects import Party

QR_TYPE = "SPC"
VERSION = "0200"
CODING_TYPE = "1"
ADDRESS_TYPE_COMBINED = "K"
TRAILER = "EPD"
LINE_SEPARATOR = "\n"

PAYLOAD_LINE_COUNT = 31
ULTIMATE_CREDITOR_LINES = 7

CENTS = Decimal("0.01")
AMOUNT_ROUNDING = ROUND_HALF_UP


class ReferenceMode(Enum):
    """How the reference type / reference value lines are written."""

    LITERAL = "literal"
    STANDARD = "standard"


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two fractional digits.

    Rounds half up (199.955 -> "199.96"), uses "." whatever the locale
    and never falls back to exponent notation. Precision grows with the
    amount, so no finite value overflows the decimal context.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return format(amount.quantize(CENTS, rounding=AMOUNT_ROUNDING), "f")


def _text(value: str | None) -> str:
    return "" if value is None else value


def _address_block(party: Party) -> list[str]:
    # Combined address: two free lines, two empty structured-only lines.
    return [
        ADDRESS_TYPE_COMBINED,
        party.name,
        party.street,
        party.locality,
        "",
        "",
        party.country,
    ]


class PayloadEncoder:
    """Encodes PaymentInstructions into QR-bill payload text.

    Stateless apart from the reference mode; safe to share between
    threads.
    """

    def __init__(self, mode: ReferenceMode = ReferenceMode.LITERAL) -> None:
        self._mode = mode

    @property
    def mode(self) -> ReferenceMode:
        return self._mode

    def encode(self, instruction: PaymentInstruction) -> str:
        """Return the payload for ``instruction``.

        Args:
            instruction: A fully constructed payment instruction.

        Returns:
            The 31-line payload, lines joined with "\\n", no trailing newline.
        """
        return LINE_SEPARATOR.join(self.encode_lines(instruction))

    def encode_lines(self, instruction: PaymentInstruction) -> list[str]:
        """Return the payload as a list of lines, in wire order."""
        lines = [
            QR_TYPE,
            VERSION,
            CODING_TYPE,
            instruction.account.value,
        ]
        lines.extend(_address_block(instruction.payee))
        lines.extend([""] * ULTIMATE_CREDITOR_LINES)
        lines.extend(
            [
                format_amount(instruction.amount),
                instruction.currency,
            ]
        )
        lines.extend(_address_block(instruction.payer))
        lines.extend(self._reference_lines(instruction))
        lines.extend(
            [
                _text(instruction.additional_info),
                TRAILER,
            ]
        )
        return lines

    def _reference_lines(self, instruction: PaymentInstruction) -> list[str]:
        if self._mode is ReferenceMode.LITERAL:
            return [ReferenceKind.NON.value, ""]

        kind = instruction.reference_kind
        if kind is ReferenceKind.NON or instruction.reference is None:
            return [kind.value, ""]
        return [kind.value, "".join(instruction.reference.split())]


def encode_payload(
    instruction: PaymentInstruction,
    mode: ReferenceMode = ReferenceMode.LITERAL,
) -> str:
    """Shortcut for PayloadEncoder(mode).encode(instruction)."""
    return PayloadEncoder(mode).encode(instruction)

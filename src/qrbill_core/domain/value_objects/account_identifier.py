from __future__ import annotations

import string
from dataclasses import dataclass

from qrbill_core.domain.exceptions import InvalidAccountIdentifierError

MIN_LENGTH = 15
MAX_LENGTH = 34
MODULUS = 97
EXPECTED_REMAINDER = 1

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_uppercase)


def normalize_account_identifier(raw: str) -> str:
    """Strip all whitespace and upper-case the identifier."""
    return "".join(raw.split()).upper()


def _mod97(rearranged: str) -> int | None:
    """Fold the digit expansion of ``rearranged`` modulo 97.

    Letters expand to two digits (A=10 ... Z=35). Returns None when a
    character is neither an ASCII digit nor an ASCII letter.
    """
    remainder = 0
    for char in rearranged:
        if char in _DIGITS:
            remainder = (remainder * 10 + int(char)) % MODULUS
        elif char in _LETTERS:
            for digit in str(ord(char) - ord("A") + 10):
                remainder = (remainder * 10 + int(digit)) % MODULUS
        else:
            return None
    return remainder


def is_valid_account_identifier(raw: str) -> bool:
    """Check an IBAN-style identifier with ISO 7064 MOD 97-10.

    Total over any input: malformed values return False, nothing raises.
    """
    if not isinstance(raw, str):
        return False

    cleaned = normalize_account_identifier(raw)
    if not MIN_LENGTH <= len(cleaned) <= MAX_LENGTH:
        return False

    rearranged = cleaned[4:] + cleaned[:4]
    return _mod97(rearranged) == EXPECTED_REMAINDER


@dataclass(frozen=True, slots=True)
class AccountIdentifier:
    """Value object for the creditor account (IBAN or QR-IBAN).

    The value is validated on every construction path, so an instance
    always holds a checksum-valid identifier. It is stored normalized
    (no whitespace, upper-case), which is the form the QR payload carries.
    """

    value: str

    def __post_init__(self) -> None:
        if not is_valid_account_identifier(self.value):
            raise InvalidAccountIdentifierError(f"Invalid account identifier: {self.value!r}")

        normalized = normalize_account_identifier(self.value)
        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

    @classmethod
    def from_string(cls, raw: str) -> AccountIdentifier:
        """Build an AccountIdentifier from user input.

        Args:
            raw: IBAN text, any case, with or without grouping spaces.

        Returns:
            An AccountIdentifier holding the normalized value.

        Raises:
            InvalidAccountIdentifierError: If the length or checksum check fails.
        """
        return cls(value=raw)

    @classmethod
    def parse(cls, raw: str) -> AccountIdentifier | None:
        """Like from_string(), but returns None instead of raising."""
        if not is_valid_account_identifier(raw):
            return None
        return cls(value=raw)

    @staticmethod
    def is_valid(raw: str) -> bool:
        return is_valid_account_identifier(raw)

    @property
    def country_code(self) -> str:
        return self.value[:2]

    def formatted(self) -> str:
        """Return the value in blocks of four characters, for printing."""
        return " ".join(self.value[i : i + 4] for i in range(0, len(self.value), 4))

    def masked(self) -> str:
        """Return a log-safe form that only shows the last four characters."""
        return f"****{self.value[-4:]}"

    def __str__(self) -> str:
        return self.value

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Party:
    """Contact details printed on and encoded into a QR-bill.

    Fields are free text; no format rules are applied here. Use the
    concrete Payee / Payer types so the two roles cannot be swapped
    by accident: dataclass equality compares classes, so a Payee never
    equals a Payer with the same contents.
    """

    name: str
    street: str
    postal_code: str
    city: str
    country: str

    @property
    def locality(self) -> str:
        """Postal code and city on one line, as the combined address type wants."""
        return f"{self.postal_code} {self.city}"

    def address_lines(self) -> list[str]:
        """Name, street and locality, for printed address blocks."""
        return [self.name, self.street, self.locality]


@dataclass(frozen=True, slots=True)
class Payee(Party):
    """The creditor: who receives the payment."""


@dataclass(frozen=True, slots=True)
class Payer(Party):
    """The debtor: who pays the bill."""

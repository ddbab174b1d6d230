"""Value objects - Immutable objects defined by their attributes."""

from qrbill_core.domain.value_objects.account_identifier import (
    AccountIdentifier,
    is_valid_account_identifier,
)
from qrbill_core.domain.value_objects.party import Party, Payee, Payer
from qrbill_core.domain.value_objects.reference_kind import ReferenceKind

__all__ = [
    "AccountIdentifier",
    "Party",
    "Payee",
    "Payer",
    "ReferenceKind",
    "is_valid_account_identifier",
]

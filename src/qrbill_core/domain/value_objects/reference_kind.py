from __future__ import annotations

from enum import Enum


class ReferenceKind(Enum):
    """Payment reference schemes of the QR-bill; values are the wire literals."""

    QRR = "QRR"  # Swiss structured reference, 27 digits
    SCOR = "SCOR"  # ISO 11649 creditor reference
    NON = "NON"  # no reference

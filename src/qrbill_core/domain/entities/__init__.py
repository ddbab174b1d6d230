"""Domain entities - Aggregates built from value objects."""

from qrbill_core.domain.entities.payment_instruction import PaymentInstruction

__all__ = [
    "PaymentInstruction",
]

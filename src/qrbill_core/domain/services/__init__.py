"""Domain services - Stateless operations on domain objects."""

from qrbill_core.domain.services.payload_encoder import (
    PayloadEncoder,
    ReferenceMode,
    encode_payload,
    format_amount,
)
from qrbill_core.domain.services.validation import validate_instruction

__all__ = [
    "PayloadEncoder",
    "ReferenceMode",
    "encode_payload",
    "format_amount",
    "validate_instruction",
]

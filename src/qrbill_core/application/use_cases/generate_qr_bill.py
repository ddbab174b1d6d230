from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from qrbill_core.domain.services import validate_instruction

if TYPE_CHECKING:
    from qrbill_core.application.ports import DocumentLayoutEngine, RasterGenerator
    from qrbill_core.domain.entities import PaymentInstruction
    from qrbill_core.domain.services import PayloadEncoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerateQRBillRequest:
    """Input DTO for the generate QR-bill use case."""

    instruction: PaymentInstruction
    include_document: bool = True


@dataclass(frozen=True, slots=True)
class GenerateQRBillResponse:
    """Output DTO for the generate QR-bill use case."""

    payload: str
    qr_image: bytes
    document: bytes | None  # None when include_document was False


class GenerateQRBillUseCase:
    """Orchestrates payload encoding and rendering of a QR-bill.

    Responsibilities:
    - Optionally run the business rule checks (strict mode)
    - Encode the instruction into the payload text
    - Hand the payload to the raster generator
    - Hand instruction, payload and image to the document layout engine

    Errors are not caught here: MalformedInstructionError comes from the
    strict checks, RenderingError from the adapters.
    """

    def __init__(
        self,
        encoder: PayloadEncoder,
        raster_generator: RasterGenerator,
        document_layout_engine: DocumentLayoutEngine,
        strict_validation: bool = False,
    ) -> None:
        self._encoder = encoder
        self._raster_generator = raster_generator
        self._layout_engine = document_layout_engine
        self._strict_validation = strict_validation

    def execute(self, request: GenerateQRBillRequest) -> GenerateQRBillResponse:
        """Execute the generate QR-bill workflow.

        Args:
            request: The instruction and whether a printable document is wanted.

        Returns:
            GenerateQRBillResponse with payload, QR image and optional document.

        Raises:
            MalformedInstructionError: Strict mode only, instruction breaks a rule.
            RenderingError: The raster or layout adapter failed.
        """
        instruction = request.instruction
        account = instruction.account.masked()

        if self._strict_validation:
            validate_instruction(instruction)

        payload = self._encoder.encode(instruction)
        logger.info(
            f"Encoded QR payload for account {account} "
            f"({instruction.currency} {instruction.amount}, mode={self._encoder.mode.value})"
        )

        qr_image = self._raster_generator.render(payload)
        logger.debug(f"Rendered QR image: {len(qr_image)} bytes")

        document = None
        if request.include_document:
            document = self._layout_engine.render(instruction, payload, qr_image)
            logger.info(f"Rendered QR-bill document for account {account}: {len(document)} bytes")

        return GenerateQRBillResponse(payload=payload, qr_image=qr_image, document=document)

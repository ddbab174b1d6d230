from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qrbill_core.domain.entities import PaymentInstruction


class DocumentLayoutEngine(ABC):
    """Port for laying out a printable QR-bill document.

    Contract:
    - render() MUST place the given QR image unchanged; it never re-encodes
      the payload itself
    - render() MUST return a complete document file (e.g. PDF bytes)
    - render() MUST raise RenderingError on failure
    - Visual fidelity to the QR-bill style guide is not part of the contract
    """

    @abstractmethod
    def render(self, instruction: PaymentInstruction, payload: str, qr_image: bytes) -> bytes:
        """Lay out the receipt and payment part for ``instruction``.

        Args:
            instruction: The payment instruction shown in the text blocks.
            payload: The encoded payload the QR image was built from.
            qr_image: Image bytes produced by a RasterGenerator.

        Returns:
            Encoded document bytes.

        Raises:
            RenderingError: If the document cannot be produced.
        """

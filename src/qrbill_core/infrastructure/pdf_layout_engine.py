"""ReportLab implementation of the document layout port.

Draws one A4 page whose bottom 105 mm hold the QR-bill:

    +-----------------+------------------------------------------+
    | Empfangsschein  | Zahlteil                                 |
    | Konto / Zahlbar | [QR code]        Konto / Zahlbar an      |
    | an ...          |                  Zusätzliche Infos       |
    | Währung Betrag  | Währung Betrag   Zahlbar durch           |
    +-----------------+------------------------------------------+

Positions follow the receipt (62 mm) / payment part (148 mm) split of the
QR-bill style guide, but pixel accuracy is not a goal.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import TYPE_CHECKING

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from qrbill_core.application.ports import DocumentLayoutEngine, RenderingError
from qrbill_core.domain.services import format_amount

if TYPE_CHECKING:
    from qrbill_core.domain.entities import PaymentInstruction

logger = logging.getLogger(__name__)

BILL_HEIGHT = 105 * mm
RECEIPT_WIDTH = 62 * mm
MARGIN = 5 * mm
QR_SIZE = 46 * mm
QR_COLUMN_WIDTH = 56 * mm

TITLE_FONT = ("Helvetica-Bold", 11)
HEADING_FONT = ("Helvetica-Bold", 6)
TEXT_FONT = ("Helvetica", 8)
LINE_HEIGHT = 9

# zero-based payload line holding the reference text
REFERENCE_LINE = 28

LABELS = {
    "receipt": "Empfangsschein",
    "payment_part": "Zahlteil",
    "account": "Konto / Zahlbar an",
    "reference": "Referenz",
    "additional_info": "Zusätzliche Informationen",
    "payable_by": "Zahlbar durch",
    "currency": "Währung",
    "amount": "Betrag",
}


def encoded_reference(payload: str) -> str | None:
    """Return the reference as written into ``payload``, or None when it carries none.

    The printed reference always matches the QR code. In literal reference
    mode the payload holds none, whatever the instruction declares.
    """
    lines = payload.split("\n")
    if len(lines) <= REFERENCE_LINE:
        return None
    return lines[REFERENCE_LINE] or None


class ReportLabDocumentLayoutEngine(DocumentLayoutEngine):
    """A4 PDF layout of the receipt and payment part, drawn with reportlab."""

    def __init__(self, title: str = "QR-bill", author: str = "qrbill-core") -> None:
        self._title = title
        self._author = author

    def render(self, instruction: PaymentInstruction, payload: str, qr_image: bytes) -> bytes:
        buffer = BytesIO()
        try:
            pdf = canvas.Canvas(buffer, pagesize=A4)
            pdf.setTitle(self._title)
            pdf.setAuthor(self._author)
            self._draw_bill(pdf, instruction, encoded_reference(payload), qr_image)
            pdf.showPage()
            pdf.save()
        except Exception as e:
            # reportlab re-raises Pillow and parser errors under their own types
            logger.exception("QR-bill layout failed")
            raise RenderingError(f"Could not lay out QR-bill document: {e}") from e

        logger.debug(f"Laid out QR-bill page for {len(payload.splitlines())}-line payload")
        return buffer.getvalue()

    def _draw_bill(
        self,
        pdf: canvas.Canvas,
        instruction: PaymentInstruction,
        reference: str | None,
        qr_image: bytes,
    ) -> None:
        page_width, _ = A4
        top = BILL_HEIGHT

        pdf.setLineWidth(0.5)
        pdf.line(0, top, page_width, top)
        pdf.line(RECEIPT_WIDTH, 0, RECEIPT_WIDTH, top)

        self._draw_receipt(pdf, instruction, reference, top)
        self._draw_payment_part(pdf, instruction, reference, qr_image, top)

    def _draw_receipt(
        self,
        pdf: canvas.Canvas,
        instruction: PaymentInstruction,
        reference: str | None,
        top: float,
    ) -> None:
        x = MARGIN
        y = top - MARGIN - TITLE_FONT[1]

        pdf.setFont(*TITLE_FONT)
        pdf.drawString(x, y, LABELS["receipt"])

        y = self._draw_section(
            pdf,
            x,
            y - 2 * LINE_HEIGHT,
            LABELS["account"],
            [instruction.account.formatted(), *instruction.payee.address_lines()],
        )
        if reference is not None:
            y = self._draw_section(pdf, x, y, LABELS["reference"], [reference])
        self._draw_section(pdf, x, y, LABELS["payable_by"], instruction.payer.address_lines())

        self._draw_amount(pdf, x, 37 * mm, instruction)

    def _draw_payment_part(
        self,
        pdf: canvas.Canvas,
        instruction: PaymentInstruction,
        reference: str | None,
        qr_image: bytes,
        top: float,
    ) -> None:
        x = RECEIPT_WIDTH + MARGIN
        y = top - MARGIN - TITLE_FONT[1]

        pdf.setFont(*TITLE_FONT)
        pdf.drawString(x, y, LABELS["payment_part"])

        qr_bottom = y - 2 * LINE_HEIGHT - QR_SIZE
        pdf.drawImage(ImageReader(BytesIO(qr_image)), x, qr_bottom, width=QR_SIZE, height=QR_SIZE)
        self._draw_amount(pdf, x, 37 * mm, instruction)

        details_x = x + QR_COLUMN_WIDTH
        y = top - MARGIN - HEADING_FONT[1]
        y = self._draw_section(
            pdf,
            details_x,
            y,
            LABELS["account"],
            [instruction.account.formatted(), *instruction.payee.address_lines()],
        )
        if reference is not None:
            y = self._draw_section(pdf, details_x, y, LABELS["reference"], [reference])
        if instruction.additional_info is not None:
            y = self._draw_section(
                pdf, details_x, y, LABELS["additional_info"], [instruction.additional_info]
            )
        self._draw_section(pdf, details_x, y, LABELS["payable_by"], instruction.payer.address_lines())

    def _draw_amount(self, pdf: canvas.Canvas, x: float, y: float, instruction: PaymentInstruction) -> None:
        pdf.setFont(*HEADING_FONT)
        pdf.drawString(x, y, LABELS["currency"])
        pdf.drawString(x + 15 * mm, y, LABELS["amount"])
        pdf.setFont(*TEXT_FONT)
        pdf.drawString(x, y - LINE_HEIGHT, instruction.currency)
        pdf.drawString(x + 15 * mm, y - LINE_HEIGHT, format_amount(instruction.amount))

    def _draw_section(
        self,
        pdf: canvas.Canvas,
        x: float,
        y: float,
        heading: str,
        lines: list[str],
    ) -> float:
        """Draw a heading and its text lines; return the y for the next section."""
        pdf.setFont(*HEADING_FONT)
        pdf.drawString(x, y, heading)
        pdf.setFont(*TEXT_FONT)
        for line in lines:
            y -= LINE_HEIGHT
            pdf.drawString(x, y, line)
        return y - 1.5 * LINE_HEIGHT

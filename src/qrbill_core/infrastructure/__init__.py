"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- QR Raster: PNG QR codes via the qrcode library (Pillow backend)
- Document Layout: A4 PDF QR-bills via reportlab

Infrastructure adapters implement the ports defined in the application layer.
"""

from qrbill_core.infrastructure.pdf_layout_engine import ReportLabDocumentLayoutEngine
from qrbill_core.infrastructure.qr_raster_generator import QRCodeRasterGenerator

__all__ = [
    "QRCodeRasterGenerator",
    "ReportLabDocumentLayoutEngine",
]

"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that rendering adapters must implement.
This keeps the payload encoder and use case independent of any QR or
PDF library.
"""

from qrbill_core.application.ports.document_layout import DocumentLayoutEngine
from qrbill_core.application.ports.raster_generator import RasterGenerator, RenderingError

__all__ = [
    "DocumentLayoutEngine",
    "RasterGenerator",
    "RenderingError",
]

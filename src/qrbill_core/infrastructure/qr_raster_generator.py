from __future__ import annotations

import logging
from io import BytesIO

import qrcode
from qrcode.exceptions import DataOverflowError

from qrbill_core.application.ports import RasterGenerator, RenderingError

logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


class QRCodeRasterGenerator(RasterGenerator):
    """PNG raster generator backed by the ``qrcode`` library (Pillow images).

    The QR-bill standard asks for error correction level M, which is the
    default. The symbol version is chosen automatically to fit the payload.

    Implementation notes:
    - A fresh qrcode.QRCode is built per render() call; nothing is shared
    - The payload is encoded to UTF-8 bytes before being added
    """

    def __init__(self, error_correction: str = "M", box_size: int = 10, border: int = 4) -> None:
        level = error_correction.upper()
        if level not in ERROR_CORRECTION_LEVELS:
            raise ValueError(
                f"error_correction must be one of {sorted(ERROR_CORRECTION_LEVELS)}, "
                f"got {error_correction!r}"
            )
        if box_size < 1:
            raise ValueError(f"box_size must be at least 1, got {box_size}")
        if border < 0:
            raise ValueError(f"border cannot be negative, got {border}")

        self._error_correction = ERROR_CORRECTION_LEVELS[level]
        self._box_size = box_size
        self._border = border

    @property
    def media_type(self) -> str:
        return "image/png"

    def render(self, payload: str) -> bytes:
        qr = qrcode.QRCode(
            version=None,
            error_correction=self._error_correction,
            box_size=self._box_size,
            border=self._border,
        )
        qr.add_data(payload.encode("utf-8"))
        try:
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as e:
            # qrcode 8 reports an overflow as an invalid version 41
            raise RenderingError(f"Payload too large for a QR code: {len(payload)} chars") from e

        image = qr.make_image(fill_color="black", back_color="white")
        buffer = BytesIO()
        image.save(buffer, format="PNG")
        logger.debug(f"QR code version {qr.version} rendered")
        return buffer.getvalue()

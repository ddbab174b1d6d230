from __future__ import annotations

import logging

from qrbill_core.application.use_cases.generate_qr_bill import GenerateQRBillUseCase
from qrbill_core.config import Settings, get_settings
from qrbill_core.domain.services import PayloadEncoder, ReferenceMode
from qrbill_core.infrastructure import QRCodeRasterGenerator, ReportLabDocumentLayoutEngine

logger = logging.getLogger(__name__)


def build_encoder(settings: Settings | None = None) -> PayloadEncoder:
    """Build a PayloadEncoder in the configured reference mode.

    Args:
        settings: Explicit settings; the cached environment settings otherwise.

    Returns:
        A PayloadEncoder using ``settings.reference_mode``.
    """
    settings = settings or get_settings()
    return PayloadEncoder(ReferenceMode(settings.reference_mode))


def build_use_case(settings: Settings | None = None) -> GenerateQRBillUseCase:
    """Wire GenerateQRBillUseCase with the default adapters.

    Args:
        settings: Explicit settings; the cached environment settings otherwise.

    Returns:
        A ready-to-use GenerateQRBillUseCase.
    """
    settings = settings or get_settings()
    logger.info(
        f"Building QR-bill use case: reference_mode={settings.reference_mode}, "
        f"strict_validation={settings.strict_validation}, "
        f"error_correction={settings.qr_error_correction}"
    )
    return GenerateQRBillUseCase(
        encoder=build_encoder(settings),
        raster_generator=QRCodeRasterGenerator(
            error_correction=settings.qr_error_correction,
            box_size=settings.qr_box_size,
            border=settings.qr_border,
        ),
        document_layout_engine=ReportLabDocumentLayoutEngine(),
        strict_validation=settings.strict_validation,
    )

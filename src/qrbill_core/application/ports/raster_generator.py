from __future__ import annotations

from abc import ABC, abstractmethod


class RenderingError(Exception):
    """Raised by rendering adapters when the underlying library fails.

    Always chained (``raise ... from e``) to the library's own exception.
    """


class RasterGenerator(ABC):
    """Port for turning a payload string into a QR code image.

    Contract:
    - render() MUST encode the payload exactly as given (UTF-8), without
      reordering, trimming or re-joining lines
    - render() MUST return a complete image file (e.g. PNG bytes)
    - render() MUST raise RenderingError, not a library exception, on failure
    - Implementations hold only immutable configuration and are safe to
      share between threads
    """

    @abstractmethod
    def render(self, payload: str) -> bytes:
        """Render ``payload`` as a QR code image.

        Args:
            payload: The QR-bill payload text.

        Returns:
            Encoded image bytes.

        Raises:
            RenderingError: If the image cannot be produced.
        """

    @property
    @abstractmethod
    def media_type(self) -> str:
        """MIME type of the bytes returned by render()."""

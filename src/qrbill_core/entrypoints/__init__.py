"""Entrypoints layer - Wiring for callers of the library.

This layer contains:
- Bootstrap: builds the payload encoder and GenerateQRBill use case
  from Settings with the default QR and PDF adapters

Entrypoints translate configuration into ready-made use cases.
"""

from qrbill_core.entrypoints.bootstrap import build_encoder, build_use_case

__all__ = [
    "build_encoder",
    "build_use_case",
]

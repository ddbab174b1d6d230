"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: GenerateQRBill (encode, rasterize, lay out)
- Ports: Abstract interfaces for the QR raster and document layout adapters

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""

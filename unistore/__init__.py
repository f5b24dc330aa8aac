"""UniStore catalogue handling and building blocks for QR-code recognition."""

__version__ = "1.0.0"
__all__ = [
    "meta",
    "qr_geometry",
    "qr_image",
    "qr_types",
    "store",
    "store_entry",
    "store_utils",
]
"""Colour-channel and box-blur filters for uncompressed 24-bit BMP images."""

__version__ = "0.1.0"
__all__ = ["bitmap", "cli", "fileinfo", "pixel"]
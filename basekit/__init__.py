"""Bit flags, build descriptors and block-wise UTF-8/16/32 conversion."""

__version__ = "0.1.0"

__all__ = ["build", "flags", "utf", "utf_base", "utf_generic"]
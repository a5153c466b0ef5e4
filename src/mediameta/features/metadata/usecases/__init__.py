"""Use case helpers for metadata extraction and artwork serving."""

from . import artwork, extraction, ports

__all__ = ["artwork", "extraction", "ports"]

# Where: mediameta.shared.__init__
# What: Provide a concise import surface for the catalog item model.
# Why: Encourage consistent reuse of shared dataclasses across features.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .catalog_item import CatalogItem, ResourceDescriptor

__all__ = ["CatalogItem", "ResourceDescriptor"]

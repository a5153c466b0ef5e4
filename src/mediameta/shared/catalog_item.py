# Where: mediameta.shared.catalog_item
# What: Catalog item and resource descriptor populated by the extraction pipeline.
# Why: Give extraction and serving one in-memory item model to mutate and read back.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ResourceDescriptor:
    """One deliverable artifact attached to a catalog item."""

    # Container family that must reopen the file to serve this resource;
    # ``None`` for the primary media stream.
    handler: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    parameters: dict[str, str] = field(default_factory=dict)

    def add_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def add_parameter(self, name: str, value: str) -> None:
        self.parameters[name] = value


@dataclass
class CatalogItem:
    """A media file as seen by the catalog.

    Resource 0 is the primary playable stream and exists from creation.
    """

    location: Path
    mimetype: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)
    aux_data: dict[str, str] = field(default_factory=dict)
    track_number: int | None = None
    resources: list[ResourceDescriptor] = field(
        default_factory=lambda: [ResourceDescriptor()]
    )

    def set_metadata(self, key: str, value: str) -> None:
        self.metadata[key] = value

    def get_metadata(self, key: str) -> str | None:
        return self.metadata.get(key)

    def set_track_number(self, number: int) -> None:
        self.track_number = number

    def set_aux_data(self, key: str, value: str) -> None:
        self.aux_data[key] = value

    def add_resource(self, descriptor: ResourceDescriptor) -> int:
        """Append ``descriptor`` and return its resource index."""
        self.resources.append(descriptor)
        return len(self.resources) - 1

    def get_resource(self, index: int) -> ResourceDescriptor:
        """Return the resource at ``index``.

        Raises:
            IndexError: If no resource exists at ``index``.
        """
        if index < 0 or index >= len(self.resources):
            raise IndexError(f"Item {self.location} has no resource {index}")
        return self.resources[index]

    def add_attribute(self, descriptor: ResourceDescriptor, name: str, value: str) -> None:
        descriptor.add_attribute(name, value)


__all__ = ["CatalogItem", "ResourceDescriptor"]

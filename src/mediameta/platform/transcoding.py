"""String conversion into the configured target encoding."""

from __future__ import annotations

from typing import final


@final
class StringConverter:
    """Coerce text so that it is representable in ``target_encoding``.

    Characters the codec cannot represent are replaced rather than raising,
    so conversion never fails the pipeline.
    """

    def __init__(self, target_encoding: str = "utf-8") -> None:
        self.target_encoding: str = target_encoding

    def convert(self, text: str | bytes) -> str:
        if isinstance(text, bytes):
            text = text.decode(self.target_encoding, errors="replace")
        encoded = text.encode(self.target_encoding, errors="replace")
        return encoded.decode(self.target_encoding, errors="replace").replace("\x00", "")


__all__ = ["StringConverter"]

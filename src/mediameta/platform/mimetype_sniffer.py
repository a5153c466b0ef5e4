"""Content-signature mimetype detection backed by puremagic."""

from __future__ import annotations

import puremagic

from mediameta.platform.logging import logger


class PuremagicSniffer:
    """Guess a mimetype from the leading bytes of a buffer."""

    def sniff(self, data: bytes) -> str | None:
        """Return the detected mimetype, or ``None`` when inconclusive."""

        if not data:
            return None
        try:
            mimetype = puremagic.from_string(data, mime=True)
        except (puremagic.PureError, ValueError) as exc:
            logger.debug("Mimetype sniffing inconclusive: %s", exc)
            return None
        return mimetype or None


__all__ = ["PuremagicSniffer"]

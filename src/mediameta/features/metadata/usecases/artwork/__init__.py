"""
Summary: Album art resolution and deferred serving.
Why: Group the embedded, sibling and serving steps behind one namespace.
"""

from .album_art_resolver import ArtworkResolution, resolve_album_art
from .content_server import ArtworkContent, serve_artwork
from .sibling_artwork import find_sibling_artwork, load_sibling_artwork

__all__ = [
    "ArtworkContent",
    "ArtworkResolution",
    "find_sibling_artwork",
    "load_sibling_artwork",
    "resolve_album_art",
    "serve_artwork",
]

"""mediameta: normalize media file tags into canonical catalog items."""

__version__ = "0.1.0"

"""Configuration management for mediameta."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from mediameta.config.file_ops import write_text_file
from mediameta.config.paths import default_config_path
from mediameta.platform.logging import logger


TARGET_ENCODING_DEFAULT: Final[str] = "utf-8"

# Substrings matched against sibling file names, in priority order.
ALBUM_ART_PATTERNS_DEFAULT: Final[tuple[str, ...]] = (
    "Folder.jpg",
    "Folder.jpeg",
    "folder.jpg",
    "folder.jpeg",
    "Art.jpg",
    "Art.jpeg",
    "art.jpg",
    "art.jpeg",
    "Cover.jpg",
    "Cover.jpeg",
    "cover.jpg",
    "cover.jpeg",
    ".jpg",
    ".jpeg",
)


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Encoding that extracted text is normalized into
    target_encoding: str = TARGET_ENCODING_DEFAULT

    # ID3v2 text frame IDs copied verbatim into item aux data
    id3_aux_tags: list[str] = field(default_factory=list)

    # Sibling file name substrings tried when no artwork is embedded
    album_art_patterns: list[str] = field(
        default_factory=lambda: list(ALBUM_ART_PATTERNS_DEFAULT)
    )

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []
        lines.append("# mediameta Configuration File")
        lines.append("")

        lines.append("# Character encoding extracted text is converted into")
        lines.append(f"target_encoding = {self._format_toml_value(config['target_encoding'])}")
        lines.append("")

        lines.append("# ID3v2 text frames copied into item aux data (optional)")
        lines.append('# Example: id3_aux_tags = ["TSOP", "TENC"]')
        lines.append(f"id3_aux_tags = {self._format_toml_value(config['id3_aux_tags'])}")
        lines.append("")

        lines.append("# Sibling file name fragments searched for album art, in order")
        lines.append(
            f"album_art_patterns = {self._format_toml_value(config['album_art_patterns'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/mediameta.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, creating a default one when missing.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        target = config_file or default_config_path()
        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        try:
            if target.exists():
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)

                _ = config_dict.setdefault("target_encoding", TARGET_ENCODING_DEFAULT)
                _ = config_dict.setdefault("id3_aux_tags", [])
                _ = config_dict.setdefault(
                    "album_art_patterns", list(ALBUM_ART_PATTERNS_DEFAULT)
                )
                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {k: v for k, v in config_dict.items() if k in known}

                logger.info("Configuration loaded from %s", target)
                instance = cls(**config_dict)
            else:
                instance = cls()
                _ = instance.save(target)
                logger.info("Created default configuration at %s", target)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = target
        return instance


__all__ = ["ALBUM_ART_PATTERNS_DEFAULT", "Config", "TARGET_ENCODING_DEFAULT"]

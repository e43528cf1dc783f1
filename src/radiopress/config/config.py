"""Configuration management for radiopress."""

import json
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from radiopress.config.file_ops import create_if_missing, write_text_file
from radiopress.config.paths import default_config_path
from radiopress.platform.logging import logger

AUDIO_EXTENSIONS_DEFAULT: tuple[str, ...] = (".mp3", ".jlres3")
AUDIO_URL_TEMPLATE_DEFAULT: str = (
    "https://raw.githubusercontent.com/{repository}/refs/heads/{branch}/{filename}"
)
UNKNOWN_ARTIST_DEFAULT: str = "Unknown Artist"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Output directory for the generated site
    site_dir: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Scanning and probing
    audio_extensions: list[str] = field(default_factory=lambda: list(AUDIO_EXTENSIONS_DEFAULT))
    probe_backend: str = "ffprobe"
    ffprobe_binary: str = "ffprobe"
    ffmpeg_binary: str = "ffmpeg"
    unknown_artist: str = UNKNOWN_ARTIST_DEFAULT

    # Page identity
    radio_title: str = "Radio"
    player_title: str = "Music Player"

    # Where browsers fetch audio bytes from
    repository: str = ""
    branch: str = "main"
    audio_url_template: str = AUDIO_URL_TEMPLATE_DEFAULT

    # Prefix for browser storage keys; variants append "Radio" / "Player"
    storage_namespace: str = "radiopress"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file.

        Args:
            path: Destination file. Defaults to :func:`default_config_path`.
        """
        target = path or default_config_path()
        try:
            write_text_file(target, self.render_toml())
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        config = asdict(self)
        lines: list[str] = []

        lines.append("# radiopress configuration file")
        lines.append("")

        lines.append("# Directory the static site is written to (optional)")
        lines.append('# Example: site_dir = "/path/to/repo/site"')
        if config["site_dir"] is not None:
            lines.append(f"site_dir = {self._format_toml_value(config['site_dir'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/radiopress.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# File extensions treated as audio when scanning")
        lines.append(f"audio_extensions = {self._format_toml_value(config['audio_extensions'])}")
        lines.append("")

        lines.append('# Metadata probe: "ffprobe" (external binaries) or "mutagen"')
        lines.append(f"probe_backend = {self._format_toml_value(config['probe_backend'])}")
        lines.append(f"ffprobe_binary = {self._format_toml_value(config['ffprobe_binary'])}")
        lines.append(f"ffmpeg_binary = {self._format_toml_value(config['ffmpeg_binary'])}")
        lines.append("")

        lines.append("# Artist written for files without an artist tag")
        lines.append(f"unknown_artist = {self._format_toml_value(config['unknown_artist'])}")
        lines.append("")

        lines.append("# Page titles")
        lines.append(f"radio_title = {self._format_toml_value(config['radio_title'])}")
        lines.append(f"player_title = {self._format_toml_value(config['player_title'])}")
        lines.append("")

        lines.append("# Raw audio location. {repository}, {branch} and {filename} are substituted.")
        lines.append('# Example: repository = "owner/name"')
        lines.append(f"repository = {self._format_toml_value(config['repository'])}")
        lines.append(f"branch = {self._format_toml_value(config['branch'])}")
        lines.append(
            f"audio_url_template = {self._format_toml_value(config['audio_url_template'])}"
        )
        lines.append("")

        lines.append("# Prefix for browser storage keys")
        lines.append(
            f"storage_namespace = {self._format_toml_value(config['storage_namespace'])}"
        )
        lines.append("")

        return "\n".join(lines)

    @classmethod
    def _format_toml_value(cls, value: Any) -> str:
        """Format a value for TOML output.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return json.dumps(str(value), ensure_ascii=False)
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(cls._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, creating a commented default first.

        Args:
            path: Explicit config file. Defaults to :func:`default_config_path`.

        Returns:
            Config: Loaded configuration object.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        try:
            if create_if_missing(config_file, lambda: cls().render_toml()):
                logger.info("Created default configuration at %s", config_file)

            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)
                del config_dict[key]

            instance = cls(**config_dict)
            logger.debug("Configuration loaded from %s", config_file)

        except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = [
    "AUDIO_EXTENSIONS_DEFAULT",
    "AUDIO_URL_TEMPLATE_DEFAULT",
    "UNKNOWN_ARTIST_DEFAULT",
    "Config",
]

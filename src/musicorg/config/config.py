"""Configuration management for musicorg."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from musicorg.config.paths import default_config_path
from musicorg.platform.logging import logger

SPLITTER_COMMAND_DEFAULT = "shnsplit"
SPLITTER_TIMEOUT_DEFAULT = 600.0
CLASSICAL_GENRE_DEFAULT = "Classical"


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

    # Log file path
    log_file: Path | None = _path_field()

    # External splitter invocation
    splitter_command: str = SPLITTER_COMMAND_DEFAULT
    splitter_timeout: float = SPLITTER_TIMEOUT_DEFAULT

    # Genre tag that routes albums to the work/movement layout
    classical_genre: str = CLASSICAL_GENRE_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Missing files yield the defaults; the file is never created here.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        target = config_file or default_config_path()

        if not target.exists():
            logger.debug("No configuration file at %s, using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", target)

        if config_file is None:
            cls._instance = instance
            cls._loaded_from = target
        return instance


# Global configuration instance
config = Config.load()

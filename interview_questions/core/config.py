"""Configuration management for Interview Questions."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict

from .question import QuestionCategory

logger = logging.getLogger(__name__)

# Config directory
CONFIG_DIR = Path.home() / ".config" / "interview-questions"
CONFIG_FILE = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "numockmate.db"


class DatabaseSettings(BaseModel):
    """Question database settings."""
    path: Path = DEFAULT_DB_PATH


class UISettings(BaseModel):
    """Window settings."""
    title: str = "Interview Questions Manager"
    window_width: int = 900
    window_height: int = 700
    fullscreen: bool = False
    default_category: QuestionCategory = QuestionCategory.GENERAL


class AppConfig(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="INTERVIEW_QUESTIONS_",
        env_nested_delimiter="__",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    ui: UISettings = Field(default_factory=UISettings)

    log_level: str = "INFO"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AppConfig":
        """Load configuration from file, falling back to defaults."""
        path = path or CONFIG_FILE
        data = _read_file(path)

        try:
            return cls(**data)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid config file {path}: {e}")
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """
        Save configuration to file.

        Values that came from environment overrides are not written; the
        file keeps whatever it held for them before.
        """
        path = path or CONFIG_FILE

        import tomli_w

        data = self.model_dump(mode="json")
        overrides = EnvSettingsSource(type(self))()
        if overrides:
            _drop_env_overrides(data, overrides, _read_file(path))

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            tomli_w.dump(data, f)


def _read_file(path: Path) -> dict:
    """Read a TOML config file, empty if missing or unreadable."""
    if not path.exists():
        return {}

    import tomli

    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        logger.warning(f"Ignoring invalid config file {path}: {e}")
        return {}


def _drop_env_overrides(data: dict, overrides: dict, on_disk: dict) -> None:
    """Replace env-sourced values with the file's own, or drop them."""
    for key, value in overrides.items():
        if key not in data:
            continue
        stored = on_disk.get(key)
        if isinstance(value, dict) and isinstance(data[key], dict):
            _drop_env_overrides(data[key], value, stored if isinstance(stored, dict) else {})
        elif key in on_disk:
            data[key] = stored
        else:
            del data[key]


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config

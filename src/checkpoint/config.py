"""Configuration management for checkpoint using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = ".checkpoint.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"

    @property
    def numeric(self) -> int:
        """The matching ``logging`` module level."""
        return {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
        }[self]


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN


class CheckpointConfig(BaseModel):
    """Complete checkpoint configuration model."""
    messages: dict[str, str] = Field(default_factory=dict)
    exception_message: str = Field(
        alias="exceptionMessage",
        default="Please correct the errors shown below."
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("messages")
    @classmethod
    def validate_messages(cls, v):
        for rule, message in v.items():
            if not rule:
                raise ValueError("message overrides need a rule name")
            if not message.strip():
                raise ValueError(f"message for rule '{rule}' cannot be blank")
        return v

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


def load_config(config_path: str | Path | None = None) -> CheckpointConfig:
    """Load configuration, falling back to the defaults when there is no file.

    Without a path, the nearest .checkpoint.json in the current directory or
    one of its parents is used.

    Raises:
        ValueError: If the file is not JSON or not a valid configuration
    """
    path = Path(config_path) if config_path else find_config_file()
    if path is None or not path.exists():
        return CheckpointConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}")

    return CheckpointConfig.model_validate(data)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest .checkpoint.json in ``start_dir`` (default: cwd) or its parents."""
    start = Path(start_dir or Path.cwd()).resolve()

    for directory in (start, *start.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory / CONFIG_FILENAME

    return None

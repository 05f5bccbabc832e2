"""Loading form declarations and input data from JSON or YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class FormDefinition(BaseModel):
    """Declarations for one form inspector and its children.

    ``checks`` and ``requirements`` take the same shape as
    ``FormInspector.set_checks`` / ``set_requirements``; ``children`` nests
    further definitions by reference.
    """
    checks: dict[str, Any] = Field(default_factory=dict)
    requirements: dict[str, Any] = Field(default_factory=dict)
    children: dict[str, FormDefinition] = Field(default_factory=dict)

    @field_validator("checks")
    @classmethod
    def validate_checks(cls, v):
        _validate_shape(v, _is_rule_list, "a list of rule names")
        return v

    @field_validator("requirements")
    @classmethod
    def validate_requirements(cls, v):
        _validate_shape(v, lambda value: isinstance(value, bool), "true or false")
        return v

    model_config = ConfigDict(extra="forbid")


def _is_rule_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(rule, str) for rule in value)


def _validate_shape(declarations: dict[str, Any], is_leaf: Callable[[Any], bool],
                    expected: str, prefix: str = "") -> None:
    """Require every entry to be a leaf or a nested mapping for a child form."""
    for field, value in declarations.items():
        path = f"{prefix}.{field}" if prefix else field
        if isinstance(value, dict):
            _validate_shape(value, is_leaf, expected, path)
        elif not is_leaf(value):
            raise ValueError(f"'{path}' must be {expected} or a mapping, got {value!r}")


def load_data(path: str | Path) -> Any:
    """Read a JSON or YAML document, chosen by file suffix.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    logger.debug(f"Loading {path}")

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}")


def load_definition(path: str | Path) -> FormDefinition:
    """Load a ``FormDefinition`` from a JSON or YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is unparseable or not a valid definition
    """
    data = load_data(path)

    try:
        return FormDefinition.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Invalid form definition in {path}: {e}")

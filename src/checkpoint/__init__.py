"""checkpoint - hierarchical validation for nested, form-shaped data.

Inspectors organize named rules, error messages and child inspectors into
a tree that mirrors the input, collecting messages addressable by dotted
path (``person.email``).
"""

__version__ = "0.3.0"
__description__ = "Hierarchical rule and error-message organizer for validating nested data"

from checkpoint.config import CheckpointConfig, load_config
from checkpoint.exceptions import (
    CheckpointError,
    ConfigurationError,
    InvalidReferenceError,
    UnsupportedRuleError,
    ValidationException,
)
from checkpoint.form import FormInspector
from checkpoint.inspector import DEFAULT_ERRORS, REQUIRED_RULE, Inspector

__all__ = [
    "__version__",
    "__description__",
    "CheckpointConfig",
    "load_config",
    "Inspector",
    "FormInspector",
    "DEFAULT_ERRORS",
    "REQUIRED_RULE",
    "CheckpointError",
    "ConfigurationError",
    "InvalidReferenceError",
    "UnsupportedRuleError",
    "ValidationException",
]

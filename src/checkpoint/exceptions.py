"""Exception hierarchy for checkpoint.

Two disjoint families: ``ConfigurationError`` for setup mistakes (unknown
rules, unknown child references), which abort the current call, and
``ValidationException`` for data that failed validation, raised only when a
caller opts in via ``run(..., exception_on_messages=True)``.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from checkpoint.utils.paths import count_messages, resolve_path

if TYPE_CHECKING:
    from checkpoint.inspector import Inspector


class CheckpointError(Exception):
    """Base class for all checkpoint errors."""


class ConfigurationError(CheckpointError):
    """An inspector was wired or used incorrectly."""


class UnsupportedRuleError(ConfigurationError):
    """A rule name has no error message or no implementation."""

    def __init__(self, rule: str, message: str | None = None):
        self.rule = rule
        super().__init__(
            message or f'Unsupported validation rule "{rule}", try using define()'
        )


class InvalidReferenceError(ConfigurationError):
    """A child reference was used before being added."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f'Reference "{reference}" is not valid / has not been added.')


class ValidationException(CheckpointError):
    """Raised when a run produced messages and the caller asked to fail on them.

    The exception keeps the inspector that failed and a snapshot of its
    messages taken at raise time. Lookups answer from the snapshot, so the
    inspector can be re-run before the exception is inspected.
    """

    def __init__(self, message: str, inspector: Inspector):
        super().__init__(message)
        self.inspector = inspector
        self.messages: dict[str, Any] = copy.deepcopy(inspector.get_messages())

    def get_messages(self, path: str | None = None) -> Any:
        """Get the messages captured at raise time, optionally under a dotted path."""
        if path is None:
            return self.messages
        return resolve_path(self.messages, path)

    def count_messages(self) -> int:
        return count_messages(self.messages)

"""The inspector: a rule and error-message organizer arranged as a tree.

An inspector holds its own rule catalog, error catalog and logged messages,
plus any number of named child inspectors. Subclasses implement
``validate(data)`` (and optionally ``setup(data)``); callers invoke
``run(data)`` and read the results back with ``count_messages()`` and
``get_messages(path)``.
"""

from __future__ import annotations

import logging
from typing import Any

from checkpoint.config import CheckpointConfig
from checkpoint.exceptions import InvalidReferenceError, UnsupportedRuleError, ValidationException
from checkpoint.rules import Rule, RuleBuilder, RuleFactory, default_factory, is_blank
from checkpoint.utils.paths import split_path

logger = logging.getLogger(__name__)

REQUIRED_RULE = "not_blank"

# Error messages for the argumentless built-in rules
DEFAULT_ERRORS: dict[str, str] = {
    "alpha": "This field should contain only letters",
    "alnum": "This field should only contain letters, numbers, and spaces",
    "bool_val": "This field should only contain true/false values",
    "numeric": "This field should only contain numeric values",
    "date": "This field should contain a valid date",
    "email": "This field should contain a valid e-mail address",
    "phone": "This field should contain a valid phone number e.g. 212-555-1234",
    "lowercase": "This field should not contain capital letters",
    "not_blank": "This field cannot be left blank",
    "country_code": "This field must be a valid ISO country code",
    "credit_card": "This field must be a valid credit card number",
    "url": "This field should contain a valid URL, including http:// or https://",
}


class Inspector:
    """Base validator node.

    Construct an inspector once (adding children in ``__init__``) and reuse it
    across many ``run`` calls. Every run starts from a clean state: messages,
    custom rules and error messages are reset, so custom rules belong in
    ``setup``::

        class SignupInspector(Inspector):
            def setup(self, data):
                self.define("username", "Use 3-16 letters").alpha().length(3, 16)

            def validate(self, data):
                self.check("username", data.get("username"), ["username"])
                self.check("email", data.get("email"), ["email"])
    """

    def __init__(self, factory: RuleFactory | None = None, config: CheckpointConfig | None = None):
        """Initialize inspector.

        Args:
            factory: Rule factory used to build rules by name
            config: Configuration supplying message overrides
        """
        self.factory = factory or default_factory()
        self.config = config or CheckpointConfig()
        self.children: dict[str, Inspector] = {}
        self.errors: dict[str, str] = {}
        self.rules: dict[str, Rule] = {}
        self._messages: dict[str, list[str]] = {}
        self.clear()

    def add(self, reference: str, child: Inspector) -> Inspector:
        """Add a child inspector, replacing any child under the same reference."""
        self.children[reference] = child
        return self

    def references(self) -> list[str]:
        """Names of the registered children, in insertion order."""
        return list(self.children)

    def set_factory(self, factory: RuleFactory) -> Inspector:
        """Replace the rule factory used to build rules by name."""
        self.factory = factory
        return self

    def define(self, rule: str, error: str) -> RuleBuilder:
        """Define a custom rule and the error message logged when it is violated.

        The returned builder is what gets tested during ``check``; configure
        it by chaining (``.alpha().length(3, 16)``). Defining the same name
        again replaces the previous rule entirely.

        Args:
            rule: Name of the rule
            error: Message to log when the rule is violated

        Returns:
            A new rule builder for chaining rules
        """
        builder = self.factory.create()
        self.rules[rule] = builder
        self.errors[rule] = error
        return builder

    def check(self, key: str, value: Any, rules: list[str], is_optional: bool = False) -> bool:
        """Check a value against a list of named rules.

        Unless ``is_optional`` is set, the required rule is prepended. An
        optional blank or falsy value (``0`` included) passes without
        evaluating anything. Naming the required rule explicitly makes the
        check non-optional. Every violated rule logs its message under
        ``key``; a failing required rule stops evaluation.

        Args:
            key: Key under which error messages are logged
            value: The value to check
            rules: Names of the rules to check the value against
            is_optional: Let blank values pass

        Returns:
            True if no rule was violated

        Raises:
            UnsupportedRuleError: If a rule has no error message
        """
        if is_optional and REQUIRED_RULE not in rules:
            if is_blank(value) or not value:
                return True
            rules = list(dict.fromkeys(rules))
        else:
            rules = list(dict.fromkeys([REQUIRED_RULE, *rules]))

        for rule in rules:
            if rule not in self.errors:
                raise UnsupportedRuleError(rule)

        passed = True

        for rule in rules:
            if not self._resolve(rule).test(value):
                passed = False
                self.log(key, self.errors[rule])

                if rule == REQUIRED_RULE:
                    break

        return passed

    def count_messages(self) -> int:
        """Count the messages logged on this inspector and all of its children."""
        count = sum(len(messages) for messages in self._messages.values())

        for child in self.children.values():
            count += child.count_messages()

        return count

    def get_messages(self, path: str | None = None) -> Any:
        """Get the messages logged on this inspector or under a particular path.

        The path combines child references and a final message key: if a
        child added as ``person`` logged messages under ``firstName``, the
        path ``person.firstName`` returns that list and ``person`` returns
        ``{"firstName": [...]}``. Paths that do not resolve return ``{}``.

        Without a path, returns every key with messages on this inspector
        plus every child reference that has messages, nested recursively.
        """
        if path:
            if path in self._messages:
                return list(self._messages[path])

            parents, key = split_path(path)
            child = self

            for part in parents:
                if part not in child.children:
                    return {}
                child = child.children[part]

            if key in child._messages:
                return list(child._messages[key])
            if key in child.children:
                return child.children[key].get_messages()
            return {}

        messages: dict[str, Any] = {key: list(value) for key, value in self._messages.items()}

        for reference, child in self.children.items():
            if child.count_messages():
                messages[reference] = child.get_messages()

        return messages

    def run(self, data: Any, exception_on_messages: bool = False) -> Inspector:
        """Run validation from a clean state.

        Use this rather than calling ``validate`` directly so that messages,
        rules and errors from a previous run are cleared first.

        Args:
            data: The data to validate
            exception_on_messages: Raise once the whole tree has been validated
                if any messages were logged

        Returns:
            The inspector, for chaining

        Raises:
            ValidationException: If messages were logged and
                ``exception_on_messages`` is set
        """
        logger.debug(f"Running {type(self).__name__}")

        self.clear()
        self.setup(data)
        self.validate(data)

        count = self.count_messages()
        logger.debug(f"{type(self).__name__} finished with {count} message(s)")

        if exception_on_messages and count:
            raise ValidationException(self.config.exception_message, self)

        return self

    def clear(self) -> Inspector:
        """Reset messages, custom rules and error messages back to the defaults.

        Children and child registrations are left untouched.
        """
        self._messages = {}
        self.rules = {}
        self.errors = {**DEFAULT_ERRORS, **self.config.messages}
        return self

    def fetch(self, reference: str) -> Inspector:
        """Fetch a child previously registered with ``add``.

        Generally used inside ``validate`` to hand a subset of the data to a
        particular child.

        Raises:
            InvalidReferenceError: If nothing was added under ``reference``
        """
        try:
            return self.children[reference]
        except KeyError:
            raise InvalidReferenceError(reference) from None

    def log(self, key: str, message: str) -> Inspector:
        """Log a message under a key."""
        self._messages.setdefault(key, []).append(message)
        return self

    def setup(self, data: Any) -> None:
        """Prepare for validation; runs after ``clear`` and before ``validate``."""

    def validate(self, data: Any) -> None:
        """Validate the data. Intended to be overridden with custom validation."""

    def _resolve(self, rule: str) -> Rule:
        if rule in self.rules:
            return self.rules[rule]
        return self.factory.build(rule)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(children={self.references()!r})"

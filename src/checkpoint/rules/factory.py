"""Rule factory: an explicit registry from rule name to rule constructor."""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..exceptions import UnsupportedRuleError
from .base import Callback, Rule
from .builder import RuleBuilder
from .builtin import (
    Alnum,
    Alpha,
    Between,
    BoolVal,
    CountryCode,
    CreditCard,
    Date,
    Email,
    In,
    Length,
    Lowercase,
    NotBlank,
    Numeric,
    Phone,
    Regex,
    Url,
)

logger = logging.getLogger(__name__)

RuleConstructor = Callable[..., Rule]

BUILTIN_RULES: dict[str, RuleConstructor] = {
    "alpha": Alpha,
    "alnum": Alnum,
    "bool_val": BoolVal,
    "numeric": Numeric,
    "date": Date,
    "email": Email,
    "phone": Phone,
    "lowercase": Lowercase,
    "not_blank": NotBlank,
    "country_code": CountryCode,
    "credit_card": CreditCard,
    "url": Url,
    "length": Length,
    "between": Between,
    "regex": Regex,
    "in": In,
    "callback": Callback,
}


class RuleFactory:
    """Produces rules and rule builders by name."""

    def __init__(self, rules: dict[str, RuleConstructor] | None = None):
        self._registry: dict[str, RuleConstructor] = dict(rules or {})

    def register(self, name: str, constructor: RuleConstructor) -> RuleFactory:
        """Register (or replace) a named rule constructor."""
        if name in self._registry:
            logger.debug(f"Replacing registered rule: {name}")
        self._registry[name] = constructor
        return self

    def has(self, name: str) -> bool:
        return name in self._registry

    def names(self) -> list[str]:
        return list(self._registry)

    def make(self, name: str, *args: Any, **kwargs: Any) -> Rule:
        """Construct a single rule by name.

        Raises:
            UnsupportedRuleError: If no rule is registered under ``name``
        """
        try:
            constructor = self._registry[name]
        except KeyError:
            raise UnsupportedRuleError(name, f'No rule is registered as "{name}"') from None
        return constructor(*args, **kwargs)

    def create(self) -> RuleBuilder:
        """Return a new, empty rule builder bound to this factory."""
        return RuleBuilder(self)

    def build(self, name: str) -> RuleBuilder:
        """Return a builder holding the single argumentless rule ``name``.

        Raises:
            UnsupportedRuleError: If ``name`` is unknown or needs arguments
        """
        try:
            return self.create().rule(name)
        except TypeError as e:
            raise UnsupportedRuleError(
                name, f'Rule "{name}" needs arguments and cannot be used by name, try using define()'
            ) from e


def default_factory() -> RuleFactory:
    """Create a factory with every built-in rule registered."""
    return RuleFactory(BUILTIN_RULES)

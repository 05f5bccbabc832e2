"""Rule base classes with a composable, predicate-style API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class Rule(ABC):
    """Base class for all rules.

    A rule is a predicate with identity: ``test(value)`` answers whether the
    value satisfies it. Rules combine with ``&`` (both), ``|`` (either) and
    ``~`` (negation).
    """

    @abstractmethod
    def test(self, value: Any) -> bool:
        """Check a value against this rule.

        Args:
            value: Value to check

        Returns:
            True if the value satisfies the rule
        """
        pass

    def __and__(self, other: Rule) -> AllOf:
        if isinstance(self, AllOf):
            return AllOf(self.rules + [other])
        elif isinstance(other, AllOf):
            return AllOf([self] + other.rules)
        return AllOf([self, other])

    def __or__(self, other: Rule) -> AnyOf:
        if isinstance(self, AnyOf):
            return AnyOf(self.rules + [other])
        elif isinstance(other, AnyOf):
            return AnyOf([self] + other.rules)
        return AnyOf([self, other])

    def __invert__(self) -> Not:
        return Not(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AllOf(Rule):
    """All rules must pass (AND logic)."""

    def __init__(self, rules: list[Rule]):
        self.rules = rules

    def test(self, value: Any) -> bool:
        return all(rule.test(value) for rule in self.rules)

    def __repr__(self) -> str:
        return f"AllOf({self.rules!r})"


class AnyOf(Rule):
    """At least one rule must pass (OR logic)."""

    def __init__(self, rules: list[Rule]):
        self.rules = rules

    def test(self, value: Any) -> bool:
        return any(rule.test(value) for rule in self.rules)

    def __repr__(self) -> str:
        return f"AnyOf({self.rules!r})"


class Not(Rule):
    """Negates a rule."""

    def __init__(self, rule: Rule):
        self.rule = rule

    def test(self, value: Any) -> bool:
        return not self.rule.test(value)

    def __repr__(self) -> str:
        return f"Not({self.rule!r})"


class Callback(Rule):
    """Rule backed by a plain callable returning a truthy/falsy result."""

    def __init__(self, func: Callable[[Any], Any]):
        """Initialize callback rule.

        Args:
            func: Callable taking the value under test
        """
        self.func = func

    def test(self, value: Any) -> bool:
        return bool(self.func(value))

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", type(self.func).__name__)
        return f"Callback({name})"

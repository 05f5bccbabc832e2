"""Fluent rule builder returned by ``RuleFactory.create()`` and ``Inspector.define()``."""

from __future__ import annotations

from re import Pattern
from typing import TYPE_CHECKING, Any, Callable

from .base import Callback, Not, Rule
from .builtin import DEFAULT_PHONE_REGION

if TYPE_CHECKING:
    from .factory import RuleFactory


class RuleBuilder(Rule):
    """A chain of rules that must all pass.

    Every builder method appends one rule and returns the builder, so custom
    rules read as a single expression::

        inspector.define("username", "Use 3-16 lowercase letters").alpha().lowercase().length(3, 16)

    An empty builder passes every value.
    """

    def __init__(self, factory: RuleFactory):
        self.factory = factory
        self.rules: list[Rule] = []

    def test(self, value: Any) -> bool:
        return all(rule.test(value) for rule in self.rules)

    def add(self, rule: Rule) -> RuleBuilder:
        """Append an already constructed rule."""
        self.rules.append(rule)
        return self

    def rule(self, name: str, *args: Any, **kwargs: Any) -> RuleBuilder:
        """Append a rule constructed by name from the factory registry."""
        return self.add(self.factory.make(name, *args, **kwargs))

    def alpha(self) -> RuleBuilder:
        return self.rule("alpha")

    def alnum(self) -> RuleBuilder:
        return self.rule("alnum")

    def bool_val(self) -> RuleBuilder:
        return self.rule("bool_val")

    def numeric(self) -> RuleBuilder:
        return self.rule("numeric")

    def date(self, format: str | None = None) -> RuleBuilder:
        return self.rule("date", format)

    def email(self) -> RuleBuilder:
        return self.rule("email")

    def phone(self, region: str = DEFAULT_PHONE_REGION) -> RuleBuilder:
        return self.rule("phone", region)

    def lowercase(self) -> RuleBuilder:
        return self.rule("lowercase")

    def not_blank(self) -> RuleBuilder:
        return self.rule("not_blank")

    def country_code(self) -> RuleBuilder:
        return self.rule("country_code")

    def credit_card(self) -> RuleBuilder:
        return self.rule("credit_card")

    def url(self) -> RuleBuilder:
        return self.rule("url")

    def length(self, min: int | None = None, max: int | None = None) -> RuleBuilder:
        return self.rule("length", min, max)

    def between(self, min: Any = None, max: Any = None) -> RuleBuilder:
        return self.rule("between", min, max)

    def regex(self, pattern: str | Pattern[str]) -> RuleBuilder:
        return self.rule("regex", pattern)

    def in_(self, values: list[Any], case_sensitive: bool = True) -> RuleBuilder:
        return self.rule("in", values, case_sensitive)

    def callback(self, func: Callable[[Any], Any]) -> RuleBuilder:
        return self.add(Callback(func))

    def not_(self, rule: Rule) -> RuleBuilder:
        """Append the negation of ``rule``."""
        return self.add(Not(rule))

    def __repr__(self) -> str:
        return f"RuleBuilder({self.rules!r})"

"""Rule library used by inspectors.

Rules are predicates exposing ``test(value) -> bool``. The factory builds
them by name; the builder composes several into one custom rule.
"""

from .base import AllOf, AnyOf, Callback, Not, Rule
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
    is_blank,
)
from .factory import BUILTIN_RULES, RuleFactory, default_factory

__all__ = [
    "Rule",
    "AllOf",
    "AnyOf",
    "Not",
    "Callback",
    "RuleBuilder",
    "RuleFactory",
    "default_factory",
    "BUILTIN_RULES",
    "is_blank",
    "Alpha",
    "Alnum",
    "BoolVal",
    "Numeric",
    "Date",
    "Email",
    "Phone",
    "Lowercase",
    "NotBlank",
    "CountryCode",
    "CreditCard",
    "Url",
    "Length",
    "Between",
    "Regex",
    "In",
]

"""Built-in rule implementations.

Each class is registered in the default factory under a snake_case name
(see ``checkpoint.rules.factory``). Format rules reject ``None``; whether an
absent value is checked at all is decided by the inspector, not the rule.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sized
from datetime import date, datetime
from re import Pattern
from typing import Any
from urllib.parse import urlparse

import phonenumbers
from email_validator import EmailNotValidError, validate_email
from phonenumbers import NumberParseException

from .base import Rule

TRUE_STRINGS = frozenset({"1", "true", "on", "yes"})
FALSE_STRINGS = frozenset({"0", "false", "off", "no", ""})

URL_SCHEMES = frozenset({"http", "https", "ftp", "ftps"})

# Region assumed for phone numbers written without a +country prefix
DEFAULT_PHONE_REGION = "US"

# ISO 3166-1 alpha-2
COUNTRY_CODES = frozenset("""
AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ BA BB BD BE BF BG BH BI BJ BL
BM BN BO BQ BR BS BT BV BW BY BZ CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV
CW CX CY CZ DE DJ DK DM DO DZ EC EE EG EH ER ES ET FI FJ FK FM FO FR GA GB GD
GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY HK HM HN HR HT HU ID IE IL IM
IN IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN KP KR KW KY KZ LA LB LC LI LK
LR LS LT LU LV LY MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW
MX MY MZ NA NC NE NF NG NI NL NO NP NR NU NZ OM PA PE PF PG PH PK PL PM PN PR
PS PT PW PY QA RE RO RS RU RW SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS
ST SV SX SY SZ TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ UA UG UM US UY
UZ VA VC VE VG VI VN VU WF WS YE YT ZA ZM ZW
""".split())


def is_blank(value: Any) -> bool:
    """Return True for values that count as "not provided".

    ``None``, ``False``, whitespace-only strings and empty collections are
    blank. Numbers (including ``0``) are never blank.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (int, float)):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _strip_whitespace(value: str) -> str:
    return re.sub(r"\s+", "", value)


class NotBlank(Rule):
    """Value must be present and non-empty."""

    def test(self, value: Any) -> bool:
        return not is_blank(value)


class Alpha(Rule):
    """Letters only; whitespace is ignored."""

    def test(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        cleaned = _strip_whitespace(value)
        return cleaned == "" or cleaned.isalpha()


class Alnum(Rule):
    """Letters and digits only; whitespace is ignored."""

    def test(self, value: Any) -> bool:
        if isinstance(value, int) and not isinstance(value, bool):
            return True
        if not isinstance(value, str):
            return False
        cleaned = _strip_whitespace(value)
        return cleaned == "" or cleaned.isalnum()


class BoolVal(Rule):
    """Booleans, or strings/ints that read as booleans ("yes", "off", 1...)."""

    def test(self, value: Any) -> bool:
        if isinstance(value, bool):
            return True
        if isinstance(value, int):
            return value in (0, 1)
        if isinstance(value, str):
            normalized = value.strip().lower()
            return normalized in TRUE_STRINGS or normalized in FALSE_STRINGS
        return False


class Numeric(Rule):
    """Finite numbers or numeric strings."""

    def test(self, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return math.isfinite(value)
        if isinstance(value, str):
            try:
                return math.isfinite(float(value.strip()))
            except ValueError:
                return False
        return False


class Date(Rule):
    """A date/datetime object, or a string parseable as one.

    Without a format, ISO 8601 strings are accepted.
    """

    def __init__(self, format: str | None = None):
        """Initialize date rule.

        Args:
            format: Optional ``strptime`` format the string must match
        """
        self.format = format

    def test(self, value: Any) -> bool:
        if isinstance(value, (date, datetime)):
            return True
        if not isinstance(value, str):
            return False

        try:
            if self.format:
                datetime.strptime(value, self.format)
            else:
                datetime.fromisoformat(value.strip())
        except ValueError:
            return False
        return True

    def __repr__(self) -> str:
        return f"Date(format={self.format!r})"


class Email(Rule):
    """Syntactically valid e-mail address, internationalized domains included.

    Only the syntax is checked; no DNS lookup is made.
    """

    def test(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True


class Phone(Rule):
    """Valid phone number for its region.

    Numbers without a ``+`` country prefix are read as US numbers, so
    ``212-555-1234`` and ``+44 20 7946 0958`` both pass.
    """

    def __init__(self, region: str = DEFAULT_PHONE_REGION):
        self.region = region

    def test(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            number = phonenumbers.parse(value, self.region)
        except NumberParseException:
            return False
        return phonenumbers.is_possible_number(number) and phonenumbers.is_valid_number(number)

    def __repr__(self) -> str:
        return f"Phone(region={self.region!r})"


class Lowercase(Rule):
    """String without capital letters."""

    def test(self, value: Any) -> bool:
        return isinstance(value, str) and value == value.lower()


class CountryCode(Rule):
    """ISO 3166-1 alpha-2 country code (case-insensitive)."""

    def test(self, value: Any) -> bool:
        return isinstance(value, str) and value.upper() in COUNTRY_CODES


class CreditCard(Rule):
    """Card number of 13-19 digits passing the Luhn checksum.

    Spaces and dashes between digit groups are allowed.
    """

    def test(self, value: Any) -> bool:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            return False

        digits = re.sub(r"[\s-]", "", value)
        if not digits.isdigit() or not 13 <= len(digits) <= 19:
            return False

        total = 0
        for index, char in enumerate(reversed(digits)):
            digit = int(char)
            if index % 2 == 1:
                digit *= 2
                if digit > 9:
                    digit -= 9
            total += digit
        return total % 10 == 0


class Url(Rule):
    """Absolute URL with a scheme (http://, https://, ...) and host."""

    def test(self, value: Any) -> bool:
        if not isinstance(value, str) or any(char.isspace() for char in value):
            return False
        parsed = urlparse(value)
        return parsed.scheme in URL_SCHEMES and bool(parsed.netloc)


class Length(Rule):
    """String/collection length must be in range (inclusive)."""

    def __init__(self, min: int | None = None, max: int | None = None):
        if min is not None and min < 0:
            raise ValueError(f"min length cannot be negative: {min}")
        if max is not None and max < 0:
            raise ValueError(f"max length cannot be negative: {max}")
        if min is not None and max is not None and min > max:
            raise ValueError(f"min length ({min}) cannot be greater than max ({max})")
        self.min = min
        self.max = max

    def test(self, value: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        length = len(value)
        if self.min is not None and length < self.min:
            return False
        if self.max is not None and length > self.max:
            return False
        return True

    def __repr__(self) -> str:
        return f"Length(min={self.min!r}, max={self.max!r})"


class Between(Rule):
    """Comparable value must be in range (inclusive)."""

    def __init__(self, min: Any = None, max: Any = None):
        if min is not None and max is not None and min > max:
            raise ValueError(f"min ({min}) cannot be greater than max ({max})")
        self.min = min
        self.max = max

    def test(self, value: Any) -> bool:
        if value is None:
            return False
        try:
            if self.min is not None and value < self.min:
                return False
            if self.max is not None and value > self.max:
                return False
        except TypeError:
            return False
        return True

    def __repr__(self) -> str:
        return f"Between(min={self.min!r}, max={self.max!r})"


class Regex(Rule):
    """String must fully match a regular expression."""

    def __init__(self, pattern: str | Pattern[str]):
        self.regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    def test(self, value: Any) -> bool:
        return isinstance(value, str) and bool(self.regex.fullmatch(value))

    def __repr__(self) -> str:
        return f"Regex({self.regex.pattern!r})"


class In(Rule):
    """Value must be one of an allowed set."""

    def __init__(self, values: list[Any], case_sensitive: bool = True):
        if not values:
            raise ValueError("In rule requires at least one allowed value")
        self.values = list(values)
        self.case_sensitive = case_sensitive

    def test(self, value: Any) -> bool:
        if self.case_sensitive or not isinstance(value, str):
            return value in self.values
        lowered = value.lower()
        return any(isinstance(v, str) and v.lower() == lowered for v in self.values)

    def __repr__(self) -> str:
        return f"In({self.values!r})"

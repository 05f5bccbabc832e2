"""Tests for built-in rules."""

from datetime import date

import pytest

from checkpoint.rules import (
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


class TestIsBlank:
    """Test the blank-value predicate."""

    @pytest.mark.parametrize("value", [None, False, "", "   ", [], {}, ()])
    def test_blank_values(self, value):
        """Test values counted as blank."""
        assert is_blank(value)

    @pytest.mark.parametrize("value", [0, 0.0, True, "a", [0], {"a": 1}])
    def test_present_values(self, value):
        """Test values counted as present."""
        assert not is_blank(value)

    def test_not_blank_rule(self):
        """Test the required rule."""
        assert NotBlank().test("Non-blank value")
        assert not NotBlank().test("")


class TestFormatRules:
    """Test the argumentless format rules with good and bad samples."""

    def test_alpha(self):
        """Test letters-only rule."""
        assert Alpha().test("AlphaValue")
        assert Alpha().test("Alpha Value")
        assert not Alpha().test("Alpha Value 1")
        assert not Alpha().test(None)

    def test_alnum(self):
        """Test letters-and-digits rule."""
        assert Alnum().test("Route 66")
        assert Alnum().test(42)
        assert not Alnum().test("Route-66")

    def test_bool_val(self):
        """Test boolean-like values."""
        for value in (True, False, "yes", "Off", "1", 0):
            assert BoolVal().test(value)
        for value in ("maybe", 2, None):
            assert not BoolVal().test(value)

    def test_numeric(self):
        """Test numeric values."""
        for value in (1, 2.5, "3", " -4.5e2 "):
            assert Numeric().test(value)
        for value in ("abc", True, float("nan"), "inf", None):
            assert not Numeric().test(value)

    def test_date(self):
        """Test ISO and formatted dates."""
        assert Date().test("2016-05-01")
        assert Date().test(date(2016, 5, 1))
        assert not Date().test("May first")
        assert Date("%m/%d/%Y").test("05/01/2016")
        assert not Date("%m/%d/%Y").test("2016-05-01")

    def test_email(self):
        """Test e-mail addresses."""
        assert Email().test("user@example.com")
        assert Email().test("first.last+tag@mail.example.co.uk")
        assert not Email().test("user_example.com")
        assert not Email().test("user@localhost")
        assert not Email().test(None)

    @pytest.mark.parametrize("value", ["a..b@example.com", ".a@example.com", "a.@example.com"])
    def test_email_rejects_misplaced_dots(self, value):
        """Test e-mail local parts with leading, trailing or doubled dots."""
        assert not Email().test(value)

    def test_email_accepts_internationalized_domain(self):
        """Test e-mail address with an internationalized domain."""
        assert Email().test("jane@bücher.de")

    def test_phone(self):
        """Test US phone numbers in common notations."""
        for value in ("212-555-3822", "(212) 555-3822", "+1 212.555.3822", "2125553822"):
            assert Phone().test(value)
        for value in ("3822", "555-3822", "212-555-38220", "not a number", None):
            assert not Phone().test(value)

    def test_phone_with_country_prefix(self):
        """Test international number with a country prefix."""
        assert Phone().test("+44 20 7946 0958")

    def test_phone_region(self):
        """Test numbers read in a configured region."""
        assert Phone("GB").test("020 7946 0958")
        assert not Phone().test("020 7946 0958")

    def test_lowercase(self):
        """Test lowercase rule."""
        assert Lowercase().test("lowercase")
        assert not Lowercase().test("LowerCase")

    def test_country_code(self):
        """Test ISO country codes."""
        assert CountryCode().test("US")
        assert CountryCode().test("de")
        assert not CountryCode().test("XX")
        assert not CountryCode().test("USA")

    def test_credit_card(self):
        """Test card numbers against the Luhn checksum."""
        assert CreditCard().test("4024007153361885")
        assert CreditCard().test("4024 0071 5336 1885")
        assert not CreditCard().test("402400715336")
        assert not CreditCard().test("4024007153361886")

    def test_url(self):
        """Test URLs with a scheme and host."""
        assert Url().test("https://example.com/path?q=1")
        assert Url().test("http://localhost:8000")
        assert not Url().test("example.com")
        assert not Url().test("mailto:user@example.com")
        assert not Url().test("http://exa mple.com")


class TestParameterizedRules:
    """Test rules configured with arguments."""

    def test_length(self):
        """Test length bounds."""
        rule = Length(min=2, max=4)
        assert rule.test("abc")
        assert rule.test([1, 2])
        assert not rule.test("a")
        assert not rule.test("abcde")
        assert not rule.test(5)

    def test_length_rejects_bad_bounds(self):
        """Test invalid length bounds."""
        with pytest.raises(ValueError):
            Length(min=5, max=1)
        with pytest.raises(ValueError):
            Length(min=-1)

    def test_between(self):
        """Test value bounds."""
        rule = Between(1, 10)
        assert rule.test(1)
        assert rule.test(10)
        assert not rule.test(11)
        assert not rule.test("5")

    def test_regex_full_match(self):
        """Test regex must match the whole value."""
        rule = Regex(r"\d{3}")
        assert rule.test("123")
        assert not rule.test("1234")

    def test_in(self):
        """Test allowed value sets."""
        assert In(["red", "green"]).test("red")
        assert not In(["red", "green"]).test("RED")
        assert In(["red", "green"], case_sensitive=False).test("RED")
        with pytest.raises(ValueError):
            In([])

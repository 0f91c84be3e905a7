#
# Number Mask - Formatting Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal
from fractions import Fraction

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numbermask.formatting import format_value, sign_for
from numbermask.sentinels import UNSET
from numbermask.settings import MaskSettings


def en(**options) -> MaskSettings:
    return MaskSettings(locale="en_US", **options)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatDecoration:

    def test_prefix(self):
        assert format_value(en(prefix="prefix 1@,."), 90) == "prefix 1@,.90"

    def test_suffix(self):
        assert format_value(en(suffix="1@,. suffix"), 90) == "901@,. suffix"

    def test_decimal_places(self):
        s = en(prefix="p", suffix="s", decimal_places=5)
        assert format_value(s, 1234.56789) == "p1,234.56789s"

    @pytest.mark.parametrize(
        "options, value, expected",
        [
            pytest.param({"prefix": "p", "show_plus_sign": True}, 1000, "+p1,000", id="plus"),
            pytest.param({"prefix": "p", "show_plus_sign": True, "space_after_sign": True,
                          "allow_negative": True}, 1000, "+ p1,000", id="plus-space"),
            pytest.param({"prefix": "p", "show_plus_sign": True, "space_after_sign": True,
                          "allow_negative": True}, -1000, "- p1,000", id="minus-space"),
            pytest.param({"prefix": "p", "allow_negative": True}, -1000, "-p1,000", id="minus"),
            pytest.param({"prefix": "p", "space_after_sign": True}, 1000, "p1,000", id="space-without-sign"),
            pytest.param({"show_plus_sign": True}, 0, "+0", id="plus-zero"),
        ],
    )
    def test_sign(self, options, value, expected):
        assert format_value(en(**options), value) == expected


class TestFormatNegative:

    @pytest.mark.parametrize(
        "allow_negative, string_value, value, expected",
        [
            pytest.param(True, False, -1234, "- -- 1,234-", id="number-allowed"),
            pytest.param(False, False, -1234, " -- 1,234-", id="number-dropped"),
            pytest.param(True, True, "-1234", "- -- 1,234-", id="string-allowed"),
            pytest.param(False, True, "-1234", " -- 1,234-", id="string-dropped"),
        ],
    )
    def test_prefix_and_suffix_with_dashes(self, allow_negative, string_value, value, expected):
        s = en(prefix=" -- ", suffix="-", allow_negative=allow_negative, string_value=string_value)
        assert format_value(s, value) == expected

    def test_negative_zero_keeps_sign(self):
        s = en(allow_negative=True, decimal_places=2)
        assert format_value(s, -0.0) == "-0.00"
        assert format_value(s, "-0") == "-0.00"

    def test_plus_sign_when_negative_not_allowed(self):
        assert format_value(en(show_plus_sign=True), -5) == "+5"


class TestFormatEmpty:

    @pytest.mark.parametrize("value", [UNSET, None, ""], ids=["unset", "none", "empty-str"])
    def test_allow_empty(self, value):
        s = en(prefix="p", suffix="s", allow_empty=True)
        assert format_value(s, value) == ""

    @pytest.mark.parametrize("value", [UNSET, None, ""], ids=["unset", "none", "empty-str"])
    def test_zero_when_empty_not_allowed(self, value):
        s = en(prefix="p", suffix="s", decimal_places=2)
        assert format_value(s, value) == "p0.00s"

    def test_default_argument(self):
        assert format_value(en(prefix="p", suffix="s")) == "p0s"


class TestFormatNumbers:

    def test_locale_bcp47(self):
        s = MaskSettings(locale="en-US", decimal_places=1)
        assert format_value(s, 1000) == "1,000.0"

    def test_locale_german(self):
        s = MaskSettings(locale="de_DE", decimal_places=2)
        assert format_value(s, 1234.5) == "1.234,50"

    def test_string_value(self):
        s = en(decimal_places=3, string_value=True)
        assert format_value(s, "1234.567") == "1,234.567"

    def test_multiplier(self):
        s = en(decimal_places=2, multiplier=1 / 100)
        assert format_value(s, 0.3333) == "33.33"

    def test_multiplier_int(self):
        s = en(multiplier=1000)
        assert format_value(s, 2_500_000) == "2,500"

    @pytest.mark.parametrize(
        "value, places, expected",
        [
            pytest.param(2.345, 2, "2.35", id="half-up"),
            pytest.param(0.5, 0, "1", id="half-to-one"),
            pytest.param(-2.5, 0, "-3", id="half-away-from-zero"),
            pytest.param(1.2, 3, "1.200", id="pad-zeros"),
            pytest.param(1234.56789, 2, "1,234.57", id="round-grouped"),
        ],
    )
    def test_rounding(self, value, places, expected):
        s = en(decimal_places=places, allow_negative=True)
        assert format_value(s, value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(Decimal("12.5"), "12.50", id="decimal"),
            pytest.param(Fraction(1, 4), "0.25", id="fraction"),
            pytest.param(" 7 ", "7.00", id="padded-str"),
        ],
    )
    def test_numeric_types(self, value, expected):
        assert format_value(en(decimal_places=2), value) == expected

    @pytest.mark.parametrize(
        "lang, expected",
        [
            pytest.param("de_DE.UTF-8", "1.234,50", id="environment"),
            pytest.param("C.UTF-8", "1,234.50", id="c-utf8"),
            pytest.param("C", "1,234.50", id="c"),
            pytest.param("POSIX", "1,234.50", id="posix"),
        ],
    )
    def test_default_locale(self, monkeypatch, lang, expected):
        for name in ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LC_NUMERIC", "LANG"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("LANG", lang)
        assert format_value(MaskSettings(decimal_places=2), 1234.5) == expected

    def test_custom_formatter(self):
        class Plain:
            def format_number(self, value, *, min_fraction_digits, max_fraction_digits, locale=None):
                return f"{value}|{min_fraction_digits}|{max_fraction_digits}|{locale}"

        s = MaskSettings(decimal_places=1, locale="xx", formatter=Plain(), prefix="p")
        assert format_value(s, 2) == "p2.0|1|1|xx"


class TestFormatErrors:

    @pytest.mark.parametrize(
        "value, exc",
        [
            pytest.param("abc", ValueError, id="non-numeric-str"),
            pytest.param(float("nan"), ValueError, id="nan"),
            pytest.param(float("inf"), ValueError, id="inf"),
            pytest.param(True, TypeError, id="bool"),
            pytest.param([1], TypeError, id="list"),
        ],
    )
    def test_invalid_stored_value(self, value, exc):
        with pytest.raises(exc):
            format_value(en(), value)


class TestSignFor:

    @pytest.mark.parametrize(
        "options, negative, expected",
        [
            pytest.param({}, False, "", id="plain"),
            pytest.param({}, True, "", id="negative-not-allowed"),
            pytest.param({"allow_negative": True}, True, "-", id="minus"),
            pytest.param({"allow_negative": True, "space_after_sign": True}, True, "- ", id="minus-space"),
            pytest.param({"show_plus_sign": True}, False, "+", id="plus"),
            pytest.param({"show_plus_sign": True, "space_after_sign": True}, False, "+ ", id="plus-space"),
        ],
    )
    def test_sign_for(self, options, negative, expected):
        assert sign_for(MaskSettings(**options), negative) == expected

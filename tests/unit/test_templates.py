"""Tests for description tag stripping and placeholder rendering."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from akdata.domain.enums import StrictnessMode
from akdata.domain.errors import UnresolvedTemplateKeyError
from akdata.domain.templates import (
    NumberFormat,
    Placeholder,
    TemplateEngine,
    build_blackboard,
    format_value,
    parse_placeholder,
    render,
    strip_tags,
)


class TestStripTags:
    def test_removes_opening_and_closing_tags(self):
        assert strip_tags("ATK <@ba.vup>+20%</> for <$ba.dt.element>10</> s") == (
            "ATK +20% for 10 s"
        )

    def test_plain_text_is_untouched(self):
        assert strip_tags("Deployment Cost -1") == "Deployment Cost -1"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("<<a>b>x", "x"), ("<<@ba.vup>@ba.kw>ATK", "ATK"), ("<</>/>text", "text")],
    )
    def test_nested_tags_are_removed(self, text, expected):
        assert strip_tags(text) == expected

    @given(st.text())
    def test_stripping_is_idempotent(self, text):
        once = strip_tags(text)
        assert strip_tags(once) == once

    @given(st.text(alphabet=st.sampled_from(list("<>/@$.ab")), max_size=30))
    def test_stripping_tag_like_text_is_idempotent(self, text):
        once = strip_tags(text)
        assert strip_tags(once) == once


class TestParsePlaceholder:
    @pytest.mark.parametrize(
        ("token", "key", "negative", "number_format"),
        [
            ("{atk:0%}", "atk", False, NumberFormat.INTEGER_PERCENT),
            ("{atk:0.0%}", "atk", False, NumberFormat.DECIMAL_PERCENT),
            ("{-sp_recovery_per_sec:0.0}", "sp_recovery_per_sec", True, NumberFormat.DECIMAL),
            ("{max_target:0}", "max_target", False, NumberFormat.INTEGER),
            ("{Duration}", "duration", False, NumberFormat.PLAIN),
            ("{attack@atk_scale:0%}", "attack@atk_scale", False, NumberFormat.INTEGER_PERCENT),
        ],
    )
    def test_markers(self, token, key, negative, number_format):
        assert parse_placeholder(token) == Placeholder(key, negative, number_format)


class TestFormatValue:
    def test_decimal_percent_drops_trailing_zeros(self):
        assert format_value(0.2, False, NumberFormat.DECIMAL_PERCENT) == "20%"
        assert format_value(0.255, False, NumberFormat.DECIMAL_PERCENT) == "25.5%"

    def test_integer_percent(self):
        assert format_value(0.2, False, NumberFormat.INTEGER_PERCENT) == "20%"

    def test_decimal_drops_zeros_and_point(self):
        assert format_value(1.0, False, NumberFormat.DECIMAL) == "1"
        assert format_value(1.2, False, NumberFormat.DECIMAL) == "1.2"
        assert format_value(10.0, False, NumberFormat.DECIMAL) == "10"

    def test_integer(self):
        assert format_value(3.0, False, NumberFormat.INTEGER) == "3"

    def test_plain(self):
        assert format_value(30.0, False, NumberFormat.PLAIN) == "30"
        assert format_value(0.25, False, NumberFormat.PLAIN) == "0.25"

    def test_negative_flag_negates_first(self):
        assert format_value(0.5, True, NumberFormat.DECIMAL) == "-0.5"
        assert format_value(-0.3, True, NumberFormat.INTEGER_PERCENT) == "30%"


def test_build_blackboard_lowercases_and_injects_duration():
    blackboard = build_blackboard([("ATK", 0.1), ("Max_Target", 3.0)], 10.0)
    assert blackboard == {"atk": 0.1, "max_target": 3.0, "duration": 10.0}


def test_render_fills_placeholders_after_stripping():
    text = "ATK <@ba.vup>+{atk:0%}</> for {duration} seconds"
    assert render(text, {"atk": 0.3, "duration": 30.0}) == "ATK +30% for 30 seconds"


def test_render_keys_are_case_insensitive():
    assert render("{ATK:0%}", {"atk": 0.5}) == "50%"


def test_missing_key_is_echoed_upper_cased_in_lenient_mode():
    assert render("Heals {heal_scale:0%} of ATK", {}) == "Heals HEAL_SCALE of ATK"


def test_missing_key_raises_in_strict_mode():
    with pytest.raises(UnresolvedTemplateKeyError) as excinfo:
        render("Heals {heal_scale:0%}", {}, StrictnessMode.STRICT)
    assert excinfo.value.key == "heal_scale"


def test_engine_uses_its_mode():
    lenient = TemplateEngine()
    strict = TemplateEngine(StrictnessMode.STRICT)

    assert lenient.render("{x}", {}) == "X"
    assert strict.render("{x:0.0}", {"x": 1.5}) == "1.5"
    with pytest.raises(UnresolvedTemplateKeyError):
        strict.render("{x}", {})

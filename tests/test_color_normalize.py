# tests/test_color_normalize.py
from __future__ import annotations

import pytest
import webcolors

from css_color_inventory.inventory.color import normalize as n
from css_color_inventory.inventory.color.vocab import lookup_named_color

RED = "rgb(255, 0, 0)"


# ───────────────────────────
# Canonical form per notation
# ───────────────────────────
@pytest.mark.parametrize(
    "token",
    [
        "red",
        "RED",
        "#f00",
        "#ff0000",
        "#FF0000",
        "#ff0000ff",
        "rgb(255, 0, 0)",
        "rgb(255,0,0)",
        "rgb(255 0 0)",
        "rgba(255, 0, 0, 1)",
        "rgb(100%, 0%, 0%)",
        "rgb(300, -5, 0)",
        "hsl(0, 100%, 50%)",
        "hsl(360deg 100% 50%)",
        "hsla(0, 100%, 50%, 1)",
        "RGB(255,0,0)",
        "HSL(0DEG 100% 50%)",
        "rgb(255 0 0 / 100%)",
    ],
)
def test_normalize_color_all_notations_agree(token):
    """Does: Every spelling of pure red renders to the same canonical string."""
    assert n.normalize_color(token) == RED


@pytest.mark.parametrize(
    "token,expected",
    [
        ("rgba(0, 0, 0, 0.5)", "rgba(0, 0, 0, 0.5)"),
        ("rgba(0, 0, 0, .25)", "rgba(0, 0, 0, 0.25)"),
        ("rgb(0 0 0 / 50%)", "rgba(0, 0, 0, 0.5)"),
        ("hsla(0, 0%, 100%, 0.1)", "rgba(255, 255, 255, 0.1)"),
        ("#ff000080", "rgba(255, 0, 0, 0.502)"),
        ("#f008", "rgba(255, 0, 0, 0.533)"),
        ("transparent", "rgba(0, 0, 0, 0)"),
        ("rgba(1, 2, 3, 7)", "rgb(1, 2, 3)"),
    ],
)
def test_normalize_color_alpha_kept_only_when_translucent(token, expected):
    assert n.normalize_color(token) == expected


def test_hsl_green_matches_keyword():
    assert n.normalize_color("hsl(120, 100%, 25%)") == n.normalize_color("green") == "rgb(0, 128, 0)"


@pytest.mark.parametrize(
    "token,expected",
    [
        ("HSL(120, 100%, 25%)", "rgb(0, 128, 0)"),
        ("hsl(120deg 100% 50%)", "rgb(0, 255, 0)"),
        ("hsl(120 100% 50% / 0.25)", "rgba(0, 255, 0, 0.25)"),
        ("Rgba(0, 0, 255, 50%)", "rgba(0, 0, 255, 0.5)"),
    ],
)
def test_space_separated_and_mixed_case_functions(token, expected):
    assert n.normalize_color(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "rgb(" + "9" * 400 + ", 0, 0)",
        "rgba(0, 0, 0, " + "9" * 400 + "e9999)",
        "hsl(" + "9" * 400 + ", 100%, 50%)",
    ],
)
def test_overflowing_numbers_never_raise(token):
    """Does: Numbers too large for a float are dropped, never raised."""
    result = n.normalize_color(token)
    assert result is None or result.startswith("rgb")


def test_infinite_channel_is_not_a_color():
    assert n.parse_color("rgb(" + "1" * 400 + ", 0, 0)") is None


def test_rebeccapurple_is_known():
    assert n.normalize_color("rebeccapurple") == "rgb(102, 51, 153)"


@pytest.mark.parametrize("name", ["red", "blue", "navy", "white", "black", "teal", "gray", "grey", "orange"])
def test_keyword_and_hex_share_canonical_form(name):
    """Does: A keyword and its hex code from the CSS3 table never diverge."""
    assert n.normalize_color(name) == n.normalize_color(webcolors.name_to_hex(name))


# ───────────────────────────
# Rejections (silent None)
# ───────────────────────────
@pytest.mark.parametrize(
    "token",
    [
        "",
        "   ",
        "solid",
        "important",
        "zzz",
        "currentcolor",
        "inherit",
        "#ff",
        "#ggg",
        "#fffff",
        "rgb(1, 2)",
        "rgb(1, 2, 3, 4, 5)",
        "rgb(a, b, c)",
        "hsl(red, 10%, 10%)",
        "url(foo.png)",
    ],
)
def test_normalize_color_rejects_non_colors(token):
    assert n.normalize_color(token) is None
    assert n.parse_color(token) is None


def test_parse_color_non_string_is_none():
    assert n.parse_color(None) is None  # type: ignore[arg-type]
    assert n.parse_color(42) is None  # type: ignore[arg-type]


# ───────────────────────────
# Model & rendering helpers
# ───────────────────────────
def test_parse_color_returns_rgba_model():
    color = n.parse_color("rgba(10, 20, 30, 0.5)")
    assert color == n.RGBA(10, 20, 30, 0.5)
    assert color.alpha == 0.5
    assert n.parse_color("#0a141e") == n.RGBA(10, 20, 30, 1.0)


def test_format_rgb_opaque_and_translucent():
    assert n.format_rgb(n.RGBA(1, 2, 3)) == "rgb(1, 2, 3)"
    assert n.format_rgb(n.RGBA(1, 2, 3, 0.0)) == "rgba(1, 2, 3, 0)"
    assert n.format_rgb(n.RGBA(1, 2, 3, 0.33333)) == "rgba(1, 2, 3, 0.333)"


def test_lookup_named_color_table():
    assert lookup_named_color("Grey") == (128, 128, 128)
    assert lookup_named_color("aliceblue") == (240, 248, 255)
    assert lookup_named_color("currentcolor") is None
    assert lookup_named_color("not-a-color") is None


def test_rejections_are_traced_only_when_topic_enabled(monkeypatch, capsys):
    """Does: The 'color' debug topic reports discarded tokens on stderr."""
    from css_color_inventory.inventory.general.utils import log

    monkeypatch.setenv(log.ENV_VAR, "color")
    log.reload_topics()
    try:
        assert n.normalize_color("solid") is None
    finally:
        monkeypatch.delenv(log.ENV_VAR)
        log.reload_topics()
    err = capsys.readouterr().err
    assert "[color][DEBUG]" in err and "'solid'" in err

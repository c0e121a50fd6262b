"""Description text rendering.

Game descriptions carry two kinds of markup:

* rich-text tags such as ``<@ba.vup>`` ... ``</>`` which are simply removed;
* placeholders such as ``{atk:0%}`` or ``{-sp_recovery_per_sec:0.0}`` that are
  filled from a per-instance *blackboard* of numeric values.

A placeholder is an optional leading ``-`` (negate the value), a key, and an
optional format marker:

========  ==========================  ============
marker    meaning                     0.2 renders
========  ==========================  ============
``:0%``   integer percent             ``20%``
``:0.0%`` percent, 2 decimal places   ``20%``
``:0``    integer                     ``0``
``:0.0``  2 decimal places            ``0.2``
(none)    plain number                ``0.2``
========  ==========================  ============

Decimal forms drop redundant trailing zeros, so ``1.20`` becomes ``1.2`` and
``1.00`` becomes ``1``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from .enums import StrictnessMode
from .errors import UnresolvedTemplateKeyError

TAG_PATTERN = re.compile(r"<[@$\w.]+>|</>")
PLACEHOLDER_PATTERN = re.compile(r"\{[\w:.%\-@\[\]]+\}")

Blackboard = Mapping[str, float]


class NumberFormat(Enum):
    DECIMAL_PERCENT = ":0.0%"
    INTEGER_PERCENT = ":0%"
    DECIMAL = ":0.0"
    INTEGER = ":0"
    PLAIN = ""


# longest markers first so ":0.0%" is not mistaken for ":0%"
_MARKER_ORDER = (
    NumberFormat.DECIMAL_PERCENT,
    NumberFormat.INTEGER_PERCENT,
    NumberFormat.DECIMAL,
    NumberFormat.INTEGER,
)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A parsed ``{...}`` token."""

    key: str
    negative: bool
    number_format: NumberFormat


def strip_tags(text: str) -> str:
    """Remove rich-text tags; applying it twice changes nothing.

    Removing a tag can join its neighbours into a new one (``<<a>b>``), so
    passes repeat until nothing matches.
    """

    while True:
        stripped = TAG_PATTERN.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


def build_blackboard(entries: Iterable[tuple[str, float]], duration: float) -> dict[str, float]:
    """Blackboard for one text instance: explicit entries plus ``duration``."""

    blackboard = {key.lower(): value for key, value in entries}
    blackboard["duration"] = duration
    return blackboard


def parse_placeholder(token: str) -> Placeholder:
    """Parse the inside of a ``{...}`` token (braces optional)."""

    body = token.strip("{}")
    negative = body.startswith("-")
    if negative:
        body = body[1:]

    for number_format in _MARKER_ORDER:
        if body.endswith(number_format.value):
            body = body[: -len(number_format.value)]
            return Placeholder(body.lower(), negative, number_format)
    return Placeholder(body.lower(), negative, NumberFormat.PLAIN)


def _trim_decimal(text: str) -> str:
    # at most two zeros, then the bare point: "1.20" -> "1.2", "1.00" -> "1"
    for _ in range(2):
        if text.endswith("0"):
            text = text[:-1]
    if text.endswith("."):
        text = text[:-1]
    return text


def _plain(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return repr(value)


def format_value(value: float, negative: bool, number_format: NumberFormat) -> str:
    """Format a blackboard value for display."""

    if negative:
        value = -value

    if number_format is NumberFormat.DECIMAL_PERCENT:
        return _trim_decimal(f"{value * 100:.2f}") + "%"
    if number_format is NumberFormat.INTEGER_PERCENT:
        return f"{value * 100:.0f}%"
    if number_format is NumberFormat.DECIMAL:
        return _trim_decimal(f"{value:.2f}")
    if number_format is NumberFormat.INTEGER:
        return f"{value:.0f}"
    return _plain(value)


def render(
    text: str,
    blackboard: Blackboard,
    mode: StrictnessMode = StrictnessMode.LENIENT,
) -> str:
    """Strip tags from ``text`` and fill its placeholders from ``blackboard``.

    Keys missing from the blackboard are echoed upper-cased in lenient mode so
    a reader can spot them; strict mode raises
    :class:`~akdata.domain.errors.UnresolvedTemplateKeyError`.
    """

    stripped = strip_tags(text)

    def _substitute(match: re.Match[str]) -> str:
        placeholder = parse_placeholder(match.group(0))
        value = blackboard.get(placeholder.key)
        if value is None:
            if mode is StrictnessMode.STRICT:
                raise UnresolvedTemplateKeyError(placeholder.key, text)
            return placeholder.key.upper()
        return format_value(value, placeholder.negative, placeholder.number_format)

    return PLACEHOLDER_PATTERN.sub(_substitute, stripped)


class TemplateEngine:
    """Renders description text with a fixed strictness mode."""

    def __init__(self, mode: StrictnessMode = StrictnessMode.LENIENT) -> None:
        self.mode = mode

    def strip_tags(self, text: str) -> str:
        return strip_tags(text)

    def render(self, text: str, blackboard: Blackboard) -> str:
        return render(text, blackboard, self.mode)

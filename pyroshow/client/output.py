#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Terminal styling for the pyroshow client.

Commands format effects, parameters, clock values and states through
an Output; which colors those get is decided here only. Color is
dropped when NO_COLOR is set, when stdout is not a terminal, or for
TERM=dumb.
"""

import os
import re
import sys
from enum import Enum

# ─────────────────────────────────────────────────────────────────────────────
# Palette
# ─────────────────────────────────────────────────────────────────────────────


class _Role(Enum):
    """What a piece of output is, independent of how it looks."""

    EFFECT = (255, 170, 68)  # burst orange
    KEY = (135, 206, 250)  # sky blue
    VALUE = (255, 215, 0)  # gold, also used for numbers
    GOOD = (80, 250, 123)
    BAD = (255, 99, 99)
    CAUTION = (241, 250, 140)
    DIM = (128, 128, 128)


CHECKMARK = "\u2713"  # ✓
CROSS = "\u2717"  # ✗
HLINE = "\u2500"  # ─
VLINE = "\u2502"  # │
JUNCTION = "\u253c"  # ┼

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return _ANSI.sub("", str(text))


def format_number(value: float, precision: int = 3) -> str:
    """Format a float compactly, dropping trailing zeros."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_vec(vec, precision: int = 2) -> str:
    """Format a 3-vector as (x, y, z)."""
    return "(" + ", ".join(format_number(v, precision) for v in vec) + ")"


def _terminal_supports_color(stream) -> bool:
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    return os.environ.get("TERM") != "dumb"


# ─────────────────────────────────────────────────────────────────────────────
# Output
# ─────────────────────────────────────────────────────────────────────────────


class Output:
    """
    Formats client output by meaning rather than by color.
    """

    def __init__(self, force_color: bool | None = None):
        if force_color is None:
            force_color = _terminal_supports_color(sys.stdout)
        self._color_enabled = force_color

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    def _style(self, text, role: _Role | None = None, bold: bool = False) -> str:
        text = str(text)
        if not self._color_enabled:
            return text
        codes = []
        if bold:
            codes.append("1")
        if role is not None:
            codes.append("38;2;%d;%d;%d" % role.value)
        if not codes:
            return text
        return "".join(f"\x1b[{code}m" for code in codes) + f"{text}\x1b[0m"

    # Content

    def effect(self, text: str) -> str:
        """An effect type name."""
        return self._style(text, _Role.EFFECT, bold=True)

    def key(self, text: str) -> str:
        return self._style(text, _Role.KEY)

    def value(self, text: str) -> str:
        return self._style(text, _Role.VALUE)

    def number(self, value: float, precision: int = 3) -> str:
        """A clock value, count or coordinate, without trailing zeros."""
        return self._style(format_number(value, precision), _Role.VALUE)

    def vec(self, vec, precision: int = 2) -> str:
        return self._style(format_vec(vec, precision), _Role.VALUE)

    def header(self, text: str) -> str:
        return self._style(text, bold=True)

    def muted(self, text: str) -> str:
        return self._style(text, _Role.DIM)

    # States

    def success(self, message: str) -> str:
        return f"{self._style(CHECKMARK, _Role.GOOD)} {message}"

    def error(self, message: str) -> str:
        return f"{self._style(CROSS, _Role.BAD)} {message}"

    def warning(self, message: str) -> str:
        return f"{self._style('!', _Role.CAUTION)} {message}"

    def active(self, text: str) -> str:
        """Marks something live at the sampled clock value."""
        return self._style(text, _Role.GOOD)

    def flag(self, state: bool) -> str:
        return self.active(CHECKMARK) if state else self.muted("-")

    # Compound lines

    def effect_line(self, name: str, strategy: str, description: str) -> str:
        """One line of the effects listing: name, strategy and description."""
        return f"{self.effect(name)} {self.muted(f'[{strategy}]')} {description}"

    def kv(self, k: str, v: str) -> str:
        return f"{self.key(k)} = {self.value(v)}"

    def trait_line(self, name: str, trait_type: str, current_value: str | None = None,
                   constraints: str = "") -> str:
        """A parameter with its type, current value and limits."""
        line = f"  {self.key(name)} {self.muted(f'({trait_type})')}"
        if current_value is not None:
            line += f" = {self.value(str(current_value))}"
        if constraints:
            line += f" {self.muted(constraints)}"
        return line

    # Tables

    def table_row(self, key_width: int, key: str, value: str, width: int = 80) -> str:
        """
        One table row: the key right-justified to key_width, then the
        value, shortened with "(...)" when it would overflow width
        """
        room = width - key_width - 5
        if room > 10 and len(strip_ansi(value)) > room:
            value = strip_ansi(value)[: room - 5] + "(...)"
        pad = " " * max(0, key_width - len(strip_ansi(key)))
        return f" {pad}{key} {VLINE} {value}"

    def table(self, rows: list[tuple[str, str]], title: str | None = None,
              width: int = 80) -> list[str]:
        """
        Format key/value rows as a table. A title adds a bold heading
        row and a rule under it.
        """
        widths = [len(strip_ansi(k)) for k, _ in rows]
        if title is not None:
            widths.append(len(title))
        key_width = max(widths, default=0)

        lines = []
        if title is not None:
            lines.append(self.table_row(key_width, self.header(title), ""))
            rule_left = HLINE * (key_width + 1)
            rule_right = HLINE * (width - key_width - 3)
            lines.append(f" {rule_left}{JUNCTION}{rule_right}")
        lines.extend(self.table_row(key_width, self.key(k), v, width) for k, v in rows)
        return lines

#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Extended Color class with a grapefruit-style API.

This extends ColorAide's Color with the factory methods and properties
used throughout pyroshow.
"""

from coloraide import Color as _BaseColor


class Color(_BaseColor):
    """Color class with grapefruit-style factories and accessors."""

    @classmethod
    def NewFromHtml(cls, html: str) -> "Color":
        """Create color from HTML hex or named color."""
        return cls(html)

    @classmethod
    def NewFromRgb(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Create color from RGB floats (0-1 range)."""
        c = cls("srgb", [r, g, b])
        c["alpha"] = a
        return c

    @staticmethod
    def IntTupleToRgb(t: tuple) -> tuple:
        """Convert int tuple (0-255) to float tuple (0-1)."""
        return (t[0] / 255.0, t[1] / 255.0, t[2] / 255.0)

    @staticmethod
    def RgbToIntTuple(t: tuple) -> tuple:
        """Convert float tuple (0-1) to int tuple (0-255)."""
        return (int(t[0] * 255), int(t[1] * 255), int(t[2] * 255))

    @property
    def rgb(self) -> tuple:
        """Get RGB as float tuple (0-1), clipped to the sRGB gamut."""
        srgb = self.convert("srgb").clip()
        return (float(srgb["red"]), float(srgb["green"]), float(srgb["blue"]))

    @property
    def intTuple(self) -> tuple:
        """Get RGBA as int tuple (0-255)."""
        r, g, b = self.rgb
        return (int(r * 255), int(g * 255), int(b * 255), int(self.alpha() * 255))

    @property
    def html(self) -> str:
        """Get HTML hex color string."""
        return self.convert("srgb").clip().to_string(hex=True)

    def blend(self, other: "Color", percent: float = 0.5) -> "Color":
        """Blend with another color."""
        return Color(self.interpolate([other], space="srgb")(percent))

    def __iter__(self):
        """Allow unpacking as RGB tuple."""
        return iter(self.rgb)

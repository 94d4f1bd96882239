#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Color coercion and the per-particle color and brightness model.

All of the model functions are pure, so they may be called per
particle per frame from any thread.
"""
import math
import re

from collections.abc import Iterable

import numpy as np

from pyroshow.colorlib import Color
from pyroshow.types import EffectType
from pyroshow.util import clamp, lerp


# Fade exponents for the effects which use a plain power curve
FADE_EXPONENTS = {
    EffectType.BURST: 0.6,
    EffectType.FOUNTAIN: 0.8,
    EffectType.SPIRAL: 0.7,
}

# Effects whose embers shift toward red as they burn out
COOLING_EFFECTS = frozenset((EffectType.BURST, EffectType.WILLOW))

MIN_VIEWER_DISTANCE = 10.0
MAX_VIEWER_DISTANCE = 500.0
MAX_ZOOM_BRIGHTNESS = 20.0


def rgb_from_tuple(arg: tuple) -> Color:
    """
    Convert a 3-tuple of ints or floats to a Color

    :param arg: The RGB tuple to convert
    :return: The Color object
    """
    if len(arg) >= 3:
        if arg[0] is None:
            return Color.NewFromRgb(0, 0, 0)
        if all(isinstance(n, (int, np.integer)) for n in arg):
            return Color.NewFromRgb(*Color.IntTupleToRgb(arg))
        if all(isinstance(n, (int, float, np.number)) for n in arg):
            return Color.NewFromRgb(*[float(n) for n in arg[:3]])

    raise TypeError('Unable to convert %s (%s) to color' % (arg, type(arg[0])))


def rgb_to_int_tuple(arg: tuple) -> tuple:
    """
    Convert/sanitize a 3-tuple of ints or floats

    :param arg: Tuple of RGB values

    :return: Tuple of RGB ints
    """
    if len(arg) >= 3:
        return tuple([clamp(round(x), 0, 255) for x in arg[:3]])

    raise TypeError('Unable to convert %s (%s) to color' % (arg, type(arg[0])))


COLOR_TUPLE_STR = re.compile(r'\((.*, .*, .*)\)')

def to_color(*color_args) -> Color:
    """
    Convert various color representations to Color

    Handles RGB triplets, hexcodes, and html color names.

    :return: The color
    """
    colors = []
    for arg in color_args:
        value = None
        if arg is not None:
            if isinstance(arg, Color):
                value = arg
            elif isinstance(arg, str):
                if arg != '':
                    strtuple = COLOR_TUPLE_STR.match(arg)
                    if strtuple:
                        value = Color.NewFromRgb(*[float(x) \
                                for x in strtuple.group(1).split(', ')][:3])
                    else:
                        value = Color.NewFromHtml(arg)
            elif isinstance(arg, Iterable):
                value = rgb_from_tuple(tuple(arg))
            else:
                raise TypeError('Unable to parse color from \'%s\' (%s)' % (arg, type(arg)))
        colors.append(value)

    if len(colors) == 0:
        return None
    if len(colors) == 1:
        return colors[0]

    return colors


def to_rgb(arg) -> tuple:
    """
    Convert various representations to RGB tuples

    :return: An RGB int tuple
    """
    if arg is None:
        return (0, 0, 0)
    if isinstance(arg, Color):
        return arg.intTuple[:3]
    if isinstance(arg, str):
        return Color.NewFromHtml(arg).intTuple[:3]
    if isinstance(arg, (tuple, list)):
        if arg[0] is None:
            return (0, 0, 0)

        if isinstance(arg[0], (list, tuple, str, Color)):
            return [to_rgb(item) for item in arg]
        return rgb_to_int_tuple(arg)

    raise TypeError('Unable to parse color from \'%s\' (%s)' % (arg, type(arg)))


def to_rgb_float(arg) -> tuple:
    """
    Convert any color representation to an RGB float tuple (0-1)
    """
    color = to_color(arg)
    if color is None:
        return (0.0, 0.0, 0.0)
    return color.rgb


def lerp_rgb(start: tuple, end: tuple, amount: float) -> tuple:
    """
    Linear interpolation between two RGB float tuples
    """
    return tuple(lerp(a, b, amount) for a, b in zip(start, end))


def palette_lerp(palette: list, position: float) -> tuple:
    """
    Sample a palette as a continuous gradient

    Position 0 is the first entry, 1 the last; values between two
    entries are linearly interpolated.

    :param palette: list of RGB float tuples, at least one entry
    :param position: position along the palette (0.0 - 1.0)

    :return: RGB float tuple
    """
    count = len(palette)
    if count == 1:
        return tuple(palette[0])

    scaled = clamp(position, 0.0, 1.0) * (count - 1)
    idx = min(int(math.floor(scaled)), count - 2)
    return lerp_rgb(palette[idx], palette[idx + 1], scaled - idx)


def palette_layer(palette: list, fraction: float) -> tuple:
    """
    Pick the discrete palette entry for a fraction (0.0 - 1.0)

    :return: RGB float tuple
    """
    count = len(palette)
    idx = int(math.floor(clamp(fraction, 0.0, 1.0) * (count - 1)))
    return tuple(palette[clamp(idx, 0, count - 1)])


def fade_curve(life_fraction: float, effect_type: EffectType) -> float:
    """
    Map remaining life to alpha for an effect family

    Bursts, fountains and spirals use a power curve. Willow embers
    linger near full brightness and then drop off steeply. All other
    effects fade linearly.

    :param life_fraction: remaining life / max life, clamped to 0.0 - 1.0
    :param effect_type: the effect family

    :return: alpha in 0.0 - 1.0
    """
    ratio = clamp(life_fraction, 0.0, 1.0)
    if effect_type in FADE_EXPONENTS:
        return math.pow(ratio, FADE_EXPONENTS[effect_type])
    if effect_type is EffectType.WILLOW:
        if ratio > 0.3:
            return math.pow(ratio, 0.5)
        return math.pow(ratio, 1.2)
    return ratio


def zoom_brightness(viewer_distance: float, min_distance: float=MIN_VIEWER_DISTANCE,
                    max_distance: float=MAX_VIEWER_DISTANCE) -> float:
    """
    Brightness multiplier which compensates for distance dimming

    :param viewer_distance: camera distance from the scene target
    :param min_distance: distance at which no compensation is applied
    :param max_distance: distance at which compensation is maximal

    :return: multiplier in 1.0 - 20.0, non-decreasing with distance
    """
    if viewer_distance is None:
        return 1.0
    span = max_distance - min_distance
    if span <= 0 or not math.isfinite(viewer_distance):
        return 1.0

    normalized = clamp((viewer_distance - min_distance) / span, 0.0, 1.0)
    return 1.0 + math.pow(normalized, 0.3) * (MAX_ZOOM_BRIGHTNESS - 1.0)


def cooling_shift(rgb: tuple, alpha: float, effect_type: EffectType) -> tuple:
    """
    Shift a color toward warm embers as its alpha falls

    Only bursts and willows cool; other effects keep their color.

    :return: RGB float tuple
    """
    if effect_type not in COOLING_EFFECTS:
        return tuple(rgb)

    cool = 1.0 - clamp(alpha, 0.0, 1.0)
    r, g, b = rgb
    return (clamp(r + cool * 0.3, 0.0, 1.0),
            clamp(g - cool * 0.2, 0.0, 1.0),
            clamp(b - cool * 0.4, 0.0, 1.0))


def shade(rgb: tuple, alpha: float, brightness: float=1.0) -> tuple:
    """
    Final particle color: the base color scaled by alpha and
    brightness, saturating at 1.0
    """
    factor = min(1.0, max(0.0, alpha * brightness))
    return tuple(min(1.0, max(0.0, c * factor)) for c in rgb)


def shade_array(colors: np.ndarray, alpha: np.ndarray, brightness) -> np.ndarray:
    """
    Vectorized shade() for N colors

    :param colors: (N, 3) array of RGB floats
    :param alpha: (N,) array of alphas
    :param brightness: scalar or (N,) array of multipliers

    :return: (N, 3) array of shaded colors
    """
    factor = np.clip(alpha * brightness, 0.0, 1.0)
    return np.clip(colors * factor[:, np.newaxis], 0.0, 1.0)



class ColorUtils(object):
    """
    Various helpers and utilities for working with colors
    """

    @staticmethod
    def gradient(length: int, *colors) -> list:
        """
        Generate an RGB gradient through evenly-spaced color stops

        :param length: Total number of entries in the final gradient
        :param colors: Color stops, varargs

        :return: List of RGB float tuples
        """
        stops = [to_rgb_float(x) for x in colors]
        if length <= 0 or not stops:
            return []
        if length == 1:
            return [stops[0]]
        return [palette_lerp(stops, x / (length - 1)) for x in range(length)]


    @staticmethod
    def luminance(color) -> float:
        """
        Calculate the relative luminance (as defined by WCAG 2.0) of
        the given color.

        :param color: a color
        :return: the calculated relative luminance between 0.0 and 1.0
        """
        vals = []
        for c in to_rgb_float(color):
            if c <= 0.03928:
                c /= 12.92
            else:
                c = math.pow((c + 0.055) / 1.055, 2.4)
            vals.append(c)
        return 0.2126 * vals[0] + 0.7152 * vals[1] + 0.0722 * vals[2]

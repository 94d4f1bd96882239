# pylint: disable=invalid-name
"""
Various helper functions that are used across the library.
"""
import hashlib
import math
import re

import numpy as np


def camel_to_snake(name: str) -> str:
    """
    Returns a snake_case_name from a CamelCaseName
    """
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def clamp(value, min_, max_):
    """
    Constrain a value to the specified range

    :param value: Input value
    :param min_: Range minimum
    :param max_: Range maximum

    :return: The constrained value
    """
    return max(min_, min(value, max_))


def lerp(start: float, end: float, amount: float) -> float:
    """
    Linear interpolation

    Return a value between start and stop at the requested percentage

    :param start: Range start
    :param end: Range end
    :param amount: Position in range (0.0 - 1.0)

    :return: The interpolated value
    """
    return start + (end - start) * amount


def safe_div(numerator: float, denominator: float, fallback: float=0.0) -> float:
    """
    Divide, returning fallback instead of propagating inf/nan when
    the denominator is zero or not finite.
    """
    if denominator == 0 or not math.isfinite(denominator):
        return fallback
    return numerator / denominator


def trunc_mod(value: float, modulus: float) -> float:
    """
    Remainder with the sign of the dividend (truncated division)

    Unlike the % operator, the result keeps the sign of the value, which
    the hash-derived wind offsets rely on.
    """
    return math.fmod(value, modulus)


def string_hash32(text: str) -> int:
    """
    32-bit rolling string hash (h = h * 31 + c, wrapped to a signed int32)

    :param text: input string
    :return: signed 32-bit hash
    """
    h = 0
    for char in text:
        h = ((h << 5) - h + ord(char)) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x100000000
    return h


def stable_seed(*parts) -> int:
    """
    Derive a process-independent 64-bit seed from the given parts.

    The builtin hash() is salted per interpreter, so seeds are taken
    from a digest of the joined string representations instead.
    """
    key = '\x1f'.join(str(part) for part in parts).encode('utf-8')
    return int.from_bytes(hashlib.blake2b(key, digest_size=8).digest(), 'little')


def seeded_rng(*parts) -> np.random.Generator:
    """
    Create a random generator seeded from stable identifiers

    :return: a numpy Generator which yields the same sequence for
             the same parts on every run
    """
    return np.random.default_rng(stable_seed(*parts))


def variation(index: int, period: int, base: float, step: float) -> float:
    """
    Deterministic per-index multiplier, repeating every period indices

    :param index: particle index
    :param period: number of distinct values
    :param base: multiplier at index 0
    :param step: increment per index within a period

    :return: base + (index mod period) * step
    """
    return base + (index % period) * step


def variation_array(count: int, period: int, base: float, step: float) -> np.ndarray:
    """
    Vectorized form of variation() for indices 0..count-1
    """
    return base + (np.arange(count) % period) * step

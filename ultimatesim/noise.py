"""Seeded two-dimensional Perlin noise."""

from __future__ import annotations

import math
import random

_PERM_SIZE = 256
_SEED_BYTES = 32
# The raw noise peaks near sqrt(2)/2; this factor stretches it to roughly [-1, 1].
_OUTPUT_SCALE = 1.414


def _fade(t: float) -> float:
    """Smoothstep curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float) -> float:
    h = hash_value & 3
    u = x if h < 2 else -x
    v = y if h & 1 == 0 else -y
    return u + v


def _normalise_seed(seed: bytes | bytearray | int) -> bytes | int:
    if isinstance(seed, (bytes, bytearray)):
        if len(seed) > _SEED_BYTES:
            raise ValueError(f"seed must be at most {_SEED_BYTES} bytes, got {len(seed)}")
        return bytes(seed).ljust(_SEED_BYTES, b"\0")
    if isinstance(seed, int) and not isinstance(seed, bool):
        return seed
    raise TypeError("seed must be bytes or an int")


class Perlin:
    """Deterministic 2D Perlin noise generator built from a seed.

    A byte seed is zero-padded to 32 bytes, so shorter seeds behave like
    their padded form.
    """

    def __init__(self, seed: bytes | bytearray | int) -> None:
        rng = random.Random(_normalise_seed(seed))
        permutation = list(range(_PERM_SIZE))
        rng.shuffle(permutation)
        self._p: tuple[int, ...] = tuple(permutation + permutation)

    def noise2d(self, x: float, y: float) -> float:
        """Noise value at (x, y), roughly within [-1.0, 1.0]."""
        floor_x = math.floor(x)
        floor_y = math.floor(y)
        xi = floor_x & 255
        yi = floor_y & 255

        x -= floor_x
        y -= floor_y

        u = _fade(x)
        v = _fade(y)

        p = self._p
        a = p[xi] + yi
        b = p[xi + 1] + yi

        value = _lerp(
            v,
            _lerp(u, _grad(p[a], x, y), _grad(p[b], x - 1, y)),
            _lerp(u, _grad(p[a + 1], x, y - 1), _grad(p[b + 1], x - 1, y - 1)),
        )
        return value * _OUTPUT_SCALE
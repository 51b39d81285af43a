"""
Alea pseudo-random number generator.

Based on Johannes Baagøe's Alea algorithm. It is small, fast and, unlike
Python's global ``random`` module, every instance carries its own state, so
a diamond-square run fed from a seeded ``AleaPRNG`` is reproducible
bit-for-bit.
"""

from typing import Iterable, Tuple, Union

SeedType = Union[str, int, float, Iterable]

_TWO_POW_32 = 0x100000000  # 2^32
_TWO_POW_NEG_32 = 2.3283064365386963e-10  # 2^-32


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Hash used to turn arbitrary seed values into generator state."""

    def __init__(self):
        self.n = 0xEFC8249D  # 4022871197

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * _TWO_POW_32
        return _uint32(self.n) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Seedable uniform random source.

    ``random()`` returns floats in ``[0, 1)``, which is all the grid
    generator needs from a random source. ``getstate()``/``setstate()``
    follow the ``random.Random`` naming so a run can be replayed from any
    point.
    """

    def __init__(self, seed: SeedType):
        """Initialize with a seed string, number, or iterable of those."""
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 -= mash(arg)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(arg)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(arg)
            if self.s2 < 0:
                self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def getstate(self) -> Tuple[float, float, float, int, int]:
        """Snapshot of the internal state, usable with ``setstate``."""
        return (self.s0, self.s1, self.s2, self.c, self.call_count)

    def setstate(self, state: Tuple[float, float, float, int, int]) -> None:
        """Restore a snapshot taken with ``getstate``."""
        self.s0, self.s1, self.s2, self.c, self.call_count = state

    def __repr__(self) -> str:
        return f"AleaPRNG(seed={self.seed!r}, call_count={self.call_count})"

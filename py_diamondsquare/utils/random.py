"""
Random source utilities.

The grid generator never touches a process-wide generator. Callers hand it
a random source explicitly; anything with a ``random()`` method returning
uniform floats in ``[0, 1)`` qualifies (``AleaPRNG``, ``random.Random``,
``numpy.random.Generator``).
"""

import uuid
from typing import Optional, Protocol, runtime_checkable

from ..core.alea_prng import AleaPRNG, SeedType


@runtime_checkable
class RandomSource(Protocol):
    """Anything producing uniform samples in [0, 1)."""

    def random(self) -> float:
        ...


def make_prng(seed: Optional[SeedType] = None) -> AleaPRNG:
    """
    Create an Alea PRNG for a generation run.

    Args:
        seed: Seed string or number. When omitted a fresh random seed is
            used, so two unseeded runs produce different grids.

    Returns:
        AleaPRNG instance
    """
    if seed is None:
        seed = uuid.uuid4().hex
    return AleaPRNG(seed)

"""
Diamond-square fractal grid generation.

Midpoint displacement over a ``(2^n + 1) x (2^n + 1)`` grid. The four
corners are seeded around the middle of the value range, then each level
alternates a square phase (centres of squares, averaged from their four
diagonal neighbours) and a diamond phase (edge midpoints, averaged from
their in-bounds axis-aligned neighbours). Every new value gets a uniform
displacement in ``[-amplitude, amplitude)`` and is clamped into
``[min_value, max_value]`` right away.

The displacement amplitude is ``(max_value - min_value) * roughness`` and
stays constant across levels unless ``amplitude_decay`` is set below 1.
"""

import math
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

import numpy as np
import structlog

from ..config import settings
from ..exceptions import InvalidConfig
from ..utils.random import RandomSource, make_prng
from .alea_prng import SeedType

logger = structlog.get_logger()

DEFAULT_MAX_VALUE = 1.0
DEFAULT_MIN_VALUE = 0.0
DEFAULT_ROUGHNESS = 0.2
DEFAULT_SIZE = 513


@dataclass(frozen=True)
class DiamondSquareConfig:
    """Configuration for one diamond-square run."""

    size: int
    max_value: float = DEFAULT_MAX_VALUE
    min_value: float = DEFAULT_MIN_VALUE
    roughness: float = DEFAULT_ROUGHNESS
    amplitude_decay: float = 1.0

    @property
    def amplitude(self) -> float:
        """Absolute displacement scale."""
        return (self.max_value - self.min_value) * self.roughness

    @property
    def mid(self) -> float:
        """Centre of the value range, used to seed the corners."""
        # Offset by min_value; a bare (max - min) / 2 only centres ranges starting at 0
        return self.min_value + (self.max_value - self.min_value) / 2

    @property
    def levels(self) -> int:
        """Number of subdivision levels for a valid size."""
        return (self.size - 1).bit_length() - 1

    def replace(self, **changes) -> "DiamondSquareConfig":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


def is_valid_size(size) -> bool:
    """Check that size is an int >= 3 with size - 1 a power of two."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        return False
    n = int(size) - 1
    return n >= 2 and (n & (n - 1)) == 0


def _reject(message: str, field: str, value) -> None:
    logger.warning("Invalid diamond-square config", field=field, value=value, reason=message)
    raise InvalidConfig(message, field=field, value=value)


def validate_config(config: DiamondSquareConfig) -> None:
    """
    Validate a configuration before any grid is allocated.

    Raises:
        InvalidConfig: if the config cannot produce a well-formed grid
    """
    if not is_valid_size(config.size):
        _reject(f"size must be 2^n + 1 with n >= 1, got {config.size!r}", "size", config.size)
    if config.size > settings.max_grid_size:
        _reject(
            f"size {config.size} exceeds max_grid_size {settings.max_grid_size}",
            "size",
            config.size,
        )
    if not math.isfinite(config.min_value):
        _reject("min_value must be finite", "min_value", config.min_value)
    if not math.isfinite(config.max_value):
        _reject("max_value must be finite", "max_value", config.max_value)
    if config.min_value > config.max_value:
        _reject(
            f"min_value {config.min_value} is greater than max_value {config.max_value}",
            "min_value",
            config.min_value,
        )
    if not math.isfinite(config.max_value - config.min_value):
        _reject("value range max_value - min_value overflows", "max_value", config.max_value)
    if not math.isfinite(config.roughness) or config.roughness < 0:
        _reject("roughness must be a finite value >= 0", "roughness", config.roughness)
    if not math.isfinite(config.amplitude):
        _reject("amplitude (max_value - min_value) * roughness overflows", "roughness", config.roughness)
    if not (0 < config.amplitude_decay <= 1):
        _reject("amplitude_decay must be in (0, 1]", "amplitude_decay", config.amplitude_decay)


def diamond_neighbors(x: int, y: int, half: int, size: int) -> List[Tuple[int, int]]:
    """
    Axis-aligned neighbours at distance ``half`` that lie inside the grid.

    Order is up, left, right, down. Corner positions get 2, edge positions
    3 and interior positions 4.
    """
    candidates = ((x - half, y), (x, y - half), (x, y + half), (x + half, y))
    return [(i, j) for i, j in candidates if 0 <= i < size and 0 <= j < size]


def _mean(values) -> float:
    values = [float(v) for v in values]
    total = sum(values)
    if math.isfinite(total):
        return total / len(values)
    # Sum overflowed near the float limit; scale each term first
    return sum(v / len(values) for v in values)


class _Run:
    """State of a single generate() call. Never outlives the call."""

    def __init__(self, config: DiamondSquareConfig, rng: RandomSource):
        self.size = config.size
        self.min_value = config.min_value
        self.max_value = config.max_value
        self.amplitude = config.amplitude
        self.rng = rng
        self.grid = np.zeros((self.size, self.size), dtype=np.float64)

    def _displaced(self, base: float) -> float:
        value = base + (1.0 - 2.0 * self.rng.random()) * self.amplitude
        if value < self.min_value:
            return self.min_value
        if value > self.max_value:
            return self.max_value
        return value

    def seed_corners(self, mid: float) -> None:
        last = self.size - 1
        for x, y in ((0, 0), (0, last), (last, 0), (last, last)):
            self.grid[x, y] = self._displaced(mid)

    def square(self, x: int, y: int, half: int) -> None:
        g = self.grid
        corners = (
            g[x - half, y - half],
            g[x - half, y + half],
            g[x + half, y - half],
            g[x + half, y + half],
        )
        g[x, y] = self._displaced(_mean(corners))

    def diamond(self, x: int, y: int, half: int) -> None:
        neighbors = diamond_neighbors(x, y, half, self.size)
        self.grid[x, y] = self._displaced(_mean([self.grid[i, j] for i, j in neighbors]))

    def subdivide(self, half: int) -> None:
        size = self.size

        # Square
        for x in range(half, size, half * 2):
            for y in range(half, size, half * 2):
                self.square(x, y, half)

        # Diamond: rows alternate between starting at half and at 0
        odd = False
        for x in range(0, size, half):
            for y in range(0 if odd else half, size, half * 2):
                self.diamond(x, y, half)
            odd = not odd


def generate(config: DiamondSquareConfig, rng: Optional[RandomSource] = None) -> np.ndarray:
    """
    Generate a diamond-square grid.

    Args:
        config: Grid size, value bounds and roughness
        rng: Random source with a ``random()`` method returning floats in
            [0, 1). A freshly seeded AleaPRNG is used when omitted.

    Returns:
        A new ``(size, size)`` float64 array with every cell in
        ``[config.min_value, config.max_value]``

    Raises:
        InvalidConfig: if the config is rejected by ``validate_config``
    """
    validate_config(config)
    if rng is None:
        rng = make_prng()

    logger.debug(
        "Generating diamond-square grid",
        size=config.size,
        min_value=config.min_value,
        max_value=config.max_value,
        roughness=config.roughness,
        amplitude=config.amplitude,
    )

    run = _Run(config, rng)
    run.seed_corners(config.mid)

    half = (config.size - 1) // 2
    while half > 0:
        run.subdivide(half)
        run.amplitude *= config.amplitude_decay
        half //= 2

    grid = run.grid
    logger.debug(
        "Diamond-square grid generated",
        levels=config.levels,
        cells=grid.size,
        grid_min=float(grid.min()),
        grid_max=float(grid.max()),
        grid_mean=float(grid.mean()),
    )
    return grid


def config_from_settings(
    size: Optional[int] = None,
    max_value: Optional[float] = None,
    min_value: Optional[float] = None,
    roughness: Optional[float] = None,
) -> DiamondSquareConfig:
    """Build a config, filling unset fields from the ``default_*`` settings."""
    return DiamondSquareConfig(
        size=settings.default_size if size is None else size,
        max_value=settings.default_max_value if max_value is None else max_value,
        min_value=settings.default_min_value if min_value is None else min_value,
        roughness=settings.default_roughness if roughness is None else roughness,
    )


def generate_grid(
    size: Optional[int] = None,
    max_value: Optional[float] = None,
    min_value: Optional[float] = None,
    roughness: Optional[float] = None,
    seed: Optional[SeedType] = None,
) -> np.ndarray:
    """One-shot helper: build the config and a PRNG from ``seed`` and generate."""
    config = config_from_settings(size, max_value, min_value, roughness)
    return generate(config, make_prng(seed))


class DiamondSquare:
    """
    Generator front end bound to a config and a random source.

    Holds no grid between calls; each ``generate()`` returns a new array.
    """

    def __init__(
        self,
        size: Optional[int] = None,
        max_value: Optional[float] = None,
        min_value: Optional[float] = None,
        roughness: Optional[float] = None,
        rng: Optional[RandomSource] = None,
        seed: Optional[SeedType] = None,
        config: Optional[DiamondSquareConfig] = None,
    ):
        """
        Initialize the generator.

        Args:
            size: Grid side length, 2^n + 1
            max_value: Upper value bound
            min_value: Lower value bound
            roughness: Displacement scale relative to the value range
            rng: Random source to draw from
            seed: Seed for a new AleaPRNG when ``rng`` is not given
            config: Complete config; when given the value arguments must be unset

        Unset value arguments fall back to the ``default_*`` settings.
        """
        if config is None:
            config = config_from_settings(size, max_value, min_value, roughness)
        elif any(v is not None for v in (size, max_value, min_value, roughness)):
            raise TypeError("pass either config or individual values, not both")
        self.config = config
        self.rng = rng if rng is not None else make_prng(seed)

    @classmethod
    def from_config(cls, config: DiamondSquareConfig, rng: Optional[RandomSource] = None) -> "DiamondSquare":
        return cls(config=config, rng=rng)

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def max_value(self) -> float:
        return self.config.max_value

    @property
    def min_value(self) -> float:
        return self.config.min_value

    @property
    def roughness(self) -> float:
        return self.config.roughness

    def with_config(self, **changes) -> "DiamondSquare":
        """New generator with an updated config, sharing this random source."""
        return DiamondSquare.from_config(self.config.replace(**changes), self.rng)

    def generate(self) -> np.ndarray:
        """Run diamond-square with the bound config."""
        return generate(self.config, self.rng)

    def __repr__(self) -> str:
        return f"DiamondSquare({self.config!r})"

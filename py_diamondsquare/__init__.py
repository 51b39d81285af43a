"""
Diamond-square fractal grid generator.
"""

from .core import (
    AleaPRNG, DiamondSquare, DiamondSquareConfig, generate, generate_grid,
    DEFAULT_MAX_VALUE, DEFAULT_MIN_VALUE, DEFAULT_ROUGHNESS, DEFAULT_SIZE,
)
from .exceptions import InvalidConfig

__version__ = "0.1.0"

__all__ = ['AleaPRNG', 'DiamondSquare', 'DiamondSquareConfig', 'generate', 'generate_grid',
           'InvalidConfig', 'DEFAULT_MAX_VALUE', 'DEFAULT_MIN_VALUE', 'DEFAULT_ROUGHNESS',
           'DEFAULT_SIZE']

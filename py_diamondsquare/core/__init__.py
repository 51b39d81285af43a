"""
Core grid generation functionality.
"""

from .alea_prng import AleaPRNG
from .diamond_square import (
    DEFAULT_MAX_VALUE, DEFAULT_MIN_VALUE, DEFAULT_ROUGHNESS, DEFAULT_SIZE,
    DiamondSquare, DiamondSquareConfig, config_from_settings, diamond_neighbors,
    generate, generate_grid, is_valid_size, validate_config,
)

__all__ = ['AleaPRNG', 'DiamondSquare', 'DiamondSquareConfig', 'generate',
           'generate_grid', 'config_from_settings', 'diamond_neighbors', 'is_valid_size', 'validate_config',
           'DEFAULT_MAX_VALUE', 'DEFAULT_MIN_VALUE', 'DEFAULT_ROUGHNESS', 'DEFAULT_SIZE']

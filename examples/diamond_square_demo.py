#!/usr/bin/env python3
"""
Simple demo script showing diamond-square grid generation.
"""

import numpy as np

from py_diamondsquare import DiamondSquare, DiamondSquareConfig, generate
from py_diamondsquare.config import settings
from py_diamondsquare.core import AleaPRNG
from py_diamondsquare.utils.logging import configure_logging


def main():
    """Demonstrate grid generation at a few roughness levels."""
    configure_logging(fmt="console")
    print("Diamond-Square Generation Demo")
    print("=" * 40)

    size = 129
    for roughness in (0.0, 0.05, settings.default_roughness, 0.5):
        grid = DiamondSquare(size, roughness=roughness, seed="demo123").generate()
        # Mean absolute difference between horizontal neighbours
        texture = np.abs(np.diff(grid, axis=1)).mean()
        print(f"\nroughness={roughness}")
        print(f"  Range: {grid.min():.3f} - {grid.max():.3f}")
        print(f"  Mean: {grid.mean():.3f}  Std: {grid.std():.3f}")
        print(f"  Neighbour difference: {texture:.4f}")

    print("\nConstant vs decaying amplitude:")
    config = DiamondSquareConfig(size, roughness=0.2)
    for decay in (1.0, 0.5):
        grid = generate(config.replace(amplitude_decay=decay), AleaPRNG("demo123"))
        texture = np.abs(np.diff(grid, axis=1)).mean()
        print(f"  amplitude_decay={decay}: neighbour difference {texture:.4f}")


if __name__ == "__main__":
    main()

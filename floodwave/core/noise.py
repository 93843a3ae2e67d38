"""
Floodwave - Lattice Noise

Cheap value noise used to bias territory growth. Each integer lattice point
is hashed to a value in [0, 1) with a fixed trigonometric mix, and points in
between are blended bilinearly with smoothstep weights. The field is
deterministic for a given (x, y) and changes gradually from one grid cell
to the next.
"""

import math


def lattice_hash(x: int, y: int) -> float:
    """Hash an integer lattice point to a float in [0, 1)."""
    value = math.sin(x * 12.9898 + y * 78.233) * math.sin(x * 39.346 + y * 14.234) * 43758.5453
    return value - math.floor(value)


def smoothstep(t: float) -> float:
    """3t^2 - 2t^3, flat at both ends of [0, 1]."""
    return t * t * (3.0 - 2.0 * t)


def lattice_noise(x: float, y: float, scale: float = 2.0) -> float:
    """
    Sample the noise field.

    Args:
        x: First coordinate (the generator passes row + seed)
        y: Second coordinate (the generator passes col + seed)
        scale: Size of one lattice cell in input units. Larger values give
               broader, smoother features.

    Returns:
        Noise value in [0, 1).
    """
    if scale <= 0:
        scale = 1.0

    fx = x / scale
    fy = y / scale
    xi = math.floor(fx)
    yi = math.floor(fy)

    n00 = lattice_hash(xi, yi)
    n10 = lattice_hash(xi + 1, yi)
    n01 = lattice_hash(xi, yi + 1)
    n11 = lattice_hash(xi + 1, yi + 1)

    u = smoothstep(fx - xi)
    v = smoothstep(fy - yi)

    n0 = n00 * (1.0 - u) + n10 * u
    n1 = n01 * (1.0 - u) + n11 * u
    value = n0 * (1.0 - v) + n1 * v

    # Rounding in the blend can land a hair outside the hash range
    return min(max(value, 0.0), math.nextafter(1.0, 0.0))

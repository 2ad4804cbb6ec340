"""Linear rescaling and the complex arithmetic used by the escape-time loop."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    """A closed interval given by its two ends; ``min`` may exceed ``max``."""

    min: float
    max: float


def map_range(value: float, new: Range, old: Range) -> float:
    """Linearly map ``value`` from the ``old`` interval onto the ``new`` one."""
    return (new.max - new.min) * (value - old.min) / (old.max - old.min) + new.min


def sum_complex(z1: complex, z2: complex) -> complex:
    """Return ``z1 + z2``."""
    return complex(z1.real + z2.real, z1.imag + z2.imag)


def square_complex(z: complex) -> complex:
    """Return ``z`` squared: ``(x² - y²) + 2xy·i``."""
    x, y = z.real, z.imag
    return complex(x * x - y * y, 2 * x * y)
"""
Model scale lookup.

A model scale says how many real-world lengths fit into one printed length,
e.g. HO is 1:87.1. Scales are looked up by name (``"HO"``, ``"N"``) or given
directly as ``"N:D"``.
"""

import math
from dataclasses import dataclass

from .constants import MODEL_SCALES
from .errors import ParseError


@dataclass(frozen=True)
class ModelScale:
    """A named reduction ratio (world length / printed length)."""

    name: str
    ratio: float
    description: str

    def __str__(self) -> str:
        return f"{self.name} (1:{self.ratio:g}, {self.description})"


def lookup_scale(name: str) -> ModelScale:
    """
    Return the ModelScale for a table name or an ``"N:D"`` ratio string.

    Raises:
        ParseError: if the name is unknown, the ratio string does not have
            exactly one colon, or either side is non-numeric or zero.
    """
    name = name.strip()
    if name in MODEL_SCALES:
        ratio, description = MODEL_SCALES[name]
        return ModelScale(name, ratio, description)

    parts = name.split(":")
    if len(parts) == 1:
        raise ParseError(
            f"Unknown scale {name!r}; use one of {list(MODEL_SCALES)} or 'N:D'",
            details={"scale": name},
        )
    if len(parts) != 2:
        raise ParseError(f"Scale {name!r} must contain exactly one colon", details={"scale": name})

    try:
        numerator = float(parts[0])
        denominator = float(parts[1])
    except ValueError as e:
        raise ParseError(f"Scale {name!r} must be two numbers like '1:87'", details={"scale": name}) from e

    if not (math.isfinite(numerator) and math.isfinite(denominator)):
        raise ParseError(f"Scale {name!r} must be two finite numbers", details={"scale": name})
    if numerator == 0 or denominator == 0:
        raise ParseError(f"Scale {name!r} cannot contain zero", details={"scale": name})

    return ModelScale(name, denominator / numerator, f"custom scale {name}")


def available_scales() -> list[ModelScale]:
    """All named scales, in table order."""
    return [ModelScale(name, ratio, description) for name, (ratio, description) in MODEL_SCALES.items()]

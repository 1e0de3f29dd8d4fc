"""
Pairs of Measurements used as points, vectors and sizes.

A ``MeasurementPair`` is used for three related purposes:

1. A point in Cartesian coordinates (the most common use).
2. A vector, i.e. a direction and length. Adding a vector to a point
   "moves" the point, which is handy when walking around a polygon.
3. A size (width, height).

X always comes first, then Y. Which combinations are meaningful is checked:

    point  + vector -> point        point  - point  -> vector
    vector + vector -> vector       point  - vector -> point
                                    vector - vector -> vector

Scaling by a bare number keeps the kind. Sizes never add or subtract.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .measurement import Frame, Measurement, MeasurementLike, parse


class PairKind(Enum):
    POINT = "point"
    VECTOR = "vector"
    SIZE = "size"


_PLUS_RESULTS = {
    (PairKind.POINT, PairKind.VECTOR): PairKind.POINT,
    (PairKind.VECTOR, PairKind.VECTOR): PairKind.VECTOR,
}

_MINUS_RESULTS = {
    (PairKind.POINT, PairKind.POINT): PairKind.VECTOR,
    (PairKind.POINT, PairKind.VECTOR): PairKind.POINT,
    (PairKind.VECTOR, PairKind.VECTOR): PairKind.VECTOR,
}


@dataclass(frozen=True)
class MeasurementPair:
    """
    An immutable (x, y) pair of same-frame Measurements.

    Args:
        x: X coordinate or width (anything :func:`parse` accepts)
        y: Y coordinate or height
        kind: Whether this is a point, vector or size
        frame: Frame of the pair; taken from ``x``/``y`` when omitted,
            WORLD if both are strings
    """

    x: Measurement
    y: Measurement
    kind: PairKind = PairKind.POINT
    frame: Frame | None = None

    def __post_init__(self):
        if self.frame is None:
            frame = next(
                (m.frame for m in (self.x, self.y) if isinstance(m, Measurement)),
                Frame.WORLD,
            )
            object.__setattr__(self, "frame", frame)
        # Strings and zero are coerced into the pair's frame.
        object.__setattr__(self, "x", parse(self.x, self.frame))
        object.__setattr__(self, "y", parse(self.y, self.frame))

    def __str__(self) -> str:
        return f"{self.kind.value}({self.x}, {self.y})"

    @property
    def width(self) -> Measurement:
        return self.x

    @property
    def height(self) -> Measurement:
        return self.y

    def values(self) -> tuple[float, float]:
        """Bare canonical values, for handing to numeric code."""
        return (self.x.value, self.y.value)

    def plus(self, *args: Any) -> MeasurementPair:
        """Add a vector: one MeasurementPair/2-list, or two loose lengths."""
        delta = self._pairify(args)
        kind = self._result_kind(_PLUS_RESULTS, delta, "+")
        return MeasurementPair(self.x.plus(delta.x), self.y.plus(delta.y), kind, self.frame)

    def minus(self, *args: Any) -> MeasurementPair:
        """Subtract a point or vector: one MeasurementPair/2-list, or two loose lengths."""
        delta = self._pairify(args)
        kind = self._result_kind(_MINUS_RESULTS, delta, "-")
        return MeasurementPair(self.x.minus(delta.x), self.y.minus(delta.y), kind, self.frame)

    def times(self, factor: float) -> MeasurementPair:
        if not isinstance(factor, numbers.Real) or isinstance(factor, bool):
            raise TypeError(f"MeasurementPair.times(): found {factor!r} where number expected")
        return MeasurementPair(self.x.times(factor), self.y.times(factor), self.kind, self.frame)

    def divided_by(self, divisor: float) -> MeasurementPair:
        if not isinstance(divisor, numbers.Real) or isinstance(divisor, bool):
            raise TypeError(f"MeasurementPair.divided_by(): found {divisor!r} where number expected")
        return MeasurementPair(self.x.divided_by(divisor), self.y.divided_by(divisor), self.kind, self.frame)

    def length(self) -> Measurement:
        """Euclidean length, e.g. a sloped roof edge from its run and rise."""
        return Measurement(math.hypot(self.x.value, self.y.value), self.frame)

    def __add__(self, other: Any) -> MeasurementPair:
        return self.plus(other)

    def __sub__(self, other: Any) -> MeasurementPair:
        return self.minus(other)

    def __mul__(self, factor: Any) -> MeasurementPair:
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return self.times(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Any) -> MeasurementPair:
        if not isinstance(divisor, numbers.Real):
            return NotImplemented
        return self.divided_by(divisor)

    def _pairify(self, args: tuple) -> MeasurementPair:
        if len(args) == 1:
            arg = args[0]
            if isinstance(arg, MeasurementPair):
                if arg.frame is not self.frame:
                    raise TypeError(
                        f"Cannot combine a {self.frame.value} pair with a {arg.frame.value} pair"
                    )
                return arg
            if isinstance(arg, (list, tuple)) and len(arg) == 2:
                return MeasurementPair(arg[0], arg[1], PairKind.VECTOR, self.frame)
            raise TypeError(f"Found {arg!r} where MeasurementPair expected")
        if len(args) == 2:
            return MeasurementPair(args[0], args[1], PairKind.VECTOR, self.frame)
        raise TypeError(f"{len(args)} args found where 1 MeasurementPair or 2 Measurements needed")

    def _result_kind(self, table: dict, other: MeasurementPair, op: str) -> PairKind:
        try:
            return table[(self.kind, other.kind)]
        except KeyError:
            raise TypeError(f"Invalid operation: {self.kind.value} {op} {other.kind.value}") from None


def point(x: MeasurementLike, y: MeasurementLike, frame: Frame | None = None) -> MeasurementPair:
    return MeasurementPair(x, y, PairKind.POINT, frame)


def vector(dx: MeasurementLike, dy: MeasurementLike, frame: Frame | None = None) -> MeasurementPair:
    return MeasurementPair(dx, dy, PairKind.VECTOR, frame)


def size(width: MeasurementLike, height: MeasurementLike, frame: Frame | None = None) -> MeasurementPair:
    return MeasurementPair(width, height, PairKind.SIZE, frame)


def distance_between(p1: MeasurementPair, p2: MeasurementPair) -> Measurement:
    """Straight-line distance between two points."""
    return p2.minus(p1).length()

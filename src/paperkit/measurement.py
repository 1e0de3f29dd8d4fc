"""
Dimensioned lengths with reference-frame tagging.

A ``Measurement`` turns strings such as ``"3 ft 6 in"`` or ``"4 m 23 cm"``
into a single canonical value (meters) and keeps track of which coordinate
space the length belongs to:

- ``Frame.WORLD``: real-world sizes, e.g. the width of a door.
- ``Frame.PRINTED``: sizes of ink on the output page.

Mixing the two frames in arithmetic or comparisons raises ``TypeError``.
Bare numbers are dimensionless and may only scale a measurement, never be
added to one. The single exception is zero, which is accepted everywhere a
measurement is expected.

Accepted string forms include::

    "1 ft"        "1 ft 2 in"     "1ft2in"      "1' 2\\""
    "4 m 23 cm"   "4.56 feet"     "3 metres"    "-5 m"     "+3 cm"
"""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .constants import IRREGULAR_UNITS, SI_PREFIX_NAMES, SI_PREFIX_SYMBOLS
from .errors import ParseError


class Frame(Enum):
    """Reference frame a length belongs to."""

    WORLD = "world"
    PRINTED = "printed"


# =============================================================================
# TOKENIZER AND UNIT LOOKUP
# =============================================================================

_TOKEN_PATTERNS = (
    ("number", re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")),
    ("unit", re.compile(r"[^\W\d_]+|['\"]")),
    ("whitespace", re.compile(r"\s+")),
)

_LONG_METRIC = re.compile(r"^(?P<prefix>[a-z]*)met(?:er|re)s?$")


def _tokenize(text: str) -> list[tuple[str, str]]:
    """Split a measurement string into (kind, text) tokens."""
    tokens = []
    index = 0
    while index < len(text):
        for kind, pattern in _TOKEN_PATTERNS:
            match = pattern.match(text, index)
            if match:
                if kind != "whitespace":
                    tokens.append((kind, match.group()))
                index = match.end()
                break
        else:
            raise ParseError(
                f"Unexpected character {text[index]!r} at index {index} in {text!r}",
                details={"input": text, "index": index},
            )
    return tokens


def unit_factor(name: str) -> float:
    """
    Return the number of meters in one ``name``.

    Irregular names (imperial units, typographic points, astronomical
    distances, ...) are checked first. Otherwise a metric unit is recognized
    either by its short symbol (``km``, ``mm``, ``µm``, case sensitive) or by
    its long name (``kilometers``, ``millimetre``, case insensitive).

    Raises:
        ParseError: if the unit is not recognized.
    """
    lowered = name.lower()
    if lowered in IRREGULAR_UNITS:
        return IRREGULAR_UNITS[lowered]

    if name.endswith("m") and name[:-1] in SI_PREFIX_SYMBOLS:
        return 10.0 ** SI_PREFIX_SYMBOLS[name[:-1]]

    match = _LONG_METRIC.match(lowered)
    if match and match.group("prefix") in SI_PREFIX_NAMES:
        return 10.0 ** SI_PREFIX_NAMES[match.group("prefix")]

    raise ParseError(f"Invalid measurement unit {name!r}", details={"unit": name})


def _parse_string(text: str) -> float:
    tokens = _tokenize(text)
    if len(tokens) % 2 != 0:
        raise ParseError(f"{text!r} has an odd number of tokens", details={"input": text})

    value = 0.0
    for (num_kind, number), (unit_kind, unit) in zip(tokens[::2], tokens[1::2]):
        if num_kind != "number" or unit_kind != "unit":
            raise ParseError(
                f"Expected a number followed by a unit in {text!r}, "
                f"found {number!r} {unit!r}",
                details={"input": text},
            )
        value += float(number) * unit_factor(unit)
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


# =============================================================================
# MEASUREMENT
# =============================================================================


@dataclass(frozen=True)
class Measurement:
    """
    An immutable length in meters, tagged with its reference frame.

    Build one with :func:`parse` (or :func:`world` / :func:`printed`); the
    constructor takes an already-canonical value.
    """

    value: float
    frame: Frame = Frame.WORLD

    def __str__(self) -> str:
        return f"{self.value:g} m ({self.frame.value})"

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def in_units(self, unit: str) -> float:
        """Return the bare value of this length expressed in ``unit``."""
        return self.value / unit_factor(unit)

    def isclose(self, other: MeasurementLike, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        """Compare with another same-frame length within float tolerance."""
        other = self._coerce(other)
        return math.isclose(self.value, other.value, rel_tol=rel_tol, abs_tol=abs_tol)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus(self, addend: MeasurementLike) -> Measurement:
        addend = self._coerce(addend)
        return Measurement(self.value + addend.value, self.frame)

    def minus(self, subtrahend: MeasurementLike) -> Measurement:
        subtrahend = self._coerce(subtrahend)
        return Measurement(self.value - subtrahend.value, self.frame)

    def times(self, factor: float) -> Measurement:
        if not _is_number(factor):
            raise TypeError(f"Measurement.times() needs a number, found {factor!r}")
        return Measurement(self.value * factor, self.frame)

    def divided_by(self, divisor: float | Measurement) -> Measurement | float:
        """
        Divide by a number (giving a Measurement) or by another Measurement
        of the same frame (giving a dimensionless ratio).
        """
        if _is_number(divisor):
            if divisor == 0:
                raise ZeroDivisionError("Measurement divided by zero")
            return Measurement(self.value / divisor, self.frame)
        if isinstance(divisor, Measurement):
            self._check_frame(divisor)
            if divisor.value == 0:
                raise ZeroDivisionError("Measurement divided by a zero length")
            return self.value / divisor.value
        raise TypeError(f"Measurement.divided_by() needs a number or Measurement, found {divisor!r}")

    __add__ = plus
    __sub__ = minus

    def __radd__(self, other: Any) -> Measurement:
        # Lets sum() start from the zero literal.
        return self.plus(other)

    def __rsub__(self, other: Any) -> Measurement:
        return self._coerce(other).minus(self)

    def __mul__(self, factor: Any) -> Measurement:
        if not _is_number(factor):
            return NotImplemented
        return self.times(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Any) -> Measurement | float:
        if not (_is_number(divisor) or isinstance(divisor, Measurement)):
            return NotImplemented
        return self.divided_by(divisor)

    def __neg__(self) -> Measurement:
        return Measurement(-self.value, self.frame)

    def __abs__(self) -> Measurement:
        return Measurement(abs(self.value), self.frame)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check_frame(other)
        return self.value == other.value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check_frame(other)
        return self.value != other.value

    def __hash__(self) -> int:
        return hash((self.value, self.frame))

    def __lt__(self, other: Measurement) -> bool:
        return self.value < self._comparable(other).value

    def __le__(self, other: Measurement) -> bool:
        return self.value <= self._comparable(other).value

    def __gt__(self, other: Measurement) -> bool:
        return self.value > self._comparable(other).value

    def __ge__(self, other: Measurement) -> bool:
        return self.value >= self._comparable(other).value

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check_frame(self, other: Measurement) -> None:
        if other.frame is not self.frame:
            raise TypeError(
                f"Cannot combine a {self.frame.value} measurement "
                f"with a {other.frame.value} measurement"
            )

    def _coerce(self, other: MeasurementLike) -> Measurement:
        return parse(other, self.frame)

    def _comparable(self, other: Any) -> Measurement:
        if not isinstance(other, Measurement):
            raise TypeError(f"Cannot compare a Measurement with {other!r}")
        self._check_frame(other)
        return other


MeasurementLike = Union[Measurement, str, list, tuple, int, float]


def parse(spec: MeasurementLike, frame: Frame = Frame.WORLD) -> Measurement:
    """
    Build a Measurement from any accepted input.

    Args:
        spec: A unit string (``"3 m 46 cm"``), a ``[number, unit]`` pair,
            the zero literal (``0`` or ``"0"``), or an existing Measurement.
        frame: Frame to tag the result with. An existing Measurement must
            already belong to this frame.

    Returns:
        The parsed Measurement.

    Raises:
        ParseError: if a string or unit name is malformed.
        TypeError: for frame mismatches, non-zero bare numbers and other
            unsupported types.
    """
    if isinstance(spec, Measurement):
        if spec.frame is not frame:
            raise TypeError(
                f"Expected a {frame.value} measurement, found a {spec.frame.value} one"
            )
        return spec

    if _is_number(spec):
        if spec == 0:
            return Measurement(0.0, frame)
        raise TypeError(
            f"Bare number {spec!r} has no unit; use e.g. [{spec!r}, 'm'] or '{spec} m'"
        )

    if isinstance(spec, str):
        if spec.strip() == "0":
            return Measurement(0.0, frame)
        return Measurement(_parse_string(spec), frame)

    if isinstance(spec, (list, tuple)):
        if len(spec) != 2 or not _is_number(spec[0]) or not isinstance(spec[1], str):
            raise TypeError(f"Expected [number, unit_name], found {spec!r}")
        return Measurement(spec[0] * unit_factor(spec[1]), frame)

    raise TypeError(f"Found {spec!r} where a string or Measurement was expected")


def world(spec: MeasurementLike) -> Measurement:
    """Parse a real-world length."""
    return parse(spec, Frame.WORLD)


def printed(spec: MeasurementLike) -> Measurement:
    """Parse a length on the printed page."""
    return parse(spec, Frame.PRINTED)

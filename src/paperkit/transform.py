"""
2-D affine transformations in homogeneous coordinates.

Every transformation is a 3x3 matrix acting on column vectors ``[x, y, 1]``.
The builders in this module (resize, translate, rotate, reflect) always
produce a final row of ``[0, 0, 1]``.

Composition follows matrix multiplication: ``a.compose(b)`` (or ``a @ b``)
is the transformation that applies ``b`` first and then ``a``. This is how
the render pass chains a child's position inside its parent, the piece's
position on the page, and the master world-to-print transform::

    master.compose(translate(piece_x, piece_y)).compose(child_shift)
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .errors import ShapeError
from .measurement import Frame, MeasurementLike, parse
from .pair import MeasurementPair, PairKind

ROT90 = 90
ROT180 = 180
ROT270 = 270


class AffineTransformation:
    """
    An immutable 3x3 affine transformation matrix.

    Args:
        matrix: Three rows of three numbers (nested sequences or ndarray)

    Raises:
        ShapeError: if the matrix is not exactly 3x3
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Sequence[Sequence[float]] | np.ndarray):
        try:
            array = np.array(matrix, dtype=float)
        except (TypeError, ValueError) as e:
            raise ShapeError(f"AffineTransformation needs a 3x3 matrix of numbers: {e}") from e
        if array.shape != (3, 3):
            raise ShapeError(
                "AffineTransformation needs a 3x3 matrix",
                details={"shape": array.shape},
            )
        array.setflags(write=False)
        self._matrix = array

    def __repr__(self) -> str:
        return f"AffineTransformation({self._matrix.tolist()})"

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the underlying matrix."""
        return self._matrix

    def apply_to_point(self, pt: MeasurementPair, frame: Frame = Frame.PRINTED) -> MeasurementPair:
        """
        Map a point through this transformation.

        Args:
            pt: The point to map
            frame: Frame of the result. The render pipeline maps world
                geometry onto the page, so this defaults to PRINTED.

        Returns:
            New POINT pair in ``frame``
        """
        if not isinstance(pt, MeasurementPair):
            raise TypeError(f"apply_to_point() needs a MeasurementPair, found {pt!r}")
        x, y, _ = self._matrix @ np.array([pt.x.value, pt.y.value, 1.0])
        return MeasurementPair(
            parse([float(x), "m"], frame),
            parse([float(y), "m"], frame),
            PairKind.POINT,
            frame,
        )

    def compose(self, other: AffineTransformation) -> AffineTransformation:
        """Return the transformation that applies ``other`` first, then ``self``."""
        if not isinstance(other, AffineTransformation):
            raise TypeError("AffineTransformation.compose needs another AffineTransformation")
        return AffineTransformation(self._matrix @ other._matrix)

    def __matmul__(self, other: AffineTransformation) -> AffineTransformation:
        if not isinstance(other, AffineTransformation):
            return NotImplemented
        return self.compose(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineTransformation):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    def __hash__(self) -> int:
        return hash(self._matrix.tobytes())

    def allclose(self, other: AffineTransformation, atol: float = 1e-12) -> bool:
        """Elementwise comparison within tolerance."""
        return bool(np.allclose(self._matrix, other._matrix, atol=atol))

    @property
    def is_affine(self) -> bool:
        """True when the last row is exactly [0, 0, 1]."""
        return bool(np.array_equal(self._matrix[2], [0.0, 0.0, 1.0]))


# =============================================================================
# BUILDERS
# =============================================================================


def identity() -> AffineTransformation:
    return AffineTransformation(np.eye(3))


def resize(factor: float) -> AffineTransformation:
    """Uniform scaling about the origin."""
    return AffineTransformation([[factor, 0, 0], [0, factor, 0], [0, 0, 1]])


def translate(dx: MeasurementLike, dy: MeasurementLike, frame: Frame = Frame.WORLD) -> AffineTransformation:
    """Shift by (dx, dy); each may be a Measurement or anything parse() accepts."""
    dx = parse(dx, frame)
    dy = parse(dy, frame)
    return AffineTransformation([[1, 0, dx.value], [0, 1, dy.value], [0, 0, 1]])


def rotate(angle: int) -> AffineTransformation:
    """
    Counter-clockwise rotation about the origin by a quarter-turn multiple.

    Raises:
        ValueError: unless ``angle`` is 90, 180 or 270
    """
    if angle == ROT90:
        m = [[0, -1, 0], [1, 0, 0], [0, 0, 1]]
    elif angle == ROT180:
        m = [[-1, 0, 0], [0, -1, 0], [0, 0, 1]]
    elif angle == ROT270:
        m = [[0, 1, 0], [-1, 0, 0], [0, 0, 1]]
    else:
        raise ValueError(f"Invalid rotation {angle!r}; use 90, 180 or 270")
    return AffineTransformation(m)


def reflect_around_x_axis() -> AffineTransformation:
    """Flip the sign of Y."""
    return AffineTransformation([[1, 0, 0], [0, -1, 0], [0, 0, 1]])

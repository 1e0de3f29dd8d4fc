"""Tests for 3x3 affine transformations."""

from __future__ import annotations

import numpy as np
import pytest

from paperkit import (
    ROT90,
    ROT180,
    ROT270,
    AffineTransformation,
    Frame,
    ShapeError,
    identity,
    point,
    reflect_around_x_axis,
    resize,
    rotate,
    translate,
    vector,
)


def world_point(x: float, y: float):
    return point([x, "m"], [y, "m"])


def mapped_values(xform: AffineTransformation, x: float, y: float):
    return xform.apply_to_point(world_point(x, y), Frame.WORLD).values()


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    @pytest.mark.parametrize(
        "matrix",
        [
            [[1, 0, 0], [0, 1, 0]],
            [[1, 0], [0, 1], [0, 0]],
            [[1, 0, 0], [0, 1, 0], [0, 0, 1], [0, 0, 1]],
            [[1, 0, 0], [0, 1], [0, 0, 1]],
            [1, 2, 3],
            np.zeros((3, 3, 3)),
            [[1, 0, 0], [0, 1, 0], "abc"],
        ],
    )
    def test_non_3x3_raises_shape_error(self, matrix):
        with pytest.raises(ShapeError):
            AffineTransformation(matrix)

    def test_shape_error_reports_shape(self):
        with pytest.raises(ShapeError) as exc_info:
            AffineTransformation(np.zeros((3, 3, 3)))
        assert exc_info.value.details == {"shape": (3, 3, 3)}

    def test_shape_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            AffineTransformation([[1, 0], [0, 1]])

    def test_accepts_ndarray(self):
        assert AffineTransformation(np.eye(3)) == identity()

    def test_matrix_is_read_only(self):
        xform = identity()
        with pytest.raises(ValueError):
            xform.matrix[0, 0] = 2.0

    def test_source_matrix_is_copied(self):
        source = np.eye(3)
        xform = AffineTransformation(source)
        source[0, 2] = 5.0
        assert xform == identity()

    @pytest.mark.parametrize(
        "xform",
        [identity(), resize(2.5), translate("1 m", "2 m"), rotate(ROT90), rotate(ROT180),
         rotate(ROT270), reflect_around_x_axis()],
    )
    def test_builders_are_affine(self, xform):
        assert xform.is_affine


# =============================================================================
# APPLICATION
# =============================================================================


class TestApplyToPoint:
    def test_result_is_printed_by_default(self):
        result = identity().apply_to_point(world_point(1, 2))
        assert result.frame is Frame.PRINTED
        assert result.kind.value == "point"

    def test_requested_frame(self):
        assert identity().apply_to_point(world_point(1, 2), Frame.WORLD).frame is Frame.WORLD

    def test_rejects_non_pairs(self):
        with pytest.raises(TypeError):
            identity().apply_to_point((1, 2))

    def test_translate(self):
        assert mapped_values(translate("1 m", "-2 m"), 3, 5) == pytest.approx((4.0, 3.0))

    def test_translate_accepts_measurements(self):
        offset = vector("10 cm", "20 cm")
        xform = translate(offset.x, offset.y)
        assert mapped_values(xform, 0, 0) == pytest.approx((0.1, 0.2))

    def test_resize_round_trip(self):
        xform = resize(1 / 87.1).compose(resize(87.1))
        assert mapped_values(xform, 3, 5) == pytest.approx((3.0, 5.0))

    def test_reflect(self):
        assert mapped_values(reflect_around_x_axis(), 3, 5) == pytest.approx((3.0, -5.0))


class TestRotate:
    def test_quarter_turn(self):
        assert mapped_values(rotate(ROT90), 3, 5) == pytest.approx((-5.0, 3.0))

    def test_half_turn(self):
        assert mapped_values(rotate(ROT180), 3, 5) == pytest.approx((-3.0, -5.0))

    def test_three_quarter_turn(self):
        assert mapped_values(rotate(ROT270), 3, 5) == pytest.approx((5.0, -3.0))

    def test_four_quarter_turns_return_to_start(self):
        quarter = rotate(ROT90)
        full = quarter @ quarter @ quarter @ quarter
        assert full.allclose(identity())
        assert mapped_values(full, 3, 5) == pytest.approx((3.0, 5.0))

    def test_rotate_270_last_row(self):
        """The bottom row of every rotation must be [0, 0, 1]."""
        assert rotate(ROT270).matrix[2].tolist() == [0.0, 0.0, 1.0]
        assert mapped_values(rotate(ROT270).compose(translate("1 m", 0)), 0, 0) == pytest.approx((0.0, -1.0))

    def test_rotate_270_undoes_rotate_90(self):
        assert rotate(ROT270).compose(rotate(ROT90)).allclose(identity())

    @pytest.mark.parametrize("angle", [0, 45, 360, -90, "90"])
    def test_invalid_angle(self, angle):
        with pytest.raises(ValueError):
            rotate(angle)


# =============================================================================
# COMPOSITION
# =============================================================================


class TestCompose:
    def test_applies_right_operand_first(self):
        # Rotate then shift differs from shift then rotate.
        xform = translate("10 m", 0).compose(rotate(ROT90))
        assert mapped_values(xform, 1, 0) == pytest.approx((10.0, 1.0))

    def test_matches_matrix_product(self):
        a = translate("1 m", "2 m")
        b = rotate(ROT90)
        c = resize(3)
        composed = a.compose(b).compose(c)
        expected = a.matrix @ b.matrix @ c.matrix
        assert np.allclose(composed.matrix, expected)

    def test_associative_builders(self):
        a = translate("1 m", "2 m")
        b = rotate(ROT90)
        c = reflect_around_x_axis()
        assert a.compose(b).compose(c).allclose(a.compose(b.compose(c)))

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_associative_random(self, seed):
        rng = np.random.default_rng(seed)
        a, b, c = (AffineTransformation(rng.uniform(-10, 10, size=(3, 3))) for _ in range(3))
        assert a.compose(b).compose(c).allclose(a.compose(b.compose(c)))

    def test_matmul_operator(self):
        a = resize(2)
        b = translate("1 m", 0)
        assert (a @ b) == a.compose(b)

    def test_rejects_non_transformations(self):
        with pytest.raises(TypeError):
            identity().compose(np.eye(3))

    def test_equal_transformations_hash_equal(self):
        assert hash(resize(2)) == hash(resize(2.0))
        assert len({resize(2), resize(2.0), resize(3)}) == 2

import pytest

from wireframe.heightmap import Point
from wireframe.matrix import Mat4
from wireframe.trs import Trs
from wireframe.vector import Mode


def _assert_mat_close(a, b):
    for i in range(4):
        for j in range(4):
            assert a[i, j] == pytest.approx(b[i, j], abs=1e-9)


def test_initial_state_matches_matrix_constructors():
    trs = Trs()
    assert trs.identity == Mat4.identity()
    assert trs.to_origin == Mat4.center_to_origin()
    assert trs.to_center == Mat4.center_back()
    assert trs.isometric == Mat4.isometric()
    assert trs.trs == Mat4.identity()
    assert trs.vec.t.w == 1.0


def test_apply_before_compute_leaves_point_unchanged():
    trs = Trs()
    point = Point(x=3, y=4, z=2, cx=120, cy=-45, cz=7, cw=1)
    trs.apply(point)
    assert (point.cx, point.cy, point.cz, point.cw) == (120, -45, 7, 1)


def test_apply_uses_computed_not_original_coordinates():
    trs = Trs()
    point = Point(x=50, y=60, z=70, cx=0, cy=0, cz=0, cw=1)
    trs.apply(point)
    assert (point.cx, point.cy, point.cz) == (0, 0, 0)
    assert (point.x, point.y, point.z) == (50, 60, 70)


def test_scale_w_cell_grows_by_one_each_compute():
    trs = Trs()
    before = trs.s[3, 3]
    trs.compute()
    first = trs.s[3, 3]
    trs.compute()
    assert first - before == 1.0
    assert trs.s[3, 3] - first == 1.0


def test_translation_accumulates_on_diagonal():
    trs = Trs()
    trs.vec.configure([10, 0, 0], Mode.TRANSLATE)
    trs.compute()
    first = trs.t[0, 0]
    trs.compute()
    assert first == 11.0
    assert trs.t[0, 0] - first == 10.0
    assert trs.t[3, 3] == 1.0


def test_rotation_follows_vector_angle():
    trs = Trs()
    trs.vec.configure([0, 0, 90], Mode.ROTATE)
    trs.compute()
    _assert_mat_close(trs.r, Mat4.rotation_z(90))


def test_rotation_is_not_cumulative():
    trs = Trs()
    trs.vec.configure([30, 0, 0], Mode.ROTATE)
    trs.compute()
    first = trs.r
    trs.compute()
    _assert_mat_close(trs.r, first)


def test_trs_combines_components_in_order():
    trs = Trs()
    trs.vec.configure([0, 45, 0], Mode.ROTATE)
    trs.vec.configure([2, 0, 0], Mode.TRANSLATE)
    trs.compute()
    _assert_mat_close(trs.trs, trs.t @ trs.r @ trs.s)


def test_apply_rounds_halves_away_from_zero():
    trs = Trs(to_origin=Mat4.identity(), to_center=Mat4.identity())
    trs.trs = Mat4.scaling(0.5, 0.5, 0.5)
    point = Point(x=0, y=0, z=0, cx=5, cy=-5, cz=1, cw=1)
    trs.apply(point)
    assert (point.cx, point.cy, point.cz) == (3, -3, 1)
    assert point.cw == 1
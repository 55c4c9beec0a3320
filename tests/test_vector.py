import pytest

from wireframe.vector import Mode, TransformVector, Xyz


def test_new_vector_has_homogeneous_translation():
    v = TransformVector()
    assert v.t == Xyz(0.0, 0.0, 0.0, 1.0)
    assert v.r == Xyz()
    assert v.s == Xyz()


def test_translate_adds_to_t_only():
    v = TransformVector()
    v.configure((10, 0, 0), Mode.TRANSLATE)
    assert (v.t.x, v.t.y, v.t.z) == (10, 0, 0)
    assert v.t.w == 1.0
    assert v.r == Xyz()
    assert v.s == Xyz()


def test_rotate_adds_to_r_only():
    v = TransformVector()
    v.configure([5, -20, 3], Mode.ROTATE)
    assert (v.r.x, v.r.y, v.r.z) == (5, -20, 3)
    assert v.t == Xyz(w=1.0)


def test_scale_adds_to_s_only():
    v = TransformVector()
    v.configure((2, 3, 4), Mode.SCALE)
    assert (v.s.x, v.s.y, v.s.z) == (2, 3, 4)
    assert v.r == Xyz()


def test_configure_accumulates():
    v = TransformVector()
    for _ in range(91):
        v.configure((10, 0, 0), Mode.TRANSLATE)
    assert v.t.x == 910


def test_integer_mode_values_are_accepted():
    v = TransformVector()
    v.configure((1, 1, 1), int(Mode.SCALE))
    assert (v.s.x, v.s.y, v.s.z) == (1, 1, 1)


def test_unknown_mode_is_ignored():
    v = TransformVector()
    v.configure((7, 8, 9), 42)
    assert v == TransformVector()


def test_wrong_number_of_values_raises():
    v = TransformVector()
    with pytest.raises(ValueError):
        v.configure((1, 2), Mode.ROTATE)


def test_vectors_do_not_share_state():
    a = TransformVector()
    b = TransformVector()
    a.configure((1, 2, 3), Mode.ROTATE)
    assert b.r == Xyz()
import math

import pytest

from slotarena.vec2 import PI, Rect, Vec2, Vec2Int, deg2rad, rad2deg, rect_make


def test_add_then_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(7.0, 3.25)
    assert (a + b) - b == a


def test_double_negation():
    a = Vec2(3.0, -9.0)
    assert -(-a) == a
    assert a + (-a) == Vec2(0, 0)


def test_scalar_multiplication_matches_addition():
    a = Vec2(2.5, -1.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_componentwise_multiply_and_divide_round_trip():
    a = Vec2(3.0, 5.0)
    b = Vec2(2.0, 4.0)
    result = (a * b) / b
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)


def test_divide_by_vector_with_zero_component_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / Vec2(0, 2)


def test_divide_by_zero_scalar_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / 0


def test_length_of_three_four():
    assert Vec2(3, 4).length() == pytest.approx(5.0)


def test_length_squared_equals_self_dot():
    a = Vec2(-2.0, 6.5)
    assert a.length_squared() == pytest.approx(a.dot(a))


def test_normalized_has_unit_length_and_same_direction():
    a = Vec2(10.0, -4.0)
    n = a.normalized()
    assert n.length() == pytest.approx(1.0)
    assert a.cross(n) == pytest.approx(0.0, abs=1e-9)
    assert a.dot(n) > 0


def test_normalized_zero_vector_is_unchanged():
    zero = Vec2(0, 0)
    assert zero.normalized() == zero


def test_normalize_does_not_mutate():
    a = Vec2(5, 0)
    a.normalized()
    assert a.x == 5.0


def test_cross_is_antisymmetric():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.0, 0.5)
    assert a.cross(b) == pytest.approx(-b.cross(a))
    assert a.cross(a) == 0.0


def test_vec2_unpacks():
    x, y = Vec2(4, 9)
    assert (x, y) == (4.0, 9.0)


def test_vec2int_add_sub_mul():
    a = Vec2Int(3, -2)
    b = Vec2Int(1, 5)
    assert (a + b) - b == a
    assert a * 3 == a + a + a


def test_vec2int_ordering_is_lexicographic():
    points = [Vec2Int(2, 0), Vec2Int(1, 5), Vec2Int(1, 2)]
    assert sorted(points) == [Vec2Int(1, 2), Vec2Int(1, 5), Vec2Int(2, 0)]
    assert Vec2Int(1, 5) < Vec2Int(2, 0)
    assert Vec2Int(2, 0) > Vec2Int(1, 9)
    assert not Vec2Int(1, 1) < Vec2Int(1, 1)


def test_vec2int_length_and_products():
    a = Vec2Int(3, 4)
    assert a.length() == pytest.approx(5.0)
    assert a.length_squared() == a.dot(a)
    assert a.cross(a) == 0
    b = Vec2Int(-1, 7)
    assert a.cross(b) == -b.cross(a)


def test_vec2int_truncates_floats():
    v = Vec2Int(2.9, -2.9)
    assert (v.x, v.y) == (2, -2)


def test_angle_conversion_round_trip():
    for degree in (0.0, 45.0, -90.0, 270.0):
        assert rad2deg(deg2rad(degree)) == pytest.approx(degree)


def test_rad2deg_of_pi():
    assert rad2deg(PI) == pytest.approx(180.0)
    assert deg2rad(180.0) == pytest.approx(PI)
    assert PI == pytest.approx(math.pi, abs=1e-8)


def test_rect_make_is_centred_on_position():
    pos = Vec2(100, 40)
    size = Vec2(30, 10)
    rect = rect_make(pos, size)
    assert isinstance(rect, Rect)
    assert rect.right - rect.left == 30
    assert rect.bottom - rect.top == 10
    assert (rect.left + rect.right) / 2 == pos.x
    assert (rect.top + rect.bottom) / 2 == pos.y


def test_rect_make_truncates_toward_zero():
    rect = rect_make(Vec2(0.5, 0.5), Vec2(2, 2))
    assert rect == Rect(0, 0, 1, 1)
import pytest

from cslib.gtypes import (
    GDimension,
    GPoint,
    GRectangle,
    hash_code,
    real_to_string,
)


def test_point_defaults_to_origin():
    assert GPoint() == GPoint(0, 0)


def test_point_str():
    assert str(GPoint(1.5, 2)) == "(1.5, 2)"


def test_point_equality():
    assert GPoint(1, 2) == GPoint(1.0, 2.0)
    assert GPoint(1, 2) != GPoint(2, 1)


def test_dimension_str_and_fields():
    dim = GDimension(3, 4.25)
    assert str(dim) == "(3, 4.25)"
    assert dim.width == 3
    assert dim.height == 4.25


def test_rectangle_str():
    assert str(GRectangle(1, 2, 3.5, 4)) == "(1, 2, 3.5, 4)"


def test_real_to_string_uses_general_format():
    assert real_to_string(1e20) == "1e+20"
    assert real_to_string(7) == "7"


@pytest.mark.parametrize(
    "rect, empty",
    [
        (GRectangle(), True),
        (GRectangle(0, 0, 5, 0), True),
        (GRectangle(0, 0, -1, 5), True),
        (GRectangle(0, 0, 5, 5), False),
    ],
)
def test_rectangle_is_empty(rect, empty):
    assert rect.is_empty() is empty


def test_rectangle_contains_is_half_open():
    rect = GRectangle(10, 20, 5, 5)
    assert rect.contains(10, 20)
    assert rect.contains(14.9, 24.9)
    assert not rect.contains(15, 22)
    assert not rect.contains(12, 25)
    assert not rect.contains(9.9, 22)


def test_rectangle_contains_point():
    rect = GRectangle(0, 0, 2, 2)
    assert rect.contains_point(GPoint(1, 1))
    assert not rect.contains_point(GPoint(2, 1))


def test_hash_code_of_zero_point_is_zero():
    assert hash_code(GPoint()) == 0


def test_hash_code_is_nonnegative_and_bounded():
    for obj in (GPoint(-3.5, 1e300), GDimension(2, -7), GRectangle(1, 2, 3, 4)):
        value = hash_code(obj)
        assert 0 <= value <= 0x7FFFFFFF


def test_hash_code_is_symmetric_in_fields():
    assert hash_code(GPoint(1.25, 8)) == hash_code(GPoint(8, 1.25))
    assert hash_code(GDimension(3, 9)) == hash_code(GDimension(9, 3))


def test_hash_code_equal_objects_hash_equal():
    assert hash_code(GRectangle(1, 2, 3, 4)) == hash_code(GRectangle(1.0, 2.0, 3.0, 4.0))


def test_hash_code_point_and_dimension_agree_on_same_values():
    assert hash_code(GPoint(5, 6)) == hash_code(GDimension(5, 6))


def test_hash_code_rejects_other_types():
    with pytest.raises(TypeError):
        hash_code("not a shape")
import pytest

from pdfdraw.geometry import Position, Rotation, Size, points_to_operands


def test_rotation_operand_is_degrees():
    assert Rotation(90).to_operand() == 90
    assert Rotation().to_operand() == 0


def test_position_defaults_to_origin():
    assert Position() == Position(0.0, 0.0)


def test_position_add_sub_round_trip():
    a = Position(12.5, -3.0)
    b = Position(4.0, 8.0)
    assert (a + b) - b == a
    assert a - a == Position()


def test_position_add_rejects_other_types():
    with pytest.raises(TypeError):
        Position(1, 2) + 3


def test_invert_from_page_size_is_involution():
    page = Size(595.0, 842.0)
    p = Position(10.0, 30.0)
    inverted = p.invert_from_page_size(page)
    assert inverted.x == p.x
    assert inverted.y + p.y == page.height
    assert inverted.invert_from_page_size(page) == p


def test_position_to_operands():
    assert Position(3.0, 7.0).to_operands() == [3.0, 7.0]


def test_points_to_operands_flattens_in_order():
    points = [Position(1, 2), Position(3, 4)]
    assert points_to_operands(points) == [1, 2, 3, 4]
    assert points_to_operands([]) == []


def test_size_scale_round_trip():
    size = Size(10.0, 20.0)
    assert size.scale(2.0, 4.0).scale(0.5, 0.25) == size
    assert size.scale_width(2.0).height == size.height
    assert size.scale_height(2.0).width == size.width
    assert size.scale_width(2.0).scale_width(0.5) == size


def test_landscape_swaps_dimensions():
    size = Size(595.0, 842.0)
    flipped = size.landscape()
    assert flipped.width == size.height
    assert flipped.height == size.width
    assert flipped.landscape() == size


def test_top_left_point():
    size = Size(595.0, 842.0)
    assert size.top_left_point() == Position(0.0, size.height)


def test_size_add_sub_round_trip():
    a = Size(5.0, 6.0)
    b = Size(1.5, 2.5)
    assert (a + b) - b == a
    assert a - (b.width, b.height) == a - b


def test_size_in_place_add():
    size = Size(1.0, 2.0)
    other = Size(3.0, 4.0)
    total = size
    total += other
    assert total == size + other


def test_size_unpacks_to_tuple():
    width, height = Size(7.0, 9.0)
    assert (width, height) == (7.0, 9.0)


def test_size_sub_rejects_bad_operand():
    with pytest.raises(TypeError):
        Size(1, 2) - "x"
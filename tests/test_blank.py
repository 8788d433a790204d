from pdfdraw.blank import BlankSpace
from pdfdraw.geometry import Position, Size


def test_default_size_is_empty():
    assert BlankSpace().calculate_size() == Size()


def test_set_size_wins_over_min_size():
    space = BlankSpace(min_size=Size(1.0, 2.0), set_size=Size(30.0, 40.0))
    assert space.calculate_size() == Size(30.0, 40.0)


def test_min_size_used_without_set_size():
    space = BlankSpace(min_size=Size(1.0, 2.0), max_size=Size(50.0, 60.0))
    assert space.calculate_size() == Size(1.0, 2.0)


def test_effective_position_defaults_to_origin():
    assert BlankSpace().effective_position() == Position()


def test_effective_position_uses_set_position():
    space = BlankSpace()
    space.position = Position(12.0, 34.0)
    assert space.effective_position() == Position(12.0, 34.0)
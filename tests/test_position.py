from imagemods.position import Position


def test_default_is_origin():
    assert Position() == Position(0, 0)


def test_fields():
    position = Position(3, 4)
    assert (position.row, position.col) == (3, 4)


def test_offset_returns_new_position():
    start = Position(2, 5)
    moved = start.offset(1, -2)
    assert moved == Position(3, 3)
    assert start == Position(2, 5)


def test_offset_by_zero_is_identity():
    assert Position(9, 8).offset(0, 0) == Position(9, 8)
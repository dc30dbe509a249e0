import pytest

from babagrid.board import Board
from babagrid.enums import ObjectType


def _text(width, height, kinds):
    return f"{width} {height} " + " ".join(str(int(k)) for k in kinds)


E = ObjectType.ICON_EMPTY


def test_default_board_is_empty_cells():
    board = Board(2, 2)
    assert (board.width, board.height) == (2, 2)
    assert board.positions(E) == [(0, 0), (1, 0), (0, 1), (1, 1)]


def test_parse_reads_dimensions_and_cells():
    kinds = [ObjectType.BABA, ObjectType.IS, ObjectType.YOU, E, ObjectType.ICON_BABA, E]
    board = Board.parse(_text(3, 2, kinds))
    assert board.width == 3
    assert board.height == 2
    assert board.at(0, 0).types() == [ObjectType.BABA]
    assert board.at(2, 0).types() == [ObjectType.YOU]
    assert board.positions(ObjectType.ICON_BABA) == [(1, 1)]


def test_parse_ignores_trailing_values():
    board = Board.parse(_text(1, 1, [ObjectType.ROCK, ObjectType.WALL]))
    assert board.at(0, 0).types() == [ObjectType.ROCK]


def test_from_file(tmp_path):
    path = tmp_path / "level.txt"
    kinds = [ObjectType.ICON_ROCK, E, E, ObjectType.ICON_FLAG]
    path.write_text(_text(2, 2, kinds) + "\n", encoding="utf-8")
    board = Board.from_file(path)
    assert board.positions(ObjectType.ICON_FLAG) == [(1, 1)]
    assert board.positions(ObjectType.ICON_ROCK) == [(0, 0)]


@pytest.mark.parametrize(
    "text",
    ["", "3", "2 2 32 32 32", "1 1 999", "a b", "-1 2"],
)
def test_parse_rejects_bad_data(text):
    with pytest.raises(ValueError):
        Board.parse(text)


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        Board(2, 2, [E, E, E])


def test_at_out_of_range():
    board = Board(2, 2)
    with pytest.raises(IndexError):
        board.at(2, 0)
    with pytest.raises(IndexError):
        board.at(0, -1)


def test_interior_cell_stacks_objects():
    board = Board(3, 3)
    board.add_object(1, 1, ObjectType.ICON_ROCK)
    board.add_object(1, 1, ObjectType.ICON_ROCK)
    board.remove_object(1, 1, ObjectType.ICON_ROCK)
    assert board.at(1, 1).has_type(ObjectType.ICON_ROCK)
    board.remove_object(1, 1, ObjectType.ICON_ROCK)
    assert not board.at(1, 1).has_type(ObjectType.ICON_ROCK)


def test_boundary_cell_does_not_stack():
    board = Board(3, 3)
    board.add_object(0, 0, ObjectType.ICON_ROCK)
    board.add_object(0, 0, ObjectType.ICON_ROCK)
    board.remove_object(0, 0, ObjectType.ICON_ROCK)
    assert board.at(0, 0).types() == [E]


def test_removing_last_object_leaves_empty_marker():
    board = Board.parse(_text(1, 1, [ObjectType.ICON_BABA]))
    board.remove_object(0, 0, ObjectType.ICON_BABA)
    assert board.at(0, 0).types() == [E]


def test_reset_restores_initial_layout():
    board = Board.parse(_text(2, 1, [ObjectType.ICON_BABA, E]))
    board.add_object(1, 0, ObjectType.ICON_BABA)
    board.remove_object(0, 0, ObjectType.ICON_BABA)
    board.at(1, 0).is_rule = True
    assert board.positions(ObjectType.ICON_BABA) == [(1, 0)]
    board.reset()
    assert board.positions(ObjectType.ICON_BABA) == [(0, 0)]
    assert board.at(1, 0).is_rule is False


def test_reset_twice_is_independent_of_play():
    board = Board.parse(_text(2, 1, [ObjectType.ICON_BABA, E]))
    board.reset()
    board.remove_object(0, 0, ObjectType.ICON_BABA)
    board.reset()
    assert board.at(0, 0).types() == [ObjectType.ICON_BABA]


def test_positions_row_major_order():
    kinds = [ObjectType.ICON_WALL] * 6
    board = Board.parse(_text(3, 2, kinds))
    positions = board.positions(ObjectType.ICON_WALL)
    assert positions == sorted(positions, key=lambda p: (p[1], p[0]))
    assert len(positions) == board.width * board.height
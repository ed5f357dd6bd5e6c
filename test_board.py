"""
Tests for the board model.
"""
import numpy as np

from src.game import Board

EMPTY_ROWS = ["........"] * 8


def test_initial_board():
    """Test the initial board setup."""
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8), "Board should be 8x8"
    # (x, y) coordinates
    assert board.get(3, 3) == Board.WHITE
    assert board.get(4, 4) == Board.WHITE
    assert board.get(4, 3) == Board.BLACK
    assert board.get(3, 4) == Board.BLACK
    assert np.sum(state == Board.EMPTY) == 60, "Should have 60 empty squares initially"
    assert board.get_score() == (2, 2)
    assert board.total_stones() == 4
    assert board.empty_count() == 60


def test_board_is_immutable():
    board = Board()
    try:
        board.cells[0, 0] = Board.BLACK
    except ValueError:
        pass
    else:
        raise AssertionError("Board cells should be read-only")
    assert board.get(0, 0) == Board.EMPTY


def test_copy_is_independent():
    """Changing a copy's state never touches the source."""
    board = Board()
    clone = board.copy()
    assert clone == board
    assert clone.cells is not board.cells

    state = clone.get_board_state()
    state[0, 0] = Board.BLACK
    assert board.get(0, 0) == Board.EMPTY
    assert clone.get(0, 0) == Board.EMPTY
    assert Board(state) != board


def test_from_rows():
    rows = list(EMPTY_ROWS)
    rows[0] = "B......."
    rows[7] = ". . . . . . . W"
    board = Board.from_rows(rows)
    assert board.get(0, 0) == Board.BLACK
    assert board.get(7, 7) == Board.WHITE
    assert board.get_score() == (1, 1)

    start = Board.from_rows([
        "........",
        "........",
        "........",
        "...WB...",
        "...BW...",
        "........",
        "........",
        "........",
    ])
    assert start == Board()
    assert hash(start) == hash(Board())


def test_invalid_boards_rejected():
    for bad in (np.zeros((7, 8)), np.full((8, 8), 3)):
        try:
            Board(bad)
        except ValueError:
            continue
        raise AssertionError(f"Board should reject {bad.shape} grid")

    try:
        Board.from_rows(["X......."] + EMPTY_ROWS[1:])
    except ValueError:
        pass
    else:
        raise AssertionError("Unknown symbols should be rejected")


def test_fractional_cells_rejected():
    grid = Board().get_board_state().astype(float)
    grid[0, 0] = 1.7
    try:
        Board(grid)
    except ValueError:
        pass
    else:
        raise AssertionError("Non-integer cells should be rejected, not truncated")

    # Whole-valued floats are still cell values
    assert Board(Board().get_board_state().astype(float)) == Board()


def test_helpers():
    assert Board.opponent(Board.BLACK) == Board.WHITE
    assert Board.opponent(Board.WHITE) == Board.BLACK
    assert Board.is_on_board(0, 0) and Board.is_on_board(7, 7)
    assert not Board.is_on_board(-1, 0)
    assert not Board.is_on_board(0, 8)


def test_str():
    text = str(Board())
    lines = text.splitlines()
    assert lines[0] == "  A B C D E F G H"
    assert lines[4] == "4 . . . W B . . ."
    assert lines[5] == "5 . . . B W . . ."


if __name__ == "__main__":
    test_initial_board()
    test_board_is_immutable()
    test_copy_is_independent()
    test_from_rows()
    test_invalid_boards_rejected()
    test_fractional_cells_rejected()
    test_helpers()
    test_str()
    print("All board tests passed!")

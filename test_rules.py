"""
Tests for legal move generation and move application.
"""
import random

from src.game import (
    DIRECTIONS,
    Board,
    apply_move,
    get_flips,
    get_valid_moves,
    has_any_valid_move,
    is_valid_move,
)

EMPTY_ROW = "........"


def test_directions():
    assert len(DIRECTIONS) == 8
    assert len(set(DIRECTIONS)) == 8
    assert (0, 0) not in DIRECTIONS
    assert all(abs(dx) <= 1 and abs(dy) <= 1 for dx, dy in DIRECTIONS)


def test_valid_moves_initial():
    """Black's valid moves in the initial position, in row-major order."""
    board = Board()
    assert get_valid_moves(board, Board.BLACK) == [(3, 2), (2, 3), (5, 4), (4, 5)]
    assert get_valid_moves(board, Board.WHITE) == [(4, 2), (5, 3), (2, 4), (3, 5)]
    assert is_valid_move(board, 2, 3, Board.BLACK)
    assert not is_valid_move(board, 3, 3, Board.BLACK), "Occupied cell"
    assert not is_valid_move(board, 0, 0, Board.BLACK)
    assert not is_valid_move(board, -1, 3, Board.BLACK)


def test_opening_move_flips_one():
    """Black at C4 flips exactly one white stone."""
    board = Board()
    new_board, flipped = apply_move(board, 2, 3, Board.BLACK)

    assert flipped == [(3, 3)]
    assert new_board.get(2, 3) == Board.BLACK
    assert new_board.get(3, 3) == Board.BLACK
    assert new_board.get_score() == (4, 1)
    # The source board is untouched
    assert board == Board()


def test_multi_direction_capture():
    board = Board.from_rows([
        EMPTY_ROW,
        "...B....",
        "...W....",
        "....WB..",
        "..W.W...",
        ".....B..",
        EMPTY_ROW,
        EMPTY_ROW,
    ])
    assert is_valid_move(board, 3, 3, Board.BLACK)
    assert set(get_flips(board, 3, 3, Board.BLACK)) == {(3, 2), (4, 3), (4, 4)}

    new_board, flipped = apply_move(board, 3, 3, Board.BLACK)
    assert set(flipped) == {(3, 2), (4, 3), (4, 4)}
    assert new_board.get_score() == (7, 1)
    # No closing stone behind (2, 4), so it stays white
    assert new_board.get(2, 4) == Board.WHITE


def test_run_to_the_edge_is_not_a_capture():
    board = Board.from_rows(["WWWWWWW."] + [EMPTY_ROW] * 7)
    assert not is_valid_move(board, 7, 0, Board.BLACK)
    assert not has_any_valid_move(board, Board.BLACK)

    board = Board.from_rows(["BWWWWWW."] + [EMPTY_ROW] * 7)
    assert get_valid_moves(board, Board.BLACK) == [(7, 0)]
    new_board, flipped = apply_move(board, 7, 0, Board.BLACK)
    assert len(flipped) == 6
    assert new_board.get_score() == (8, 0)


def test_empty_cell_breaks_run():
    board = Board.from_rows(["BW.W...."] + [EMPTY_ROW] * 7)
    assert get_flips(board, 4, 0, Board.BLACK) == []
    assert not is_valid_move(board, 4, 0, Board.BLACK)
    assert is_valid_move(board, 2, 0, Board.BLACK)
    assert get_flips(board, 2, 0, Board.BLACK) == [(1, 0)]


def test_apply_move_bounds():
    board = Board()
    for x, y in ((3, 3), (-1, 0), (8, 2)):
        try:
            apply_move(board, x, y, Board.BLACK)
        except ValueError:
            continue
        raise AssertionError(f"apply_move should reject ({x}, {y})")


def _on_line(origin, cell):
    dx, dy = cell[0] - origin[0], cell[1] - origin[1]
    return dx == 0 or dy == 0 or abs(dx) == abs(dy)


def test_random_playouts_keep_invariants():
    """Random games from the start respect the move and capture invariants and terminate."""
    rng = random.Random(1234)
    for _ in range(20):
        board = Board()
        player = Board.BLACK
        placements = 0
        passes_in_a_row = 0

        while passes_in_a_row < 2:
            moves = get_valid_moves(board, player)
            assert len(moves) == len(set(moves)), "No duplicate moves"
            for x, y in moves:
                assert board.get(x, y) == Board.EMPTY
                assert get_flips(board, x, y, player), "Every legal move flips something"

            if not moves:
                passes_in_a_row += 1
                player = Board.opponent(player)
                continue
            passes_in_a_row = 0

            x, y = rng.choice(moves)
            before = board
            board, flipped = apply_move(before, x, y, player)
            placements += 1

            assert board.total_stones() == before.total_stones() + 1
            assert set(flipped) == set(get_flips(before, x, y, player))
            for fx, fy in flipped:
                assert before.get(fx, fy) == Board.opponent(player)
                assert board.get(fx, fy) == player
                assert _on_line((x, y), (fx, fy))
            changed = {(cx, cy) for cy in range(8) for cx in range(8)
                       if before.get(cx, cy) != board.get(cx, cy)}
            assert changed == set(flipped) | {(x, y)}

            player = Board.opponent(player)
            assert placements <= 60

        assert board.total_stones() == 4 + placements


if __name__ == "__main__":
    test_directions()
    test_valid_moves_initial()
    test_opening_move_flips_one()
    test_multi_direction_capture()
    test_run_to_the_edge_is_not_a_capture()
    test_empty_cell_breaks_run()
    test_apply_move_bounds()
    test_random_playouts_keep_invariants()
    print("All rule tests passed!")

"""
Move rules for Reversi: legal move generation and move application.
"""
from typing import List, Tuple

from .board import Board

# Directions: E, S, W, N, SE, NW, SW, NE as (dx, dy)
DIRECTIONS = [
    (1, 0),
    (0, 1),
    (-1, 0),
    (0, -1),
    (1, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
]

Move = Tuple[int, int]


def _run_to_flip(grid: List[List[int]], x: int, y: int, dx: int, dy: int,
                 player: int) -> List[Move]:
    """
    Opponent stones flipped in one direction by a placement at (x, y).

    Walks from the neighbour of (x, y) over the opponent's stones; the run is
    returned only if it is non-empty and ends on one of player's stones.
    """
    opponent = Board.opponent(player)
    run = []
    nx, ny = x + dx, y + dy
    while Board.is_on_board(nx, ny) and grid[ny][nx] == opponent:
        run.append((nx, ny))
        nx += dx
        ny += dy
    if run and Board.is_on_board(nx, ny) and grid[ny][nx] == player:
        return run
    return []


def get_valid_moves(board: Board, player: int) -> List[Move]:
    """
    Get all valid moves for the given player.

    Args:
        board: Board to inspect
        player: Board.BLACK or Board.WHITE

    Returns:
        List of (x, y) tuples in row-major scan order (y, then x)
    """
    grid = board.rows()
    moves = []
    for y in range(Board.SIZE):
        for x in range(Board.SIZE):
            if grid[y][x] != Board.EMPTY:
                continue
            for dx, dy in DIRECTIONS:
                if _run_to_flip(grid, x, y, dx, dy, player):
                    moves.append((x, y))
                    break  # one direction is enough
    return moves


def is_valid_move(board: Board, x: int, y: int, player: int) -> bool:
    """Check if player may place a stone at (x, y)."""
    if not Board.is_on_board(x, y) or board.get(x, y) != Board.EMPTY:
        return False
    grid = board.rows()
    return any(_run_to_flip(grid, x, y, dx, dy, player) for dx, dy in DIRECTIONS)


def has_any_valid_move(board: Board, player: int) -> bool:
    """Check if the player has any valid moves."""
    return len(get_valid_moves(board, player)) > 0


def get_flips(board: Board, x: int, y: int, player: int) -> List[Move]:
    """
    Get the stones that a placement at (x, y) would flip.

    Every direction is read from the board as it is before the move.
    """
    grid = board.rows()
    flipped = []
    for dx, dy in DIRECTIONS:
        flipped.extend(_run_to_flip(grid, x, y, dx, dy, player))
    return flipped


def apply_move(board: Board, x: int, y: int, player: int) -> Tuple[Board, List[Move]]:
    """
    Place a stone for player at (x, y) and flip the captured stones.

    Legality is the caller's responsibility; only the bounds and the
    emptiness of the target cell are checked here.

    Args:
        board: Board before the move (left untouched)
        x: Column of the move (0-based)
        y: Row of the move (0-based)
        player: The player making the move

    Returns:
        Tuple of (new_board, flipped) where flipped lists the (x, y) of every
        stone turned over by the move
    """
    if not Board.is_on_board(x, y):
        raise ValueError(f"Move ({x}, {y}) is off the board")
    if board.get(x, y) != Board.EMPTY:
        raise ValueError(f"Cell ({x}, {y}) is already occupied")

    flipped = get_flips(board, x, y, player)

    grid = board.get_board_state()
    grid[y, x] = player
    for fx, fy in flipped:
        grid[fy, fx] = player

    return Board(grid), flipped

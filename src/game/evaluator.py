"""
Static positional evaluation used as the leaf value of the search.
"""
import numpy as np

from .board import Board

# Corners are worth most, the squares next to them are traps,
# edges are mildly good and the interior is close to neutral.
POSITION_WEIGHTS = np.array([
    [100, -20, 10,  5,  5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [ 10,  -2, -1, -1, -1, -1,  -2,  10],
    [  5,  -2, -1, -1, -1, -1,  -2,   5],
    [  5,  -2, -1, -1, -1, -1,  -2,   5],
    [ 10,  -2, -1, -1, -1, -1,  -2,  10],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [100, -20, 10,  5,  5, 10, -20, 100],
], dtype=np.int32)
POSITION_WEIGHTS.flags.writeable = False


def evaluate_board(board: Board, player: int) -> int:
    """
    Score the board from player's point of view.

    Args:
        board: Board to score
        player: Board.BLACK or Board.WHITE

    Returns:
        Sum of the weights under player's stones minus the sum under the
        opponent's stones
    """
    cells = board.cells
    own = POSITION_WEIGHTS[cells == player].sum()
    theirs = POSITION_WEIGHTS[cells == Board.opponent(player)].sum()
    return int(own - theirs)

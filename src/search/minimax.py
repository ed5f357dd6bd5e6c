"""
Minimax search with alpha-beta pruning for Reversi.
"""
import math
from typing import Tuple

from ..game.board import Board
from ..game.evaluator import evaluate_board
from ..game.rules import apply_move, get_valid_moves

# Returned when the side to move has no legal placement
NO_MOVE = (-1, -1)


def minimax(board: Board, depth: int, maximizing: bool, player: int,
            alpha: float = -math.inf, beta: float = math.inf) -> Tuple[int, int, float]:
    """
    Depth-bounded minimax with alpha-beta pruning.

    Leaves (depth 0, or no legal move for ``player``) are scored with
    ``evaluate_board(board, player)`` for the player to move at that leaf.
    A side without moves is scored as a leaf; the search never plays
    through a pass.

    Args:
        board: Position to search
        depth: Remaining plies
        maximizing: True if this node maximizes
        player: Player to move at this node
        alpha: Best score the maximizer can guarantee so far
        beta: Best score the minimizer can guarantee so far

    Returns:
        Tuple of (x, y, score); (x, y) is NO_MOVE at leaves
    """
    valid_moves = get_valid_moves(board, player)
    if depth == 0 or not valid_moves:
        return NO_MOVE[0], NO_MOVE[1], evaluate_board(board, player)

    best_move = NO_MOVE
    best_score = -math.inf if maximizing else math.inf
    next_player = Board.opponent(player)

    for x, y in valid_moves:
        child, _ = apply_move(board, x, y, player)
        _, _, score = minimax(child, depth - 1, not maximizing, next_player, alpha, beta)

        if maximizing:
            if score > best_score:
                best_score = score
                best_move = (x, y)
            alpha = max(alpha, best_score)
        else:
            if score < best_score:
                best_score = score
                best_move = (x, y)
            beta = min(beta, best_score)

        if beta <= alpha:
            break

    return best_move[0], best_move[1], best_score


def best_move(board: Board, depth: int, player: int) -> Tuple[int, int]:
    """
    Choose a move for player.

    Args:
        board: Current position
        depth: Search depth (1-15 in practice; not checked here)
        player: Player to move

    Returns:
        (x, y) of the chosen move, or NO_MOVE if player has none
    """
    x, y, _ = minimax(board, depth, True, player, -math.inf, math.inf)
    return x, y

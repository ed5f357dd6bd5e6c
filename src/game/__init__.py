"""
Reversi game module.
This package contains the board model, the move rules and the evaluator.
"""

from .board import Board
from .evaluator import POSITION_WEIGHTS, evaluate_board
from .rules import (
    DIRECTIONS,
    apply_move,
    get_flips,
    get_valid_moves,
    has_any_valid_move,
    is_valid_move,
)

__all__ = [
    'Board', 'POSITION_WEIGHTS', 'evaluate_board', 'DIRECTIONS', 'apply_move',
    'get_flips', 'get_valid_moves', 'has_any_valid_move', 'is_valid_move',
]

"""
Computer players built on the search engine.
"""
import logging
import random
from typing import Optional, Tuple

from .minimax import NO_MOVE, best_move

logger = logging.getLogger(__name__)


class SearchAgent:
    """Plays the alpha-beta minimax move at a fixed depth."""

    def __init__(self, depth: int, name: Optional[str] = None):
        """
        Initialize the agent.

        Args:
            depth: Search depth in plies
            name: Identifier used in logs and tournaments (default: ``depth-<n>``)
        """
        self.depth = depth
        self.name = name or f"depth-{depth}"

    def get_move(self, game) -> Tuple[int, int]:
        """Get the next move for the current game state, or NO_MOVE."""
        board = game.board
        player = game.get_current_player()
        move = best_move(board, self.depth, player)
        logger.debug("%s chose %s", self.name, move)
        return move


class RandomAgent:
    """Baseline that picks a legal move uniformly at random."""

    def __init__(self, seed: Optional[int] = None, name: str = "random"):
        self.name = name
        self.rng = random.Random(seed)

    def get_move(self, game) -> Tuple[int, int]:
        valid_moves = game.get_valid_moves()
        return self.rng.choice(valid_moves) if valid_moves else NO_MOVE

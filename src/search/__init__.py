"""
Game-tree search for Reversi.
"""
from .minimax import NO_MOVE, best_move, minimax
from .agents import RandomAgent, SearchAgent

__all__ = ['NO_MOVE', 'best_move', 'minimax', 'RandomAgent', 'SearchAgent']

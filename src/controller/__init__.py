"""
Turn control for Reversi: immutable game state, pure transitions and the game record.
"""
from .state import GameResult, GameSettings, GameState, MoveRecord
from .records import KifuEntry, format_coordinate, move_table, parse_coordinate
from .game import ReversiGame

__all__ = [
    'GameResult', 'GameSettings', 'GameState', 'MoveRecord',
    'KifuEntry', 'format_coordinate', 'move_table', 'parse_coordinate',
    'ReversiGame',
]

"""
Immutable game state: settings, move records and the history cursor.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..config import AI, HUMAN, Config
from ..game.board import Board

Move = Tuple[int, int]


class GameResult(Enum):
    """Outcome of a finished game."""
    BLACK_WINS = "Black wins"
    WHITE_WINS = "White wins"
    DRAW = "Draw"

    @property
    def winner(self) -> int:
        """Board.BLACK, Board.WHITE, or 0 for a draw."""
        if self is GameResult.BLACK_WINS:
            return Board.BLACK
        if self is GameResult.WHITE_WINS:
            return Board.WHITE
        return 0

    @classmethod
    def from_counts(cls, black: int, white: int) -> 'GameResult':
        if black > white:
            return cls.BLACK_WINS
        if white > black:
            return cls.WHITE_WINS
        return cls.DRAW


@dataclass(frozen=True)
class GameSettings:
    """Seat controllers and search depth for one game."""
    black: str = HUMAN
    white: str = AI
    ai_depth: int = 3
    max_moves: int = 60

    @classmethod
    def from_config(cls, config: Config) -> 'GameSettings':
        config.validate()
        return cls(
            black=config.players.black,
            white=config.players.white,
            ai_depth=config.players.ai_depth,
            max_moves=config.game.max_moves,
        )

    def controller_for(self, player: int) -> str:
        return self.black if player == Board.BLACK else self.white

    def is_ai(self, player: int) -> bool:
        return self.controller_for(player) == AI

    def is_human(self, player: int) -> bool:
        return self.controller_for(player) == HUMAN

    @property
    def ai_vs_ai(self) -> bool:
        return self.black == AI and self.white == AI


@dataclass(frozen=True)
class MoveRecord:
    """
    One entry of the game history.

    ``player`` is the side to move *after* this record; ``move_pos`` is the
    placement that produced ``board``, or None for a pass (and for the
    initial position).
    """
    board: Board
    player: int
    move_pos: Optional[Move] = None
    is_ai_move: bool = False

    @property
    def is_pass(self) -> bool:
        return self.move_pos is None


def initial_record() -> MoveRecord:
    return MoveRecord(board=Board(), player=Board.BLACK)


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a whole game.

    ``history[cursor]`` is the position on display; records after the cursor
    are kept for redo until a new move truncates them.
    """
    history: Tuple[MoveRecord, ...]
    cursor: int
    settings: GameSettings
    result: Optional[GameResult] = None
    ai_in_flight: bool = False
    pending_move: Optional[Move] = None
    last_flipped: Tuple[Move, ...] = ()

    @property
    def current(self) -> MoveRecord:
        return self.history[self.cursor]

    @property
    def board(self) -> Board:
        return self.current.board

    @property
    def current_player(self) -> int:
        return self.current.player

    @property
    def at_latest(self) -> bool:
        """True when the cursor sits on the last history record."""
        return self.cursor == len(self.history) - 1

    @property
    def is_over(self) -> bool:
        return self.result is not None

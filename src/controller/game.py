"""
Reversi game module.
Stateful wrapper around the pure turn controller, for front ends and the arena.
"""
from typing import List, Optional, Tuple

from ..config import Config
from ..game.board import Board
from . import controller
from .records import KifuEntry, move_table, player_name
from .state import GameSettings, GameState, MoveRecord


class ReversiGame:
    """
    Main game class for Reversi that holds the current GameState.

    Each method replaces ``self.state`` with the result of the matching
    controller function.
    """

    def __init__(self, settings: Optional[GameSettings] = None):
        """
        Initialize a new Reversi game.

        Args:
            settings: Seat controllers and search depth (default: human Black vs AI White)
        """
        self.state = controller.new_game(settings)

    @classmethod
    def from_config(cls, config: Config) -> 'ReversiGame':
        return cls(GameSettings.from_config(config))

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def settings(self) -> GameSettings:
        return self.state.settings

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.state = controller.reset(self.state)

    def configure(self, black: Optional[str] = None, white: Optional[str] = None,
                  depth: Optional[int] = None) -> None:
        self.state = controller.configure(self.state, black=black, white=white, depth=depth)

    def _update(self, new_state: GameState) -> bool:
        changed = new_state is not self.state
        self.state = new_state
        return changed

    def make_move(self, x: int, y: int) -> bool:
        """
        Play a human move.

        Args:
            x: Column of the move (0-based)
            y: Row of the move (0-based)

        Returns:
            bool: True if the move was legal and made, False otherwise
        """
        return self._update(controller.play_move(self.state, x, y))

    def make_agent_move(self, x: int, y: int) -> bool:
        """Play a move chosen by an outside agent for a computer seat."""
        return self._update(controller.submit_agent_move(self.state, x, y))

    def step(self) -> bool:
        """Run one controller transition; True if anything happened."""
        return self._update(controller.step(self.state))

    def advance(self) -> None:
        """Let passes and computer moves play out until a human must move."""
        self.state = controller.advance(self.state)

    def undo(self) -> bool:
        return self._update(controller.undo(self.state))

    def redo(self) -> bool:
        return self._update(controller.redo(self.state))

    def hint(self) -> Optional[Tuple[int, int]]:
        return controller.hint(self.state)

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (x, y) tuples representing valid moves
        """
        return controller.valid_moves(self.state)

    def get_current_player(self) -> int:
        return self.state.current_player

    def is_game_over(self) -> bool:
        return self.state.is_over

    def get_winner(self) -> Optional[int]:
        """
        Get the winner of the game.

        Returns:
            int: Board.BLACK, Board.WHITE, or 0 for draw, None if game not over
        """
        return self.state.result.winner if self.state.result is not None else None

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return controller.score(self.state)

    def get_move_history(self) -> List[MoveRecord]:
        return list(self.state.history)

    def get_move_table(self) -> List[KifuEntry]:
        return move_table(self.state)

    def get_last_flipped(self) -> Tuple[Tuple[int, int], ...]:
        return self.state.last_flipped

    def turn_message(self) -> str:
        return controller.turn_message(self.state)

    def copy(self) -> 'ReversiGame':
        new_game = ReversiGame(self.state.settings)
        new_game.state = self.state
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [str(self.board)]
        if self.state.is_over:
            lines.append(f"Game over! {controller.result_message(self.state)}")
        else:
            lines.append(f"Current player: {player_name(self.state.current_player)}")
        lines.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(lines)

"""
Turn controller for Reversi.

Every function takes a GameState and returns a new one; nothing here keeps
state between calls. A function that has nothing to do returns the state it
was given, so callers can detect a no-op with ``new is old``.
"""
import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from ..game.board import Board
from ..game.rules import apply_move, get_valid_moves
from ..search.minimax import NO_MOVE, best_move
from .records import player_name
from .state import GameResult, GameSettings, GameState, Move, MoveRecord, initial_record

logger = logging.getLogger(__name__)


def new_game(settings: Optional[GameSettings] = None) -> GameState:
    """Start a game from the standard position with Black to move."""
    return GameState(
        history=(initial_record(),),
        cursor=0,
        settings=settings or GameSettings(),
    )


def reset(state: GameState) -> GameState:
    """Start over, keeping the seat settings."""
    return new_game(state.settings)


def configure(state: GameState, black: Optional[str] = None, white: Optional[str] = None,
              depth: Optional[int] = None) -> GameState:
    """
    Change seat controllers or the search depth.

    The depth is not range-checked here; see ``config.check_depth``.
    """
    if state.ai_in_flight:
        return state
    settings = state.settings
    settings = replace(
        settings,
        black=settings.black if black is None else black,
        white=settings.white if white is None else white,
        ai_depth=settings.ai_depth if depth is None else depth,
    )
    return replace(state, settings=settings)


def check_end(state: GameState) -> Optional[GameResult]:
    """
    Decide whether the game on display has ended.

    The game ends when the board is full, a player has no stones, neither
    player can move, or the history has reached ``settings.max_moves``
    plies. The winner is decided by stone count.
    """
    board = state.board
    black, white = board.get_score()
    player = state.current_player

    if (black + white == Board.BOARD_SIZE
            or black == 0
            or white == 0
            or (not get_valid_moves(board, player)
                and not get_valid_moves(board, Board.opponent(player)))
            or state.cursor >= state.settings.max_moves):
        return GameResult.from_counts(black, white)
    return None


def _append(state: GameState, record: MoveRecord, flipped: List[Move]) -> GameState:
    """Drop any redo records, append record and re-check the end conditions."""
    history = state.history[:state.cursor + 1] + (record,)
    new_state = replace(
        state,
        history=history,
        cursor=len(history) - 1,
        result=None,
        ai_in_flight=False,
        pending_move=None,
        last_flipped=tuple(flipped),
    )
    result = check_end(new_state)
    if result is not None:
        black, white = record.board.get_score()
        logger.info("Game over after %d plies: %s (%d-%d)", new_state.cursor, result.value, black, white)
        new_state = replace(new_state, result=result)
    return new_state


def _pass(state: GameState) -> GameState:
    player = state.current_player
    logger.debug("%s has no legal move and passes", player_name(player))
    record = MoveRecord(
        board=state.board,
        player=Board.opponent(player),
        move_pos=None,
        is_ai_move=state.settings.is_ai(player),
    )
    return _append(state, record, [])


def step(state: GameState) -> GameState:
    """
    Run one transition of the turn state machine.

    In order: finish the game if an end condition holds, pass if the side
    to move has no legal move, play the agent's move if the side to move is
    computer-controlled. Human turns, finished games, positions behind the
    end of the history and in-flight agent moves are left alone.
    """
    if state.is_over or not state.at_latest or state.ai_in_flight:
        return state

    result = check_end(state)
    if result is not None:
        logger.info("Game over: %s", result.value)
        return replace(state, result=result)

    if not get_valid_moves(state.board, state.current_player):
        return _pass(state)

    if state.settings.is_ai(state.current_player):
        return commit_agent_move(request_agent_move(state))

    return state


def advance(state: GameState) -> GameState:
    """Step until a human has to move or the game is over."""
    while True:
        next_state = step(state)
        if next_state is state:
            return state
        state = next_state


def request_agent_move(state: GameState) -> GameState:
    """
    Pick the computer's move and mark it as in flight.

    The move is stored in ``pending_move`` and applied by
    ``commit_agent_move``; in between, undo, redo, human moves and further
    requests are refused.
    """
    if state.is_over or state.ai_in_flight or not state.at_latest:
        return state
    player = state.current_player
    if not state.settings.is_ai(player) or check_end(state) is not None:
        return state

    move = best_move(state.board, state.settings.ai_depth, player)
    if move == NO_MOVE:
        # No placement available; step() records the pass.
        return state

    logger.debug("%s (AI, depth %d) plays %s", player_name(player), state.settings.ai_depth, move)
    return replace(state, ai_in_flight=True, pending_move=move)


def commit_agent_move(state: GameState) -> GameState:
    """Apply the move chosen by ``request_agent_move``."""
    if not state.ai_in_flight or state.pending_move is None:
        return state
    x, y = state.pending_move
    player = state.current_player
    board, flipped = apply_move(state.board, x, y, player)
    record = MoveRecord(board=board, player=Board.opponent(player), move_pos=(x, y), is_ai_move=True)
    return _append(state, record, flipped)


def submit_agent_move(state: GameState, x: int, y: int) -> GameState:
    """
    Apply a move picked outside the controller for a computer seat.

    Used by arena players, which choose their own moves; the record is
    flagged ``is_ai_move`` the same way as a searched move. Illegal moves,
    human turns and in-flight or finished games are ignored.
    """
    if state.is_over or state.ai_in_flight or not state.at_latest:
        return state
    player = state.current_player
    if not state.settings.is_ai(player) or (x, y) not in get_valid_moves(state.board, player):
        logger.debug("Ignoring agent move %s for %s", (x, y), player_name(player))
        return state
    return commit_agent_move(replace(state, ai_in_flight=True, pending_move=(x, y)))


def play_move(state: GameState, x: int, y: int, player: Optional[int] = None) -> GameState:
    """
    Apply a placement chosen by a human at (x, y).

    Illegal or out-of-turn requests are ignored and the same state is
    returned. Playing from an earlier history position discards the records
    after it.

    Args:
        state: Current state
        x: Column of the move (0-based)
        y: Row of the move (0-based)
        player: Side the request is made for; ignored unless it is the side to move
    """
    if player is not None and player != state.current_player:
        logger.debug("Ignoring move %s: not %s's turn", (x, y), player_name(player))
        return state
    player = state.current_player
    if state.is_over or state.ai_in_flight or not state.settings.is_human(player):
        logger.debug("Ignoring move %s: not a human turn", (x, y))
        return state
    if (x, y) not in get_valid_moves(state.board, player):
        logger.debug("Ignoring illegal move %s for %s", (x, y), player_name(player))
        return state

    board, flipped = apply_move(state.board, x, y, player)
    record = MoveRecord(board=board, player=Board.opponent(player), move_pos=(x, y), is_ai_move=False)
    logger.debug("%s plays %s, flipping %d", player_name(player), (x, y), len(flipped))
    return _append(state, record, flipped)


def _navigate(state: GameState, target: int) -> GameState:
    moved = replace(state, cursor=target, result=None, last_flipped=())
    if moved.at_latest:
        moved = replace(moved, result=check_end(moved))
    return moved


def undo(state: GameState) -> GameState:
    """
    Step back through the history.

    With a human seat, goes back to the latest earlier position where a human
    is to move (or the start); between two agents, goes back one ply.
    Refused while an agent move is in flight.
    """
    if state.ai_in_flight or state.cursor == 0:
        return state

    target = state.cursor - 1
    if not state.settings.ai_vs_ai:
        while target > 0 and not state.settings.is_human(state.history[target].player):
            target -= 1
    return _navigate(state, target)


def redo(state: GameState) -> GameState:
    """
    Step forward through the history.

    With a human seat, goes forward to the next position where a human is to
    move (or the end); between two agents, goes forward one ply. Refused
    while an agent move is in flight.
    """
    if state.ai_in_flight or state.at_latest:
        return state

    last = len(state.history) - 1
    target = state.cursor + 1
    if not state.settings.ai_vs_ai:
        while target < last and not state.settings.is_human(state.history[target].player):
            target += 1
    return _navigate(state, target)


def hint(state: GameState) -> Optional[Move]:
    """Suggest a move for the human to move, searched at the agent depth."""
    player = state.current_player
    if state.is_over or state.ai_in_flight or not state.settings.is_human(player):
        return None
    move = best_move(state.board, state.settings.ai_depth, player)
    return None if move == NO_MOVE else move


def valid_moves(state: GameState) -> List[Move]:
    return get_valid_moves(state.board, state.current_player)


def score(state: GameState) -> Tuple[int, int]:
    """Stone counts (black, white) of the position on display."""
    return state.board.get_score()


def turn_message(state: GameState) -> str:
    """Whose turn it is, e.g. ``"1P's Turn (Black)"``; empty once the game is over."""
    if state.is_over:
        return ""
    player = state.current_player
    if state.settings.is_ai(player):
        seat = "AI"
    else:
        seat = "1P" if player == Board.BLACK else "2P"
    return f"{seat}'s Turn ({player_name(player)})"


def result_message(state: GameState) -> str:
    return state.result.value if state.result is not None else ""

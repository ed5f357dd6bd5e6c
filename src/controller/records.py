"""
Game record (kifu) helpers: coordinate notation and the move table.
"""
from dataclasses import dataclass
from typing import List, Tuple

from ..game.board import Board

COLUMNS = "ABCDEFGH"
PASS_MARK = "-"


def player_name(player: int) -> str:
    return "Black" if player == Board.BLACK else "White"


def format_coordinate(x: int, y: int) -> str:
    """(2, 3) -> "C4"."""
    return f"{COLUMNS[x]}{y + 1}"


def parse_coordinate(text: str) -> Tuple[int, int]:
    """
    Parse a coordinate such as "C4" (case-insensitive) into (x, y).

    Raises:
        ValueError: if the text is not a column letter A-H followed by a row 1-8
    """
    text = text.strip().upper()
    if len(text) != 2 or text[0] not in COLUMNS or text[1] not in "12345678":
        raise ValueError(f"Invalid coordinate: {text!r}")
    return COLUMNS.index(text[0]), int(text[1]) - 1


@dataclass(frozen=True)
class KifuEntry:
    """One row of the move table."""
    move: int
    player: int
    coordinate: str
    is_pass: bool
    is_ai_move: bool

    @property
    def player_label(self) -> str:
        label = player_name(self.player)
        return f"{label}(P)" if self.is_pass else label


def move_table(state) -> List[KifuEntry]:
    """
    List the moves played up to the history cursor.

    Entry i describes the ply that produced ``history[i]``; the mover is the
    side to move in ``history[i - 1]``.
    """
    entries = []
    for i in range(1, state.cursor + 1):
        record = state.history[i]
        mover = state.history[i - 1].player
        if record.move_pos is None:
            coordinate = PASS_MARK
        else:
            coordinate = format_coordinate(*record.move_pos)
        entries.append(KifuEntry(
            move=i,
            player=mover,
            coordinate=coordinate,
            is_pass=record.move_pos is None,
            is_ai_move=record.is_ai_move,
        ))
    return entries


def format_move_table(entries: List[KifuEntry]) -> str:
    """Render the move table as plain text."""
    lines = ["Move  Player     Coord", "----  ---------  -----"]
    for entry in entries:
        lines.append(f"{entry.move:4d}  {entry.player_label:9s}  {entry.coordinate}")
    return "\n".join(lines)

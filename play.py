"""
Text front end for playing Reversi against the computer (or another human).
"""
import argparse
import os
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.config import CONTROLLER_TYPES, Config, InvalidConfigurationError, get_default_config
from src.controller import ReversiGame, format_coordinate, parse_coordinate
from src.controller.records import format_move_table
from src.logger import setup_logger

HELP = """Commands:
  C4       place a stone (column A-H, row 1-8)
  hint     suggest a move
  undo     go back to your previous turn
  redo     go forward again
  moves    show the move table
  reset    start a new game
  quit     leave"""


def load_config(args) -> Config:
    if args.config and os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.black:
        config.players.black = args.black
    if args.white:
        config.players.white = args.white
    if args.depth is not None:
        config.players.ai_depth = args.depth
    if args.log_level:
        config.logging.log_level = args.log_level
    return config.validate()


def show(game: ReversiGame):
    print()
    print(game)
    flipped = game.get_last_flipped()
    if flipped:
        print("Flipped: " + " ".join(format_coordinate(x, y) for x, y in flipped))
    message = game.turn_message()
    if message:
        moves = " ".join(format_coordinate(x, y) for x, y in game.get_valid_moves())
        print(f"{message} - legal moves: {moves}")


def main():
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--black', choices=CONTROLLER_TYPES, default=None,
                        help='Controller of the black seat (1P)')
    parser.add_argument('--white', choices=CONTROLLER_TYPES, default=None,
                        help='Controller of the white seat (2P)')
    parser.add_argument('--depth', type=int, default=None,
                        help='Computer search depth (1-15)')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, ...)')
    args = parser.parse_args()

    try:
        config = load_config(args)
    except InvalidConfigurationError as e:
        parser.error(str(e))

    logger = setup_logger(config)
    game = ReversiGame.from_config(config)

    print(HELP)
    try:
        while True:
            game.advance()
            show(game)
            if game.is_game_over():
                print("\n" + format_move_table(game.get_move_table()))
                break

            if game.settings.is_ai(game.get_current_player()):
                # Only reachable when the cursor is behind the end of the history.
                command = input("> (redo to continue) ").strip().lower()
            else:
                command = input("> ").strip().lower()

            if command in ('quit', 'exit', 'q'):
                break
            elif command == 'hint':
                move = game.hint()
                print("Hint: " + (format_coordinate(*move) if move else "no move available"))
            elif command == 'undo':
                if not game.undo():
                    print("Nothing to undo")
            elif command == 'redo':
                if not game.redo():
                    print("Nothing to redo")
            elif command == 'moves':
                print(format_move_table(game.get_move_table()))
            elif command == 'reset':
                game.reset()
            elif command == 'help':
                print(HELP)
            else:
                try:
                    x, y = parse_coordinate(command)
                except ValueError:
                    print("Unknown command, type 'help'")
                    continue
                if not game.make_move(x, y):
                    print(f"{command.upper()} is not a legal move")
    except (KeyboardInterrupt, EOFError):
        print()
    finally:
        logger.close()


if __name__ == "__main__":
    main()

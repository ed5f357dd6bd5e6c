"""
Script for running tournaments between computer players of different search depths.
"""
import os
import argparse
import json
from datetime import datetime

from src.arena import Arena, ELORatingSystem
from src.config import Config, InvalidConfigurationError, get_default_config
from src.logger import setup_logger
from src.search import RandomAgent, SearchAgent


def main():
    parser = argparse.ArgumentParser(description='Run a tournament between Reversi search depths')

    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--depths', type=int, nargs='+', default=None,
                        help='Search depths to enter (1-15)')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play')
    parser.add_argument('--no-random', action='store_true',
                        help='Do not enter the random baseline player')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random baseline player')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save tournament results')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every move')
    args = parser.parse_args()

    if args.config and os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    t = config.tournament
    if args.depths:
        t.depths = args.depths
    if args.rounds is not None:
        t.rounds = args.rounds
    if args.no_random:
        t.include_random = False
    if args.seed is not None:
        t.seed = args.seed
    if args.output_dir:
        t.output_dir = args.output_dir
    if args.verbose:
        config.logging.verbose = True

    try:
        config.validate()
    except InvalidConfigurationError as e:
        parser.error(str(e))

    logger = setup_logger(config)
    os.makedirs(t.output_dir, exist_ok=True)

    # Initialize ELO rating system
    elo_file = os.path.join(t.output_dir, t.elo_file)
    if os.path.exists(elo_file):
        print(f"Loading ELO ratings from {elo_file}")
        elo = ELORatingSystem.load_ratings(elo_file)
    else:
        print("Starting new ELO rating system")
        elo = ELORatingSystem(k=t.k_factor, initial_rating=t.initial_rating)

    arena = Arena(elo_system=elo, max_moves=config.game.max_moves)
    if t.include_random:
        arena.add_player(RandomAgent(seed=t.seed))
    for depth in sorted(set(t.depths)):
        arena.add_player(SearchAgent(depth))

    if len(arena.players) < 2:
        print("Need at least 2 players to start a tournament")
        logger.close()
        return

    print("\nTournament Participants:")
    for i, player_id in enumerate(arena.players.keys(), 1):
        print(f"{i}. {player_id}")

    print(f"\nStarting tournament with {t.rounds} rounds...")
    try:
        results = arena.run_tournament(rounds=t.rounds, verbose=config.logging.verbose)
    finally:
        logger.close()

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    results_file = os.path.join(t.output_dir, f'tournament_{timestamp}.json')
    with open(results_file, 'w') as f:
        json.dump({
            'timestamp': timestamp,
            'rounds': t.rounds,
            'participants': list(arena.players.keys()),
            'games': results['games'],
            'matchups': results['matchups'],
            'leaderboard': [{'player': p['player_id'], 'rating': p['rating']}
                            for p in results['leaderboard']]
        }, f, indent=2)

    arena.elo.save_ratings(elo_file)

    print(f"\nTournament completed! Results saved to {results_file}")
    print("\nFinal Leaderboard:")
    arena.print_leaderboard()


if __name__ == '__main__':
    main()

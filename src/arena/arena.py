"""
Arena for running matches and tournaments between computer players with ELO rating.
"""
import json
import logging
import time
from datetime import datetime
from itertools import combinations
from typing import Dict, List, Optional

from tqdm import tqdm

from ..controller import GameSettings, ReversiGame
from ..config import AI
from ..game.board import Board
from ..search import NO_MOVE

logger = logging.getLogger(__name__)


class ELORatingSystem:
    """ELO rating system for tracking player strength."""

    def __init__(self, k: float = 32, initial_rating: float = 1500.0):
        """
        Initialize the ELO rating system.

        Args:
            k: K-factor, controls how much ratings change after each game
            initial_rating: Initial rating for new players
        """
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.games_played: Dict[str, int] = {}
        self.history: List[Dict] = []

    def add_player(self, player_id: str, rating: Optional[float] = None):
        if player_id not in self.ratings:
            self.ratings[player_id] = rating if rating is not None else self.initial_rating
            self.games_played[player_id] = 0

    def get_rating(self, player_id: str) -> float:
        return self.ratings.get(player_id, self.initial_rating)

    @staticmethod
    def get_expected_score(rating_a: float, rating_b: float) -> float:
        """Expected score of player A against player B."""
        return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / 400.0))

    def update_ratings(self, player_a: str, player_b: str, score_a: float) -> Dict:
        """
        Update ratings after a game.

        Args:
            player_a: ID of player A
            player_b: ID of player B
            score_a: Score for player A (1.0 for win, 0.5 for draw, 0.0 for loss)

        Returns:
            The game record added to the history
        """
        self.add_player(player_a)
        self.add_player(player_b)

        rating_a = self.ratings[player_a]
        rating_b = self.ratings[player_b]
        expected_a = self.get_expected_score(rating_a, rating_b)

        self.ratings[player_a] = rating_a + self.k * (score_a - expected_a)
        self.ratings[player_b] = rating_b + self.k * ((1.0 - score_a) - (1.0 - expected_a))
        self.games_played[player_a] += 1
        self.games_played[player_b] += 1

        game_record = {
            'timestamp': time.time(),
            'player_a': player_a,
            'player_b': player_b,
            'score_a': score_a,
            'rating_a_before': rating_a,
            'rating_b_before': rating_b,
            'rating_a_after': self.ratings[player_a],
            'rating_b_after': self.ratings[player_b],
        }
        self.history.append(game_record)
        return game_record

    def get_leaderboard(self) -> List[Dict]:
        """Get the current leaderboard sorted by rating."""
        leaderboard = [
            {'player_id': player_id, 'rating': rating, 'games_played': self.games_played[player_id]}
            for player_id, rating in self.ratings.items()
        ]
        leaderboard.sort(key=lambda x: x['rating'], reverse=True)
        return leaderboard

    def save_ratings(self, filepath: str):
        """Save the current ratings to a JSON file."""
        data = {
            'k': self.k,
            'initial_rating': self.initial_rating,
            'ratings': self.ratings,
            'games_played': self.games_played,
            'history': self.history,
            'last_updated': datetime.now().isoformat()
        }
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load_ratings(cls, filepath: str) -> 'ELORatingSystem':
        """Load ratings from a JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        elo = cls(k=data['k'], initial_rating=data['initial_rating'])
        elo.ratings = {k: float(v) for k, v in data['ratings'].items()}
        elo.games_played = {k: int(v) for k, v in data['games_played'].items()}
        elo.history = data.get('history', [])
        return elo


class Arena:
    """
    Plays computer players against each other.

    A player is any object with a ``name`` attribute and a
    ``get_move(game) -> (x, y)`` method (see ``SearchAgent``, ``RandomAgent``).
    """

    def __init__(self, elo_system: Optional[ELORatingSystem] = None, max_moves: int = 60):
        """
        Initialize the arena.

        Args:
            elo_system: Optional ELO rating system to use
            max_moves: Ply cap passed to every game
        """
        self.elo = elo_system if elo_system is not None else ELORatingSystem()
        self.max_moves = max_moves
        self.players: Dict[str, object] = {}

    def add_player(self, player):
        self.players[player.name] = player
        self.elo.add_player(player.name)

    def play_game(self, black_id: str, white_id: str, verbose: bool = False) -> ReversiGame:
        """
        Play a single game; the first player takes Black.

        Both seats are computer seats whose moves come from the players
        rather than the built-in search; ``ReversiGame.step`` is only called
        when the side to move has no placement, to record the pass or end
        the game.

        Returns:
            The finished game
        """
        if black_id not in self.players or white_id not in self.players:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        seats = {Board.BLACK: self.players[black_id], Board.WHITE: self.players[white_id]}
        game = ReversiGame(GameSettings(black=AI, white=AI, max_moves=self.max_moves))

        while not game.is_game_over():
            if not game.get_valid_moves():
                game.step()
                continue

            player = seats[game.get_current_player()]
            move = player.get_move(game)
            if move == NO_MOVE or not game.make_agent_move(*move):
                raise RuntimeError(f"{player.name} returned an unplayable move: {move}")
            if verbose:
                logger.info("%s plays %s\n%s", player.name, move, game)

        black, white = game.get_score()
        logger.info("%s (Black) vs %s (White): %d-%d", black_id, white_id, black, white)
        return game

    @staticmethod
    def score_for_black(game: ReversiGame) -> float:
        """1.0 if Black won, 0.5 for a draw, 0.0 if White won."""
        winner = game.get_winner()
        if winner == Board.BLACK:
            return 1.0
        if winner == Board.WHITE:
            return 0.0
        return 0.5

    def run_tournament(self, rounds: int = 1, verbose: bool = False,
                       show_progress: bool = True) -> Dict:
        """
        Run a round-robin tournament between all players.

        Every pair meets twice per round, once with each colour.

        Args:
            rounds: Number of rounds to play
            verbose: Whether to log every move
            show_progress: Whether to display a tqdm progress bar

        Returns:
            Dictionary with tournament results
        """
        player_ids = list(self.players.keys())
        if len(player_ids) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        pairings = []
        for p1, p2 in combinations(player_ids, 2):
            pairings.extend([(p1, p2), (p2, p1)])

        results = {
            'games_played': 0,
            'matchups': {},
            'games': [],
            'start_time': time.time(),
        }
        for p1, p2 in combinations(player_ids, 2):
            results['matchups'][f"{p1}_vs_{p2}"] = {
                'player1': p1, 'player2': p2, 'wins1': 0, 'wins2': 0, 'draws': 0
            }

        total = rounds * len(pairings)
        with tqdm(total=total, desc="Tournament", disable=not show_progress) as progress:
            for round_num in range(rounds):
                for black_id, white_id in pairings:
                    game = self.play_game(black_id, white_id, verbose=verbose)
                    score = self.score_for_black(game)
                    self.elo.update_ratings(black_id, white_id, score)

                    key = f"{black_id}_vs_{white_id}"
                    if key not in results['matchups']:
                        key = f"{white_id}_vs_{black_id}"
                    matchup = results['matchups'][key]
                    first_is_black = matchup['player1'] == black_id
                    if score == 0.5:
                        matchup['draws'] += 1
                    elif (score == 1.0) == first_is_black:
                        matchup['wins1'] += 1
                    else:
                        matchup['wins2'] += 1

                    black, white = game.get_score()
                    results['games'].append({
                        'round': round_num + 1,
                        'black': black_id,
                        'white': white_id,
                        'black_stones': black,
                        'white_stones': white,
                        'plies': game.state.cursor,
                        'score_black': score,
                    })
                    results['games_played'] += 1
                    progress.update(1)

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.elo.get_leaderboard()
        return results

    def format_leaderboard(self) -> str:
        """Render the current leaderboard as a table."""
        lines = [
            "Rank  Player ID               Rating  Games Played",
            "----  ---------------------  -------  ------------",
        ]
        for i, player in enumerate(self.elo.get_leaderboard(), 1):
            lines.append(f"{i:4d}  {player['player_id']:22s}  {player['rating']:7.1f}  {player['games_played']:12d}")
        return "\n".join(lines)

    def print_leaderboard(self):
        print("\nCurrent Leaderboard:")
        print(self.format_leaderboard())

    def save_results(self, results: Dict, filepath: str):
        """Save tournament results to a JSON file."""
        with open(filepath, 'w') as f:
            json.dump(results, f, indent=2)

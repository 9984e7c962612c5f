"""Game scoring — fold a sequence of points into the final called score.

Every step produces a fresh GameScore, so the full history of a game can be
kept and replayed without copying.
"""

import random
from typing import Iterable, Optional

from scoring.types import GameScore, Player, Point

DEFAULT_P1_WIN_PROB = 0.5

# Accepted spellings for the winner of a point on the command line
_PLAYER_TOKENS = {
    "1": Player.ONE,
    "p1": Player.ONE,
    "a": Player.ONE,
    "2": Player.TWO,
    "p2": Player.TWO,
    "b": Player.TWO,
}


def score_game(points: Iterable[Point]) -> str:
    """Score a game from love-love and return the final call, e.g. "30-15".

    Raises InvalidScore on the first point won by a player who already has
    game; no later points are applied.
    """
    game = GameScore.new()
    for point in points:
        game = game.scored(point)
    return str(game)


def replay_game(points: Iterable[Point]) -> list[GameScore]:
    """Return every snapshot of the game, starting with love-love."""
    snapshots = [GameScore.new()]
    for point in points:
        snapshots.append(snapshots[-1].scored(point))
    return snapshots


def game_stats(points: Iterable[Point]) -> dict:
    """Compute game statistics."""
    points = list(points)
    snapshots = replay_game(points)
    final = snapshots[-1]

    # First player to reach game, even if the other gets there later
    winner = next((s.winner for s in snapshots if s.winner is not None), None)

    p1_points = sum(1 for p in points if p.player is Player.ONE)
    p2_points = len(points) - p1_points

    return {
        "p1_points": p1_points,
        "p2_points": p2_points,
        "total_points": len(points),
        "score": str(final),
        "winner": winner.label if winner else None,
    }


def parse_points(tokens: Iterable[str]) -> list[Point]:
    """Turn tokens like "1", "p2" or "A" into points.

    Raises ValueError on a token that names neither player.
    """
    points = []
    for token in tokens:
        player = _PLAYER_TOKENS.get(token.strip().lower())
        if player is None:
            raise ValueError(f"Unknown player {token!r}, expected 1 or 2")
        points.append(Point(player))
    return points


def simulate_points(
    p1_win_prob: float = DEFAULT_P1_WIN_PROB,
    rng: Optional[random.Random] = None,
) -> list[Point]:
    """Draw random points until one player reaches game.

    Args:
        p1_win_prob: Chance that Player 1 wins any single point.
        rng: Random source; the module-level generator if omitted.

    Returns:
        The points in the order they were played.
    """
    if not 0.0 <= p1_win_prob <= 1.0:
        raise ValueError(f"p1_win_prob must be within [0, 1], got {p1_win_prob}")
    rng = rng or random

    points: list[Point] = []
    game = GameScore.new()
    while game.winner is None:
        player = Player.ONE if rng.random() < p1_win_prob else Player.TWO
        point = Point(player)
        game = game.scored(point)
        points.append(point)
    return points


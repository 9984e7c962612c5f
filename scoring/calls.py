"""Tennis calls for a single game and the scoring constants behind them.

A player's point count inside one game is called out loud as
love, 15, 30, 40 and finally game.
"""

from typing import Optional

# Point count -> call. 0 and 4 are named, 1-3 are numeric.
CALLS = {
    0: "love",
    1: "15",
    2: "30",
    3: "40",
    4: "game",
}

LOVE_CALL = CALLS[0]
GAME_CALL = CALLS[4]
MAX_POINTS = 4  # count at which a player has won the game


def score_to_call(count: int) -> Optional[str]:
    """Return the call for a point count, or None if the count has no call."""
    if isinstance(count, bool) or not isinstance(count, int):
        return None
    return CALLS.get(count)


def list_calls() -> list[str]:
    """Return all calls in order from love to game."""
    return [CALLS[c] for c in sorted(CALLS)]

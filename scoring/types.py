"""Core data types for scoring a tennis game."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from scoring.calls import MAX_POINTS, score_to_call


class InvalidScore(ValueError):
    """A point count that has no tennis call (outside 0-4)."""

    def __init__(self, count):
        self.count = count
        super().__init__(f"Score {count} is not a valid tennis score")


class Player(Enum):
    """One of the two players in a game."""
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def label(self) -> str:
        return f"Player {self.value}"


def player_one() -> Player:
    return Player.ONE


def player_two() -> Player:
    return Player.TWO


@dataclass(frozen=True)
class Point:
    """A single rally, won by `player`."""
    player: Player

    def __post_init__(self):
        if not isinstance(self.player, Player):
            raise TypeError(f"Point needs a Player, got {self.player!r}")


@dataclass(frozen=True)
class Score:
    """Points won by one player in the current game."""
    count: int = 0

    def __post_init__(self):
        if score_to_call(self.count) is None:
            raise InvalidScore(self.count)

    def add_point(self) -> "Score":
        """Return the score one point later.

        Raises InvalidScore when the player already has game.
        """
        return Score(self.count + 1)

    @property
    def call(self) -> str:
        return score_to_call(self.count)

    @property
    def is_game(self) -> bool:
        return self.count == MAX_POINTS

    def __str__(self) -> str:
        return self.call


@dataclass(frozen=True)
class GameScore:
    """Snapshot of both players' scores. Never modified once created."""
    player_one: Score = Score(0)
    player_two: Score = Score(0)

    def __post_init__(self):
        for slot in (self.player_one, self.player_two):
            if not isinstance(slot, Score):
                raise TypeError(f"GameScore needs two Scores, got {slot!r}")

    @classmethod
    def new(cls) -> "GameScore":
        """Love-love."""
        return cls()

    def score_for(self, player: Player) -> Score:
        if player is Player.ONE:
            return self.player_one
        if player is Player.TWO:
            return self.player_two
        raise TypeError(f"Expected a Player, got {player!r}")

    def scored(self, point: Point) -> "GameScore":
        """Return a new snapshot with the point's winner one point further on.

        The other player's score is carried over unchanged. Raises
        InvalidScore if the winner already has game.
        """
        new_score = self.score_for(point.player).add_point()
        if point.player is Player.ONE:
            return replace(self, player_one=new_score)
        return replace(self, player_two=new_score)

    @property
    def winner(self) -> Optional[Player]:
        """Player whose score is game, if any.

        Checks player one first, so after both reach game this does not say
        who got there first; use the game history for that.
        """
        if self.player_one.is_game:
            return Player.ONE
        if self.player_two.is_game:
            return Player.TWO
        return None

    def __str__(self) -> str:
        return f"{self.player_one}-{self.player_two}"

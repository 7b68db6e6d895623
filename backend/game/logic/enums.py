"""
String enum definitions for lobby game concepts.
"""

from enum import Enum


class GameKind(str, Enum):
    """Game families a room can be configured to play."""

    ROCK_PAPER_SCISSORS = "rock_paper_scissors"


class ActionKind(str, Enum):
    """Moves a player can submit for a round."""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class GameStatus(str, Enum):
    """Lifecycle status of a launched game."""

    RUNNING = "running"
    ENDED = "ended"


class EndConditionType(str, Enum):
    """Rule deciding when a running game ends."""

    TOTAL_ROUNDS = "total_rounds"  # after exactly n resolved rounds
    FIRST_TO_SCORE = "first_to_score"  # when the best score is exactly n


class Outcome(str, Enum):
    """Result of comparing two actions, from the first action's point of view."""

    TIE = "tie"
    FIRST = "first"
    SECOND = "second"

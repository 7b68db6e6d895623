"""Beats-relation tables, one per game kind.

A game kind plugs in as an action set plus a table mapping each action to
the actions it defeats. Round resolution only ever calls compare(), so it
never branches on concrete actions.
"""

from __future__ import annotations

from dataclasses import dataclass

from game.logic.enums import ActionKind, GameKind, Outcome


@dataclass(frozen=True)
class GameRules:
    kind: GameKind
    beats: dict[ActionKind, frozenset[ActionKind]]

    def __post_init__(self) -> None:
        """Check the table decides every pair of distinct actions exactly one way."""
        for action, defeated in self.beats.items():
            if action in defeated:
                raise ValueError(f"{action.value} cannot beat itself")
            unknown = defeated - self.beats.keys()
            if unknown:
                raise ValueError(f"{action.value} beats actions outside the table: {sorted(a.value for a in unknown)}")
        for first in self.beats:
            for second in self.beats:
                if first == second:
                    continue
                forward = second in self.beats[first]
                backward = first in self.beats[second]
                if forward == backward:
                    raise ValueError(f"{first.value} vs {second.value} must have exactly one winner")

    @property
    def actions(self) -> frozenset[ActionKind]:
        return frozenset(self.beats)

    def accepts(self, action: ActionKind) -> bool:
        return action in self.beats

    def compare(self, first: ActionKind, second: ActionKind) -> Outcome:
        """Compare two actions: TIE when equal, otherwise the side whose action wins."""
        if first == second:
            return Outcome.TIE
        if second in self.beats[first]:
            return Outcome.FIRST
        return Outcome.SECOND


ROCK_PAPER_SCISSORS_RULES = GameRules(
    kind=GameKind.ROCK_PAPER_SCISSORS,
    beats={
        ActionKind.ROCK: frozenset({ActionKind.SCISSORS}),
        ActionKind.SCISSORS: frozenset({ActionKind.PAPER}),
        ActionKind.PAPER: frozenset({ActionKind.ROCK}),
    },
)

RULES_BY_KIND: dict[GameKind, GameRules] = {
    GameKind.ROCK_PAPER_SCISSORS: ROCK_PAPER_SCISSORS_RULES,
}


def get_rules(kind: GameKind) -> GameRules:
    return RULES_BY_KIND[kind]

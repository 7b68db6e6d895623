"""
Round resolution for simultaneous-action games.

Every unordered pair of players is compared once, in player order:
for [p0, p1, p2] the pairs are (p0, p1), (p0, p2), (p1, p2). Result order
therefore depends only on the game's player order, never on the order in
which actions were submitted.
"""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING

from game.logic.enums import Outcome
from game.logic.state import GamePlayer, RoundResult

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from game.logic.enums import ActionKind
    from game.logic.rules import GameRules


def iter_pairs(players: Sequence[GamePlayer]) -> Iterator[tuple[GamePlayer, GamePlayer]]:
    """Yield every unordered pair of distinct players, outer loop first."""
    return combinations(players, 2)


def resolve_round(
    players: Sequence[GamePlayer],
    inputs: Mapping[int, ActionKind],
    rules: GameRules,
) -> list[RoundResult]:
    """
    Compare every pair of players' actions with the game's beats-relation.

    Requires an input for every player. Returns one RoundResult per pair,
    in pair order.
    """
    results: list[RoundResult] = []
    for first, second in iter_pairs(players):
        outcome = rules.compare(inputs[first.player.id], inputs[second.player.id])
        if outcome == Outcome.FIRST:
            results.append(RoundResult.winner(first.player.id))
        elif outcome == Outcome.SECOND:
            results.append(RoundResult.winner(second.player.id))
        else:
            results.append(RoundResult.draw())
    return results


def score_round(players: Sequence[GamePlayer], results: Sequence[RoundResult]) -> None:
    """
    Add one point per pairwise win.

    A player beating several opponents in the same round scores once per opponent.
    """
    by_id = {gp.player.id: gp for gp in players}
    for result in results:
        if result.winner_id is not None:
            by_id[result.winner_id].score += 1

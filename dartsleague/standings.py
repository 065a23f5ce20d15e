"""League table calculation.

Points:
- 3 points per match won (first to 3 legs)
- 1 bonus point per match with a high checkout of 50 or more
- 1 bonus point per match with a high visit of 150 or more

Table order: points, then leg difference, then roster order.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from .constants import BONUS_CHECKOUT_THRESHOLD, BONUS_VISIT_THRESHOLD, POINTS_PER_WIN
from .models import Match, Player, PlayerStanding

logger = logging.getLogger('dartsleague.standings')


def _apply_side(
    standing: PlayerStanding,
    legs_for: int,
    legs_against: int,
    high_checkout: Optional[int],
    high_visit: Optional[int],
) -> None:
    standing.played += 1
    standing.legs_for += legs_for
    standing.legs_against += legs_against

    if high_checkout is not None:
        standing.high_checkout = max(standing.high_checkout, high_checkout)
        if high_checkout >= BONUS_CHECKOUT_THRESHOLD:
            standing.bonus_checkouts += 1

    if high_visit is not None:
        standing.high_visit = max(standing.high_visit, high_visit)
        if high_visit >= BONUS_VISIT_THRESHOLD:
            standing.bonus_visits += 1


def compute_standings(
    roster: Sequence[Player],
    matches: Iterable[Match],
) -> list[PlayerStanding]:
    """Fold a match log into a sorted league table.

    Matches referencing a player outside the roster are skipped entirely.
    A match where neither (or both) players reached 3 legs still counts
    towards played and legs, but records no win or loss.

    Args:
        roster: Season players in roster order
        matches: Match log in any order

    Returns:
        List of PlayerStanding sorted by points, leg difference, roster order
    """
    stats: dict[str, PlayerStanding] = {}
    roster_index: dict[str, int] = {}
    for index, player in enumerate(roster):
        stats[player.id] = PlayerStanding(id=player.id, name=player.name)
        roster_index[player.id] = index

    for match in matches:
        p1 = stats.get(match.player1_id)
        p2 = stats.get(match.player2_id)
        if p1 is None or p2 is None:
            logger.debug(f'Skipping match {match.id}: player not in roster')
            continue

        _apply_side(
            p1,
            match.player1_legs,
            match.player2_legs,
            match.player1_high_checkout,
            match.player1_high_visit,
        )
        _apply_side(
            p2,
            match.player2_legs,
            match.player1_legs,
            match.player2_high_checkout,
            match.player2_high_visit,
        )

        winner = match.winner_id
        if winner is None:
            continue
        if winner == match.player1_id:
            p1.won += 1
            p2.lost += 1
        else:
            p2.won += 1
            p1.lost += 1

    for standing in stats.values():
        standing.leg_diff = standing.legs_for - standing.legs_against
        standing.points = (
            standing.won * POINTS_PER_WIN + standing.bonus_checkouts + standing.bonus_visits
        )

    return sorted(
        stats.values(),
        key=lambda s: (-s.points, -s.leg_diff, roster_index[s.id]),
    )


def rank_by_player(standings: Sequence[PlayerStanding]) -> dict[str, int]:
    """Map player id to 1-based table position."""
    return {standing.id: rank for rank, standing in enumerate(standings, 1)}

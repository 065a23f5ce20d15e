"""Head-to-head records between every pair of players."""

import logging
from collections.abc import Iterable, Sequence

from .models import H2HRecord, Match, Player

logger = logging.getLogger('dartsleague.head_to_head')


def compute_head_to_head(
    roster: Sequence[Player],
    matches: Iterable[Match],
) -> list[H2HRecord]:
    """Win tallies for every unordered pair of roster players.

    One record is produced for each pair (i, j) with i < j in roster order,
    and that order fixes which player is ``player1``. Which side a player
    was on in an individual match does not matter.

    Matches between players outside the roster, or without a winner,
    are ignored.
    """
    records: list[H2HRecord] = []
    by_pair: dict[frozenset, H2HRecord] = {}
    for i, p1 in enumerate(roster):
        for p2 in roster[i + 1:]:
            record = H2HRecord(player1=p1, player2=p2)
            records.append(record)
            by_pair[frozenset((p1.id, p2.id))] = record

    for match in matches:
        record = by_pair.get(match.pair)
        if record is None:
            logger.debug(f'Skipping match {match.id}: pair not in roster')
            continue
        winner = match.winner_id
        if winner == record.player1.id:
            record.p1_wins += 1
        elif winner == record.player2.id:
            record.p2_wins += 1

    return records


def pair_head_to_head(
    player1_id: str,
    player2_id: str,
    matches: Iterable[Match],
) -> tuple[int, int]:
    """Wins for (player1, player2) across all their meetings."""
    p1_wins = 0
    p2_wins = 0
    pair = frozenset((player1_id, player2_id))
    for match in matches:
        if match.pair != pair:
            continue
        winner = match.winner_id
        if winner == player1_id:
            p1_wins += 1
        elif winner == player2_id:
            p2_wins += 1
    return p1_wins, p2_wins


def head_to_head_lookup(records: Iterable[H2HRecord]) -> dict[frozenset, H2HRecord]:
    """Index records by the frozenset of their two player ids."""
    return {frozenset((r.player1.id, r.player2.id)): r for r in records}

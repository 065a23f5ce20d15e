"""Round-robin fixture schedule.

A round is every pair of players meeting once. Each week, floor(n / 2)
matches are played, so a round spans ceil(pairs / matches_per_week) weeks.

The schedule shows:
- the pairs still to play in the current round, chunked into weeks
  (the first week is badged 'current')
- a divider for the next round
- the full pairing set for the next round, chunked into weeks
  (badged 'next-round')

Example (4 players, no matches yet):
    Week 1 [current]: A v B, A v C
    Week 2:           A v D, B v C
    Week 3:           B v D, C v D
    --- Round 2 ---
    Week 1 [next-round]: A v B, A v C
    ...
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from .constants import BADGE_CURRENT, BADGE_NEXT_ROUND
from .head_to_head import pair_head_to_head
from .models import Fixture, Match, Player, RoundDivider, ScheduleEntry, WeekBlock


@dataclass
class FixtureProgress:
    """How far the season has got through its rounds.

    ``current_round`` and ``week_in_round`` are estimated from the number of
    matches played. ``rounds_completed`` is verified against the pairs:
    it is the number of times every pair has met.
    """
    matches_per_week: int
    weeks_per_round: int
    total_played: int
    weeks_completed: int
    current_round: int
    week_in_round: int
    rounds_completed: int
    pair_counts: dict[tuple[str, str], int] = field(default_factory=dict)


def round_robin_pairs(roster: Sequence[Player]) -> list[tuple[str, str]]:
    """Every unordered pair (i, j), i < j, in roster order."""
    return [
        (roster[i].id, roster[j].id)
        for i in range(len(roster))
        for j in range(i + 1, len(roster))
    ]


def count_pair_matches(
    pairs: Sequence[tuple[str, str]],
    matches: Sequence[Match],
) -> dict[tuple[str, str], int]:
    """Number of matches played by each pair, in either player order."""
    counts = {pair: 0 for pair in pairs}
    key_for = {frozenset(pair): pair for pair in pairs}
    for match in matches:
        pair = key_for.get(match.pair)
        if pair is not None:
            counts[pair] += 1
    return counts


def chunk(items: Sequence, size: int) -> list[list]:
    """Split items into consecutive lists of ``size``."""
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def compute_fixture_progress(
    roster: Sequence[Player],
    matches: Sequence[Match],
) -> FixtureProgress | None:
    """Round and week progress for the season, or None with fewer than 2 players.

    Only matches between two roster players count towards progress.
    """
    n = len(roster)
    if n < 2:
        return None

    pairs = round_robin_pairs(roster)
    matches_per_week = n // 2
    weeks_per_round = math.ceil(len(pairs) / matches_per_week)

    pair_counts = count_pair_matches(pairs, matches)
    total_played = sum(pair_counts.values())
    weeks_completed = total_played // matches_per_week

    return FixtureProgress(
        matches_per_week=matches_per_week,
        weeks_per_round=weeks_per_round,
        total_played=total_played,
        weeks_completed=weeks_completed,
        current_round=weeks_completed // weeks_per_round + 1,
        week_in_round=weeks_completed % weeks_per_round + 1,
        rounds_completed=min(pair_counts.values()),
        pair_counts=pair_counts,
    )


def remaining_round_pairs(
    roster: Sequence[Player],
    matches: Sequence[Match],
) -> list[tuple[str, str]]:
    """Pairs still to play in the round in progress.

    A round is complete only once every pair has played the same number of
    times, so the remaining pairs are those at the lowest play count.
    """
    pairs = round_robin_pairs(roster)
    if not pairs:
        return []
    counts = count_pair_matches(pairs, matches)
    fewest = min(counts.values())
    return [pair for pair in pairs if counts[pair] == fewest]


def _fixture(pair: tuple[str, str], matches: Sequence[Match]) -> Fixture:
    p1_wins, p2_wins = pair_head_to_head(pair[0], pair[1], matches)
    return Fixture(
        player1_id=pair[0],
        player2_id=pair[1],
        player1_wins=p1_wins,
        player2_wins=p2_wins,
    )


def compute_fixture_schedule(
    roster: Sequence[Player],
    matches: Sequence[Match],
) -> list[ScheduleEntry]:
    """Build the fixture list for the rest of this round and the next.

    Args:
        roster: Season players in roster order
        matches: Match log in any order

    Returns:
        WeekBlock and RoundDivider entries in display order; empty for
        rosters of fewer than 2 players
    """
    progress = compute_fixture_progress(roster, matches)
    if progress is None:
        return []

    entries: list[ScheduleEntry] = []

    remaining = remaining_round_pairs(roster, matches)
    for offset, week_pairs in enumerate(chunk(remaining, progress.matches_per_week)):
        entries.append(
            WeekBlock(
                title=f'Week {progress.week_in_round + offset}',
                badge=BADGE_CURRENT if offset == 0 else None,
                matches=[_fixture(pair, matches) for pair in week_pairs],
            )
        )

    entries.append(RoundDivider(label=f'Round {progress.current_round + 1}'))

    next_round = chunk(round_robin_pairs(roster), progress.matches_per_week)
    for week_num, week_pairs in enumerate(next_round[: progress.weeks_per_round], 1):
        entries.append(
            WeekBlock(
                title=f'Week {week_num}',
                badge=BADGE_NEXT_ROUND,
                matches=[_fixture(pair, matches) for pair in week_pairs],
            )
        )

    return entries

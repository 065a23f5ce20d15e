"""League position over time, for the rank chart.

Each distinct match date is one step on the chart. After folding in every
match up to and including that date, the table is recomputed and each
player's position recorded (1 = top of the table).
"""

from collections import defaultdict
from collections.abc import Sequence
from datetime import date

from .constants import PALETTE
from .models import Match, Player, PositionHistory
from .standings import compute_standings, rank_by_player


def format_week_label(day: date) -> str:
    """Chart axis label, e.g. '7 Jan'."""
    return f'{day.day} {day.strftime("%b")}'


def compute_position_history(
    roster: Sequence[Player],
    matches: Sequence[Match],
) -> PositionHistory:
    """Replay the match log date by date and record table positions.

    Args:
        roster: Season players in roster order
        matches: Match log in any order

    Returns:
        PositionHistory with one label and one position per player for each
        match date, oldest first. Empty lists when there are no matches.
    """
    history = PositionHistory(positions_by_player={player.id: [] for player in roster})
    if not matches:
        return history

    by_date: dict[date, list[Match]] = defaultdict(list)
    for match in matches:
        by_date[match.date].append(match)

    cumulative: list[Match] = []
    for day in sorted(by_date):
        cumulative.extend(by_date[day])
        ranks = rank_by_player(compute_standings(roster, cumulative))

        history.week_dates.append(day)
        history.week_labels.append(format_week_label(day))
        for player in roster:
            history.positions_by_player[player.id].append(ranks[player.id])

    return history


def assign_player_colors(
    roster: Sequence[Player],
    palette: Sequence[str] = PALETTE,
) -> dict[str, str]:
    """Chart colour per player, by index in the name-sorted roster.

    The palette wraps around for rosters larger than the palette.
    """
    ordered = sorted(roster, key=lambda p: (p.name, p.id))
    return {player.id: palette[index % len(palette)] for index, player in enumerate(ordered)}

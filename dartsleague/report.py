"""Season report: every derived view of a season in one JSON-ready dict.

SeasonView is the presentation layer's view state. It holds the snapshot
for the selected season and recomputes the report from scratch each time
it is asked, so edits and deletions in the store are always reflected.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from .constants import FORM_LENGTH
from .form import compute_all_forms
from .head_to_head import compute_head_to_head
from .models import Match, Player, RoundDivider
from .position_history import assign_player_colors, compute_position_history
from .schedule import compute_fixture_progress, compute_fixture_schedule
from .standings import compute_standings
from .store import SeasonStore

logger = logging.getLogger('dartsleague.report')


def build_season_report(
    roster: list[Player],
    matches: list[Match],
    form_length: int = FORM_LENGTH,
) -> dict[str, Any]:
    """Compute standings, form, head-to-head, position history and fixtures.

    Args:
        roster: Season players in roster order
        matches: Season match log
        form_length: Number of recent results in each form list

    Returns:
        Dict of JSON-serialisable views keyed by name
    """
    names = {player.id: player.name for player in roster}
    forms = compute_all_forms(roster, matches, form_length)

    standings = []
    for rank, standing in enumerate(compute_standings(roster, matches), 1):
        row = standing.to_dict()
        row['rank'] = rank
        row['form'] = forms[standing.id]
        standings.append(row)

    head_to_head = [
        {
            'player1': record.player1.id,
            'player2': record.player2.id,
            'p1Wins': record.p1_wins,
            'p2Wins': record.p2_wins,
        }
        for record in compute_head_to_head(roster, matches)
    ]

    history = compute_position_history(roster, matches)
    colors = assign_player_colors(roster)
    position_history = {
        'weekLabels': history.week_labels,
        'weekDates': [day.isoformat() for day in history.week_dates],
        'series': [
            {
                'playerId': player.id,
                'name': player.name,
                'color': colors[player.id],
                'positions': history.positions_by_player[player.id],
            }
            for player in roster
        ],
    }

    fixtures = []
    for entry in compute_fixture_schedule(roster, matches):
        if isinstance(entry, RoundDivider):
            fixtures.append({'type': 'divider', 'label': entry.label})
            continue
        fixtures.append(
            {
                'type': 'week',
                'title': entry.title,
                'badge': entry.badge,
                'matches': [
                    {
                        'player1': f.player1_id,
                        'player2': f.player2_id,
                        'player1Name': names.get(f.player1_id, f.player1_id),
                        'player2Name': names.get(f.player2_id, f.player2_id),
                        'h2h': [f.player1_wins, f.player2_wins],
                    }
                    for f in entry.matches
                ],
            }
        )

    progress = compute_fixture_progress(roster, matches)
    progress_data = None
    if progress is not None:
        progress_data = {
            'currentRound': progress.current_round,
            'weekInRound': progress.week_in_round,
            'weeksPerRound': progress.weeks_per_round,
            'matchesPerWeek': progress.matches_per_week,
            'matchesPlayed': progress.total_played,
            'roundsCompleted': progress.rounds_completed,
        }

    return {
        'players': [{'id': p.id, 'name': p.name} for p in roster],
        'matchCount': len(matches),
        'standings': standings,
        'headToHead': head_to_head,
        'positionHistory': position_history,
        'fixtures': fixtures,
        'progress': progress_data,
    }


@dataclass
class SeasonView:
    """Current season snapshot shown by the front end."""
    season: str
    roster: list[Player] = field(default_factory=list)
    matches: list[Match] = field(default_factory=list)
    form_length: int = FORM_LENGTH
    loaded_at: Optional[datetime] = None

    def refresh(self, store: SeasonStore) -> 'SeasonView':
        """Reload the roster and match log for the current season."""
        self.roster = store.load_players(self.season)
        self.matches = store.load_matches(self.season, skip_invalid=True)
        self.loaded_at = datetime.now(timezone.utc)
        logger.info(
            f'Loaded season {self.season}: {len(self.roster)} players, {len(self.matches)} matches'
        )
        return self

    def switch_season(self, store: SeasonStore, season: str) -> 'SeasonView':
        """Select another season and load its snapshot."""
        self.season = season
        return self.refresh(store)

    def build_report(self) -> dict[str, Any]:
        report = build_season_report(self.roster, self.matches, self.form_length)
        report['season'] = self.season
        if self.loaded_at is not None:
            report['updated_at'] = self.loaded_at.isoformat()
        return report

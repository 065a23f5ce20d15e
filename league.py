#!/usr/bin/env python3
"""
Darts League CLI

Prints league views for a season from the JSON season store.
Players come from data/seasons/{season}/players.json
Matches come from data/seasons/{season}/matches.json

Usage:
    python league.py
    python league.py --season 2025 --view fixtures
    python league.py --season 2025 --output web/data/seasons/2025/league.json
"""

import argparse
import logging
import sys
from pathlib import Path

from dartsleague import (
    SeasonStore,
    SeasonView,
    compute_all_forms,
    compute_fixture_schedule,
    compute_head_to_head,
    compute_position_history,
    compute_standings,
)
from dartsleague.config import get_config
from dartsleague.constants import SEASONS_DIR
from dartsleague.logging_config import setup_logging
from dartsleague.models import RoundDivider
from dartsleague.utils import save_json

VIEWS = ('standings', 'form', 'h2h', 'history', 'fixtures')

logger = logging.getLogger('dartsleague.cli')


def print_standings(view: SeasonView) -> None:
    forms = compute_all_forms(view.roster, view.matches, view.form_length)
    print(f"{'#':>2}  {'Player':<20} {'P':>3} {'W':>3} {'L':>3} {'Pts':>4} "
          f"{'LF':>4} {'LA':>4} {'+/-':>4} {'HC':>4}  Form")
    for rank, s in enumerate(compute_standings(view.roster, view.matches), 1):
        diff = f'+{s.leg_diff}' if s.leg_diff > 0 else str(s.leg_diff)
        high_checkout = s.high_checkout or '-'
        print(f"{rank:>2}  {s.name:<20} {s.played:>3} {s.won:>3} {s.lost:>3} {s.points:>4} "
              f"{s.legs_for:>4} {s.legs_against:>4} {diff:>4} {high_checkout:>4}  "
              f"{' '.join(forms[s.id])}")


def print_form(view: SeasonView) -> None:
    forms = compute_all_forms(view.roster, view.matches, view.form_length)
    for player in view.roster:
        print(f"  {player.name:<20} {' '.join(forms[player.id])}")


def print_head_to_head(view: SeasonView) -> None:
    for record in compute_head_to_head(view.roster, view.matches):
        print(f"  {record.player1.name} {record.p1_wins} - {record.p2_wins} {record.player2.name}")


def print_history(view: SeasonView) -> None:
    history = compute_position_history(view.roster, view.matches)
    if not history.week_labels:
        print("  No matches played yet")
        return
    print(f"  {'':<20} " + ' '.join(f'{label:>7}' for label in history.week_labels))
    for player in view.roster:
        positions = history.positions_by_player[player.id]
        print(f"  {player.name:<20} " + ' '.join(f'{pos:>7}' for pos in positions))


def print_fixtures(view: SeasonView) -> None:
    names = {p.id: p.name for p in view.roster}
    entries = compute_fixture_schedule(view.roster, view.matches)
    if not entries:
        print("  At least two players are needed for fixtures")
        return
    for entry in entries:
        if isinstance(entry, RoundDivider):
            print(f"\n--- {entry.label} ---")
            continue
        badge = f" [{entry.badge}]" if entry.badge else ''
        print(f"{entry.title}{badge}")
        for f in entry.matches:
            print(f"  {names[f.player1_id]} v {names[f.player2_id]}"
                  f"  (H2H {f.player1_wins}-{f.player2_wins})")


PRINTERS = {
    'standings': print_standings,
    'form': print_form,
    'h2h': print_head_to_head,
    'history': print_history,
    'fixtures': print_fixtures,
}


def main():
    parser = argparse.ArgumentParser(description="Darts league standings and fixtures")
    parser.add_argument(
        "--season", "-s",
        default=None,
        help="Season name (defaults to current_season in data/league_config.json)",
    )
    parser.add_argument(
        "--data-dir", "-d",
        default=str(SEASONS_DIR),
        help="Path to the seasons directory (default: the bundled data/seasons)",
    )
    parser.add_argument(
        "--view",
        choices=VIEWS,
        default="standings",
        help="Which view to print",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the full season report as JSON to this path",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output (skipped matches etc.)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print errors",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also write a timestamped log file to this directory",
    )

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO
    setup_logging(level=level, log_dir=args.log_dir)

    try:
        config = get_config()
        season = args.season or config.current_season
        store = SeasonStore(Path(args.data_dir))
        view = SeasonView(season=season, form_length=config.form_length).refresh(store)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)

    print(f"{config.league_name} - Season {season}")
    print("=" * 60)
    PRINTERS[args.view](view)

    if args.output:
        save_json(args.output, view.build_report())
        logger.info(f"Report saved to {args.output}")


if __name__ == "__main__":
    main()

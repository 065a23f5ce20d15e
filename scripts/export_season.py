#!/usr/bin/env python3
"""
Export season data for the web front end.

Writes one report per season plus an index of seasons:
- web/data/seasons/{season}/league.json - standings, form, H2H, chart, fixtures
- web/data/index.json - league name, seasons, current season

Run after any match is added, edited or deleted.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dartsleague.config import get_config
from dartsleague.logging_config import setup_logging
from dartsleague.report import SeasonView
from dartsleague.store import SeasonStore
from dartsleague.utils import save_json


def export_season(store: SeasonStore, web_data_dir: Path, season: str, form_length: int) -> dict:
    """
    Export one season's report.

    Args:
        store: Season store to read players and matches from
        web_data_dir: Path to web/data/ directory
        season: Season name
        form_length: Number of recent results per form list

    Returns:
        The exported report
    """
    view = SeasonView(season=season, form_length=form_length).refresh(store)
    report = view.build_report()
    save_json(web_data_dir / "seasons" / season / "league.json", report)
    return report


def export_index(web_data_dir: Path, seasons: list[str]) -> dict:
    """Write the season index used by the season picker."""
    config = get_config()
    index = {
        'league_name': config.league_name,
        'current_season': config.current_season,
        'seasons': seasons,
        'updated_at': datetime.now(timezone.utc).isoformat(),
    }
    save_json(web_data_dir / "index.json", index)
    return index


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Export season data for the web")
    parser.add_argument("--season", "-s", default=None, help="Season to export (default: all)")
    parser.add_argument("--data-dir", "-d", default="data/seasons", help="Seasons directory")
    parser.add_argument("--web-dir", "-w", default="web", help="Web directory")
    args = parser.parse_args()

    logger = setup_logging()

    project_dir = Path(__file__).parent.parent
    store = SeasonStore(project_dir / args.data_dir)
    web_data_dir = project_dir / args.web_dir / "data"
    config = get_config()

    seasons = [args.season] if args.season else store.list_seasons()
    for season in seasons:
        report = export_season(store, web_data_dir, season, config.form_length)
        logger.info(
            f"Exported season {season}: {len(report['standings'])} players, "
            f"{report['matchCount']} matches"
        )

    export_index(web_data_dir, store.list_seasons())
    logger.info(f"Exported index to {web_data_dir / 'index.json'}")


if __name__ == "__main__":
    main()

"""JSON file store for season players and matches.

Layout:
    data/seasons/<season>/players.json  -> {"players": [{"id": ..., "name": ...}]}
    data/seasons/<season>/matches.json  -> {"matches": [{"id": ..., "date": ..., ...}]}

This is the same shape the web front end loads. Records are kept in
insertion order; every derived view is recomputed from them on demand.
"""

import logging
import uuid
from pathlib import Path
from typing import Any

from .constants import SEASONS_DIR
from .models import Match, Player
from .normalizer import normalize_matches, normalize_players
from .schemas import MatchRecord, PlayerRecord
from .utils import load_json, save_json
from .validators import validate_match

logger = logging.getLogger('dartsleague.store')


def _to_aliases(fields: dict[str, Any]) -> dict[str, Any]:
    """Rename snake_case match fields to the stored camelCase keys."""
    aliases = {name: info.alias or name for name, info in MatchRecord.model_fields.items()}
    return {aliases.get(key, key): value for key, value in fields.items()}


class SeasonStore:
    """CRUD access to per-season player and match files."""

    def __init__(self, seasons_dir: Path | str = SEASONS_DIR):
        self.seasons_dir = Path(seasons_dir)

    # Paths

    def season_dir(self, season: str) -> Path:
        path = self.seasons_dir / str(season)
        if not path.is_dir():
            raise FileNotFoundError(f'Season not found: {season} ({path})')
        return path

    def _players_path(self, season: str) -> Path:
        return self.season_dir(season) / 'players.json'

    def _matches_path(self, season: str) -> Path:
        return self.season_dir(season) / 'matches.json'

    # Seasons

    def list_seasons(self) -> list[str]:
        """Season directory names, sorted."""
        if not self.seasons_dir.exists():
            return []
        return sorted(p.name for p in self.seasons_dir.iterdir() if p.is_dir())

    def create_season(self, season: str, players: list[dict[str, Any]] | None = None) -> Path:
        """Create an empty season, optionally seeded with player records."""
        path = self.seasons_dir / str(season)
        if path.exists():
            raise FileExistsError(f'Season already exists: {season}')
        path.mkdir(parents=True)
        save_json(path / 'players.json', {'players': players or []})
        save_json(path / 'matches.json', {'matches': []})
        logger.info(f'Created season {season} with {len(players or [])} players')
        return path

    # Players

    def load_player_records(self, season: str) -> list[dict[str, Any]]:
        data = load_json(self._players_path(season))
        return data.get('players', [])

    def load_players(self, season: str) -> list[Player]:
        """Season roster in stored order."""
        return normalize_players(self.load_player_records(season))

    def add_player(self, season: str, name: str) -> dict[str, Any]:
        """Add a player to the season roster and return the stored record."""
        records = self.load_player_records(season)
        record = PlayerRecord(id=uuid.uuid4().hex, name=name).model_dump(mode='json')
        records.append(record)
        save_json(self._players_path(season), {'players': records})
        logger.info(f'Added player {name} to season {season}')
        return record

    # Matches

    def load_match_records(self, season: str, missing_ok: bool = True) -> list[dict[str, Any]]:
        """
        Raw match records in stored order.

        A season without a matches.json yet reads as empty when ``missing_ok``.
        A malformed file always raises, so a write never replaces the log
        with an empty one.

        Raises:
            FileNotFoundError: If the file is missing and ``missing_ok`` is False
            json.JSONDecodeError: If the file is not valid JSON
        """
        path = self._matches_path(season)
        if missing_ok and not path.exists():
            return []
        return load_json(path).get('matches', [])

    def load_matches(self, season: str, skip_invalid: bool = False) -> list[Match]:
        """Season match log in stored order."""
        return normalize_matches(self.load_match_records(season), skip_invalid=skip_invalid)

    def get_match(self, season: str, match_id: str) -> dict[str, Any]:
        for record in self.load_match_records(season):
            if str(record.get('id')) == str(match_id):
                return record
        raise KeyError(f'Match not found in season {season}: {match_id}')

    def _prepare(self, season: str, record: dict[str, Any], validate: bool) -> dict[str, Any]:
        if validate:
            errors = validate_match(record, self.load_players(season))
            if errors:
                raise ValueError('Invalid match:\n' + '\n'.join(errors))
        return MatchRecord(**record).model_dump(mode='json', by_alias=True, exclude_none=True)

    def _save_matches(self, season: str, records: list[dict[str, Any]]) -> None:
        save_json(self._matches_path(season), {'matches': records})

    def add_match(
        self,
        season: str,
        record: dict[str, Any],
        validate: bool = True,
    ) -> dict[str, Any]:
        """
        Append a match to the season log.

        Args:
            season: Season name
            record: Match fields (camelCase or snake_case keys); an id is
                generated when missing
            validate: Run the match form checks before saving

        Returns:
            The stored record

        Raises:
            ValueError: If validation fails
        """
        record = {**record}
        record.setdefault('id', uuid.uuid4().hex)
        stored = self._prepare(season, record, validate)

        records = self.load_match_records(season, missing_ok=False)
        records.append(stored)
        self._save_matches(season, records)
        logger.info(f'Added match {stored["id"]} to season {season}')
        return stored

    def update_match(
        self,
        season: str,
        match_id: str,
        changes: dict[str, Any],
        validate: bool = True,
    ) -> dict[str, Any]:
        """Apply field changes to a stored match and return the updated record."""
        records = self.load_match_records(season, missing_ok=False)
        for i, record in enumerate(records):
            if str(record.get('id')) != str(match_id):
                continue
            merged = {**MatchRecord(**record).model_dump(by_alias=True), **_to_aliases(changes)}
            merged['id'] = record.get('id')
            stored = self._prepare(season, merged, validate)
            records[i] = stored
            self._save_matches(season, records)
            logger.info(f'Updated match {match_id} in season {season}')
            return stored
        raise KeyError(f'Match not found in season {season}: {match_id}')

    def delete_match(self, season: str, match_id: str) -> None:
        """Remove a match from the season log."""
        records = self.load_match_records(season, missing_ok=False)
        remaining = [r for r in records if str(r.get('id')) != str(match_id)]
        if len(remaining) == len(records):
            raise KeyError(f'Match not found in season {season}: {match_id}')
        self._save_matches(season, remaining)
        logger.info(f'Deleted match {match_id} from season {season}')

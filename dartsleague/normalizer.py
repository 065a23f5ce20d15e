"""Map stored player and match records onto the engine's models.

Records come from the season store (or any JSON source) as plain dicts.
Keys may be camelCase or snake_case. Ids are normalized to strings so that
integer ids in one file and string ids in another still compare equal.

Type errors (for example non-numeric legs) raise ValueError here, at the
boundary, so the calculators never see them.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from .models import Match, Player
from .schemas import MatchRecord, PlayerRecord

logger = logging.getLogger('dartsleague.normalizer')


def normalize_player(record: Mapping[str, Any]) -> Player:
    """Convert a stored player record to a Player."""
    try:
        parsed = PlayerRecord(**record)
    except ValidationError as e:
        raise ValueError(f'Invalid player record {dict(record)!r}:\n{e}') from e
    return Player(id=str(parsed.id), name=parsed.name)


def normalize_players(records: Iterable[Mapping[str, Any]]) -> list[Player]:
    """Convert stored player records, preserving roster order."""
    return [normalize_player(record) for record in records]


def normalize_match(record: Mapping[str, Any], index: int = 0) -> Match:
    """Convert a stored match record to a Match.

    Args:
        record: Raw match dict
        index: Position of the record in the match log, used to build an id
            when the record has none

    Raises:
        ValueError: If a field cannot be coerced to its type
    """
    try:
        parsed = MatchRecord(**record)
    except ValidationError as e:
        raise ValueError(f'Invalid match record at position {index}:\n{e}') from e

    match_id = str(parsed.id) if parsed.id is not None else f'match-{index}'
    return Match(
        id=match_id,
        date=parsed.date,
        player1_id=str(parsed.player1_id),
        player2_id=str(parsed.player2_id),
        player1_legs=parsed.player1_legs,
        player2_legs=parsed.player2_legs,
        player1_high_checkout=parsed.player1_high_checkout,
        player2_high_checkout=parsed.player2_high_checkout,
        player1_high_visit=parsed.player1_high_visit,
        player2_high_visit=parsed.player2_high_visit,
    )


def normalize_matches(
    records: Iterable[Mapping[str, Any]],
    skip_invalid: bool = False,
) -> list[Match]:
    """Convert stored match records, preserving log order.

    Args:
        records: Raw match dicts in log order
        skip_invalid: Drop records that fail type coercion instead of raising

    Returns:
        List of Match objects
    """
    matches = []
    for index, record in enumerate(records):
        try:
            matches.append(normalize_match(record, index))
        except ValueError as e:
            if not skip_invalid:
                raise
            logger.warning(f'Skipping match record {index}: {e}')
    logger.debug(f'Normalized {len(matches)} matches')
    return matches

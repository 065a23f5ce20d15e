"""Recent form (last N results) for each player."""

from collections.abc import Sequence

from .constants import FORM_EMPTY, FORM_LENGTH, FORM_LOSS, FORM_WIN, LEGS_TO_WIN
from .models import Match, Player


def compute_form(
    player_id: str,
    matches: Sequence[Match],
    length: int = FORM_LENGTH,
) -> list[str]:
    """Last ``length`` results for a player, oldest first.

    Matches are ordered by date; matches sharing a date keep their order in
    the match log, so the later log entry counts as the more recent one.
    The old web table did the opposite (a stable newest-first sort, then
    reversed), which made the earlier entry of a same-day pair the most
    recent. Log order is used here instead.
    The result is left-padded with '-' when the player has fewer matches.

    Example:
        >>> compute_form('a', [])
        ['-', '-', '-']
    """
    played = [
        (match.date, index, match)
        for index, match in enumerate(matches)
        if match.involves(player_id)
    ]
    played.sort(key=lambda item: (item[0], item[1]))
    recent = played[-length:] if length > 0 else []

    results = [
        FORM_WIN if match.legs_of(player_id) == LEGS_TO_WIN else FORM_LOSS
        for _, _, match in recent
    ]
    return [FORM_EMPTY] * (length - len(results)) + results


def compute_all_forms(
    roster: Sequence[Player],
    matches: Sequence[Match],
    length: int = FORM_LENGTH,
) -> dict[str, list[str]]:
    """Recent form for every roster player.

    Matches against a player outside the roster are left out, as they are
    in the standings.
    """
    roster_ids = {player.id for player in roster}
    counted = [
        match for match in matches
        if match.player1_id in roster_ids and match.player2_id in roster_ids
    ]
    return {player.id: compute_form(player.id, counted, length) for player in roster}

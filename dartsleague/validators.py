"""Validation for match results submitted through the match form.

The standings engine tolerates malformed matches; these checks run before a
match is written to the store so that it never has to.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from .constants import BOGEY_CHECKOUTS, LEGS_TO_WIN, MAX_CHECKOUT, MAX_VISIT
from .models import Player
from .normalizer import normalize_match


def validate_legs(player1_legs: int, player2_legs: int) -> list[str]:
    """
    Check a best-of-five scoreline.

    Checks:
    - Both leg counts between 0 and 3
    - Exactly one player reached 3 legs

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    for label, legs in (('Player 1', player1_legs), ('Player 2', player2_legs)):
        if legs < 0 or legs > LEGS_TO_WIN:
            errors.append(f'{label} legs must be between 0 and {LEGS_TO_WIN}, got {legs}')

    winners = [legs for legs in (player1_legs, player2_legs) if legs == LEGS_TO_WIN]
    if not errors and len(winners) != 1:
        errors.append(
            f'Exactly one player must win {LEGS_TO_WIN} legs, got {player1_legs}-{player2_legs}'
        )

    return errors


def validate_high_scores(
    label: str,
    high_checkout: int | None,
    high_visit: int | None,
) -> list[str]:
    """
    Check a player's optional high checkout and high visit.

    Checks:
    - Checkout between 0 and 170 and not an impossible (bogey) checkout
    - Visit between 0 and 180
    """
    errors = []

    if high_checkout is not None:
        if high_checkout < 0 or high_checkout > MAX_CHECKOUT:
            errors.append(
                f'{label} high checkout must be between 0 and {MAX_CHECKOUT}, got {high_checkout}'
            )
        elif high_checkout in BOGEY_CHECKOUTS:
            errors.append(f'{label} high checkout {high_checkout} is not a possible checkout')

    if high_visit is not None and (high_visit < 0 or high_visit > MAX_VISIT):
        errors.append(f'{label} high visit must be between 0 and {MAX_VISIT}, got {high_visit}')

    return errors


def validate_match(record: Mapping[str, Any], roster: Sequence[Player]) -> list[str]:
    """
    Validate a match submission against the season roster.

    Checks:
    - Record has valid field types and an ISO date
    - Both players are on the roster and are different players
    - Legs form a completed best-of-five result
    - High checkout / high visit values are possible darts scores

    Args:
        record: Raw match dict (camelCase or snake_case keys)
        roster: Season players

    Returns:
        List of validation error messages (empty if valid)
    """
    try:
        match = normalize_match(record)
    except ValueError as e:
        return [str(e)]

    errors = []
    roster_ids = {player.id for player in roster}

    for label, player_id in (('Player 1', match.player1_id), ('Player 2', match.player2_id)):
        if player_id not in roster_ids:
            errors.append(f'{label} ({player_id}) is not on the roster')

    if match.player1_id == match.player2_id:
        errors.append(f'A player cannot play themselves ({match.player1_id})')

    errors.extend(validate_legs(match.player1_legs, match.player2_legs))
    errors.extend(
        validate_high_scores('Player 1', match.player1_high_checkout, match.player1_high_visit)
    )
    errors.extend(
        validate_high_scores('Player 2', match.player2_high_checkout, match.player2_high_visit)
    )

    return errors

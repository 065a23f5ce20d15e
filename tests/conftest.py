"""Shared fixtures for engine tests."""

from datetime import date

import pytest

from dartsleague.models import Match, Player


def make_match(
    match_id,
    p1,
    p2,
    p1_legs,
    p2_legs,
    day=date(2025, 1, 7),
    **scores,
):
    """Build a Match with optional high checkout / high visit keyword args."""
    return Match(
        id=match_id,
        date=day,
        player1_id=p1,
        player2_id=p2,
        player1_legs=p1_legs,
        player2_legs=p2_legs,
        **scores,
    )


@pytest.fixture
def roster():
    """Four-player roster: A, B, C, D."""
    return [
        Player(id='a', name='Alice'),
        Player(id='b', name='Bob'),
        Player(id='c', name='Carl'),
        Player(id='d', name='Dina'),
    ]

"""Unit tests for match form validation."""

import pytest

from dartsleague.models import Player
from dartsleague.validators import validate_high_scores, validate_legs, validate_match


@pytest.fixture
def season_roster():
    return [Player('1', 'Dave'), Player('2', 'Gary'), Player('3', 'Luke')]


def submission(**overrides):
    record = {
        'date': '2025-01-07',
        'player1Id': '1',
        'player2Id': '2',
        'player1Legs': 3,
        'player2Legs': 2,
    }
    record.update(overrides)
    return record


class TestLegValidation:
    """Tests for scoreline checks."""

    @pytest.mark.parametrize('p1, p2', [(3, 0), (3, 1), (3, 2), (0, 3), (2, 3)])
    def test_valid_results(self, p1, p2):
        assert validate_legs(p1, p2) == []

    def test_no_winner(self):
        """2-2 is an unfinished match."""
        errors = validate_legs(2, 2)
        assert len(errors) == 1
        assert 'Exactly one player must win 3 legs' in errors[0]

    def test_both_winners(self):
        errors = validate_legs(3, 3)
        assert len(errors) == 1
        assert '3-3' in errors[0]

    def test_out_of_range(self):
        errors = validate_legs(4, 1)
        assert errors == ['Player 1 legs must be between 0 and 3, got 4']

    def test_negative_legs(self):
        errors = validate_legs(3, -1)
        assert errors == ['Player 2 legs must be between 0 and 3, got -1']


class TestHighScoreValidation:
    """Tests for checkout and visit checks."""

    def test_not_recorded(self):
        assert validate_high_scores('Player 1', None, None) == []

    def test_maximums_allowed(self):
        assert validate_high_scores('Player 1', 170, 180) == []

    def test_checkout_too_high(self):
        errors = validate_high_scores('Player 1', 171, None)
        assert errors == ['Player 1 high checkout must be between 0 and 170, got 171']

    def test_bogey_checkout(self):
        """169 can't be checked out with three darts."""
        errors = validate_high_scores('Player 2', 169, None)
        assert errors == ['Player 2 high checkout 169 is not a possible checkout']

    def test_visit_too_high(self):
        errors = validate_high_scores('Player 2', None, 181)
        assert errors == ['Player 2 high visit must be between 0 and 180, got 181']


class TestMatchValidation:
    """Tests for full match submissions."""

    def test_valid_submission(self, season_roster):
        assert validate_match(submission(player1HighCheckout=56), season_roster) == []

    def test_unknown_player(self, season_roster):
        errors = validate_match(submission(player2Id='99'), season_roster)
        assert errors == ['Player 2 (99) is not on the roster']

    def test_same_player_twice(self, season_roster):
        errors = validate_match(submission(player2Id='1'), season_roster)
        assert len(errors) == 1
        assert 'cannot play themselves' in errors[0]

    def test_bad_types_reported(self, season_roster):
        """Non-numeric legs come back as an error, not an exception."""
        errors = validate_match(submission(player1Legs='abc'), season_roster)
        assert len(errors) == 1
        assert 'Invalid match record' in errors[0]

    def test_multiple_errors(self, season_roster):
        errors = validate_match(
            submission(player2Id='99', player1Legs=2, player2HighVisit=200),
            season_roster,
        )
        assert len(errors) == 3

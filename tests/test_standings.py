"""Unit tests for the league table calculation."""

import random
from datetime import date

from conftest import make_match

from dartsleague.models import Player
from dartsleague.standings import compute_standings, rank_by_player


def by_id(standings):
    return {s.id: s for s in standings}


class TestPointsFormula:
    """Tests for win points and bonus points."""

    def test_win_plus_checkout_bonus_and_visit_bonus(self):
        """Winner with a 60 checkout gets 4, loser with a 160 visit gets 1."""
        roster = [Player('p1', 'One'), Player('p2', 'Two')]
        matches = [
            make_match('m1', 'p1', 'p2', 3, 1, player1_high_checkout=60, player2_high_visit=160)
        ]
        table = by_id(compute_standings(roster, matches))
        assert table['p1'].points == 4
        assert table['p1'].bonus_checkouts == 1
        assert table['p1'].bonus_visits == 0
        assert table['p2'].points == 1
        assert table['p2'].bonus_visits == 1
        assert table['p2'].bonus_checkouts == 0

    def test_bonus_thresholds_are_inclusive(self):
        """A 50 checkout and a 150 visit both earn bonus points."""
        roster = [Player('p1', 'One'), Player('p2', 'Two')]
        matches = [
            make_match('m1', 'p1', 'p2', 1, 3, player1_high_checkout=50, player1_high_visit=150)
        ]
        table = by_id(compute_standings(roster, matches))
        assert table['p1'].points == 2

    def test_below_thresholds_no_bonus(self):
        """A 49 checkout and a 149 visit earn nothing."""
        roster = [Player('p1', 'One'), Player('p2', 'Two')]
        matches = [
            make_match('m1', 'p1', 'p2', 3, 0, player1_high_checkout=49, player1_high_visit=149)
        ]
        table = by_id(compute_standings(roster, matches))
        assert table['p1'].points == 3
        assert table['p1'].high_checkout == 49
        assert table['p1'].high_visit == 149

    def test_bonuses_counted_per_match(self):
        """Each qualifying match earns its own bonus point."""
        roster = [Player('p1', 'One'), Player('p2', 'Two')]
        matches = [
            make_match('m1', 'p1', 'p2', 3, 0, player1_high_checkout=60),
            make_match('m2', 'p1', 'p2', 3, 2, player1_high_checkout=80),
            make_match('m3', 'p2', 'p1', 3, 1, player2_high_checkout=100),
        ]
        table = by_id(compute_standings(roster, matches))
        assert table['p1'].bonus_checkouts == 3
        assert table['p1'].points == 2 * 3 + 3
        assert table['p1'].high_checkout == 100

    def test_high_scores_are_running_maximum(self):
        """High checkout/visit keep the best value across matches."""
        roster = [Player('p1', 'One'), Player('p2', 'Two')]
        matches = [
            make_match('m1', 'p1', 'p2', 3, 0, player1_high_checkout=120, player1_high_visit=171),
            make_match('m2', 'p1', 'p2', 3, 0, player1_high_checkout=40, player1_high_visit=100),
        ]
        table = by_id(compute_standings(roster, matches))
        assert table['p1'].high_checkout == 120
        assert table['p1'].high_visit == 171
        assert table['p2'].high_checkout == 0
        assert table['p2'].high_visit == 0


class TestTableOrder:
    """Tests for legs, leg difference and sort order."""

    def test_hand_computed_table(self):
        """A beats B 3-1, C beats A 3-2."""
        roster = [Player('a', 'A'), Player('b', 'B'), Player('c', 'C')]
        matches = [
            make_match('m1', 'a', 'b', 3, 1),
            make_match('m2', 'c', 'a', 3, 2),
        ]
        standings = compute_standings(roster, matches)
        table = by_id(standings)

        assert (table['a'].played, table['a'].won, table['a'].lost) == (2, 1, 1)
        assert (table['a'].legs_for, table['a'].legs_against, table['a'].leg_diff) == (5, 4, 1)
        assert table['a'].points == 3

        assert (table['b'].played, table['b'].won, table['b'].lost) == (1, 0, 1)
        assert (table['b'].legs_for, table['b'].legs_against, table['b'].leg_diff) == (1, 3, -2)
        assert table['b'].points == 0

        assert (table['c'].played, table['c'].won, table['c'].lost) == (1, 1, 0)
        assert (table['c'].legs_for, table['c'].legs_against, table['c'].leg_diff) == (3, 2, 1)
        assert table['c'].points == 3

        # A and C level on points and leg difference: roster order decides
        assert [s.id for s in standings] == ['a', 'c', 'b']

    def test_leg_diff_breaks_points_tie(self, roster):
        """Equal points are separated by leg difference."""
        matches = [
            make_match('m1', 'a', 'b', 3, 2),
            make_match('m2', 'c', 'd', 3, 0),
        ]
        standings = compute_standings(roster, matches)
        assert [s.id for s in standings] == ['c', 'a', 'b', 'd']

    def test_points_beat_leg_diff(self):
        """A bonus point outranks a better leg difference."""
        roster = [Player('a', 'A'), Player('b', 'B'), Player('c', 'C'), Player('d', 'D')]
        matches = [
            make_match('m1', 'a', 'b', 3, 0),
            make_match('m2', 'c', 'd', 3, 2, player1_high_visit=180),
        ]
        standings = compute_standings(roster, matches)
        assert [s.id for s in standings][:2] == ['c', 'a']

    def test_no_matches_keeps_roster_order(self, roster):
        """Everyone on zero: table follows roster order."""
        standings = compute_standings(roster, [])
        assert [s.id for s in standings] == ['a', 'b', 'c', 'd']
        assert all(s.played == 0 and s.points == 0 for s in standings)

    def test_empty_roster(self):
        """No players gives an empty table."""
        assert compute_standings([], [make_match('m1', 'a', 'b', 3, 0)]) == []

    def test_order_independence(self, roster):
        """Shuffling the match log does not change the table."""
        matches = [
            make_match('m1', 'a', 'b', 3, 1, player1_high_checkout=72),
            make_match('m2', 'c', 'd', 2, 3, player2_high_visit=160),
            make_match('m3', 'a', 'c', 3, 2),
            make_match('m4', 'b', 'd', 3, 0, player1_high_checkout=50),
            make_match('m5', 'a', 'd', 1, 3),
            make_match('m6', 'b', 'c', 0, 3, player2_high_visit=180),
        ]
        expected = [s.to_dict() for s in compute_standings(roster, matches)]

        rng = random.Random(7)
        for _ in range(10):
            shuffled = matches[:]
            rng.shuffle(shuffled)
            assert [s.to_dict() for s in compute_standings(roster, shuffled)] == expected

    def test_idempotent(self, roster):
        """Two calls with the same input give equal output."""
        matches = [make_match('m1', 'a', 'b', 3, 1)]
        assert compute_standings(roster, matches) == compute_standings(roster, matches)

    def test_rank_by_player(self, roster):
        """Ranks are 1-based table positions."""
        standings = compute_standings(roster, [make_match('m1', 'd', 'a', 3, 0)])
        ranks = rank_by_player(standings)
        assert ranks['d'] == 1
        assert ranks['b'] == 2
        assert ranks['a'] == 4


class TestMalformedData:
    """Tests for dangling references and malformed results."""

    def test_unknown_player_match_skipped(self, roster):
        """A match against a non-roster player is ignored entirely."""
        matches = [
            make_match('m1', 'a', 'ghost', 3, 0, player1_high_checkout=170),
            make_match('m2', 'a', 'b', 3, 1),
        ]
        table = by_id(compute_standings(roster, matches))
        assert table['a'].played == 1
        assert table['a'].high_checkout == 0
        assert table['a'].points == 3
        assert 'ghost' not in table

    def test_no_winner_counts_legs_only(self, roster):
        """A 2-2 result counts as played with legs, but no win or loss."""
        matches = [make_match('m1', 'a', 'b', 2, 2, day=date(2025, 2, 1))]
        table = by_id(compute_standings(roster, matches))
        assert table['a'].played == 1
        assert table['a'].won == 0 and table['a'].lost == 0
        assert table['a'].legs_for == 2
        assert table['b'].legs_against == 2

    def test_both_on_three_records_no_result(self, roster):
        """A 3-3 result records no win or loss for either player."""
        table = by_id(compute_standings(roster, [make_match('m1', 'a', 'b', 3, 3)]))
        assert table['a'].won == table['b'].won == 0
        assert table['a'].lost == table['b'].lost == 0

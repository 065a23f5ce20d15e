"""Data models for the darts league engine."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Union

from .constants import LEGS_TO_WIN


@dataclass(frozen=True)
class Player:
    """A league player."""
    id: str
    name: str


@dataclass(frozen=True)
class Match:
    """A single best-of-five match between two players."""
    id: str
    date: date
    player1_id: str
    player2_id: str
    player1_legs: int
    player2_legs: int
    player1_high_checkout: Optional[int] = None
    player2_high_checkout: Optional[int] = None
    player1_high_visit: Optional[int] = None
    player2_high_visit: Optional[int] = None

    @property
    def pair(self) -> frozenset:
        return frozenset((self.player1_id, self.player2_id))

    def involves(self, player_id: str) -> bool:
        return player_id in (self.player1_id, self.player2_id)

    def legs_of(self, player_id: str) -> int:
        """Legs won by ``player_id`` in this match (0 if not involved)."""
        if player_id == self.player1_id:
            return self.player1_legs
        if player_id == self.player2_id:
            return self.player2_legs
        return 0

    @property
    def winner_id(self) -> Optional[str]:
        """Id of the player who reached 3 legs, or None if the result is malformed."""
        p1_won = self.player1_legs == LEGS_TO_WIN
        p2_won = self.player2_legs == LEGS_TO_WIN
        if p1_won and not p2_won:
            return self.player1_id
        if p2_won and not p1_won:
            return self.player2_id
        return None


@dataclass
class PlayerStanding:
    """Aggregated season statistics for one player."""
    id: str
    name: str
    played: int = 0
    won: int = 0
    lost: int = 0
    points: int = 0
    legs_for: int = 0
    legs_against: int = 0
    leg_diff: int = 0
    high_checkout: int = 0
    high_visit: int = 0
    bonus_checkouts: int = 0
    bonus_visits: int = 0

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            'id': self.id,
            'name': self.name,
            'played': self.played,
            'won': self.won,
            'lost': self.lost,
            'points': self.points,
            'legsFor': self.legs_for,
            'legsAgainst': self.legs_against,
            'legDiff': self.leg_diff,
            'highCheckout': self.high_checkout,
            'highVisit': self.high_visit,
            'bonusCheckouts': self.bonus_checkouts,
            'bonusVisits': self.bonus_visits,
        }


@dataclass
class H2HRecord:
    """Head-to-head tally for one pair; player1/player2 follow roster order."""
    player1: Player
    player2: Player
    p1_wins: int = 0
    p2_wins: int = 0

    @property
    def played(self) -> int:
        return self.p1_wins + self.p2_wins


@dataclass
class PositionHistory:
    """League position per player after each match date."""
    week_labels: List[str] = field(default_factory=list)
    week_dates: List[date] = field(default_factory=list)
    positions_by_player: Dict[str, List[int]] = field(default_factory=dict)


@dataclass(frozen=True)
class Fixture:
    """An unplayed pairing plus the head-to-head record of the two players."""
    player1_id: str
    player2_id: str
    player1_wins: int = 0
    player2_wins: int = 0


@dataclass(frozen=True)
class RoundDivider:
    label: str


@dataclass
class WeekBlock:
    title: str
    badge: Optional[str] = None  # 'current', 'next-round' or None
    matches: List[Fixture] = field(default_factory=list)


ScheduleEntry = Union[RoundDivider, WeekBlock]

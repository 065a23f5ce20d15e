from .models import (
    Player,
    Match,
    PlayerStanding,
    H2HRecord,
    PositionHistory,
    Fixture,
    RoundDivider,
    WeekBlock,
)
from .normalizer import (
    normalize_player,
    normalize_players,
    normalize_match,
    normalize_matches,
)
from .standings import compute_standings
from .form import compute_form, compute_all_forms
from .head_to_head import compute_head_to_head, pair_head_to_head
from .position_history import compute_position_history, assign_player_colors
from .schedule import (
    FixtureProgress,
    compute_fixture_schedule,
    compute_fixture_progress,
    remaining_round_pairs,
    round_robin_pairs,
)
from .validators import validate_match
from .store import SeasonStore
from .report import SeasonView, build_season_report

__all__ = [
    # Models
    'Player',
    'Match',
    'PlayerStanding',
    'H2HRecord',
    'PositionHistory',
    'Fixture',
    'RoundDivider',
    'WeekBlock',
    # Normalizer
    'normalize_player',
    'normalize_players',
    'normalize_match',
    'normalize_matches',
    # Calculators
    'compute_standings',
    'compute_form',
    'compute_all_forms',
    'compute_head_to_head',
    'pair_head_to_head',
    'compute_position_history',
    'assign_player_colors',
    # Fixtures
    'FixtureProgress',
    'compute_fixture_schedule',
    'compute_fixture_progress',
    'remaining_round_pairs',
    'round_robin_pairs',
    # Validation
    'validate_match',
    # Store and views
    'SeasonStore',
    'SeasonView',
    'build_season_report',
]

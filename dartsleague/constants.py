"""Constants for the darts league engine."""

from pathlib import Path

# Project layout
PROJECT_DIR = Path(__file__).parent.parent
DATA_DIR = PROJECT_DIR / 'data'
SEASONS_DIR = DATA_DIR / 'seasons'
WEB_DIR = PROJECT_DIR / 'web'
WEB_DATA_DIR = WEB_DIR / 'data'

# Match format: first to 3 legs
LEGS_TO_WIN = 3

# League points
POINTS_PER_WIN = 3
BONUS_CHECKOUT_THRESHOLD = 50
BONUS_VISIT_THRESHOLD = 150

# Physical limits of a darts score (used by the match validator only)
MAX_CHECKOUT = 170
MAX_VISIT = 180
BOGEY_CHECKOUTS = frozenset({159, 162, 163, 165, 166, 168, 169})

# Recent form
FORM_LENGTH = 3
FORM_WIN = 'W'
FORM_LOSS = 'L'
FORM_EMPTY = '-'

# Fixture schedule badges
BADGE_CURRENT = 'current'
BADGE_NEXT_ROUND = 'next-round'

# Chart line colours, assigned by roster index
PALETTE = [
    '#ef4444',
    '#3b82f6',
    '#22c55e',
    '#f97316',
    '#8b5cf6',
    '#eab308',
    '#ec4899',
    '#14b8a6',
    '#64748b',
    '#a855f7',
]

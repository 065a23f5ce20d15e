"""League configuration management."""

from functools import lru_cache

from .constants import DATA_DIR
from .schemas import LeagueConfig
from .utils import load_json


@lru_cache(maxsize=1)
def get_config() -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Configuration is cached after first load.

    Returns:
        LeagueConfig object with validated settings

    Raises:
        FileNotFoundError: If league_config.json doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from dartsleague.config import get_config
        config = get_config()
        print(f"Current season: {config.current_season}")
    """
    return load_json(DATA_DIR / 'league_config.json', schema=LeagueConfig)


def get_league_name() -> str:
    """Get the league's display name from config."""
    return get_config().league_name


def get_current_season() -> str:
    """Get the current season from config."""
    return get_config().current_season


def get_seasons() -> list[str]:
    """Get all configured seasons, oldest first."""
    return get_config().seasons


def get_form_length() -> int:
    """Get the number of recent results shown in the form column."""
    return get_config().form_length


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()

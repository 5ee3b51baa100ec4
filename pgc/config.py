"""League configuration management."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from .schemas import LeagueConfig
from .utils import load_json

logger = logging.getLogger('pgc.config')

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'league_config.json'


def get_config_path() -> Path:
    """Config location: $PGC_CONFIG if set, else data/league_config.json."""
    return Path(os.environ.get('PGC_CONFIG', DEFAULT_CONFIG_PATH))


@lru_cache(maxsize=1)
def get_config() -> LeagueConfig:
    """
    Load league configuration.

    Configuration is cached after first load. When no config file exists
    the built-in defaults are used.

    Returns:
        LeagueConfig object with validated settings

    Raises:
        ValueError: If the config file has an invalid structure

    Example:
        from pgc.config import get_config
        config = get_config()
        print(f"Championship: {config.tour_championship_name}")
    """
    path = get_config_path()
    if not path.exists():
        logger.debug(f'No league config at {path}, using defaults')
        return LeagueConfig()
    return load_json(path, schema=LeagueConfig)


def get_default_par() -> int:
    """Get the course par used when an event does not name one."""
    return get_config().default_par


def get_playoff_selection() -> dict[int, list[int]]:
    """Get best-N golfer counts per round, keyed by playoff event index."""
    return get_config().playoff_selection


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file (or $PGC_CONFIG) changes during runtime.
    """
    get_config.cache_clear()

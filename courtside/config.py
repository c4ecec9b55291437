"""League configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import LeagueConfig
from .utils import load_json

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'league_config.json'


def load_league_config(path: Path | str) -> LeagueConfig:
    """
    Load and validate a league configuration document.

    Args:
        path: Path to a league config JSON file

    Returns:
        LeagueConfig object with validated settings

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file has an invalid structure
    """
    return load_json(path, schema=LeagueConfig)


@lru_cache(maxsize=1)
def get_config() -> LeagueConfig:
    """
    Load the default league configuration from data/league_config.json.

    Configuration is cached after first load.

    Example:
        from courtside.config import get_config
        config = get_config()
        print(f"{config.title}: {config.total_days} days")
    """
    return load_league_config(DEFAULT_CONFIG_PATH)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()

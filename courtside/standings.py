"""League standings: replay results, reconcile seeds, rank players.

compute_standings is a pure function of its arguments. Inputs are copied
before use and every returned PlayerStats is freshly built, so identical
inputs always give identical standings and callers can cache them.
"""

import logging
from typing import Any, Optional

from .models import PlayerStats, initialize_player_stats
from .ranking import sort_players_with_tie_breaking
from .results import process_day_results
from .schemas import LeagueConfig
from .seeding import select_seed
from .utils import day_lookup, snapshot
from .validators import ensure_league_config

logger = logging.getLogger('courtside.standings')


def compute_standings_by_id(
    config: LeagueConfig,
    results: Optional[dict],
    matchups: Optional[dict],
    attendance: Optional[dict],
    upto_day: int,
) -> dict[int, PlayerStats]:
    """
    Cumulative stats for every rostered player through ``upto_day``.

    Args:
        config: League configuration (roster, seeds)
        results: Day -> court -> list of game results
        matchups: Day -> court -> list of matchups
        attendance: Day -> player id -> per-game presence flags
        upto_day: Last day to include (inclusive); 0 gives empty stats

    Returns:
        Player id -> PlayerStats

    Raises:
        LeagueConfigError: If the roster is empty or the day counts are invalid
    """
    ensure_league_config(config, require_players=True)

    stats = initialize_player_stats(config.roster)
    seed = select_seed(config)
    seed.reconcile(stats, snapshot(results), snapshot(matchups), snapshot(attendance), upto_day)

    logger.debug(
        f'Computed standings for "{config.title}" through day {upto_day} '
        f'({type(seed).__name__}, {len(stats)} players)'
    )
    return stats


def compute_standings(
    config: LeagueConfig,
    results: Optional[dict],
    matchups: Optional[dict],
    attendance: Optional[dict],
    upto_day: int,
) -> list[PlayerStats]:
    """Ranked standings through ``upto_day``. See compute_standings_by_id."""
    stats = compute_standings_by_id(config, results, matchups, attendance, upto_day)
    return sort_players_with_tie_breaking(stats.values())


def players_for_generator(
    config: LeagueConfig,
    results: Optional[dict],
    matchups: Optional[dict],
    attendance: Optional[dict],
    day: int,
) -> list[PlayerStats]:
    """Ranking a day's matchups are generated from: standings through the day before."""
    return compute_standings(config, results, matchups, attendance, day - 1)


def daily_points_projection(
    config: LeagueConfig,
    results: Optional[dict],
    matchups: Optional[dict],
    attendance: Optional[dict],
    day: int,
) -> list[dict[str, Any]]:
    """
    Read-only view of one day's points per player.

    This is all the commentary collaborator receives: id, name and the points
    earned on ``day`` alone, in roster order.
    """
    ensure_league_config(config, require_players=True)

    stats = initialize_player_stats(config.roster)
    process_day_results(
        stats,
        day,
        snapshot(day_lookup(results, day)),
        snapshot(day_lookup(matchups, day)),
        snapshot(day_lookup(attendance, day)),
    )
    return [
        {'id': s.player_id, 'name': s.name, 'dailyPoints': s.daily_points.get(day, 0)}
        for s in stats.values()
    ]

"""Canonical league ranking order.

Players are ordered by:
1. League points (desc)
2. Points for (desc)
3. Points against (asc)
4. Player id (asc, for stability)
"""

from typing import Iterable

from .models import PlayerStats


def ranking_key(stats: PlayerStats) -> tuple[int, int, int, int]:
    """Sort key implementing the ranking order."""
    return (-stats.league_points, -stats.points_for, stats.points_against, stats.player_id)


def compare_players(a: PlayerStats, b: PlayerStats) -> int:
    """Three-way comparison: negative when ``a`` ranks ahead of ``b``."""
    key_a, key_b = ranking_key(a), ranking_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_players_with_tie_breaking(players: Iterable[PlayerStats]) -> list[PlayerStats]:
    """Return a new list in ranking order. The input is left untouched."""
    return sorted(players, key=ranking_key)


def assign_ranks(players: Iterable[PlayerStats]) -> list[tuple[int, PlayerStats]]:
    """Pair each player with a 1-based rank in ranking order."""
    return list(enumerate(sort_players_with_tie_breaking(players), 1))

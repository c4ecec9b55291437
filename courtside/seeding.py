"""Seed reconciliation: how historical stats combine with replayed results.

Leagues that start mid-season carry externally supplied stats through the
seed cutover (day 3). From day 4 onwards results are processed normally and
added on top. Leagues without seeded stats are always replayed from day 1.
"""

import logging
from typing import Optional

from .constants import FIRST_POST_SEED_DAY, SEED_CUTOVER_DAY
from .models import PlayerStats
from .results import process_day_results
from .schemas import LeagueConfig, SeededPlayerStats
from .utils import day_lookup

logger = logging.getLogger('courtside.seeding')


class SeedReconciler:
    """
    Base class for building cumulative stats through a given day.

    Subclasses decide where replay starts and what the starting values are;
    the day-by-day replay itself is shared.
    """

    def reconcile(
        self,
        stats: dict[int, PlayerStats],
        results: dict,
        matchups: dict,
        attendance: dict,
        upto_day: int,
    ) -> None:
        """Fill ``stats`` in place with totals through ``upto_day``."""
        raise NotImplementedError

    def replay(
        self,
        stats: dict[int, PlayerStats],
        results: dict,
        matchups: dict,
        attendance: dict,
        first_day: int,
        upto_day: int,
    ) -> None:
        """Run the result processor for each day in ``first_day..upto_day``."""
        for day in range(first_day, upto_day + 1):
            process_day_results(
                stats,
                day,
                day_lookup(results, day),
                day_lookup(matchups, day),
                day_lookup(attendance, day),
            )

    @staticmethod
    def finalize(stats: dict[int, PlayerStats], base_points: Optional[dict[int, int]] = None) -> None:
        """Set league points from daily points (plus any base) and the differential."""
        base_points = base_points or {}
        for player_id, player_stats in stats.items():
            player_stats.league_points = base_points.get(player_id, 0) + sum(
                player_stats.daily_points.values()
            )
            player_stats.point_differential = player_stats.points_for - player_stats.points_against


class NullSeed(SeedReconciler):
    """Full replay from day 1."""

    def reconcile(self, stats, results, matchups, attendance, upto_day):
        self.replay(stats, results, matchups, attendance, 1, upto_day)
        self.finalize(stats)


class FixedCutoverSeed(SeedReconciler):
    """Seeded stats stand in for days 1-3; replay resumes at day 4."""

    def __init__(self, seeded_stats: dict[int, SeededPlayerStats]):
        self.seeded_stats = seeded_stats

    def applies_to(self, upto_day: int) -> bool:
        return upto_day >= SEED_CUTOVER_DAY

    def reconcile(self, stats, results, matchups, attendance, upto_day):
        if not self.applies_to(upto_day):
            NullSeed().reconcile(stats, results, matchups, attendance, upto_day)
            return

        base_points = {}
        for player_id, seeded in self.seeded_stats.items():
            player_stats = stats.get(player_id)
            if player_stats is None:
                logger.debug(f'Seeded stats for unknown player {player_id} ignored')
                continue
            player_stats.wins = seeded.wins
            player_stats.losses = seeded.losses
            player_stats.ties = seeded.ties
            player_stats.points_for = seeded.points_for
            player_stats.points_against = seeded.points_against
            player_stats.daily_points = {}
            base_points[player_id] = seeded.league_points

        self.replay(stats, results, matchups, attendance, FIRST_POST_SEED_DAY, upto_day)
        self.finalize(stats, base_points)


def select_seed(config: LeagueConfig) -> SeedReconciler:
    """Pick the reconciler for a league's configuration."""
    if config.seeded_stats:
        return FixedCutoverSeed(config.seeded_stats)
    return NullSeed()

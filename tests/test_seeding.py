"""Tests for seed reconciliation at the day-3 cutover."""

import pytest

from courtside.seeding import FixedCutoverSeed, NullSeed, select_seed
from courtside.standings import compute_standings_by_id

SEEDS = {
    1: {'wins': 2, 'losses': 1, 'ties': 0, 'pointsFor': 60, 'pointsAgainst': 50, 'leaguePoints': 6},
    2: {'wins': 1, 'losses': 1, 'ties': 1, 'pointsFor': 55, 'pointsAgainst': 52, 'leaguePoints': 4},
    3: {'wins': 0, 'losses': 2, 'ties': 1, 'pointsFor': 40, 'pointsAgainst': 58, 'leaguePoints': 1},
    4: {'wins': 1, 'losses': 2, 'ties': 0, 'pointsFor': 48, 'pointsAgainst': 43, 'leaguePoints': 3},
}


@pytest.fixture
def seeded_league(make_config, make_matchup, score):
    """Seeded league with a game recorded on each of days 1-4."""
    config = make_config(seeded_stats=SEEDS)
    matchups = {day: {'Court 1': [make_matchup([1, 2], [3, 4])]} for day in range(1, 5)}
    results = {day: {'Court 1': [score(21, 15)]} for day in range(1, 5)}
    return config, results, matchups


class TestSeedBoundary:
    """Tests for the fixed cutover: seeds cover days 1-3, results resume at day 4."""

    def test_cutover_day_returns_seed_exactly(self, seeded_league):
        config, results, matchups = seeded_league
        stats = compute_standings_by_id(config, results, matchups, {}, 3)

        p1 = stats[1]
        assert (p1.wins, p1.losses, p1.ties) == (2, 1, 0)
        assert (p1.points_for, p1.points_against) == (60, 50)
        assert p1.league_points == 6
        assert p1.point_differential == 10
        assert p1.daily_points == {}

    def test_day_after_cutover_adds_only_that_day(self, seeded_league):
        config, results, matchups = seeded_league
        stats = compute_standings_by_id(config, results, matchups, {}, 4)

        p1 = stats[1]
        assert (p1.wins, p1.losses) == (3, 1)
        assert (p1.points_for, p1.points_against) == (81, 65)
        assert p1.league_points == 9
        assert p1.point_differential == 16
        assert p1.daily_points == {4: 3}

        p3 = stats[3]
        assert p3.losses == 3
        assert p3.league_points == 1
        assert p3.daily_points == {4: 0}

    def test_before_cutover_replays_from_day_one(self, seeded_league):
        """Seeds are ignored before day 3."""
        config, results, matchups = seeded_league
        stats = compute_standings_by_id(config, results, matchups, {}, 2)

        assert stats[1].wins == 2
        assert stats[1].points_for == 42
        assert stats[1].league_points == 6
        assert stats[1].daily_points == {1: 3, 2: 3}

    def test_unseeded_player_starts_from_zero(self, make_config, make_matchup, score):
        config = make_config(seeded_stats={1: SEEDS[1]})
        matchups = {4: {'Court 1': [make_matchup([1, 2], [3, 4])]}}
        results = {4: {'Court 1': [score(21, 15)]}}
        stats = compute_standings_by_id(config, results, matchups, {}, 4)

        assert stats[2].wins == 1
        assert stats[2].league_points == 3
        assert stats[1].league_points == 9

    def test_seed_for_unknown_player_ignored(self, make_config):
        config = make_config(seeded_stats={99: SEEDS[1]})
        stats = compute_standings_by_id(config, {}, {}, {}, 3)
        assert 99 not in stats
        assert all(s.league_points == 0 for s in stats.values())


class TestSelectSeed:
    """Tests for picking the reconciler from configuration."""

    def test_unseeded_league(self, make_config):
        assert isinstance(select_seed(make_config()), NullSeed)

    def test_seeded_league(self, make_config):
        seed = select_seed(make_config(seeded_stats=SEEDS))
        assert isinstance(seed, FixedCutoverSeed)
        assert not seed.applies_to(2)
        assert seed.applies_to(3)

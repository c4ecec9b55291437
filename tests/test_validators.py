"""Unit tests for validation functions."""

import pytest

from courtside.validators import (
    LeagueConfigError,
    ensure_league_config,
    validate_day_matchups,
    validate_league_config,
)


class TestLeagueConfigValidation:
    """Tests for league-level checks."""

    def test_valid_config(self, make_config):
        assert validate_league_config(make_config()) == []

    def test_non_positive_counts(self, make_config):
        errors = validate_league_config(make_config(total_days=0, games_per_day=-1))
        assert len(errors) == 2
        assert 'totalDays must be positive, got 0' in errors[0]
        assert 'gamesPerDay must be positive, got -1' in errors[1]

    def test_ensure_passes_valid_config(self, make_config):
        ensure_league_config(make_config(), require_players=True)

    def test_ensure_reports_every_problem(self, make_config):
        with pytest.raises(LeagueConfigError) as exc_info:
            ensure_league_config(make_config(num_players=0, games_per_day=0), require_players=True)
        message = str(exc_info.value)
        assert 'gamesPerDay' in message
        assert 'roster is empty' in message

    def test_error_is_value_error(self):
        assert issubclass(LeagueConfigError, ValueError)


class TestDayMatchupValidation:
    """Tests for checking a day's matchups against the league shape."""

    def test_valid_day(self, make_config, make_matchup):
        config = make_config(num_players=8, courts=2)
        day = {
            'Court 1': [make_matchup([1, 2], [3, 4])],
            'Court 2': [make_matchup([5, 6], [7, 8])],
        }
        assert validate_day_matchups(day, config) == []

    def test_wrong_game_count(self, make_config, make_matchup):
        config = make_config(games_per_day=2)
        warnings = validate_day_matchups({'Court 1': [make_matchup([1, 2], [3, 4])]}, config)
        assert warnings == ['Court 1 has 1 games (expected 2)']

    def test_wrong_team_size(self, make_config, make_matchup):
        config = make_config()
        warnings = validate_day_matchups({'Court 1': [make_matchup([1, 2, 3], [4])]}, config)
        assert len(warnings) == 2
        assert 'Team A has 3 players' in warnings[0]

    def test_player_on_both_teams(self, make_config, make_matchup):
        config = make_config()
        warnings = validate_day_matchups({'Court 1': [make_matchup([1, 2], [2, 4])]}, config)
        assert warnings == ['Court 1 game 1 has players on both teams: 2']

    def test_player_on_two_courts(self, make_config, make_matchup):
        config = make_config(num_players=8, courts=2)
        day = {
            'Court 1': [make_matchup([1, 2], [3, 4])],
            'Court 2': [make_matchup([1, 6], [7, 8])],
        }
        warnings = validate_day_matchups(day, config)
        assert warnings == ['Player 1 is on Court 1 and Court 2 in game 1']

    def test_missing_matchup(self, make_config):
        warnings = validate_day_matchups({'Court 1': [None]}, make_config())
        assert warnings == ['Court 1 game 1 has no matchup']

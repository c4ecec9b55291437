"""Tests for loading and validating league configuration."""

import json

import pytest
from pydantic import ValidationError

from courtside.config import clear_config_cache, get_config, load_league_config
from courtside.schemas import LeagueConfig


@pytest.fixture
def config_file(tmp_path):
    """League config document in the persistence layer's camelCase form."""
    document = {
        'title': 'Discovery League',
        'totalDays': 6,
        'gamesPerDay': 3,
        'playersPerTeam': 2,
        'numberOfCourts': 2,
        'leagueType': 'custom',
        'lockedDays': {'1': True},
        'seededStats': {'1': {'wins': 2, 'pointsFor': 40, 'leaguePoints': 6}},
        'players': [
            {'id': 1, 'name': 'Avery', 'grade': '7'},
            {'id': 2, 'name': 'Blake'},
        ],
        'someUiSetting': True,
    }
    path = tmp_path / 'league_config.json'
    path.write_text(json.dumps(document))
    return path


class TestLoadLeagueConfig:
    """Tests for reading config documents."""

    def test_camel_case_document(self, config_file):
        config = load_league_config(config_file)

        assert config.total_days == 6
        assert config.games_per_day == 3
        assert config.courts == 2
        assert config.league_type == 'custom'
        assert config.locked_days == {1: True}
        assert config.seeded_stats[1].points_for == 40
        assert config.seeded_stats[1].losses == 0
        assert config.roster[0].grade == '7'
        assert config.players_per_court == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_league_config(tmp_path / 'missing.json')

    def test_invalid_document(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps({'totalDays': 3, 'gamesPerDay': 1, 'playersPerTeam': 0}))
        with pytest.raises(ValueError, match='Schema validation failed'):
            load_league_config(path)

    def test_default_config(self):
        clear_config_cache()
        config = get_config()
        assert config.title
        assert config is get_config()
        clear_config_cache()


class TestLeagueConfigSchema:
    """Tests for schema-level checks."""

    def test_duplicate_player_ids(self):
        with pytest.raises(ValidationError, match='Duplicate player id'):
            LeagueConfig(
                total_days=1,
                games_per_day=1,
                players_per_team=1,
                players=[{'id': 1, 'name': 'A'}, {'id': 1, 'name': 'B'}],
            )

    def test_unknown_league_type(self):
        with pytest.raises(ValidationError):
            LeagueConfig(total_days=1, games_per_day=1, players_per_team=1, league_type='ladder')

    def test_duplicate_court_names(self):
        with pytest.raises(ValidationError, match='Duplicate court names'):
            LeagueConfig(
                total_days=1, games_per_day=1, players_per_team=1, court_names=['A', 'A']
            )

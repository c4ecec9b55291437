"""Shared fixtures for courtside tests."""

import pytest

from courtside.models import GameMatchup, Player
from courtside.schemas import LeagueConfig


def _player(player_id):
    return Player(id=player_id, name=f'Player {player_id}')


@pytest.fixture
def make_config():
    """Factory for small league configs; keyword arguments override defaults."""

    def _make(num_players=4, **overrides):
        settings = {
            'title': 'Test League',
            'players': [{'id': i, 'name': f'Player {i}'} for i in range(1, num_players + 1)],
            'total_days': 5,
            'games_per_day': 1,
            'players_per_team': 2,
            'courts': 1,
            'league_type': 'standard',
        }
        settings.update(overrides)
        return LeagueConfig(**settings)

    return _make


@pytest.fixture
def make_matchup():
    """Factory for a GameMatchup from two lists of player ids."""

    def _make(team_a_ids, team_b_ids):
        return GameMatchup(
            team_a=tuple(_player(i) for i in team_a_ids),
            team_b=tuple(_player(i) for i in team_b_ids),
        )

    return _make


@pytest.fixture
def score():
    """Plain-data game score, as stored by the persistence layer."""

    def _make(team_a, team_b):
        return {'teamAScore': team_a, 'teamBScore': team_b}

    return _make

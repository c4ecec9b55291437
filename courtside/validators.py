"""Validation functions for league configuration and generated matchups."""

import logging

from .models import GameMatchup
from .schemas import LeagueConfig

logger = logging.getLogger('courtside.validators')


class LeagueConfigError(ValueError):
    """Raised when a league is misconfigured badly enough to stop computation."""


def validate_league_config(config: LeagueConfig) -> list[str]:
    """
    Check the settings the engine cannot work around.

    Checks:
    - total_days and games_per_day are positive
    - players_per_team is positive

    Args:
        config: League configuration to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if config.total_days <= 0:
        errors.append(f'totalDays must be positive, got {config.total_days}')
    if config.games_per_day <= 0:
        errors.append(f'gamesPerDay must be positive, got {config.games_per_day}')
    if config.players_per_team <= 0:
        errors.append(f'playersPerTeam must be positive, got {config.players_per_team}')

    return errors


def ensure_league_config(config: LeagueConfig, require_players: bool = False) -> None:
    """
    Raise LeagueConfigError if the league cannot be computed.

    Args:
        config: League configuration to check
        require_players: Also reject an empty roster

    Raises:
        LeagueConfigError: With every problem found, joined into one message
    """
    errors = validate_league_config(config)
    if require_players and not config.players:
        errors.append('League roster is empty')

    if errors:
        message = f'League "{config.title}" is misconfigured: ' + '; '.join(errors)
        logger.error(message)
        raise LeagueConfigError(message)


def validate_day_matchups(day_matchups: dict, config: LeagueConfig) -> list[str]:
    """
    Check a day's matchups against the league's shape.

    Checks:
    - Each court has gamesPerDay games
    - Each team has playersPerTeam players
    - No player is on both teams of a game
    - No player is on two courts in the same game slot

    Args:
        day_matchups: Court name -> list of GameMatchup (or plain dicts)
        config: League configuration

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    slot_players: dict[int, dict[int, str]] = {}

    for court, court_matchups in day_matchups.items():
        court_matchups = court_matchups or []
        if len(court_matchups) != config.games_per_day:
            warnings.append(
                f'{court} has {len(court_matchups)} games (expected {config.games_per_day})'
            )

        for game_index, raw in enumerate(court_matchups):
            if not raw:
                warnings.append(f'{court} game {game_index + 1} has no matchup')
                continue
            matchup = GameMatchup.from_plain(raw)

            for label, team in (('Team A', matchup.team_a), ('Team B', matchup.team_b)):
                if len(team) != config.players_per_team:
                    warnings.append(
                        f'{court} game {game_index + 1} {label} has {len(team)} players '
                        f'(expected {config.players_per_team})'
                    )

            both = {p.id for p in matchup.team_a} & {p.id for p in matchup.team_b}
            if both:
                warnings.append(
                    f'{court} game {game_index + 1} has players on both teams: '
                    f'{", ".join(str(i) for i in sorted(both))}'
                )

            seen = slot_players.setdefault(game_index, {})
            for player_id in sorted(matchup.player_ids()):
                other_court = seen.get(player_id)
                if other_court is not None and other_court != court:
                    warnings.append(
                        f'Player {player_id} is on {other_court} and {court} in game {game_index + 1}'
                    )
                seen[player_id] = court

    return warnings

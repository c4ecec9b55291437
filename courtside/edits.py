"""Copy-on-write edits to a league's day data, gated by day locks.

The standings engine computes over whatever data it is given. Locks are
enforced here, on the write path: every edit refuses to touch a locked day
and returns a new structure rather than mutating the one passed in.
"""

import copy
import logging
from typing import Any, Optional

from .constants import TEAM_A_KEY, TEAM_B_KEY, UNPLAYED
from .models import GameMatchup, GameScore
from .schemas import LeagueConfig

logger = logging.getLogger('courtside.edits')

TEAM_KEYS = (TEAM_A_KEY, TEAM_B_KEY)


class DayLockedError(Exception):
    """Raised when an edit targets a locked day."""

    def __init__(self, day: int):
        super().__init__(f'Day {day} is locked. Unlock it before making changes.')
        self.day = day


def is_day_locked(config: LeagueConfig, day: int) -> bool:
    return bool(config.locked_days.get(day, False))


def ensure_day_unlocked(config: LeagueConfig, day: int) -> None:
    if is_day_locked(config, day):
        logger.info(f'Rejected edit to locked day {day}')
        raise DayLockedError(day)


def _day_key(by_day: dict, day: int) -> Any:
    if day not in by_day and str(day) in by_day:
        return str(day)
    return day


def _check_game_index(config: LeagueConfig, game_index: int) -> None:
    if not 0 <= game_index < config.games_per_day:
        raise ValueError(f'Game index {game_index} out of range (0-{config.games_per_day - 1})')


def set_game_result(
    results: Optional[dict],
    config: LeagueConfig,
    day: int,
    court: str,
    game_index: int,
    result: Any,
) -> dict:
    """
    Record a game result.

    Args:
        results: Day -> court -> list of results
        config: League configuration
        day: Day number
        court: Court name
        game_index: 0-based game number
        result: 'unplayed', a GameScore, or a plain score dict

    Returns:
        New results map; a missing court row is created as all 'unplayed'

    Raises:
        DayLockedError: If the day is locked
        ValueError: If game_index is outside the day's games
    """
    ensure_day_unlocked(config, day)
    _check_game_index(config, game_index)

    new_results = copy.deepcopy(results) if results else {}
    day_results = new_results.setdefault(_day_key(new_results, day), {})
    row = day_results.setdefault(court, [UNPLAYED] * config.games_per_day)
    while len(row) < config.games_per_day:
        row.append(UNPLAYED)

    row[game_index] = result.to_plain() if isinstance(result, GameScore) else copy.deepcopy(result)
    return new_results


def set_attendance(
    attendance: Optional[dict],
    config: LeagueConfig,
    day: int,
    player_id: int,
    game_index: int,
    present: bool,
) -> dict:
    """Mark a player present or absent for one game slot. Returns a new map."""
    ensure_day_unlocked(config, day)
    _check_game_index(config, game_index)

    new_attendance = copy.deepcopy(attendance) if attendance else {}
    day_attendance = new_attendance.setdefault(_day_key(new_attendance, day), {})
    row = day_attendance.setdefault(_day_key(day_attendance, player_id), [True] * config.games_per_day)
    while len(row) < config.games_per_day:
        row.append(True)

    row[game_index] = present
    return new_attendance


def set_day_attendance(
    attendance: Optional[dict],
    config: LeagueConfig,
    day: int,
    player_id: int,
    present: bool,
) -> dict:
    """Mark a player present or absent for every game of a day. Returns a new map."""
    ensure_day_unlocked(config, day)

    new_attendance = copy.deepcopy(attendance) if attendance else {}
    day_attendance = new_attendance.setdefault(_day_key(new_attendance, day), {})
    day_attendance[_day_key(day_attendance, player_id)] = [present] * config.games_per_day
    return new_attendance


def _store(original: Any, matchup: GameMatchup) -> Any:
    """Keep the representation the caller used: plain dict in, plain dict out."""
    return matchup if isinstance(original, GameMatchup) else matchup.to_plain()


def move_player(
    matchups: dict,
    config: LeagueConfig,
    day: int,
    court: str,
    game_index: int,
    player_id: int,
    from_team: str,
) -> dict:
    """
    Move a player to the other team of the same game.

    Returns the original map unchanged when the game or player is not found.
    """
    ensure_day_unlocked(config, day)
    if from_team not in TEAM_KEYS:
        raise ValueError(f'from_team must be one of {TEAM_KEYS}, got {from_team!r}')

    day_matchups = (matchups or {}).get(_day_key(matchups or {}, day)) or {}
    games = day_matchups.get(court) or []
    if game_index >= len(games) or not games[game_index]:
        return matchups

    original = games[game_index]
    matchup = GameMatchup.from_plain(original)
    source = list(matchup.team_a if from_team == TEAM_A_KEY else matchup.team_b)
    target = list(matchup.team_b if from_team == TEAM_A_KEY else matchup.team_a)

    index = next((i for i, p in enumerate(source) if p.id == player_id), None)
    if index is None:
        return matchups

    target.append(source.pop(index))
    if from_team == TEAM_A_KEY:
        moved = GameMatchup(team_a=tuple(source), team_b=tuple(target))
    else:
        moved = GameMatchup(team_a=tuple(target), team_b=tuple(source))

    new_matchups = copy.deepcopy(matchups)
    new_matchups[_day_key(new_matchups, day)][court][game_index] = _store(original, moved)
    return new_matchups


def _locate(day_matchups: dict, game_index: int, player_id: int) -> Optional[tuple[str, str, int]]:
    for court, games in day_matchups.items():
        if game_index >= len(games or []) or not games[game_index]:
            continue
        matchup = GameMatchup.from_plain(games[game_index])
        for team_key, team in zip(TEAM_KEYS, (matchup.team_a, matchup.team_b)):
            for position, player in enumerate(team):
                if player.id == player_id:
                    return court, team_key, position
    return None


def swap_players(
    matchups: dict,
    config: LeagueConfig,
    day: int,
    game_index: int,
    first_id: int,
    second_id: int,
) -> dict:
    """
    Swap two players within the same game slot, on the same or different courts.

    Returns the original map unchanged when either player is not in that slot.
    """
    ensure_day_unlocked(config, day)

    day_matchups = (matchups or {}).get(_day_key(matchups or {}, day)) or {}
    first = _locate(day_matchups, game_index, first_id)
    second = _locate(day_matchups, game_index, second_id)
    if first is None or second is None or first_id == second_id:
        logger.warning(f'Could not find both players {first_id} and {second_id} in game {game_index + 1}')
        return matchups

    new_matchups = copy.deepcopy(matchups)
    new_day = new_matchups[_day_key(new_matchups, day)]
    parsed = {}
    for court in {first[0], second[0]}:
        m = GameMatchup.from_plain(new_day[court][game_index])
        parsed[court] = {TEAM_A_KEY: list(m.team_a), TEAM_B_KEY: list(m.team_b)}

    first_player = parsed[first[0]][first[1]][first[2]]
    second_player = parsed[second[0]][second[1]][second[2]]
    parsed[first[0]][first[1]][first[2]] = second_player
    parsed[second[0]][second[1]][second[2]] = first_player

    for court, teams in parsed.items():
        swapped = GameMatchup(team_a=tuple(teams[TEAM_A_KEY]), team_b=tuple(teams[TEAM_B_KEY]))
        new_day[court][game_index] = _store(new_day[court][game_index], swapped)
    return new_matchups

"""Fold one day's game results and attendance into player stats."""

import logging
from typing import Any, Optional

from .constants import (
    LOSS_POINTS,
    TEAM_A_SCORE_KEY,
    TEAM_B_SCORE_KEY,
    TIE_POINTS,
    UNPLAYED,
    WIN_POINTS,
)
from .models import GameMatchup, GameScore, PlayerStats

logger = logging.getLogger('courtside.results')


def _coerce_score(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        score = int(value)
    except (TypeError, ValueError):
        return None
    return score if score >= 0 else None


def parse_game_result(raw: Any) -> Optional[GameScore]:
    """
    Normalize a stored game result.

    Args:
        raw: 'unplayed', a GameScore, or a {'teamAScore', 'teamBScore'} dict

    Returns:
        GameScore (possibly incomplete), or None for unplayed or unreadable
        entries
    """
    if raw is None or raw == UNPLAYED:
        return None
    if isinstance(raw, GameScore):
        return raw
    if isinstance(raw, dict):
        a = raw.get(TEAM_A_SCORE_KEY, raw.get('team_a_score'))
        b = raw.get(TEAM_B_SCORE_KEY, raw.get('team_b_score'))
        return GameScore(team_a_score=_coerce_score(a), team_b_score=_coerce_score(b))

    logger.debug(f'Ignoring unreadable game result: {raw!r}')
    return None


def is_game_complete(raw: Any) -> bool:
    """True when both scores of a game have been entered."""
    score = parse_game_result(raw)
    return score is not None and score.is_complete


def day_has_results(day_results: Optional[dict]) -> bool:
    """True when any game on any court has at least one score entered."""
    if not day_results:
        return False
    for court_results in day_results.values():
        for raw in court_results or []:
            score = parse_game_result(raw)
            if score is not None and (
                score.team_a_score is not None or score.team_b_score is not None
            ):
                return True
    return False


def is_present(day_attendance: Optional[dict], player_id: int, game_index: int) -> bool:
    """
    Check a player's attendance for one game slot.

    Players without an attendance row, or with a row too short to cover the
    slot, count as present. Only an explicit False marks an absence.
    """
    if not day_attendance:
        return True
    row = day_attendance.get(player_id)
    if row is None:
        row = day_attendance.get(str(player_id))
    if row is None or game_index >= len(row):
        return True
    return row[game_index] is not False


def _outcome_points(own: int, other: int) -> int:
    if own > other:
        return WIN_POINTS
    if own < other:
        return LOSS_POINTS
    return TIE_POINTS


def process_day_results(
    stats: dict[int, PlayerStats],
    day: int,
    day_results: Optional[dict],
    day_matchups: Optional[dict],
    day_attendance: Optional[dict],
) -> None:
    """
    Add one day's contribution to ``stats`` in place.

    Every completed game credits each attending player with their team's
    score as points for, the opponent's score as points against, and a win,
    loss or tie. Missing matchups, unplayed or half-entered games and players
    no longer on the roster contribute nothing.

    ``daily_points[day]`` is cleared for every player on entry and assigned
    once at the end of the call for each player who took part in a completed
    game that day.

    Args:
        stats: Player id -> PlayerStats, mutated in place
        day: Day number being processed
        day_results: Court name -> list of game results
        day_matchups: Court name -> list of GameMatchup (or plain dicts)
        day_attendance: Player id -> per-game presence flags
    """
    for player_stats in stats.values():
        player_stats.daily_points.pop(day, None)

    if not day_matchups:
        return

    day_results = day_results or {}
    day_totals: dict[int, int] = {}

    for court, court_matchups in day_matchups.items():
        court_results = day_results.get(court) or []

        for game_index, raw_matchup in enumerate(court_matchups or []):
            if not raw_matchup:
                continue
            if game_index >= len(court_results):
                continue

            score = parse_game_result(court_results[game_index])
            if score is None or not score.is_complete:
                continue

            try:
                matchup = GameMatchup.from_plain(raw_matchup)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning(f'Day {day} {court} game {game_index + 1}: unreadable matchup skipped ({e})')
                continue

            sides = (
                (matchup.team_a, score.team_a_score, score.team_b_score),
                (matchup.team_b, score.team_b_score, score.team_a_score),
            )

            for team, own, other in sides:
                points = _outcome_points(own, other)
                for player in team:
                    player_stats = stats.get(player.id)
                    if player_stats is None:
                        continue
                    if not is_present(day_attendance, player.id, game_index):
                        continue

                    player_stats.points_for += own
                    player_stats.points_against += other
                    if points == WIN_POINTS:
                        player_stats.wins += 1
                    elif points == LOSS_POINTS:
                        player_stats.losses += 1
                    else:
                        player_stats.ties += 1
                    day_totals[player.id] = day_totals.get(player.id, 0) + points

    for player_id, total in day_totals.items():
        stats[player_id].daily_points[day] = total

    logger.debug(f'Day {day}: credited {len(day_totals)} players')

"""Daily matchup generation.

Standard leagues open with a mixed discovery round on day 1. From day 2 the
ranked player list is cut into contiguous tiers, one per court, so players
compete against others near their own rank:

    ranks 1-4  -> Court 1
    ranks 5-8  -> Court 2
    ...

Custom leagues mix players across courts every day. Within each court the
tier is split into two teams for every game of the day, rotating the splits
so partners change from game to game.
"""

import logging
import random
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Iterable, Optional, Sequence

from .constants import DEFAULT_COURT_PREFIX
from .models import GameMatchup, Player, PlayerStats
from .schemas import LeagueConfig
from .validators import ensure_league_config

logger = logging.getLogger('courtside.matchups')


@dataclass
class MatchupPlan:
    """Generated courts plus any players that could not be placed."""
    courts: dict[str, list[GameMatchup]] = field(default_factory=dict)
    unassigned: list[Player] = field(default_factory=list)


def get_all_court_names(config: LeagueConfig) -> list[str]:
    """Configured court names, or 'Court 1'..'Court N'."""
    if config.court_names:
        return list(config.court_names)
    return [f'{DEFAULT_COURT_PREFIX} {i}' for i in range(1, config.courts + 1)]


def uses_ranked_tiers(config: LeagueConfig, day: int) -> bool:
    """Standard leagues tier by rank after the day-1 discovery round."""
    return config.league_type == 'standard' and day >= 2


def _as_players(ranked_players: Iterable[Any], config: LeagueConfig) -> list[Player]:
    roster = {p.id: p for p in config.roster}
    players = []
    seen = set()
    for entry in ranked_players:
        if isinstance(entry, PlayerStats):
            player = roster.get(entry.player_id) or Player(id=entry.player_id, name=entry.name)
        else:
            entry = Player.from_plain(entry)
            player = roster.get(entry.id, entry)
        if player.id in seen:
            continue
        seen.add(player.id)
        players.append(player)
    return players


def _mix(players: list[Player], config: LeagueConfig, day: int) -> list[Player]:
    pool = sorted(players, key=lambda p: p.id)
    rng = random.Random(config.shuffle_seed * 100003 + day)
    rng.shuffle(pool)
    return pool


def _team_splits(tier_size: int, players_per_team: int) -> list[tuple[tuple[int, ...], tuple[int, ...]]]:
    """
    Every distinct way to split tier positions into two teams.

    Position 0 is pinned to team A so mirrored splits are not repeated.
    Splits come back ordered by balance: the gap between the two teams'
    summed positions, smallest first.
    """
    positions = range(tier_size)
    splits = []
    for rest in combinations(range(1, tier_size), players_per_team - 1):
        team_a = (0,) + rest
        team_b = tuple(i for i in positions if i not in team_a)
        splits.append((team_a, team_b))
    return sorted(splits, key=lambda s: abs(sum(s[0]) - sum(s[1])))


def _pairs(team: Sequence[int]) -> list[tuple[int, int]]:
    return list(combinations(team, 2))


def _rotate_splits(tier_size: int, players_per_team: int, games: int) -> list[tuple[tuple[int, ...], tuple[int, ...]]]:
    """
    Pick one split per game.

    Each game takes the unused split that repeats the fewest teammate pairs
    already seen that day, preferring balanced splits on ties. Once every split
    has been used the rotation starts over.
    """
    splits = _team_splits(tier_size, players_per_team)
    pair_counts: dict[tuple[int, int], int] = {}
    used: set[int] = set()
    chosen = []

    for _ in range(games):
        if len(used) == len(splits):
            used = set()
        best_index = min(
            (i for i in range(len(splits)) if i not in used),
            key=lambda i: (
                sum(pair_counts.get(pair, 0) for team in splits[i] for pair in _pairs(team)),
                i,
            ),
        )
        used.add(best_index)
        split = splits[best_index]
        for team in split:
            for pair in _pairs(team):
                pair_counts[pair] = pair_counts.get(pair, 0) + 1
        chosen.append(split)

    return chosen


def _court_games(tier: list[Player], config: LeagueConfig) -> list[GameMatchup]:
    games = []
    for team_a, team_b in _rotate_splits(len(tier), config.players_per_team, config.games_per_day):
        games.append(
            GameMatchup(
                team_a=tuple(tier[i] for i in team_a),
                team_b=tuple(tier[i] for i in team_b),
            )
        )
    return games


def plan_daily_matchups(
    day: int,
    ranked_players: Sequence[Any],
    config: LeagueConfig,
) -> MatchupPlan:
    """
    Build a day's courts and report players left over.

    Only whole courts are filled. Players beyond the last full court, or
    beyond the configured number of courts, are returned as unassigned for
    manual placement rather than raising.

    Args:
        day: Day number being scheduled
        ranked_players: PlayerStats, Player or plain player dicts in ranking order
        config: League configuration

    Returns:
        MatchupPlan with court name -> gamesPerDay matchups, and unassigned players

    Raises:
        LeagueConfigError: If totalDays or gamesPerDay is not positive
    """
    ensure_league_config(config)

    players = _as_players(ranked_players, config)
    if not players:
        players = list(config.roster)

    plan = MatchupPlan()
    if not players:
        return plan

    if not uses_ranked_tiers(config, day):
        players = _mix(players, config, day)

    per_court = config.players_per_court
    court_names = get_all_court_names(config)
    filled = min(len(court_names), len(players) // per_court)

    for index in range(filled):
        tier = players[index * per_court:(index + 1) * per_court]
        plan.courts[court_names[index]] = _court_games(tier, config)

    plan.unassigned = players[filled * per_court:]
    if plan.unassigned:
        logger.warning(
            f'Day {day}: {len(plan.unassigned)} players unassigned '
            f'({len(players)} players, {len(court_names)} courts of {per_court})'
        )

    return plan


def generate_daily_matchups(
    day: int,
    ranked_players: Sequence[Any],
    config: LeagueConfig,
) -> dict[str, list[GameMatchup]]:
    """Court name -> the day's matchups. See plan_daily_matchups."""
    return plan_daily_matchups(day, ranked_players, config).courts


def ensure_daily_matchups(
    day: int,
    existing_day: Optional[dict],
    ranked_players: Sequence[Any],
    config: LeagueConfig,
) -> dict:
    """Return a day's existing matchups untouched, generating them only when absent."""
    if existing_day:
        return existing_day
    return generate_daily_matchups(day, ranked_players, config)


def matchups_to_plain(day_matchups: dict[str, list[GameMatchup]]) -> dict[str, list[dict]]:
    """Serialize a day's matchups to plain dicts and lists."""
    return {court: [m.to_plain() for m in games] for court, games in day_matchups.items()}


def matchups_from_plain(data: dict[str, list[Any]]) -> dict[str, list[GameMatchup]]:
    return {court: [GameMatchup.from_plain(m) for m in games] for court, games in data.items()}

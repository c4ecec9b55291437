from .models import Player, PlayerStats, GameScore, GameMatchup, initialize_player_stats
from .schemas import LeagueConfig, PlayerEntry, SeededPlayerStats
from .config import load_league_config, get_config, clear_config_cache
from .results import (
    process_day_results,
    parse_game_result,
    is_game_complete,
    is_present,
    day_has_results,
)
from .ranking import (
    ranking_key,
    compare_players,
    sort_players_with_tie_breaking,
    assign_ranks,
)
from .seeding import SeedReconciler, NullSeed, FixedCutoverSeed, select_seed
from .matchups import (
    MatchupPlan,
    get_all_court_names,
    plan_daily_matchups,
    generate_daily_matchups,
    ensure_daily_matchups,
    matchups_to_plain,
    matchups_from_plain,
)
from .standings import (
    compute_standings,
    compute_standings_by_id,
    players_for_generator,
    daily_points_projection,
)
from .validators import (
    LeagueConfigError,
    validate_league_config,
    ensure_league_config,
    validate_day_matchups,
)
from .schedule import get_active_day
from .logging_config import setup_logging, collect_degraded_state
from .edits import (
    DayLockedError,
    is_day_locked,
    ensure_day_unlocked,
    set_game_result,
    set_attendance,
    set_day_attendance,
    move_player,
    swap_players,
)

__all__ = [
    # Models
    'Player',
    'PlayerStats',
    'GameScore',
    'GameMatchup',
    'initialize_player_stats',
    # Configuration
    'LeagueConfig',
    'PlayerEntry',
    'SeededPlayerStats',
    'load_league_config',
    'get_config',
    'clear_config_cache',
    # Result processing
    'process_day_results',
    'parse_game_result',
    'is_game_complete',
    'is_present',
    'day_has_results',
    # Ranking
    'ranking_key',
    'compare_players',
    'sort_players_with_tie_breaking',
    'assign_ranks',
    # Seeding
    'SeedReconciler',
    'NullSeed',
    'FixedCutoverSeed',
    'select_seed',
    # Matchups
    'MatchupPlan',
    'get_all_court_names',
    'plan_daily_matchups',
    'generate_daily_matchups',
    'ensure_daily_matchups',
    'matchups_to_plain',
    'matchups_from_plain',
    # Standings
    'compute_standings',
    'compute_standings_by_id',
    'players_for_generator',
    'daily_points_projection',
    # Validation
    'LeagueConfigError',
    'validate_league_config',
    'ensure_league_config',
    'validate_day_matchups',
    # Schedule
    'get_active_day',
    # Logging
    'setup_logging',
    'collect_degraded_state',
    # Day edits
    'DayLockedError',
    'is_day_locked',
    'ensure_day_unlocked',
    'set_game_result',
    'set_attendance',
    'set_day_attendance',
    'move_player',
    'swap_players',
]

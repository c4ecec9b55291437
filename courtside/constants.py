"""Constants for the courtside league engine."""

from datetime import datetime, timezone

# League points per game outcome
WIN_POINTS = 3
TIE_POINTS = 1
LOSS_POINTS = 0

# Sentinel for a game slot with no result entered
UNPLAYED = 'unplayed'

# Seeded leagues carry historical stats through day 3; new results start at day 4
SEED_CUTOVER_DAY = 3
FIRST_POST_SEED_DAY = SEED_CUTOVER_DAY + 1

LEAGUE_TYPES = ('standard', 'custom')

# Fallback start date for leagues without explicit day schedules
LEAGUE_START_DATE = datetime(2025, 7, 1, tzinfo=timezone.utc)

# Plain-data keys shared with the persistence layer
TEAM_A_KEY = 'teamA'
TEAM_B_KEY = 'teamB'
TEAM_A_SCORE_KEY = 'teamAScore'
TEAM_B_SCORE_KEY = 'teamBScore'

DEFAULT_COURT_PREFIX = 'Court'

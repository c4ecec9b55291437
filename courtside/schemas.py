"""Pydantic schemas for league configuration documents."""

from pydantic import BaseModel, Field, field_validator

from .models import Player


class PlayerEntry(BaseModel):
    """Player on the league roster."""

    id: int
    name: str = Field(..., min_length=1)
    grade: str | None = None

    def to_player(self) -> Player:
        return Player(id=self.id, name=self.name, grade=self.grade)

    class Config:
        extra = 'ignore'


class SeededPlayerStats(BaseModel):
    """Historical stats for one player, baked in at the seed cutover day."""

    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    ties: int = Field(0, ge=0)
    points_for: int = Field(0, ge=0, alias='pointsFor')
    points_against: int = Field(0, ge=0, alias='pointsAgainst')
    league_points: int = Field(0, ge=0, alias='leaguePoints')

    class Config:
        populate_by_name = True
        extra = 'ignore'


class LeagueConfig(BaseModel):
    """League configuration settings.

    ``total_days`` and ``games_per_day`` are left unconstrained here so that a
    misconfigured league can still be loaded and reported; the engine rejects
    non-positive values when standings are computed.
    """

    title: str = ''
    players: list[PlayerEntry] = Field(default_factory=list)
    total_days: int = Field(..., alias='totalDays')
    games_per_day: int = Field(..., alias='gamesPerDay')
    players_per_team: int = Field(..., ge=1, alias='playersPerTeam')
    courts: int = Field(1, ge=0, alias='numberOfCourts')
    court_names: list[str] | None = Field(None, alias='courtNames')
    league_type: str = Field('standard', pattern=r'^(standard|custom)$', alias='leagueType')
    locked_days: dict[int, bool] = Field(default_factory=dict, alias='lockedDays')
    seeded_stats: dict[int, SeededPlayerStats] | None = Field(None, alias='seededStats')
    day_schedules: dict[int, str] = Field(default_factory=dict, alias='daySchedules')
    shuffle_seed: int = Field(0, alias='shuffleSeed')

    @field_validator('players')
    @classmethod
    def validate_unique_ids(cls, v):
        """Ensure player ids are unique across the roster."""
        seen = set()
        for player in v:
            if player.id in seen:
                raise ValueError(f'Duplicate player id: {player.id}')
            seen.add(player.id)
        return v

    @field_validator('court_names')
    @classmethod
    def validate_court_names(cls, v):
        """Ensure court names are non-empty and distinct."""
        if v is None:
            return v
        if any(not name or not name.strip() for name in v):
            raise ValueError('Court names must be non-empty')
        if len(set(v)) != len(v):
            raise ValueError(f'Duplicate court names: {v}')
        return v

    @property
    def roster(self) -> tuple[Player, ...]:
        return tuple(p.to_player() for p in self.players)

    @property
    def players_per_court(self) -> int:
        return self.players_per_team * 2

    class Config:
        populate_by_name = True
        extra = 'ignore'

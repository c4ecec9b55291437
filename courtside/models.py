"""Data models for the courtside league engine."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

from .constants import TEAM_A_KEY, TEAM_A_SCORE_KEY, TEAM_B_KEY, TEAM_B_SCORE_KEY


@dataclass(frozen=True)
class Player:
    """A rostered player."""
    id: int
    name: str
    grade: Optional[str] = None

    def to_plain(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'id': self.id, 'name': self.name}
        if self.grade is not None:
            data['grade'] = self.grade
        return data

    @classmethod
    def from_plain(cls, data: Any) -> 'Player':
        if isinstance(data, Player):
            return data
        return cls(id=int(data['id']), name=str(data.get('name', '')), grade=data.get('grade'))


@dataclass
class PlayerStats:
    """Accumulated stats for one player, rebuilt on every standings request."""
    player_id: int
    name: str = ''
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: int = 0
    points_against: int = 0
    league_points: int = 0
    point_differential: int = 0
    daily_points: Dict[int, int] = field(default_factory=dict)  # day -> points earned that day


@dataclass(frozen=True)
class GameScore:
    """Entered score for one game. Either side stays None until entered."""
    team_a_score: Optional[int] = None
    team_b_score: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.team_a_score is not None and self.team_b_score is not None

    def to_plain(self) -> Dict[str, Optional[int]]:
        return {TEAM_A_SCORE_KEY: self.team_a_score, TEAM_B_SCORE_KEY: self.team_b_score}


@dataclass(frozen=True)
class GameMatchup:
    """Two disjoint teams meeting in one game slot."""
    team_a: Tuple[Player, ...]
    team_b: Tuple[Player, ...]

    def player_ids(self) -> set:
        return {p.id for p in self.team_a} | {p.id for p in self.team_b}

    def to_plain(self) -> Dict[str, list]:
        return {
            TEAM_A_KEY: [p.to_plain() for p in self.team_a],
            TEAM_B_KEY: [p.to_plain() for p in self.team_b],
        }

    @classmethod
    def from_plain(cls, data: Any) -> 'GameMatchup':
        if isinstance(data, GameMatchup):
            return data
        return cls(
            team_a=tuple(Player.from_plain(p) for p in data.get(TEAM_A_KEY, [])),
            team_b=tuple(Player.from_plain(p) for p in data.get(TEAM_B_KEY, [])),
        )


def initialize_player_stats(players: Iterable[Player]) -> Dict[int, PlayerStats]:
    """Create an empty PlayerStats record for every rostered player."""
    return {p.id: PlayerStats(player_id=p.id, name=p.name) for p in players}

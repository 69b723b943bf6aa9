"""
Data models for the standings and playoff-odds engine.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


# Tie-break criteria a league may declare. The comparator ranks by a fixed
# order (win% -> points for -> points against -> name) regardless of this list.
DEFAULT_TIEBREAKERS = ["headToHead", "pointsFor", "divisionRecord", "pointsAgainst"]


@dataclass
class Team:
    """Represents a fantasy team with its record and season scoring to date."""

    id: int
    name: str
    division: Optional[str] = None
    wins: int = 0
    losses: int = 0
    ties: int = 0
    pf: float = 0.0
    pa: float = 0.0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def record_str(self) -> str:
        return f"{self.wins}-{self.losses}-{self.ties}"

    @property
    def win_pct(self) -> float:
        total = self.games_played
        if total == 0:
            return 0.0
        return (self.wins + 0.5 * self.ties) / total

    def copy(self) -> 'Team':
        """Create a copy of this team for simulation."""
        return Team(
            id=self.id,
            name=self.name,
            division=self.division,
            wins=self.wins,
            losses=self.losses,
            ties=self.ties,
            pf=self.pf,
            pa=self.pa
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "division": self.division,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "pf": self.pf,
            "pa": self.pa,
            "record": self.record_str,
            "win_pct": self.win_pct
        }


@dataclass
class Matchup:
    """
    Represents a scheduled matchup between two teams.

    A matchup is complete only when both scores are present and not both
    exactly zero. Some upstream feeds report games that have not started as
    0-0, so a genuine 0-0 tie is indistinguishable from an unplayed game and
    is treated as unplayed.
    """

    id: str
    week: int
    home_id: int
    away_id: int
    home_score: Optional[float] = None
    away_score: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        if self.home_score is None or self.away_score is None:
            return False
        return not (self.home_score == 0 and self.away_score == 0)

    @property
    def is_unplayed(self) -> bool:
        return not self.is_complete

    @property
    def participants(self) -> Tuple[int, int]:
        return (self.home_id, self.away_id)

    def opponent_of(self, team_id: int) -> int:
        return self.away_id if team_id == self.home_id else self.home_id

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "week": self.week,
            "home_id": self.home_id,
            "away_id": self.away_id,
            "home_score": self.home_score,
            "away_score": self.away_score
        }


@dataclass
class LeagueSettings:
    """League configuration settings."""

    playoff_seeds: int = 6
    weeks: int = 17
    tiebreakers: List[str] = field(default_factory=lambda: list(DEFAULT_TIEBREAKERS))

    def to_dict(self) -> dict:
        return {
            "playoff_seeds": self.playoff_seeds,
            "weeks": self.weeks,
            "tiebreakers": list(self.tiebreakers)
        }


@dataclass
class Standings:
    """Ranked standings table, most favorable team first."""

    sorted: List[Team]
    seeds: List[int]

    def to_dict(self) -> dict:
        return {
            "sorted": [team.to_dict() for team in self.sorted],
            "seeds": list(self.seeds)
        }


@dataclass
class SimulationTally:
    """Raw clinch/seed counts for one team across a batch of trials."""

    team_id: int
    clinch: int = 0
    seeds: List[int] = field(default_factory=list)

    def merge(self, other: 'SimulationTally') -> None:
        """Add another batch's counts into this one."""
        self.clinch += other.clinch
        for idx, count in enumerate(other.seeds):
            self.seeds[idx] += count


@dataclass(frozen=True)
class OddsResult:
    """Playoff odds for a team, as percentages in [0, 100]."""

    team_id: int
    clinch_pct: float
    seed_pct: Tuple[float, ...]

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "clinch_pct": self.clinch_pct,
            "seed_pct": list(self.seed_pct)
        }


@dataclass(frozen=True)
class SimulationReport:
    """Odds plus the trial bookkeeping needed to interpret them."""

    odds: List[OddsResult]
    trials_requested: int
    trials_completed: int

    @property
    def cancelled(self) -> bool:
        return self.trials_completed < self.trials_requested


# matchup id -> winning team id
LockedResults = Dict[str, int]


class SimulatorError(Exception):
    """Base class for errors raised by the simulation engine."""
    pass


class InvalidConfigurationError(SimulatorError, ValueError):
    """Raised when a simulation is requested with an invalid configuration."""
    pass

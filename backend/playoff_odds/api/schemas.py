"""
Pydantic schemas for API request/response validation.
"""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field

from ..core.config import MAX_TRIALS
from ..simulator import Team, Matchup, LeagueSettings
from ..simulator.models import DEFAULT_TIEBREAKERS


# ============== League Schemas ==============

class TeamSchema(BaseModel):
    """A team and its record to date."""
    id: int
    name: str
    division: Optional[str] = None
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    ties: int = Field(default=0, ge=0)
    pf: float = Field(default=0.0, allow_inf_nan=False)
    pa: float = Field(default=0.0, allow_inf_nan=False)

    def to_model(self) -> Team:
        return Team(**self.model_dump())


class MatchupSchema(BaseModel):
    """A scheduled matchup; scores are present once played."""
    id: str = Field(..., min_length=1)
    week: int = Field(..., ge=1)
    home_id: int
    away_id: int
    home_score: Optional[float] = Field(default=None, allow_inf_nan=False)
    away_score: Optional[float] = Field(default=None, allow_inf_nan=False)

    def to_model(self) -> Matchup:
        return Matchup(**self.model_dump())


class LeagueSettingsSchema(BaseModel):
    """League configuration."""
    playoff_seeds: int = 6
    weeks: int = Field(default=17, ge=1)
    tiebreakers: List[str] = Field(default_factory=lambda: list(DEFAULT_TIEBREAKERS))

    def to_model(self) -> LeagueSettings:
        return LeagueSettings(**self.model_dump())


class LeagueSnapshot(BaseModel):
    """Teams, schedule and settings as supplied by the caller."""
    teams: List[TeamSchema]
    matchups: List[MatchupSchema] = Field(default_factory=list)
    settings: LeagueSettingsSchema = Field(default_factory=LeagueSettingsSchema)

    def to_models(self):
        return (
            [t.to_model() for t in self.teams],
            [m.to_model() for m in self.matchups],
            self.settings.to_model()
        )


# ============== Standings Schemas ==============

class StandingsRequest(LeagueSnapshot):
    """Standings request, optionally with what-if picks applied first."""
    picks: Dict[str, Any] = Field(default_factory=dict)


class StandingsTeam(BaseModel):
    """One row of the standings table."""
    id: int
    name: str
    division: Optional[str]
    wins: int
    losses: int
    ties: int
    pf: float
    pa: float
    record: str
    win_pct: float


class StandingsResponse(BaseModel):
    """Ranked standings."""
    sorted: List[StandingsTeam]
    seeds: List[int]
    settings: LeagueSettingsSchema


# ============== Simulation Schemas ==============

class PlayoffOddsRequest(LeagueSnapshot):
    """Playoff odds request."""
    trials: Optional[int] = Field(default=None, ge=1, le=MAX_TRIALS)
    locked_results: Dict[str, Any] = Field(default_factory=dict)
    seed: Optional[int] = None  # Fixed seed for reproducible results


class TeamOdds(BaseModel):
    """Playoff odds for a single team."""
    team_id: int
    clinch_pct: float
    seed_pct: List[float]


class PlayoffOddsResponse(BaseModel):
    """Full playoff odds response."""
    odds: List[TeamOdds]
    settings: LeagueSettingsSchema
    locked_results: Dict[str, int]
    trials_requested: int
    trials_completed: int


# ============== What-If Schemas ==============

class WhatIfWeeksRequest(BaseModel):
    """Schedule to inspect for pickable weeks."""
    matchups: List[MatchupSchema]


class WhatIfWeeksResponse(BaseModel):
    """Weeks that still have games to pick."""
    current_week: Optional[int]
    future_weeks: List[int]


# ============== Error Schemas ==============

class ErrorResponse(BaseModel):
    """API error response."""
    detail: str
    code: Optional[str] = None

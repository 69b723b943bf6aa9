"""
What-if picks for unplayed matchups.

Picks come straight from interactive input, so anything that does not name a
participant of a currently unplayed matchup is dropped instead of failing the
whole request.
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from .models import Team, Matchup, LeagueSettings, LockedResults, Standings
from .standings import compute_standings


logger = logging.getLogger(__name__)


def _as_team_id(value: Any) -> Optional[int]:
    """Integer team id from a pick, or None; floats are never rounded into an id."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and re.fullmatch(r"-?\d+", value.strip()):
        return int(value.strip())
    return None


def build_locked_results(
    matchups: List[Matchup],
    picks: Optional[Mapping[Any, Any]]
) -> LockedResults:
    """
    Turn raw picks into the locked results used by the simulator.

    Args:
        matchups: Full schedule
        picks: matchup id -> chosen winner id, as submitted

    Returns:
        matchup id -> winner id, keeping only picks whose winner plays in
        that matchup and whose matchup is still unplayed
    """
    if not picks:
        return {}

    by_id = {m.id: m for m in matchups}
    locked: LockedResults = {}

    for matchup_id, winner in picks.items():
        matchup = by_id.get(str(matchup_id))
        winner_id = _as_team_id(winner)

        if matchup is None or winner_id is None:
            logger.debug("Dropping pick %r -> %r: unknown matchup or winner", matchup_id, winner)
            continue
        if matchup.is_complete:
            logger.debug("Dropping pick for completed matchup %s", matchup.id)
            continue
        if winner_id not in matchup.participants:
            logger.debug("Dropping pick for matchup %s: team %s is not playing", matchup.id, winner_id)
            continue

        locked[matchup.id] = winner_id

    return locked


def apply_picks(
    teams: List[Team],
    matchups: List[Matchup],
    picks: Optional[Mapping[Any, Any]]
) -> Dict[int, Team]:
    """
    Apply picked winners to copies of the teams.

    Invalid picks and matchups involving unknown teams have no effect.

    Args:
        teams: Current team standings (never modified)
        matchups: Full schedule
        picks: matchup id -> chosen winner id

    Returns:
        Updated team copies keyed by id
    """
    locked = build_locked_results(matchups, picks)
    sim_teams = {t.id: t.copy() for t in teams}

    for matchup in matchups:
        winner_id = locked.get(matchup.id)
        if winner_id is None:
            continue

        loser_id = matchup.opponent_of(winner_id)
        if winner_id not in sim_teams or loser_id not in sim_teams:
            continue

        sim_teams[winner_id].wins += 1
        sim_teams[loser_id].losses += 1

    return sim_teams


def what_if_standings(
    teams: List[Team],
    matchups: List[Matchup],
    settings: LeagueSettings,
    picks: Optional[Mapping[Any, Any]]
) -> Standings:
    """Standings after applying picks, with no simulation of other games."""
    updated = apply_picks(teams, matchups, picks)
    return compute_standings(list(updated.values()), settings)


def detect_current_week(matchups: List[Matchup]) -> Optional[int]:
    """
    The first week after the latest week with a completed game.

    Falls back to the earliest scheduled week when nothing has been played,
    and None for an empty schedule.
    """
    if not matchups:
        return None

    completed_weeks = {m.week for m in matchups if m.is_complete}
    if not completed_weeks:
        return min(m.week for m in matchups)
    return max(completed_weeks) + 1


def future_weeks(matchups: List[Matchup]) -> List[int]:
    """Weeks from the current week on that still have unplayed games."""
    current = detect_current_week(matchups)
    if current is None:
        return []
    return sorted({m.week for m in matchups if m.week >= current and m.is_unplayed})


def pick_all(matchups: List[Matchup], week: int, side: str) -> LockedResults:
    """
    Pick the home (or away) team in every unplayed matchup of a week.

    Raises:
        ValueError: If side is not 'home' or 'away'
    """
    if side not in ("home", "away"):
        raise ValueError(f"side must be 'home' or 'away', got {side!r}")

    return {
        m.id: (m.home_id if side == "home" else m.away_id)
        for m in matchups
        if m.week == week and m.is_unplayed
    }

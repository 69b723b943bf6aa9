"""
Standings ordering for fantasy leagues.

Teams are ranked by:
1. Win percentage (ties count as half a win), highest first
2. Points for, highest first
3. Points against, lowest first
4. Team name, alphabetical
"""

from typing import List, Tuple

from .models import Team, LeagueSettings, Standings, InvalidConfigurationError


def standings_key(team: Team) -> Tuple[float, float, float, str, int]:
    """
    Sort key for a team; smaller keys rank higher.

    The trailing team id only matters when two teams share a name, and keeps
    the order strict in that case as well.
    """
    return (-team.win_pct, -team.pf, team.pa, team.name, team.id)


def compare_teams(a: Team, b: Team) -> int:
    """Return -1 if a ranks above b, 1 if below, 0 only for the same team."""
    key_a, key_b = standings_key(a), standings_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def rank_teams(teams: List[Team]) -> List[Team]:
    """Return teams in standings order without modifying the input list."""
    return sorted(teams, key=standings_key)


def validate_playoff_seeds(settings: LeagueSettings) -> None:
    """
    Reject a playoff cutoff that cannot pick any team.

    Raises:
        InvalidConfigurationError: If playoff_seeds is not positive
    """
    if settings.playoff_seeds <= 0:
        raise InvalidConfigurationError(
            f"playoff_seeds must be positive, got {settings.playoff_seeds}"
        )


def compute_standings(teams: List[Team], settings: LeagueSettings) -> Standings:
    """
    Rank teams and pick out the playoff seeds.

    Args:
        teams: Teams with their current records
        settings: League settings (playoff_seeds decides the cutoff)

    Returns:
        Standings with every team in order and the ids of the top
        playoff_seeds teams

    Raises:
        InvalidConfigurationError: If playoff_seeds is not positive
    """
    validate_playoff_seeds(settings)
    ordered = rank_teams(teams)
    seeds = [team.id for team in ordered[:settings.playoff_seeds]]
    return Standings(sorted=ordered, seeds=seeds)

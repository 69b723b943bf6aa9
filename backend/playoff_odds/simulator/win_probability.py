"""
Matchup win probabilities from season scoring.

A team's rating is its average point differential per game. The chance that
one team beats another is a logistic curve over the rating difference.
"""

import math

from .models import Team


DEFAULT_STEEPNESS = 8.0


def rating(team: Team) -> float:
    """Average points-for minus points-against per game (0 with no games)."""
    games = max(1, team.games_played)
    return (team.pf / games) - (team.pa / games)


def win_prob(team_a: Team, team_b: Team, steepness: float = DEFAULT_STEEPNESS) -> float:
    """
    Probability that team_a beats team_b.

    win_prob(a, b) + win_prob(b, a) is exactly 1, and two teams with the same
    rating get exactly 0.5.

    Args:
        team_a: The team whose win chance is returned
        team_b: The opponent
        steepness: Rating difference that moves the curve by one logit

    Returns:
        Probability between 0 and 1
    """
    if steepness <= 0:
        raise ValueError(f"steepness must be positive, got {steepness}")

    diff = rating(team_a) - rating(team_b)
    if diff < 0:
        return 1.0 - win_prob(team_b, team_a, steepness)

    # diff >= 0 here, so exp() can only underflow, never overflow
    return 1.0 / (1.0 + math.exp(-diff / steepness))

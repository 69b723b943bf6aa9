"""
Shared fixtures for simulator and API tests.
"""

import random

import pytest

from playoff_odds.simulator import Team, Matchup, LeagueSettings


def _make_team(team_id: int, name: str, wins: int = 0, losses: int = 0, ties: int = 0,
               pf: float = 0.0, pa: float = 0.0, division: str = None) -> Team:
    return Team(id=team_id, name=name, division=division, wins=wins, losses=losses,
                ties=ties, pf=pf, pa=pa)


@pytest.fixture
def make_team():
    """Factory for teams with a given record."""
    return _make_team


@pytest.fixture
def rng():
    """Seeded random source so simulations are reproducible."""
    return random.Random(1234)


@pytest.fixture
def settings():
    """Two playoff seeds in a short season."""
    return LeagueSettings(playoff_seeds=2, weeks=3)


@pytest.fixture
def teams():
    """Four teams two weeks into a three-week season."""
    return [
        _make_team(1, "Alpha", wins=2, losses=0, pf=260.0, pa=215.0),
        _make_team(2, "Beta", wins=1, losses=1, pf=240.0, pa=220.0),
        _make_team(3, "Gamma", wins=1, losses=1, pf=225.0, pa=230.0),
        _make_team(4, "Delta", wins=0, losses=2, pf=190.0, pa=250.0),
    ]


@pytest.fixture
def matchups():
    """Weeks 1-2 played, week 3 still open (one game reported as 0-0)."""
    return [
        Matchup(id="w1-a", week=1, home_id=1, away_id=2, home_score=130.0, away_score=110.0),
        Matchup(id="w1-b", week=1, home_id=3, away_id=4, home_score=120.0, away_score=100.0),
        Matchup(id="w2-a", week=2, home_id=1, away_id=3, home_score=130.0, away_score=105.0),
        Matchup(id="w2-b", week=2, home_id=2, away_id=4, home_score=130.0, away_score=90.0),
        Matchup(id="w3-a", week=3, home_id=1, away_id=4),
        Matchup(id="w3-b", week=3, home_id=2, away_id=3, home_score=0.0, away_score=0.0),
    ]

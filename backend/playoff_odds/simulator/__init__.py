"""
Fantasy Playoff Odds Simulator

Standings ordering and Monte Carlo simulation of playoff probabilities.
"""

from .models import (
    Team,
    Matchup,
    LeagueSettings,
    Standings,
    OddsResult,
    SimulationReport,
    SimulationTally,
    LockedResults,
    SimulatorError,
    InvalidConfigurationError
)
from .standings import compute_standings, rank_teams, compare_teams, standings_key
from .win_probability import rating, win_prob, DEFAULT_STEEPNESS
from .engine import (
    simulate_odds,
    run_simulation,
    run_trial,
    play_out_season,
    unplayed_matchups,
    validate_simulation_config
)
from .what_if import (
    build_locked_results,
    apply_picks,
    what_if_standings,
    detect_current_week,
    future_weeks,
    pick_all
)

__all__ = [
    # Models
    "Team",
    "Matchup",
    "LeagueSettings",
    "Standings",
    "OddsResult",
    "SimulationReport",
    "SimulationTally",
    "LockedResults",
    "SimulatorError",
    "InvalidConfigurationError",
    # Standings
    "compute_standings",
    "rank_teams",
    "compare_teams",
    "standings_key",
    # Win probability
    "rating",
    "win_prob",
    "DEFAULT_STEEPNESS",
    # Engine
    "simulate_odds",
    "run_simulation",
    "run_trial",
    "play_out_season",
    "unplayed_matchups",
    "validate_simulation_config",
    # What-if
    "build_locked_results",
    "apply_picks",
    "what_if_standings",
    "detect_current_week",
    "future_weeks",
    "pick_all",
]

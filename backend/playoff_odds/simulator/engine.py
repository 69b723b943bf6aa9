"""
Monte Carlo simulation engine for playoff probability calculations.
"""

import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Tuple

from .models import (
    Team,
    Matchup,
    LeagueSettings,
    LockedResults,
    OddsResult,
    SimulationReport,
    SimulationTally,
    InvalidConfigurationError
)
from .standings import rank_teams, validate_playoff_seeds
from .win_probability import DEFAULT_STEEPNESS, win_prob


logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 100
CHUNKS_PER_WORKER = 4


def validate_simulation_config(
    teams: List[Team],
    settings: LeagueSettings,
    trials: int
) -> None:
    """
    Reject configurations the engine cannot honor.

    Raises:
        InvalidConfigurationError: If trials or playoff_seeds is out of range
    """
    if trials <= 0:
        raise InvalidConfigurationError(f"trials must be positive, got {trials}")
    validate_playoff_seeds(settings)
    if settings.playoff_seeds > len(teams):
        raise InvalidConfigurationError(
            f"playoff_seeds ({settings.playoff_seeds}) exceeds the number of teams ({len(teams)})"
        )


def unplayed_matchups(matchups: List[Matchup]) -> List[Matchup]:
    """Matchups still to be decided, in schedule order."""
    return [m for m in matchups if m.is_unplayed]


def play_out_season(
    sim_teams: Dict[int, Team],
    remaining: List[Matchup],
    locked_results: LockedResults,
    rng: random.Random,
    steepness: float = DEFAULT_STEEPNESS
) -> Dict[int, Team]:
    """
    Decide every remaining matchup on a trial snapshot, in place.

    Locked matchups go to their chosen winner; the rest are drawn against the
    home team's win probability. Simulated games never tie and do not change
    points for/against.

    Args:
        sim_teams: Trial-local team copies keyed by id (mutated)
        remaining: Unplayed matchups
        locked_results: matchup id -> forced winner id
        rng: Random source for unlocked games
        steepness: Win probability curve steepness

    Returns:
        The same snapshot, for chaining
    """
    for matchup in remaining:
        home = sim_teams.get(matchup.home_id)
        away = sim_teams.get(matchup.away_id)
        if home is None or away is None:
            continue

        locked_winner = locked_results.get(matchup.id)
        if locked_winner == matchup.home_id:
            home_wins = True
        elif locked_winner == matchup.away_id:
            home_wins = False
        else:
            home_wins = rng.random() < win_prob(home, away, steepness)

        winner, loser = (home, away) if home_wins else (away, home)
        winner.wins += 1
        loser.losses += 1

    return sim_teams


def run_trial(
    teams: List[Team],
    matchups: List[Matchup],
    locked_results: Optional[LockedResults] = None,
    rng: Optional[random.Random] = None,
    steepness: float = DEFAULT_STEEPNESS
) -> List[Team]:
    """
    Simulate one completion of the season and rank the result.

    The caller's teams are never modified; the returned list holds the
    trial's own copies.
    """
    if rng is None:
        rng = random.Random()
    sim_teams = {t.id: t.copy() for t in teams}
    play_out_season(sim_teams, unplayed_matchups(matchups), locked_results or {}, rng, steepness)
    return rank_teams(list(sim_teams.values()))


def _past(deadline: Optional[float]) -> bool:
    return deadline is not None and time.time() > deadline


def _empty_tallies(teams: List[Team], playoff_seeds: int) -> Dict[int, SimulationTally]:
    return {
        t.id: SimulationTally(team_id=t.id, seeds=[0] * playoff_seeds)
        for t in teams
    }


def _tally_trials(
    teams: List[Team],
    remaining: List[Matchup],
    playoff_seeds: int,
    locked_results: LockedResults,
    trials: int,
    rng: random.Random,
    steepness: float,
    should_stop: Optional[Callable[[], bool]] = None,
    progress_callback: Optional[Callable[[float], None]] = None,
    deadline: Optional[float] = None
) -> Tuple[Dict[int, SimulationTally], int]:
    """
    Run a batch of trials into a private tally.

    Stops early once should_stop() is true or time.time() passes deadline.

    Returns:
        Tuple of (tallies by team id, trials actually completed)
    """
    tallies = _empty_tallies(teams, playoff_seeds)
    completed = 0

    for sim_idx in range(trials):
        if _past(deadline) or (should_stop is not None and should_stop()):
            logger.debug("Simulation stopped after %d of %d trials", completed, trials)
            break

        # Report progress periodically
        if progress_callback and sim_idx % PROGRESS_INTERVAL == 0:
            progress_callback(sim_idx / trials * 100)

        sim_teams = {t.id: t.copy() for t in teams}
        play_out_season(sim_teams, remaining, locked_results, rng, steepness)
        ordered = rank_teams(list(sim_teams.values()))

        for seed_idx, team in enumerate(ordered[:playoff_seeds]):
            tallies[team.id].clinch += 1
            tallies[team.id].seeds[seed_idx] += 1

        completed += 1

    return tallies, completed


def _run_chunk(
    teams: List[Team],
    remaining: List[Matchup],
    playoff_seeds: int,
    locked_results: LockedResults,
    trials: int,
    seed: int,
    steepness: float,
    deadline: Optional[float] = None
) -> Tuple[Dict[int, SimulationTally], int]:
    """Worker entry point: a batch of trials with its own seeded generator."""
    return _tally_trials(
        teams, remaining, playoff_seeds, locked_results, trials,
        random.Random(seed), steepness, deadline=deadline
    )


def _chunk_sizes(trials: int, n_chunks: int) -> List[int]:
    base, extra = divmod(trials, n_chunks)
    sizes = [base + 1 if i < extra else base for i in range(n_chunks)]
    return [size for size in sizes if size > 0]


def _tally_trials_parallel(
    teams: List[Team],
    remaining: List[Matchup],
    playoff_seeds: int,
    locked_results: LockedResults,
    trials: int,
    rng: random.Random,
    steepness: float,
    workers: int,
    should_stop: Optional[Callable[[], bool]] = None,
    progress_callback: Optional[Callable[[float], None]] = None,
    deadline: Optional[float] = None
) -> Tuple[Dict[int, SimulationTally], int]:
    """
    Split trials into chunks across worker processes and merge their tallies.

    Chunk seeds are drawn from rng up front, so a seeded rng reproduces the
    same totals no matter which chunk finishes first.

    should_stop is only polled here, between chunks. The deadline also goes
    to each worker, which checks it between trials, so a chunk already
    running stops at the deadline instead of finishing its batch.
    """
    sizes = _chunk_sizes(trials, workers * CHUNKS_PER_WORKER)
    seeds = [rng.getrandbits(64) for _ in sizes]

    tallies = _empty_tallies(teams, playoff_seeds)
    completed = 0

    with ProcessPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(
                _run_chunk, teams, remaining, playoff_seeds,
                locked_results, size, seed, steepness, deadline
            )
            for size, seed in zip(sizes, seeds)
        ]

        for future in as_completed(futures):
            chunk_tallies, chunk_completed = future.result()
            for team_id, tally in chunk_tallies.items():
                tallies[team_id].merge(tally)
            completed += chunk_completed

            if progress_callback:
                progress_callback(completed / trials * 100)

            if _past(deadline) or (should_stop is not None and should_stop()):
                logger.debug("Simulation stopped after %d of %d trials", completed, trials)
                for pending in futures:
                    pending.cancel()
                break

    return tallies, completed


def _to_percent(count: int, trials: int) -> float:
    if trials == 0:
        return 0.0
    return round(100 * count / trials, 1)


def run_simulation(
    teams: List[Team],
    matchups: List[Matchup],
    settings: LeagueSettings,
    trials: int,
    locked_results: Optional[LockedResults] = None,
    rng: Optional[random.Random] = None,
    steepness: float = DEFAULT_STEEPNESS,
    workers: int = 1,
    should_stop: Optional[Callable[[], bool]] = None,
    progress_callback: Optional[Callable[[float], None]] = None,
    deadline: Optional[float] = None
) -> SimulationReport:
    """
    Run Monte Carlo simulation of the remaining season.

    Args:
        teams: Current team standings (never modified)
        matchups: Full schedule; only unplayed games are simulated
        settings: League settings (playoff_seeds is the clinch cutoff)
        trials: Number of simulations to run
        locked_results: matchup id -> forced winner id for unplayed games
        rng: Random source; a fresh entropy-seeded generator if omitted
        steepness: Win probability curve steepness
        workers: Worker processes to spread trials across
        should_stop: Polled between trials; returning True ends the run early
        progress_callback: Optional callback for progress updates (receives percent complete)
        deadline: time.time() value after which no new trial starts; unlike
            should_stop it also reaches worker processes

    Returns:
        SimulationReport with per-team odds computed against the trials
        that actually completed

    Raises:
        InvalidConfigurationError: If trials or playoff_seeds is out of range
    """
    validate_simulation_config(teams, settings, trials)

    if rng is None:
        rng = random.Random()
    locked_results = locked_results or {}
    remaining = unplayed_matchups(matchups)
    playoff_seeds = settings.playoff_seeds

    known_ids = {t.id for t in teams}
    orphaned = [m.id for m in remaining if m.home_id not in known_ids or m.away_id not in known_ids]
    if orphaned:
        logger.debug("Skipping matchups with unknown teams: %s", ", ".join(orphaned))

    if workers > 1 and trials > 1:
        tallies, completed = _tally_trials_parallel(
            teams, remaining, playoff_seeds, locked_results, trials,
            rng, steepness, workers, should_stop, progress_callback, deadline
        )
    else:
        tallies, completed = _tally_trials(
            teams, remaining, playoff_seeds, locked_results, trials,
            rng, steepness, should_stop, progress_callback, deadline
        )

    # Final progress update
    if progress_callback:
        progress_callback(100)

    logger.info(
        "Simulated %d/%d trials over %d unplayed matchups (%d locked)",
        completed, trials, len(remaining),
        sum(1 for m in remaining if m.id in locked_results)
    )

    odds = [
        OddsResult(
            team_id=t.id,
            clinch_pct=_to_percent(tallies[t.id].clinch, completed),
            seed_pct=tuple(_to_percent(n, completed) for n in tallies[t.id].seeds)
        )
        for t in teams
    ]

    return SimulationReport(odds=odds, trials_requested=trials, trials_completed=completed)


def simulate_odds(
    teams: List[Team],
    matchups: List[Matchup],
    settings: LeagueSettings,
    trials: int,
    locked_results: Optional[LockedResults] = None,
    **kwargs
) -> List[OddsResult]:
    """Per-team playoff odds; see run_simulation for the keyword options."""
    return run_simulation(teams, matchups, settings, trials, locked_results, **kwargs).odds

"""
Tests for standings ordering.
"""

import itertools

import pytest

from playoff_odds.simulator import (
    InvalidConfigurationError,
    LeagueSettings,
    compute_standings,
    compare_teams,
    rank_teams
)


class TestStandingsOrder:
    """Tests for the standings comparator."""

    def test_tiebreak_by_points_for(self, make_team):
        """Equal win% is broken by higher points for."""
        a = make_team(1, "A", wins=5, losses=3, pf=900.0, pa=850.0)
        b = make_team(2, "B", wins=5, losses=3, pf=880.0, pa=820.0)
        assert [t.id for t in rank_teams([b, a])] == [1, 2]

    def test_win_pct_dominates_points_for(self, make_team):
        """A better record outranks more points scored."""
        a = make_team(1, "A", wins=6, losses=2, pf=700.0, pa=720.0)
        b = make_team(2, "B", wins=5, losses=3, pf=1000.0, pa=600.0)
        assert [t.id for t in rank_teams([b, a])] == [1, 2]

    def test_points_against_breaks_pf_tie(self, make_team):
        """With equal win% and PF, fewer points against ranks higher."""
        a = make_team(1, "A", wins=4, losses=4, pf=800.0, pa=810.0)
        b = make_team(2, "B", wins=4, losses=4, pf=800.0, pa=790.0)
        assert [t.id for t in rank_teams([a, b])] == [2, 1]

    def test_name_is_final_tiebreak(self, make_team):
        """Identical numbers fall back to alphabetical name."""
        zed = make_team(1, "Zed", wins=3, losses=3, pf=600.0, pa=600.0)
        amy = make_team(2, "Amy", wins=3, losses=3, pf=600.0, pa=600.0)
        assert [t.name for t in rank_teams([zed, amy])] == ["Amy", "Zed"]

    def test_ties_count_as_half_win(self, make_team):
        """A 4-3-1 team ranks above a 4-4-0 team."""
        tied = make_team(1, "Tied", wins=4, losses=3, ties=1, pf=100.0)
        even = make_team(2, "Even", wins=4, losses=4, pf=900.0)
        assert [t.id for t in rank_teams([even, tied])] == [1, 2]

    def test_team_without_games_has_zero_win_pct(self, make_team):
        """A team with no games ranks by win% 0, behind any team with a win."""
        fresh = make_team(1, "Fresh", pf=0.0)
        one_win = make_team(2, "OneWin", wins=1, losses=5)
        assert fresh.win_pct == 0.0
        assert [t.id for t in rank_teams([fresh, one_win])] == [2, 1]

    def test_empty_input(self):
        """No teams gives an empty table."""
        table = compute_standings([], LeagueSettings(playoff_seeds=4))
        assert table.sorted == []
        assert table.seeds == []


class TestTotalOrder:
    """The comparator must be a strict total order."""

    def _teams(self, make_team):
        return [
            make_team(1, "A", wins=5, losses=3, pf=900.0, pa=850.0),
            make_team(2, "B", wins=5, losses=3, pf=900.0, pa=850.0),
            make_team(3, "C", wins=5, losses=3, pf=900.0, pa=800.0),
            make_team(4, "D", wins=6, losses=2, pf=700.0, pa=900.0),
            make_team(5, "E", wins=4, losses=3, ties=1, pf=950.0, pa=700.0),
            make_team(6, "A", wins=5, losses=3, pf=900.0, pa=850.0),
        ]

    def test_antisymmetric(self, make_team):
        """Distinct teams never compare equal, and swapping flips the sign."""
        teams = self._teams(make_team)
        for a, b in itertools.permutations(teams, 2):
            assert compare_teams(a, b) != 0
            assert compare_teams(a, b) == -compare_teams(b, a)

    def test_transitive(self, make_team):
        """a < b and b < c implies a < c."""
        teams = self._teams(make_team)
        for a, b, c in itertools.permutations(teams, 3):
            if compare_teams(a, b) < 0 and compare_teams(b, c) < 0:
                assert compare_teams(a, c) < 0

    def test_order_independent_of_input_order(self, make_team):
        """Any input permutation produces the same ranking."""
        teams = self._teams(make_team)
        expected = [t.id for t in rank_teams(teams)]
        for perm in itertools.permutations(teams):
            assert [t.id for t in rank_teams(list(perm))] == expected


class TestComputeStandings:
    """Tests for compute_standings."""

    def test_seeds_are_top_teams(self, teams, settings):
        """Seeds list the ids of the top playoff_seeds teams."""
        table = compute_standings(teams, settings)
        assert [t.id for t in table.sorted] == [1, 2, 3, 4]
        assert table.seeds == [1, 2]

    def test_idempotent(self, teams, settings):
        """Repeated calls give identical output."""
        first = compute_standings(teams, settings)
        second = compute_standings(teams, settings)
        assert [t.id for t in first.sorted] == [t.id for t in second.sorted]
        assert first.seeds == second.seeds

    def test_does_not_mutate_input(self, teams, settings):
        """The caller's list and teams are left untouched."""
        reversed_teams = list(reversed(teams))
        before = [t.to_dict() for t in reversed_teams]
        compute_standings(reversed_teams, settings)
        assert [t.to_dict() for t in reversed_teams] == before
        assert [t.id for t in reversed_teams] == [4, 3, 2, 1]

    def test_ignores_declared_tiebreakers(self, make_team):
        """The fixed order applies even if the league lists other criteria."""
        a = make_team(1, "A", wins=5, losses=3, pf=900.0, pa=850.0)
        b = make_team(2, "B", wins=5, losses=3, pf=880.0, pa=820.0)
        settings = LeagueSettings(playoff_seeds=1, tiebreakers=["pointsAgainst"])
        assert compute_standings([b, a], settings).seeds == [1]

    @pytest.mark.parametrize("seeds", [0, -1])
    def test_non_positive_seeds_rejected(self, teams, seeds):
        """A cutoff below one is refused instead of slicing from the end."""
        with pytest.raises(InvalidConfigurationError, match="playoff_seeds"):
            compute_standings(teams, LeagueSettings(playoff_seeds=seeds))

    def test_to_dict(self, teams, settings):
        """Serialized standings carry records and seeds."""
        data = compute_standings(teams, settings).to_dict()
        assert data["seeds"] == [1, 2]
        assert data["sorted"][0]["record"] == "2-0-0"

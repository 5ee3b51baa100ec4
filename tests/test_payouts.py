"""Unit tests for earnings and points lookup."""

import pytest

from pgc.models import TeamResult, TierTable
from pgc.payouts import (
    compute_earnings_and_points,
    count_positions,
    prize_for_position,
    slice_tier,
)

TIER = TierTable(points=[50, 30, 20, 10], payouts=[100, 60, 40, 20])


def make_team(team_id, position):
    return TeamResult(id=team_id, tour_card_id=f'tc-{team_id}', position=position)


class TestUntiedPositions:
    """Tests for plain ranks."""

    def test_first_place(self):
        """Test rank 1 reads index 0."""
        team = make_team('a', '1')
        assert compute_earnings_and_points(team, [team], TIER) == (100.0, 50.0)

    def test_third_place(self):
        """Test rank 3 reads index 2."""
        team = make_team('a', '3')
        assert compute_earnings_and_points(team, [team], TIER) == (40.0, 20.0)

    def test_past_end_of_table(self):
        """Test ranks beyond the table pay nothing."""
        team = make_team('a', '5')
        assert compute_earnings_and_points(team, [team], TIER) == (0.0, 0.0)

    def test_uneven_tables_default_per_table(self):
        """Test each table defaults to 0 on its own when lengths differ."""
        tier = TierTable(points=[50, 30], payouts=[100, 60, 40])
        assert prize_for_position('3', 1, tier) == (40.0, 0.0)


class TestTiedPositions:
    """Tests for splitting tied positions."""

    def test_two_way_tie_for_first(self):
        """Test T1 shared by two teams averages ranks 1 and 2."""
        a, b = make_team('a', 'T1'), make_team('b', 'T1')
        assert compute_earnings_and_points(a, [a, b], TIER) == (80.0, 40.0)

    def test_three_way_tie_for_second(self):
        """Test T2 shared by three teams averages ranks 2-4."""
        teams = [make_team(x, 'T2') for x in 'abc'] + [make_team('d', '1')]
        earnings, points = compute_earnings_and_points(teams[0], teams, TIER)
        assert earnings == pytest.approx(40.0)
        assert points == pytest.approx(20.0)

    def test_tie_runs_off_table_divides_by_full_count(self):
        """Test only in-bounds entries are summed, divided by all tied teams."""
        teams = [make_team(x, 'T3') for x in 'abcd']
        earnings, points = compute_earnings_and_points(teams[0], teams, TIER)
        assert earnings == pytest.approx((40 + 20) / 4)
        assert points == pytest.approx((20 + 10) / 4)

    def test_tie_starting_past_table(self):
        """Test a tie starting beyond the table pays nothing."""
        teams = [make_team(x, 'T5') for x in 'ab']
        assert compute_earnings_and_points(teams[0], teams, TIER) == (0.0, 0.0)

    def test_tie_sum_matches_untied_range(self):
        """Test tied earnings add up to the payouts of the occupied ranks."""
        teams = [make_team(x, 'T2') for x in 'ab']
        total = sum(compute_earnings_and_points(t, teams, TIER)[0] for t in teams)
        assert total == pytest.approx(60 + 40)

    def test_only_same_position_counts_as_tied(self):
        """Test teams on other positions do not join the tie."""
        a, b = make_team('a', 'T1'), make_team('b', 'T1')
        others = [make_team('c', '3'), make_team('d', 'CUT')]
        assert compute_earnings_and_points(a, [a, b, *others], TIER) == (80.0, 40.0)


class TestNoPrize:
    """Tests for positions that earn nothing."""

    def test_cut(self):
        """Test CUT teams earn nothing."""
        team = make_team('a', 'CUT')
        assert compute_earnings_and_points(team, [team], TIER) == (0.0, 0.0)

    def test_empty_tables(self):
        """Test an empty tier pays nothing."""
        team = make_team('a', '1')
        assert compute_earnings_and_points(team, [team], TierTable()) == (0.0, 0.0)

    def test_empty_payouts_only(self):
        """Test either table being empty pays nothing."""
        assert prize_for_position('1', 1, TierTable(points=[10], payouts=[])) == (0.0, 0.0)

    @pytest.mark.parametrize('position', [None, '', '0', 'WD'])
    def test_unparsable_positions(self, position):
        """Test missing or malformed positions pay nothing."""
        assert prize_for_position(position, 1, TIER) == (0.0, 0.0)


class TestHelpers:
    """Tests for tier slicing and tie counting."""

    def test_slice_tier(self):
        """Test slicing both tables together."""
        view = slice_tier(TIER, 2, 4)
        assert view.points == [20, 10]
        assert view.payouts == [40, 20]

    def test_slice_past_end_is_empty(self):
        """Test slicing beyond the table gives empty tables."""
        view = slice_tier(TIER, 75, 150)
        assert view.points == []
        assert view.payouts == []

    def test_count_positions(self):
        """Test counting skips teams without a position."""
        teams = [make_team('a', 'T1'), make_team('b', 'T1'), make_team('c', None)]
        assert count_positions(teams) == {'T1': 2}

"""Unit tests for position assignment."""

import pytest

from pgc.models import TeamResult, TourCard
from pgc.positions import (
    assign_positions,
    format_position,
    group_teams_by_tour,
    parse_position,
)


def make_team(team_id, score, position=None, tour_card_id=None):
    return TeamResult(
        id=team_id,
        tour_card_id=tour_card_id or f'tc-{team_id}',
        score=score,
        position=position,
    )


def by_score(team):
    return team.score


class TestParsePosition:
    """Tests for splitting position strings."""

    @pytest.mark.parametrize(
        'position, expected',
        [
            ('1', (1, False)),
            ('12', (12, False)),
            ('T4', (4, True)),
            ('T100', (100, True)),
            ('CUT', (None, False)),
            ('', (None, False)),
            (None, (None, False)),
            ('TX', (None, False)),
        ],
    )
    def test_parse(self, position, expected):
        """Test rank and tie flag extraction."""
        assert parse_position(position) == expected

    def test_format_position(self):
        """Test tied positions get the T prefix."""
        assert format_position(4, True) == 'T4'
        assert format_position(4, False) == '4'


class TestAssignPositions:
    """Tests for competition ranking."""

    def test_ties_share_rank_and_next_rank_skips(self):
        """Test -5, -5, -3 ranks T1, T1, 3."""
        teams = [make_team('a', -5), make_team('b', -5), make_team('c', -3)]
        positions = assign_positions(teams, by_score)
        assert positions == {'a': 'T1', 'b': 'T1', 'c': '3'}

    def test_lowest_score_ranks_first(self):
        """Test ordering is ascending by score regardless of input order."""
        teams = [make_team('a', 2), make_team('b', -7), make_team('c', 0)]
        positions = assign_positions(teams, by_score)
        assert positions == {'b': '1', 'c': '2', 'a': '3'}

    def test_rank_sequence_follows_group_sizes(self):
        """Test ranks are 1, 1+k1, 1+k1+k2 for tie groups of size k1, k2, ..."""
        scores = [-8, -8, -8, -6, -4, -4, 1]
        teams = [make_team(str(i), s) for i, s in enumerate(scores)]
        positions = assign_positions(teams, by_score)
        assert [positions[str(i)] for i in range(len(scores))] == [
            'T1', 'T1', 'T1', '4', 'T5', 'T5', '7',
        ]

    def test_cut_teams_excluded(self):
        """Test CUT teams take no rank slot."""
        teams = [
            make_team('a', -10, position='CUT'),
            make_team('b', -2),
            make_team('c', 0),
        ]
        positions = assign_positions(teams, by_score)
        assert positions == {'b': '1', 'c': '2'}

    def test_missing_scores_excluded(self):
        """Test teams without a score are skipped and do not shift others."""
        teams = [make_team('a', None), make_team('b', -1), make_team('c', -1)]
        positions = assign_positions(teams, by_score)
        assert positions == {'b': 'T1', 'c': 'T1'}

    def test_fractional_scores_group_exactly(self):
        """Test scores only tie on exact equality."""
        teams = [make_team('a', -2.5), make_team('b', -2.5), make_team('c', -2.4)]
        positions = assign_positions(teams, by_score)
        assert positions == {'a': 'T1', 'b': 'T1', 'c': '3'}

    def test_custom_score_function(self):
        """Test ranking by a derived score."""
        teams = [make_team('a', -5), make_team('b', -3)]
        positions = assign_positions(teams, lambda t: -t.score)
        assert positions == {'b': '1', 'a': '2'}

    def test_empty(self):
        """Test no teams gives no positions."""
        assert assign_positions([], by_score) == {}


class TestGroupTeamsByTour:
    """Tests for grouping teams by tour."""

    def test_groups_by_tour_card_tour(self):
        """Test teams land under their tour card's tour."""
        cards = [
            TourCard(id='tc1', tour_id='pga'),
            TourCard(id='tc2', tour_id='ccg'),
            TourCard(id='tc3', tour_id='pga'),
        ]
        teams = [
            make_team('a', 0, tour_card_id='tc1'),
            make_team('b', 0, tour_card_id='tc2'),
            make_team('c', 0, tour_card_id='tc3'),
        ]
        groups = group_teams_by_tour(teams, cards)
        assert [t.id for t in groups['pga']] == ['a', 'c']
        assert [t.id for t in groups['ccg']] == ['b']

    def test_unknown_tour_card_skipped(self):
        """Test teams without a known tour card are left out."""
        teams = [make_team('a', 0, tour_card_id='missing')]
        assert group_teams_by_tour(teams, []) == {}

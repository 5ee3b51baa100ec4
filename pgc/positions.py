"""Position assignment for tournament leaderboards."""

import math
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .constants import CUT, TIE_PREFIX
from .models import TeamResult, TourCard


def parse_position(position: Optional[str]) -> Tuple[Optional[int], bool]:
    """
    Split a position string into its rank and tie flag.

    Examples:
        "T4"  -> (4, True)
        "12"  -> (12, False)
        "CUT" -> (None, False)
        None  -> (None, False)
    """
    if not position:
        return None, False

    tied = position.startswith(TIE_PREFIX)
    digits = position[len(TIE_PREFIX):] if tied else position
    if not digits.isdigit():
        return None, False
    return int(digits), tied


def format_position(rank: int, tied: bool) -> str:
    """Build a position string, e.g. (4, True) -> "T4"."""
    return f'{TIE_PREFIX}{rank}' if tied else str(rank)


def assign_positions(
    teams: Iterable[TeamResult],
    score_of: Callable[[TeamResult], Optional[float]],
) -> Dict[str, str]:
    """
    Rank teams by score using competition ranking.

    Lower scores rank higher. Teams sharing a score share the position
    (prefixed with "T") and the next score starts after the whole group,
    so scores -5, -5, -3 rank T1, T1, 3.

    CUT teams and teams whose score is unknown are left out of the result
    and take no rank slot.

    Args:
        teams: Teams to rank
        score_of: Returns the score to rank a team by, or None to skip it

    Returns:
        Dict mapping team id to position string
    """
    teams_by_score: Dict[float, List[str]] = defaultdict(list)

    for team in teams:
        if team.position == CUT:
            continue
        score = score_of(team)
        if score is None or math.isnan(score):
            continue
        teams_by_score[score].append(team.id)

    positions: Dict[str, str] = {}
    rank = 1
    for score in sorted(teams_by_score):
        team_ids = teams_by_score[score]
        label = format_position(rank, len(team_ids) > 1)
        for team_id in team_ids:
            positions[team_id] = label
        rank += len(team_ids)

    return positions


def group_teams_by_tour(
    teams: Iterable[TeamResult],
    tour_cards: Iterable[TourCard],
) -> Dict[str, List[TeamResult]]:
    """
    Group teams by the tour their tour card belongs to.

    Teams whose tour card is not in ``tour_cards`` are left out.
    """
    tour_by_card = {card.id: card.tour_id for card in tour_cards}

    teams_by_tour: Dict[str, List[TeamResult]] = defaultdict(list)
    for team in teams:
        tour_id = tour_by_card.get(team.tour_card_id)
        if tour_id is not None:
            teams_by_tour[tour_id].append(team)

    return dict(teams_by_tour)

"""Season totals and standings for tour cards."""

import logging
from collections import defaultdict
from dataclasses import replace
from typing import Dict, Iterable, List

from .constants import CUT
from .models import TeamResult, TourCard
from .positions import assign_positions
from .utils import round_half_up

logger = logging.getLogger('pgc.season')


def summarize_tour_card(tour_card: TourCard, teams: Iterable[TeamResult]) -> TourCard:
    """
    Total a tour card's season from its tournament results.

    Earnings and points are summed, every team counts as an appearance and
    every team not marked CUT counts as a made cut.
    """
    teams = list(teams)
    return replace(
        tour_card,
        earnings=round_half_up(sum(team.earnings or 0 for team in teams), 2),
        points=sum(team.points or 0 for team in teams),
        appearances=len(teams),
        made_cut=sum(1 for team in teams if team.position != CUT),
    )


def summarize_season(
    tour_cards: Iterable[TourCard],
    teams: Iterable[TeamResult],
) -> List[TourCard]:
    """
    Recalculate season totals for every tour card.

    Args:
        tour_cards: Tour cards to total
        teams: Every team result of the season, across tournaments

    Returns:
        New list of TourCard objects with earnings, points, appearances and cuts
    """
    teams_by_card: Dict[str, List[TeamResult]] = defaultdict(list)
    for team in teams:
        teams_by_card[team.tour_card_id].append(team)

    summaries = [summarize_tour_card(card, teams_by_card.get(card.id, [])) for card in tour_cards]
    logger.debug(f'Summarized {len(summaries)} tour cards from {sum(map(len, teams_by_card.values()))} teams')
    return summaries


def rank_tour_cards(tour_cards: Iterable[TourCard]) -> List[TourCard]:
    """
    Rank tour cards by season points, separately on each tour.

    Higher points rank higher; equal points share a tied position.
    """
    tour_cards = list(tour_cards)

    cards_by_tour: Dict[str, List[TourCard]] = defaultdict(list)
    for card in tour_cards:
        cards_by_tour[card.tour_id].append(card)

    positions: Dict[str, str] = {}
    for cards in cards_by_tour.values():
        # assign_positions ranks low scores first, so rank by negated points
        positions.update(assign_positions(cards, lambda card: -card.points))

    return [replace(card, position=positions.get(card.id)) for card in tour_cards]

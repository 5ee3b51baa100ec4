"""Tournament standings: positions, past positions, earnings and points."""

import logging
from collections import Counter
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

from .config import get_config
from .constants import CUT, PLAYOFF_SILVER
from .models import TeamResult, TierTable, TourCard
from .payouts import count_positions, prize_for_position, slice_tier
from .positions import assign_positions, group_teams_by_tour
from .schemas import LeagueConfig
from .utils import round_half_up

logger = logging.getLogger('pgc.standings')


def current_score(team: TeamResult) -> Optional[float]:
    """Score the live leaderboard is ranked by."""
    return team.score


def past_score(team: TeamResult) -> Optional[float]:
    """Score before today's round, used for yesterday's standings."""
    if team.score is None:
        return None
    return team.score - (team.today or 0)


def split_playoff_brackets(
    teams: Iterable[TeamResult],
    tour_cards: Iterable[TourCard],
) -> Tuple[List[TeamResult], List[TeamResult]]:
    """
    Split teams into the gold and silver playoff brackets.

    Silver is every team whose tour card has playoff == 2; all other teams,
    including those without a known tour card, play in gold.

    Returns:
        Tuple of (gold_teams, silver_teams)
    """
    playoff_by_card = {card.id: card.playoff for card in tour_cards}

    gold: List[TeamResult] = []
    silver: List[TeamResult] = []
    for team in teams:
        if playoff_by_card.get(team.tour_card_id) == PLAYOFF_SILVER:
            silver.append(team)
        else:
            gold.append(team)
    return gold, silver


def update_team_positions(
    teams: List[TeamResult],
    tour_cards: Optional[Iterable[TourCard]],
    tier: Optional[TierTable],
    tournament_name: Optional[str] = None,
    *,
    config: Optional[LeagueConfig] = None,
) -> List[TeamResult]:
    """
    Recalculate positions, past positions, earnings and points for a tournament.

    Regular events rank the whole field passed in and pay every team from the
    full tier table; ties are split among teams of the same tour. The TOUR
    Championship instead runs two independent competitions: the silver
    bracket (tour card playoff == 2) and the gold bracket (everyone else),
    paid from the first and second ``playoff_bracket_size`` slots of the
    table respectively.

    CUT teams keep "CUT" and earn nothing. Teams without a score are not
    ranked and receive the configured fallback position. Teams whose tour
    card is unknown still count in the ranking (gold at the championship)
    but are returned as they are.

    Args:
        teams: Team results for one tournament
        tour_cards: Tour cards owning the teams
        tier: Points and payouts tables for the tournament's tier
        tournament_name: Tournament name, checked for the TOUR Championship
        config: League settings (default: loaded configuration)

    Returns:
        New list of TeamResult objects, in input order
    """
    if not teams or tier is None:
        return teams

    config = config or get_config()
    tour_cards = list(tour_cards or [])
    cards_by_id: Dict[str, TourCard] = {card.id: card for card in tour_cards}
    is_championship = tournament_name == config.tour_championship_name

    if is_championship:
        size = config.playoff_bracket_size
        gold_tier = slice_tier(tier, 0, size)
        silver_tier = slice_tier(tier, size, 2 * size)
        ranking_groups = list(split_playoff_brackets(teams, tour_cards))
    else:
        gold_tier = silver_tier = tier
        if config.rank_scope == 'tour':
            ranking_groups = list(group_teams_by_tour(teams, tour_cards).values())
        else:
            ranking_groups = [teams]

    positions: Dict[str, str] = {}
    past_positions: Dict[str, str] = {}
    for group in ranking_groups:
        positions.update(assign_positions(group, current_score))
        past_positions.update(assign_positions(group, past_score))

    fallback = config.unranked_position
    placed: List[TeamResult] = []
    missing_cards = 0
    for team in teams:
        if team.tour_card_id not in cards_by_id:
            missing_cards += 1
            placed.append(team)
        elif team.position == CUT:
            placed.append(replace(team, past_position=CUT))
        else:
            placed.append(
                replace(
                    team,
                    position=positions.get(team.id, fallback),
                    past_position=past_positions.get(team.id, fallback),
                )
            )

    if missing_cards:
        logger.warning(f'{missing_cards} team(s) have no matching tour card and were left unchanged')

    def pool_key(team: TeamResult) -> Optional[str]:
        card = cards_by_id.get(team.tour_card_id)
        if is_championship:
            return 'silver' if card is not None and card.playoff == PLAYOFF_SILVER else 'gold'
        return card.tour_id if card is not None else None

    pools: Dict[str, List[TeamResult]] = {}
    for team in placed:
        key = pool_key(team)
        if key is not None:
            pools.setdefault(key, []).append(team)
    tie_counts: Dict[str, Counter] = {key: count_positions(pool) for key, pool in pools.items()}

    results: List[TeamResult] = []
    for team in placed:
        card = cards_by_id.get(team.tour_card_id)
        if card is None:
            results.append(team)
            continue

        key = pool_key(team)
        tier_view = silver_tier if is_championship and card.playoff == PLAYOFF_SILVER else gold_tier
        earnings, points = prize_for_position(
            team.position, tie_counts[key][team.position], tier_view
        )
        results.append(
            replace(team, earnings=round_half_up(earnings, 2), points=round_half_up(points))
        )

    logger.debug(
        f'Updated {len(results)} teams for {tournament_name or "tournament"} '
        f'({"bracket split" if is_championship else config.rank_scope + " ranking"})'
    )
    return results

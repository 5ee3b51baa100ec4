"""Round-by-round scoring for the multi-week playoff series.

Each playoff event counts the best N golfers of a team per round, where N
shrinks as the series goes on. Scores carry over: the first event starts
each team from strokes earned by its regular-season finish, later events
start from the team's final score in the previous event.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Union

import polars as pl

from .config import get_config, get_playoff_selection
from .constants import MISSING_ROUND_STROKES, ROUND_FIELDS
from .models import Golfer, PlayoffEvent, TeamResult, TierTable, TourCard
from .positions import parse_position
from .schemas import LeagueConfig
from .standings import update_team_positions
from .utils import round_half_up

logger = logging.getLogger('pgc.playoffs')

GOLFER_SCHEMA = {
    'api_id': pl.Int64,
    'position': pl.String,
    **{name: pl.Float64 for name in ROUND_FIELDS},
}


def _as_float(value):
    return None if value is None else float(value)


def golfers_frame(golfers: Iterable[Golfer]) -> pl.DataFrame:
    """Build a leaderboard DataFrame (api_id, position, round_one..round_four)."""
    golfers = list(golfers)
    data = {
        'api_id': [g.api_id for g in golfers],
        'position': [g.position for g in golfers],
    }
    for name in ROUND_FIELDS:
        data[name] = [_as_float(getattr(g, name)) for g in golfers]
    return pl.DataFrame(data, schema=GOLFER_SCHEMA)


def get_event_index(tournament_name: str, tier_name: str = '') -> int:
    """
    Work out which playoff event (1, 2 or 3) a tournament is from its names.

    A "2" or "3" counts when it appears after the word "event" or "playoff"
    in the tournament name, or anywhere in the tier name.

    Examples:
        ("Playoff Event 2", "Playoff")  -> 2
        ("TOUR Championship", "Playoff 3") -> 3
        ("FedEx St. Jude", "Playoff") -> 1
    """
    name = (tournament_name or '').lower()
    tier = (tier_name or '').lower()

    marks = [pos for pos in (name.find('event'), name.find('playoff')) if pos != -1]
    event_pos = min(marks) if marks else -1

    if (event_pos != -1 and name.find('3') > event_pos) or '3' in tier:
        return 3
    if (event_pos != -1 and name.find('2') > event_pos) or '2' in tier:
        return 2
    return 1


def selection_count(
    event_index: int,
    round_number: int,
    selection: Optional[Dict[int, Sequence[int]]] = None,
) -> int:
    """Number of golfers counted for ``round_number`` (1-4) of playoff event ``event_index``."""
    selection = selection or get_playoff_selection()
    counts = selection.get(event_index) or selection[max(selection)]
    return counts[round_number - 1]


def team_golfers(frame: pl.DataFrame, golfer_ids: Sequence[int]) -> pl.DataFrame:
    """Rows of the leaderboard belonging to a team's picks."""
    if not golfer_ids:
        return frame.clear()
    return frame.filter(pl.col('api_id').is_in(list(golfer_ids)))


def best_round_total(frame: pl.DataFrame, round_field: str, count: int) -> float:
    """
    Sum of the ``count`` lowest scores in a round.

    Golfers without a score for the round are ordered last and add nothing.
    """
    if frame.is_empty():
        return 0.0
    best = frame.sort(pl.col(round_field).fill_null(MISSING_ROUND_STROKES)).head(count)
    return float(best.get_column(round_field).fill_null(0).sum())


def starting_strokes_for(
    tour_card: Optional[TourCard],
    tour_cards: Sequence[TourCard],
    playoff_tier: Optional[TierTable],
) -> float:
    """
    Strokes a tour card starts the first playoff event with.

    The value is read from the playoff tier's points table at the card's
    season finishing position. A tied finish averages the slots the tie
    covers, divided by the number of cards sharing it.
    """
    if tour_card is None or playoff_tier is None:
        return 0.0

    table = playoff_tier.points
    rank, tied = parse_position(tour_card.position)
    if rank is None or rank < 1:
        return 0.0
    index = rank - 1

    if not tied:
        return float(table[index]) if index < len(table) else 0.0

    tie_count = sum(1 for card in tour_cards if card.position == tour_card.position) or 1
    return sum(table[index:index + tie_count]) / tie_count


def carry_in_strokes(team: TeamResult, previous_teams: Iterable[TeamResult]) -> float:
    """Final score of the same tour card in the previous playoff event (0 if absent)."""
    for previous in previous_teams:
        if previous.tour_card_id == team.tour_card_id:
            return previous.score or 0.0
    return 0.0


def calculate_round_by_round_scoring(
    team: TeamResult,
    golfers: Union[pl.DataFrame, Iterable[Golfer]],
    event_index: int,
    starting_strokes: float = 0.0,
    par: int = 72,
    multiplier: Optional[float] = None,
    weekend_multiplier: Optional[float] = None,
    selection: Optional[Dict[int, Sequence[int]]] = None,
) -> TeamResult:
    """
    Score a team's completed playoff event round by round.

    Each round value is the best-N strokes total divided by the multiplier,
    rounded and divided by ten (``multiplier`` for rounds 1-2,
    ``weekend_multiplier`` for rounds 3-4; both default to N/10, which makes
    the value the best-N average to one decimal).

    The event score is ``starting_strokes + rounds - 4 * par``, rounded to
    one decimal; ``today`` is the final round against par.

    Args:
        team: Team to score
        golfers: Event leaderboard, as Golfer objects or from golfers_frame()
        event_index: Playoff event number (1-3)
        starting_strokes: Finish-based strokes (event 1) or carried score
        par: Course par
        multiplier: Divisor for rounds one and two
        weekend_multiplier: Divisor for rounds three and four
        selection: Golfer counts per event (default: league config)

    Returns:
        New TeamResult with rounds, score, today, thru and round filled in
    """
    frame = golfers if isinstance(golfers, pl.DataFrame) else golfers_frame(golfers)
    picks = team_golfers(frame, team.golfer_ids)

    rounds: Dict[str, float] = {}
    for round_number, round_field in enumerate(ROUND_FIELDS, start=1):
        count = selection_count(event_index, round_number, selection)
        divisor = multiplier if round_number <= 2 else weekend_multiplier
        divisor = divisor or count / 10
        total = best_round_total(picks, round_field, count)
        rounds[round_field] = round_half_up(total / divisor) / 10

    score = round_half_up(((starting_strokes or 0) + sum(rounds.values()) - par * 4) * 10) / 10
    today = round_half_up((rounds['round_four'] - par) * 10) / 10

    return replace(
        team,
        score=score,
        today=today,
        thru=18,
        round=5,
        points=0.0,
        **rounds,
    )


def score_playoff_series(
    events: Sequence[PlayoffEvent],
    tour_cards: Sequence[TourCard],
    playoff_tier: Optional[TierTable],
    *,
    config: Optional[LeagueConfig] = None,
) -> List[List[TeamResult]]:
    """
    Recalculate every event of the playoff series in order.

    Teams in event 1 start from their season-finish strokes; teams in later
    events start from their previous event score. Every event is ranked per
    bracket, but only the final event pays out, and only earnings. Playoff
    teams never receive points.

    Args:
        events: Playoff events in the order they were played
        tour_cards: Tour cards (season position and playoff bracket)
        playoff_tier: Playoff tier (starting strokes and final payouts)
        config: League settings (default: loaded configuration)

    Returns:
        One list of updated TeamResult objects per event
    """
    config = config or get_config()
    cards_by_id = {card.id: card for card in tour_cards}
    championship = config.tour_championship_name

    results: List[List[TeamResult]] = []
    previous: List[TeamResult] = []

    for event_index, event in enumerate(events, start=1):
        named_index = get_event_index(event.name)
        if named_index != 1 and named_index != event_index:
            logger.warning(
                f'{event.name} looks like playoff event {named_index} but is scored as event {event_index}'
            )

        frame = golfers_frame(event.golfers)
        scored = []
        for team in event.teams:
            if event_index == 1:
                start = starting_strokes_for(
                    cards_by_id.get(team.tour_card_id), tour_cards, playoff_tier
                )
            else:
                start = carry_in_strokes(team, previous)
            scored.append(
                calculate_round_by_round_scoring(
                    team,
                    frame,
                    event_index,
                    starting_strokes=start,
                    par=event.par,
                    selection=config.playoff_selection,
                )
            )

        is_final = event_index == len(events)
        if is_final and playoff_tier is not None:
            # Playoff teams earn money only; the points table holds starting strokes
            prize_tier = TierTable(
                points=[0.0] * len(playoff_tier.payouts), payouts=list(playoff_tier.payouts)
            )
        else:
            prize_tier = TierTable()
        ranked = update_team_positions(scored, tour_cards, prize_tier, championship, config=config)

        logger.info(f'Scored playoff event {event_index} ({event.name}): {len(ranked)} teams')
        results.append(ranked)
        previous = ranked

    return results

from .models import Golfer, PlayoffEvent, TeamResult, TierTable, Tournament, TourCard
from .positions import (
    assign_positions,
    format_position,
    group_teams_by_tour,
    parse_position,
)
from .payouts import (
    compute_earnings_and_points,
    prize_for_position,
    slice_tier,
)
from .standings import split_playoff_brackets, update_team_positions
from .playoffs import (
    calculate_round_by_round_scoring,
    get_event_index,
    score_playoff_series,
    selection_count,
    starting_strokes_for,
)
from .season import rank_tour_cards, summarize_season, summarize_tour_card
from .validators import validate_tier_table, validate_tournament
from .tournament_io import (
    load_playoff_series,
    load_season,
    load_tournament,
    recalculate_season,
    recalculate_tournament,
    save_season_standings,
    save_tournament_results,
)
from .excel_export import export_standings_to_excel

__all__ = [
    # Models
    'Golfer',
    'PlayoffEvent',
    'TeamResult',
    'TierTable',
    'Tournament',
    'TourCard',
    # Positions
    'assign_positions',
    'format_position',
    'group_teams_by_tour',
    'parse_position',
    # Earnings and points
    'compute_earnings_and_points',
    'prize_for_position',
    'slice_tier',
    # Tournament standings
    'split_playoff_brackets',
    'update_team_positions',
    # Playoffs
    'calculate_round_by_round_scoring',
    'get_event_index',
    'score_playoff_series',
    'selection_count',
    'starting_strokes_for',
    # Season
    'rank_tour_cards',
    'summarize_season',
    'summarize_tour_card',
    # Validation
    'validate_tier_table',
    'validate_tournament',
    # JSON / Excel I/O
    'load_playoff_series',
    'load_season',
    'load_tournament',
    'recalculate_season',
    'recalculate_tournament',
    'save_season_standings',
    'save_tournament_results',
    'export_standings_to_excel',
]

"""JSON-based loading and saving of tournament snapshots and results.

Snapshots are exported from the league database; results are written back
as JSON for the importer (and optionally to an Excel workbook, see
excel_export).
"""

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from .config import get_config, get_default_par
from .models import PlayoffEvent, TeamResult, TierTable, Tournament, TourCard
from .schemas import LeagueConfig, PlayoffSeriesFile, SeasonFile, TournamentFile
from .season import rank_tour_cards, summarize_season
from .standings import update_team_positions
from .utils import load_json, save_json
from .validators import validate_tournament

logger = logging.getLogger('pgc.tournament_io')


def load_tournament(path: str | Path) -> Tournament:
    """Load and validate a tournament snapshot file.

    Args:
        path: Path to the snapshot JSON (see schemas.TournamentFile)

    Returns:
        Tournament with model objects in place of the raw records
    """
    snapshot: TournamentFile = load_json(path, schema=TournamentFile)
    return Tournament(
        name=snapshot.name,
        tier=snapshot.tier.to_model() if snapshot.tier else None,
        tier_name=snapshot.tier_name or (snapshot.tier.name if snapshot.tier else '') or '',
        par=snapshot.par or get_default_par(),
        tour_cards=[card.to_model() for card in snapshot.tour_cards],
        teams=[team.to_model() for team in snapshot.teams],
        golfers=[golfer.to_model() for golfer in snapshot.golfers],
    )


def load_playoff_series(
    path: str | Path,
) -> tuple[list[PlayoffEvent], list[TourCard], Optional[TierTable]]:
    """Load a playoff series file.

    Returns:
        Tuple of (events, tour_cards, playoff_tier)
    """
    series: PlayoffSeriesFile = load_json(path, schema=PlayoffSeriesFile)
    events = [
        PlayoffEvent(
            name=event.name,
            par=event.par or get_default_par(),
            teams=[team.to_model() for team in event.teams],
            golfers=[golfer.to_model() for golfer in event.golfers],
        )
        for event in series.events
    ]
    tour_cards = [card.to_model() for card in series.tour_cards]
    tier = series.tier.to_model() if series.tier else None
    return events, tour_cards, tier


def load_season(path: str | Path) -> tuple[list[TourCard], list[TeamResult]]:
    """Load a season file as (tour_cards, teams)."""
    season: SeasonFile = load_json(path, schema=SeasonFile)
    return [card.to_model() for card in season.tour_cards], [team.to_model() for team in season.teams]


def save_tournament_results(
    output_path: str | Path,
    tournament_name: str,
    teams: list[TeamResult],
) -> None:
    """Save updated team results to JSON.

    Args:
        output_path: Path to output JSON file
        tournament_name: Tournament the results belong to
        teams: Updated TeamResult objects
    """
    data: dict[str, Any] = {
        'tournament': tournament_name,
        'updated_at': datetime.now(timezone.utc).isoformat(),
        'teams': [asdict(team) for team in teams],
    }
    save_json(output_path, data)
    logger.info(f'Results for {tournament_name} saved to {output_path}')


def save_season_standings(output_path: str | Path, tour_cards: list[TourCard]) -> None:
    """Save tour card season totals to JSON, best first within each tour."""
    ordered = sorted(tour_cards, key=lambda card: (card.tour_id, -card.points, -card.earnings))
    save_json(
        output_path,
        {
            'updated_at': datetime.now(timezone.utc).isoformat(),
            'tour_cards': [asdict(card) for card in ordered],
        },
    )
    logger.info(f'Season standings saved to {output_path}')


def recalculate_tournament(
    input_path: str | Path,
    output_path: Optional[str | Path] = None,
    config: Optional[LeagueConfig] = None,
    verbose: bool = False,
) -> tuple[Tournament, list[TeamResult]]:
    """Recalculate positions, earnings and points for a tournament snapshot.

    Args:
        input_path: Tournament snapshot JSON
        output_path: Where to write the results (skipped when None)
        config: League settings (default: loaded configuration)
        verbose: Whether to print the resulting leaderboard

    Returns:
        Tuple of (tournament, updated_teams)

    Raises:
        ValueError: If the snapshot fails validation
    """
    config = config or get_config()
    tournament = load_tournament(input_path)

    errors, warnings = validate_tournament(
        tournament.teams,
        tournament.tour_cards,
        tournament.tier,
        tournament.name,
        championship_name=config.tour_championship_name,
        bracket_size=config.playoff_bracket_size,
    )
    for warning in warnings:
        logger.warning(warning)
    if errors:
        for error in errors:
            logger.error(error)
        raise ValueError(f'{input_path} failed validation with {len(errors)} error(s)')

    teams = update_team_positions(
        tournament.teams, tournament.tour_cards, tournament.tier, tournament.name, config=config
    )

    if verbose:
        print(f'\n{tournament.name}: {len(teams)} teams')
        for team in teams:
            print(
                f'  {team.position or "-":>5}  {team.id}  score={team.score}  '
                f'earnings={team.earnings:.2f}  points={team.points:.0f}'
            )

    if output_path is not None:
        save_tournament_results(output_path, tournament.name, teams)

    return tournament, teams


def recalculate_season(
    input_path: str | Path,
    output_path: Optional[str | Path] = None,
) -> list[TourCard]:
    """Recalculate season totals and per-tour standings from a season file."""
    tour_cards, teams = load_season(input_path)
    standings = rank_tour_cards(summarize_season(tour_cards, teams))
    if output_path is not None:
        save_season_standings(output_path, standings)
    return standings

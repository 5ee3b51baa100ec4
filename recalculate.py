#!/usr/bin/env python3
"""
PGC Tour standings recalculation CLI

Recalculates positions, earnings and points from JSON snapshots exported
from the league database, and writes the results back as JSON (and
optionally Excel) for import.

Usage:
    python recalculate.py tournament data/tournaments/masters.json
    python recalculate.py tournament data/tournaments/tour_championship.json --excel standings.xlsx
    python recalculate.py playoffs data/playoffs/2025.json --output-dir out/playoffs
    python recalculate.py season data/seasons/2025.json --output out/season_2025.json
"""

import argparse
import logging
import sys
from pathlib import Path

from pgc import (
    export_standings_to_excel,
    load_playoff_series,
    recalculate_season,
    recalculate_tournament,
    save_tournament_results,
    score_playoff_series,
)
from pgc.logging_config import setup_logging


def default_output(input_path: Path, suffix: str) -> Path:
    return input_path.with_name(f'{input_path.stem}_{suffix}.json')


def run_tournament(args: argparse.Namespace) -> int:
    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else default_output(input_path, 'results')

    try:
        tournament, teams = recalculate_tournament(
            input_path, output_path, verbose=not args.quiet
        )
    except (FileNotFoundError, ValueError) as e:
        print(f'❌ {e}')
        return 1

    if args.excel:
        export_standings_to_excel(args.excel, teams, tournament.tour_cards)

    print(f'Results saved to {output_path}')
    return 0


def run_playoffs(args: argparse.Namespace) -> int:
    input_path = Path(args.input)
    output_dir = Path(args.output_dir) if args.output_dir else input_path.parent

    try:
        events, tour_cards, tier = load_playoff_series(input_path)
    except (FileNotFoundError, ValueError) as e:
        print(f'❌ {e}')
        return 1

    results = score_playoff_series(events, tour_cards, tier)

    for event_index, (event, teams) in enumerate(zip(events, results), start=1):
        save_tournament_results(output_dir / f'playoff_event_{event_index}.json', event.name, teams)
        if not args.quiet:
            leader = min(
                (t for t in teams if t.score is not None), key=lambda t: t.score, default=None
            )
            if leader:
                print(f'  Event {event_index} ({event.name}): leader {leader.id} at {leader.score}')

    print(f'Playoff results saved to {output_dir}')
    return 0


def run_season(args: argparse.Namespace) -> int:
    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else default_output(input_path, 'standings')

    try:
        standings = recalculate_season(input_path, output_path)
    except (FileNotFoundError, ValueError) as e:
        print(f'❌ {e}')
        return 1

    if not args.quiet:
        for card in standings:
            print(
                f'  {card.position or "-":>5}  {card.display_name or card.id} ({card.tour_id}): '
                f'{card.points:.0f} pts, ${card.earnings:,.2f}, '
                f'{card.made_cut}/{card.appearances} cuts'
            )

    print(f'Season standings saved to {output_path}')
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description='PGC Tour standings recalculation')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress detailed output')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-dir', default=None, help='Write a log file to this directory')

    subparsers = parser.add_subparsers(dest='command', required=True)

    tournament = subparsers.add_parser('tournament', help='Recalculate one tournament')
    tournament.add_argument('input', help='Tournament snapshot JSON')
    tournament.add_argument('--output', '-o', default=None, help='Results JSON path')
    tournament.add_argument('--excel', default=None, help='Also export standings to this workbook')
    tournament.set_defaults(func=run_tournament)

    playoffs = subparsers.add_parser('playoffs', help='Rescore the playoff series round by round')
    playoffs.add_argument('input', help='Playoff series JSON')
    playoffs.add_argument('--output-dir', default=None, help='Directory for per-event results')
    playoffs.set_defaults(func=run_playoffs)

    season = subparsers.add_parser('season', help='Recalculate tour card season totals')
    season.add_argument('input', help='Season JSON (tour cards and team results)')
    season.add_argument('--output', '-o', default=None, help='Standings JSON path')
    season.set_defaults(func=run_season)

    args = parser.parse_args()

    setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=logging.DEBUG if args.debug else logging.INFO,
        log_to_file=args.log_dir is not None,
    )

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())

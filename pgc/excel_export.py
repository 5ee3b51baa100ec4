"""Excel export of tournament standings."""

import logging
from pathlib import Path

import openpyxl
from openpyxl.styles import Font

from .constants import CUT
from .models import TeamResult, TourCard
from .positions import parse_position

logger = logging.getLogger('pgc.excel_export')

HEADERS = ['Position', 'Team', 'Tour', 'Score', 'Today', 'Earnings', 'Points']


def _standing_key(team: TeamResult) -> tuple[int, int]:
    """Sort ranked teams first by rank, then unranked, then CUT."""
    if team.position == CUT:
        return 2, 0
    rank, _ = parse_position(team.position)
    if rank is None:
        return 1, 0
    return 0, rank


def export_standings_to_excel(
    excel_path: str | Path,
    teams: list[TeamResult],
    tour_cards: list[TourCard],
    sheet_name: str = 'Standings',
) -> Path:
    """
    Write a tournament's standings to a worksheet, one block per tour.

    An existing workbook is kept and only ``sheet_name`` is replaced.

    Args:
        excel_path: Workbook to create or update
        teams: Updated TeamResult objects
        tour_cards: Tour cards owning the teams (names and tours)
        sheet_name: Worksheet to (re)write

    Returns:
        Path of the saved workbook
    """
    excel_path = Path(excel_path)
    cards_by_id = {card.id: card for card in tour_cards}

    if excel_path.exists():
        wb = openpyxl.load_workbook(excel_path)
        if sheet_name in wb.sheetnames:
            del wb[sheet_name]
        ws = wb.create_sheet(sheet_name)
    else:
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = sheet_name

    ws.append(HEADERS)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    def tour_of(team: TeamResult) -> str:
        card = cards_by_id.get(team.tour_card_id)
        return card.tour_id if card else ''

    for team in sorted(teams, key=lambda t: (tour_of(t), _standing_key(t))):
        card = cards_by_id.get(team.tour_card_id)
        ws.append(
            [
                team.position or '',
                (card.display_name or card.id) if card else team.tour_card_id,
                tour_of(team),
                team.score,
                team.today,
                team.earnings,
                team.points,
            ]
        )

    excel_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(excel_path)
    wb.close()
    logger.info(f'Standings saved to {excel_path}')
    return excel_path

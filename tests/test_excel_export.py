"""Tests for the Excel standings export."""

import openpyxl

from pgc.excel_export import HEADERS, export_standings_to_excel
from pgc.models import TeamResult, TourCard

CARDS = [
    TourCard(id='tc-1', tour_id='pga', display_name='Alice'),
    TourCard(id='tc-2', tour_id='pga', display_name='Bob'),
    TourCard(id='tc-3', tour_id='ccg', display_name='Cara'),
    TourCard(id='tc-4', tour_id='pga'),
]

TEAMS = [
    TeamResult(id='1', tour_card_id='tc-1', score=2, position='CUT'),
    TeamResult(id='2', tour_card_id='tc-2', score=-3, position='2', earnings=60, points=30),
    TeamResult(id='3', tour_card_id='tc-3', score=-1, position='1', earnings=100, points=50),
    TeamResult(id='4', tour_card_id='tc-4', score=-4, position='1', earnings=100, points=50),
]


def read_rows(path, sheet_name='Standings'):
    wb = openpyxl.load_workbook(path)
    try:
        return [list(row) for row in wb[sheet_name].iter_rows(values_only=True)]
    finally:
        wb.close()


class TestExportStandings:
    """Tests for writing standings worksheets."""

    def test_new_workbook(self, tmp_path):
        path = export_standings_to_excel(tmp_path / 'standings.xlsx', TEAMS, CARDS)
        rows = read_rows(path)

        assert rows[0] == HEADERS
        assert [row[1] for row in rows[1:]] == ['Cara', 'tc-4', 'Bob', 'Alice']
        assert rows[1][2] == 'ccg'
        assert rows[4][0] == 'CUT'
        assert rows[2][5] == 100

    def test_header_is_bold(self, tmp_path):
        path = export_standings_to_excel(tmp_path / 'standings.xlsx', TEAMS, CARDS)
        wb = openpyxl.load_workbook(path)
        assert wb['Standings']['A1'].font.bold
        wb.close()

    def test_existing_workbook_keeps_other_sheets(self, tmp_path):
        path = tmp_path / 'league.xlsx'
        wb = openpyxl.Workbook()
        wb.active.title = 'Notes'
        wb['Notes']['A1'] = 'keep me'
        wb.save(path)
        wb.close()

        export_standings_to_excel(path, TEAMS[:1], CARDS)
        export_standings_to_excel(path, TEAMS, CARDS)

        wb = openpyxl.load_workbook(path)
        assert wb.sheetnames == ['Notes', 'Standings']
        assert wb['Notes']['A1'].value == 'keep me'
        wb.close()
        assert len(read_rows(path)) == len(TEAMS) + 1

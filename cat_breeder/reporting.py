"""
Cat Breeder - Reports
Spreadsheet ledger and Word turn summary of a game.
"""

from pathlib import Path
from typing import Sequence
import logging

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor
from openpyxl import Workbook
from openpyxl.styles import Border, Font, PatternFill, Side

from .core.collection import collection_progress
from .core.genetics import TRAITS
from .economy.market import cat_value
from .game.state import GameState
from .game.turn import TurnReport
from .habitat.furniture import capacity, happiness_status

logger = logging.getLogger(__name__)

HEADER_COLOR = "1F4E79"

ROSTER_HEADERS = ["ID", "Name", "Age", "Happiness", "Favourite"] + [
    trait.name.replace("_", " ").title() for trait in TRAITS
] + ["Genotype", "Value"]
TRANSACTION_HEADERS = ["Day", "Kind", "Subject", "Amount"]
COLLECTION_HEADERS = ["Combination", "Cat", "Cat ID", "Day"]


# =============================================================================
# SPREADSHEET
# =============================================================================

def _write_header(ws, row, headers):
    header_fill = PatternFill(start_color=HEADER_COLOR, end_color=HEADER_COLOR, fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")
    thin_border = Border(
        left=Side(style='thin'), right=Side(style='thin'),
        top=Side(style='thin'), bottom=Side(style='thin')
    )
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=row, column=col, value=header)
        cell.fill = header_fill
        cell.font = header_font
        cell.border = thin_border


def export_ledger_workbook(state: GameState, path) -> Path:
    """
    Write the roster, transaction ledger and trait collection to an .xlsx.

    Each sheet has a title on row 1 and its header row on row 3; data
    starts on row 4.
    """
    wb = Workbook()

    # ===== SHEET 1: Roster =====
    ws1 = wb.active
    ws1.title = "Roster"
    ws1['A1'] = f"CAT ROSTER - DAY {state.day}"
    ws1['A1'].font = Font(bold=True, size=14)
    _write_header(ws1, 3, ROSTER_HEADERS)

    for row, cat in enumerate(state.cats, 4):
        phenotype = cat.phenotype
        genotype = " ".join("".join(cat.genotype.pair(trait)) for trait in TRAITS)
        values = [cat.id, cat.name, cat.age, cat.happiness, "yes" if cat.favourite else ""]
        values += [phenotype.label(trait) for trait in TRAITS]
        values += [genotype, cat_value(cat, state.market)]
        for col, value in enumerate(values, 1):
            ws1.cell(row=row, column=col, value=value)

    # ===== SHEET 2: Transactions =====
    ws2 = wb.create_sheet("Transactions")
    ws2['A1'] = f"TRANSACTIONS - BALANCE ${state.money}"
    ws2['A1'].font = Font(bold=True, size=14)
    _write_header(ws2, 3, TRANSACTION_HEADERS)

    for row, t in enumerate(state.transactions, 4):
        ws2.cell(row=row, column=1, value=t.day)
        ws2.cell(row=row, column=2, value=t.kind.value)
        ws2.cell(row=row, column=3, value=t.subject_id)
        ws2.cell(row=row, column=4, value=t.amount)

    # ===== SHEET 3: Trait Collection =====
    progress = collection_progress(state.trait_collection)
    ws3 = wb.create_sheet("Trait Collection")
    ws3['A1'] = f"TRAIT COLLECTION - {progress['collected']}/{progress['total']}"
    ws3['A1'].font = Font(bold=True, size=14)
    _write_header(ws3, 3, COLLECTION_HEADERS)

    for row, entry in enumerate(state.trait_collection.collected.values(), 4):
        ws3.cell(row=row, column=1, value=entry.key)
        ws3.cell(row=row, column=2, value=entry.cat_name)
        ws3.cell(row=row, column=3, value=entry.cat_id)
        ws3.cell(row=row, column=4, value=entry.day)

    for ws in (ws1, ws2, ws3):
        ws.column_dimensions['A'].width = 24

    output_path = Path(path)
    wb.save(output_path)
    logger.info(f"Wrote ledger workbook: {output_path}")
    return output_path


# =============================================================================
# DOCUMENT
# =============================================================================

def _set_cell_shading(cell, color):
    shading = OxmlElement('w:shd')
    shading.set(qn('w:fill'), color)
    cell._tc.get_or_add_tcPr().append(shading)


def _add_formatted_table(doc, headers, rows):
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = 'Table Grid'

    # Header row
    header_cells = table.rows[0].cells
    for i, header in enumerate(headers):
        header_cells[i].text = header
        header_cells[i].paragraphs[0].runs[0].bold = True
        header_cells[i].paragraphs[0].runs[0].font.color.rgb = RGBColor(255, 255, 255)
        _set_cell_shading(header_cells[i], HEADER_COLOR)

    # Data rows
    for row_data in rows:
        row = table.add_row()
        for i, cell_data in enumerate(row_data):
            row.cells[i].text = str(cell_data)

    return table


def export_turn_summary(state: GameState, reports: Sequence[TurnReport], path) -> Path:
    """Write a .docx summary of the current state and each turn's events."""
    doc = Document()

    style = doc.styles['Normal']
    style.font.name = 'Calibri'
    style.font.size = Pt(11)

    title = doc.add_heading('CAT BREEDER', 0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    # ========== STATUS ==========
    doc.add_heading('Status', level=1)
    progress = collection_progress(state.trait_collection)
    mood = happiness_status(len(state.cats), state.furniture)
    _add_formatted_table(doc, ['Metric', 'Value'], [
        ['Day', state.day],
        ['Money', f"${state.money}"],
        ['Cats', f"{len(state.cats)} / {capacity(state.furniture)}"],
        ['Room', mood["description"]],
        ['Traits collected', f"{progress['collected']} / {progress['total']} ({progress['percentage']}%)"],
        ['Cats bred', state.total_cats_bred],
        ['Cats sold', state.total_cats_sold],
    ])

    # ========== ROSTER ==========
    doc.add_heading('Roster', level=1)
    _add_formatted_table(doc, ['Name', 'Age', 'Happiness', 'Traits'], [
        [cat.name, cat.age, cat.happiness, ", ".join(cat.phenotype.labels())]
        for cat in state.cats
    ])

    # ========== TURNS ==========
    doc.add_heading('Turn History', level=1)
    if not reports:
        doc.add_paragraph('No turns played yet.')
    for report in reports:
        doc.add_heading(f"Day {report.day}", level=2)
        if not report.events:
            doc.add_paragraph('A quiet day.')
        for event in report.events:
            doc.add_paragraph(event, style='List Bullet')

    output_path = Path(path)
    doc.save(output_path)
    logger.info(f"Wrote turn summary: {output_path}")
    return output_path

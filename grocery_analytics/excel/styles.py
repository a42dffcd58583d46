"""
Colors, fonts, fills, borders and alignments for exported workbooks.
"""
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
BLUE = "1E5AA8"
DARK_BLUE = "0D3B75"
ALTERNATE_ROW = "F5F7FA"
TOTAL_ROW_BG = "E3F2FD"
WHITE = "FFFFFF"
BLACK = "000000"
GRAY_666 = "666666"
BORDER_GRAY = "CCCCCC"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=20, bold=True, color=DARK_BLUE)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=GRAY_666)
SECTION_FONT = Font(name="Calibri", size=14, bold=True, color=DARK_BLUE)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
TOTAL_FONT = Font(name="Calibri", size=10, bold=True, color=BLACK)
KPI_VALUE_FONT = Font(name="Calibri", size=24, bold=True, color=BLUE)
KPI_LABEL_FONT = Font(name="Calibri", size=10, color=GRAY_666)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=DARK_BLUE, end_color=DARK_BLUE, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=ALTERNATE_ROW, end_color=ALTERNATE_ROW, fill_type="solid")
TOTAL_FILL = PatternFill(start_color=TOTAL_ROW_BG, end_color=TOTAL_ROW_BG, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
_thin = Side(style="thin", color=BORDER_GRAY)
THIN_BORDER = Border(left=_thin, right=_thin, top=_thin, bottom=_thin)
HEADER_BORDER = Border(
    left=Side(style="thin", color=DARK_BLUE),
    right=Side(style="thin", color=DARK_BLUE),
    top=Side(style="thin", color=DARK_BLUE),
    bottom=Side(style="medium", color=DARK_BLUE),
)
TOTAL_BORDER = Border(left=_thin, right=_thin, top=Side(style="medium", color="999999"), bottom=_thin)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")

# Number formats by column type
NUMBER_FORMATS = {
    "currency": '"$"#,##0.00',
    "percent": '0.0"%"',
    "number": "#,##0",
    "decimal": "0.00",
}

"""Constants and mappings for the OPL results build."""

from pathlib import Path

# Project paths
PROJECT_DIR = Path(__file__).parent.parent
CONFIG_PATH = PROJECT_DIR / 'build_config.json'
DEFAULT_CSV_DIR = 'assets/resultados csv'
DEFAULT_OUTPUT_PATH = 'assets/data/resultados.json'

# Input file suffixes (.opl.csv is covered by .csv)
CSV_SUFFIXES = ('.csv', '.opl.csv')

# Fixed line offsets in an OPL export:
# 0-1 header, 2 meet header, 3 meet row, 4 blank, 5 column header, 6+ data
MEET_ROW_LINE = 3
COLUMN_HEADER_LINE = 5
FIRST_DATA_LINE = 6
MIN_LINES = 7

# Positional fields of the meet row
MEET_DATE_FIELD = 1
MEET_STATE_FIELD = 3
MEET_TOWN_FIELD = 4
MEET_NAME_FIELD = 5

# Known columns of the competitor header row
COL_NAME = 'Name'
COL_DIVISION = 'Division'
COL_WEIGHT_CLASS = 'WeightClassKg'
COL_SEX = 'Sex'
COL_SQUAT = 'Best3SquatKg'
COL_BENCH = 'Best3BenchKg'
COL_DEADLIFT = 'Best3DeadliftKg'
COL_TOTAL = 'TotalKg'
COL_POINTS = 'Points'
COL_PLACE = 'Place'

KNOWN_COLUMNS = (
    COL_NAME,
    COL_DIVISION,
    COL_WEIGHT_CLASS,
    COL_SEX,
    COL_SQUAT,
    COL_BENCH,
    COL_DEADLIFT,
    COL_TOTAL,
    COL_POINTS,
    COL_PLACE,
)

# A data row must reach these columns or it is skipped
REQUIRED_COLUMNS = (COL_NAME, COL_TOTAL)

# Meet category labels
CATEGORY_MALE = 'Masculino'
CATEGORY_FEMALE = 'Feminino'
CATEGORY_MIXED = 'Misto'
CATEGORY_LABELS = (CATEGORY_MALE, CATEGORY_FEMALE, CATEGORY_MIXED)

EMPTY_CATEGORY = '-'

# Location normalization
DEFAULT_LOCATION = 'Brasília'
LOCATION_FIXES = {
    'BRASILIA': 'Brasília',
}

# Output layouts
LAYOUT_PARTITIONED = 'partitioned'
LAYOUT_SINGLE = 'single'

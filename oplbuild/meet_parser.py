"""Parse OPL-format meet exports into Meet objects.

An OPL export has a fixed layout:

    line 0-1  file header
    line 2    meet header
    line 3    meet row (Federation, Date, MeetCountry, MeetState, MeetTown, MeetName)
    line 4    blank
    line 5    competitor column header
    line 6+   one competitor per line

Everything is read by position; the column header is only used to locate
the competitor fields.
"""

import re
from pathlib import Path
from typing import Optional

from .constants import (
    CATEGORY_FEMALE,
    CATEGORY_MALE,
    CATEGORY_MIXED,
    COL_BENCH,
    COL_DEADLIFT,
    COL_DIVISION,
    COL_NAME,
    COL_POINTS,
    COL_SEX,
    COL_SQUAT,
    COL_TOTAL,
    COL_WEIGHT_CLASS,
    COLUMN_HEADER_LINE,
    DEFAULT_LOCATION,
    EMPTY_CATEGORY,
    FIRST_DATA_LINE,
    LAYOUT_SINGLE,
    LOCATION_FIXES,
    MEET_DATE_FIELD,
    MEET_NAME_FIELD,
    MEET_ROW_LINE,
    MEET_STATE_FIELD,
    MEET_TOWN_FIELD,
    MIN_LINES,
    REQUIRED_COLUMNS,
)
from .logging_config import ROW_LOGGER, get_logger
from .models import ColumnIndex
from .schemas import CompetitorResult, Meet, SingleListMeet, SingleListResult
from .tokenizer import parse_csv_line
from .utils import parse_positive_float, title_case

logger = get_logger('oplbuild.meet_parser')
row_logger = get_logger(ROW_LOGGER)

_LINE_BREAK_RE = re.compile(r'\r?\n')


def split_lines(content: str) -> list[str]:
    """Split file content on LF or CRLF line endings."""
    return _LINE_BREAK_RE.split(content)


def meet_name_from_filename(file_name: str) -> str:
    """Derive a meet name from a file name: 'copa-df-2024.opl.csv' -> 'copa df 2024'."""
    base = Path(file_name).name
    for suffix in ('.opl.csv', '.csv'):
        if base.lower().endswith(suffix):
            base = base[: -len(suffix)]
            break
    return base.replace('-', ' ')


def normalize_location(town: str, state: str) -> str:
    """Join town and state, fixing known misspellings ('BRASILIA, DF' -> 'Brasília, DF')."""
    location = ', '.join(part for part in (town, state) if part)
    for wrong, right in LOCATION_FIXES.items():
        location = re.sub(re.escape(wrong), right, location, count=1, flags=re.IGNORECASE)
    return location


def _field(fields: list[str], idx: int) -> str:
    return fields[idx] if idx < len(fields) else ''


def parse_meet_info(line: str, file_name: str) -> dict[str, str]:
    """
    Read name, date and location from the meet row.

    The meet row's quoting is unreliable in real exports (e.g. a date written
    as '2025-12-21 with a stray leading quote), so it is split on raw commas
    instead of going through the quoted tokenizer.
    """
    fields = [part.strip() for part in line.split(',')]

    date_raw = _field(fields, MEET_DATE_FIELD)
    if date_raw[:1] in ('"', "'"):
        date_raw = date_raw[1:]
    date = date_raw.split(',')[0] or date_raw

    state = _field(fields, MEET_STATE_FIELD)
    town = _field(fields, MEET_TOWN_FIELD)
    name = _field(fields, MEET_NAME_FIELD) or meet_name_from_filename(file_name)

    return {
        'nome': name,
        'data': date,
        'local': normalize_location(town, state) or DEFAULT_LOCATION,
    }


def category_label(weight_class: str, division: str) -> str:
    """Weight class and division joined by a space, or '-' when both are empty."""
    label = ' '.join(part for part in (weight_class, division) if part).strip()
    return label or EMPTY_CATEGORY


def parse_competitor(row: list[str], columns: ColumnIndex) -> Optional[CompetitorResult]:
    """Build one competitor result from a tokenized data row, or None if the row is unusable."""
    if not columns.covers(row, REQUIRED_COLUMNS):
        return None

    name = columns.get(row, COL_NAME).strip()
    if not name:
        return None

    return CompetitorResult(
        atleta=title_case(name),
        categoria=category_label(
            columns.get(row, COL_WEIGHT_CLASS), columns.get(row, COL_DIVISION)
        ),
        squat=parse_positive_float(columns.get(row, COL_SQUAT)),
        bench=parse_positive_float(columns.get(row, COL_BENCH)),
        deadlift=parse_positive_float(columns.get(row, COL_DEADLIFT)),
        total=parse_positive_float(columns.get(row, COL_TOTAL)),
        pontos=parse_positive_float(columns.get(row, COL_POINTS)),
    )


def rank_results(results: list, score_field: str) -> list:
    """
    Order results by a score, highest first.

    Results without a score go last and keep their input order; the sort is
    stable so ties keep input order too.
    """
    def sort_key(result):
        score = getattr(result, score_field)
        return (score is None, -score if score is not None else 0.0)

    return sorted(results, key=sort_key)


def meet_category(male: list, female: list) -> str:
    """Label a meet by which buckets hold results."""
    if female and not male:
        return CATEGORY_FEMALE
    if male and not female:
        return CATEGORY_MALE
    return CATEGORY_MIXED


def is_female(sex: str) -> bool:
    """Only an explicit 'F' is female; unknown or missing sex counts as male."""
    return sex.strip().upper() == 'F'


def _read_layout(content: str, file_name: str) -> Optional[tuple[dict, ColumnIndex, list[str]]]:
    lines = split_lines(content)
    if len(lines) < MIN_LINES:
        logger.debug(f'Skipping {file_name}: only {len(lines)} lines')
        return None

    info = parse_meet_info(lines[MEET_ROW_LINE], file_name)
    columns = ColumnIndex.from_header(parse_csv_line(lines[COLUMN_HEADER_LINE]))
    return info, columns, lines[FIRST_DATA_LINE:]


def parse_opl_meet(content: str, file_name: str) -> Optional[Meet]:
    """
    Parse one OPL export into a sex-partitioned Meet.

    Args:
        content: Full text of the file
        file_name: File name, used for the fallback meet name and log messages

    Returns:
        Meet with both buckets ranked by points, or None if the file is too
        short to be an OPL export. A Meet with empty buckets is returned for a
        well-formed file without usable rows; callers decide whether to keep it.
    """
    layout = _read_layout(content, file_name)
    if layout is None:
        return None
    info, columns, data_lines = layout

    male: list[CompetitorResult] = []
    female: list[CompetitorResult] = []

    for offset, line in enumerate(data_lines):
        row = parse_csv_line(line)
        result = parse_competitor(row, columns)
        if result is None:
            if line.strip():
                row_logger.debug(f'{file_name}: skipping row {FIRST_DATA_LINE + offset}')
            continue
        if is_female(columns.get(row, COL_SEX)):
            female.append(result)
        else:
            male.append(result)

    return Meet(
        nome=info['nome'],
        data=info['data'],
        local=info['local'],
        categoria=meet_category(male, female),
        resultados_masculino=rank_results(male, 'pontos'),
        resultados_feminino=rank_results(female, 'pontos'),
    )


def parse_opl_meet_single(content: str, file_name: str) -> Optional[SingleListMeet]:
    """
    Parse one OPL export into a single unpartitioned result list.

    Results are ranked by total. The meet category comes from the distinct
    sex values in the file: only 'M' is Masculino, only 'F' is Feminino,
    anything else (mixed, unknown or missing) is Misto.
    """
    layout = _read_layout(content, file_name)
    if layout is None:
        return None
    info, columns, data_lines = layout

    results: list[SingleListResult] = []
    sexes = set()

    for offset, line in enumerate(data_lines):
        row = parse_csv_line(line)
        sex = columns.get(row, COL_SEX).strip().upper()
        if sex:
            sexes.add(sex)
        competitor = parse_competitor(row, columns)
        if competitor is None:
            if line.strip():
                row_logger.debug(f'{file_name}: skipping row {FIRST_DATA_LINE + offset}')
            continue
        results.append(SingleListResult(**competitor.model_dump(exclude={'pontos'})))

    if sexes == {'M'}:
        categoria = CATEGORY_MALE
    elif sexes == {'F'}:
        categoria = CATEGORY_FEMALE
    else:
        categoria = CATEGORY_MIXED

    return SingleListMeet(
        nome=info['nome'],
        data=info['data'],
        local=info['local'],
        categoria=categoria,
        resultados=rank_results(results, 'total'),
    )


def parse_opl_file(path: Path | str, layout: str = 'partitioned'):
    """
    Read and parse one OPL export from disk.

    Returns:
        Meet (or SingleListMeet for the single layout), or None if the file is
        not a valid OPL export or cannot be read
    """
    path = Path(path)
    try:
        content = path.read_text(encoding='utf-8-sig')
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f'Skipping unreadable file {path.name}: {e}')
        return None

    if layout == LAYOUT_SINGLE:
        return parse_opl_meet_single(content, path.name)
    return parse_opl_meet(content, path.name)

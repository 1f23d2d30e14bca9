"""Build the results document from a directory of OPL exports."""

from datetime import date
from pathlib import Path

from .constants import CSV_SUFFIXES, LAYOUT_PARTITIONED
from .exceptions import BuildError, InputDirectoryError
from .logging_config import get_logger
from .meet_parser import parse_opl_file
from .utils import parse_meet_date, save_json
from .validators import validate_meets

logger = get_logger('oplbuild.aggregator')


def list_input_files(csv_dir: Path | str) -> list[Path]:
    """
    List the OPL exports in a directory, in directory-listing order.

    Raises:
        InputDirectoryError: If the directory is missing or cannot be listed
    """
    csv_dir = Path(csv_dir)
    if not csv_dir.is_dir():
        raise InputDirectoryError(f'Input directory not found: {csv_dir}')

    try:
        entries = list(csv_dir.iterdir())
    except OSError as e:
        raise InputDirectoryError(f'Cannot list input directory {csv_dir}: {e}') from e

    return [p for p in entries if p.name.lower().endswith(CSV_SUFFIXES) and p.is_file()]


def sort_meets(meets: list) -> list:
    """Most recent meet first; meets with unparsable dates go last in input order."""
    return sorted(meets, key=lambda m: parse_meet_date(m.data) or date.min, reverse=True)


def collect_meets(csv_dir: Path | str, layout: str = LAYOUT_PARTITIONED) -> list:
    """
    Parse every OPL export in a directory and keep the meets with results.

    Args:
        csv_dir: Directory holding .csv / .opl.csv exports
        layout: 'partitioned' (male/female buckets) or 'single'

    Returns:
        Meets sorted by date, most recent first
    """
    meets = []
    for path in list_input_files(csv_dir):
        meet = parse_opl_file(path, layout=layout)
        if meet is None:
            continue
        if not meet.all_results:
            logger.debug(f'Dropping {path.name}: no results')
            continue
        meets.append(meet)

    return sort_meets(meets)


def build_resultados(
    csv_dir: Path | str,
    output_path: Path | str,
    layout: str = LAYOUT_PARTITIONED,
    indent: int = 2,
) -> list:
    """
    Build the results document and write it to output_path.

    The previous document is replaced only once the new one is fully written.

    Returns:
        The meets that were written

    Raises:
        InputDirectoryError: If csv_dir cannot be listed
        WriteError: If output_path cannot be written
        BuildError: If the built meets fail validation
    """
    meets = collect_meets(csv_dir, layout=layout)

    errors, warnings = validate_meets(meets)
    for warning in warnings:
        logger.warning(warning)
    if errors:
        for error in errors:
            logger.error(error)
        raise BuildError(f'{len(errors)} validation error(s); {output_path} not written')

    save_json(output_path, meets, indent=indent)
    logger.info(f'Wrote {output_path} with {len(meets)} competition(s)')
    return meets

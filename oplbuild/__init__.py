from .exceptions import BuildError, InputDirectoryError, WriteError
from .models import ColumnIndex
from .schemas import BuildConfig, CompetitorResult, Meet, SingleListMeet, SingleListResult
from .tokenizer import parse_csv_line
from .meet_parser import (
    parse_opl_meet,
    parse_opl_meet_single,
    parse_opl_file,
    rank_results,
)
from .aggregator import (
    list_input_files,
    collect_meets,
    sort_meets,
    build_resultados,
)
from .validators import validate_meet, validate_meets
from .filters import ResultsFilter, apply_filters
from .config import get_config

__all__ = [
    # Errors
    'BuildError',
    'InputDirectoryError',
    'WriteError',
    # Models
    'ColumnIndex',
    'BuildConfig',
    'CompetitorResult',
    'Meet',
    'SingleListMeet',
    'SingleListResult',
    # Parsing
    'parse_csv_line',
    'parse_opl_meet',
    'parse_opl_meet_single',
    'parse_opl_file',
    'rank_results',
    # Build
    'list_input_files',
    'collect_meets',
    'sort_meets',
    'build_resultados',
    # Validation
    'validate_meet',
    'validate_meets',
    # Filtering
    'ResultsFilter',
    'apply_filters',
    # Config
    'get_config',
]

"""Tests for build logging setup."""

import logging

from oplbuild.logging_config import (
    ROW_LOGGER,
    get_logger,
    setup_logging,
    verbosity_to_levels,
)
from oplbuild.meet_parser import parse_opl_meet

MEET_ROW = 'CBLP,2024-03-05,Brazil,DF,BRASILIA,Copa'
ROWS = ['1,CARLOS,M,Open,93,210,140,250,600,420', '2,INCOMPLETE,M']


class TestVerbosityToLevels:
    """Tests for mapping CLI flags to log levels."""

    def test_default(self):
        assert verbosity_to_levels() == (logging.INFO, logging.INFO)

    def test_single_verbose_keeps_rows_quiet(self):
        assert verbosity_to_levels(1) == (logging.DEBUG, logging.INFO)

    def test_double_verbose_shows_rows(self):
        assert verbosity_to_levels(2) == (logging.DEBUG, logging.DEBUG)

    def test_quiet_wins(self):
        assert verbosity_to_levels(2, quiet=True) == (logging.WARNING, logging.WARNING)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_get_logger(self):
        assert get_logger().name == 'oplbuild'
        assert get_logger('oplbuild.aggregator').parent is get_logger()

    def test_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_row_skips_hidden_at_debug(self, make_opl, caplog):
        setup_logging(level=logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger='oplbuild'):
            parse_opl_meet(make_opl(MEET_ROW, ROWS), 'copa.csv')
        assert 'skipping row' not in caplog.text

    def test_row_skips_shown_with_row_level(self, make_opl, caplog):
        setup_logging(level=logging.DEBUG, row_level=logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger='oplbuild'):
            parse_opl_meet(make_opl(MEET_ROW, ROWS), 'copa.csv')
        assert 'copa.csv: skipping row 7' in caplog.text
        setup_logging()
        assert get_logger(ROW_LOGGER).level == logging.INFO

    def test_file_handler(self, tmp_path):
        logger = setup_logging(log_dir=tmp_path / 'logs', log_to_file=True)
        logger.info('hello')
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []
        logs = list((tmp_path / 'logs').glob('build_*.log'))
        assert len(logs) == 1
        assert 'hello' in logs[0].read_text(encoding='utf-8')

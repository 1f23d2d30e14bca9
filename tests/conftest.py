"""Shared test fixtures."""

import pytest

HEADER = 'Place,Name,Sex,Division,WeightClassKg,Best3SquatKg,Best3BenchKg,Best3DeadliftKg,TotalKg,Points'


def opl_content(meet_row, rows, header=HEADER, newline='\n'):
    """Assemble an OPL export: two header lines, meet header/row, blank, column header, data."""
    lines = [
        'OPL Format v1,Submit by email:,,,,',
        'Results,,,,,',
        'Federation,Date,MeetCountry,MeetState,MeetTown,MeetName',
        meet_row,
        '',
        header,
        *rows,
    ]
    return newline.join(lines) + newline


@pytest.fixture
def make_opl():
    """Factory for OPL export text."""
    return opl_content


@pytest.fixture
def csv_dir(tmp_path):
    """Empty input directory."""
    path = tmp_path / 'resultados csv'
    path.mkdir()
    return path


@pytest.fixture
def write_meet(csv_dir):
    """Write an OPL export into the input directory and return its path."""
    def _write(file_name, meet_row, rows, header=HEADER):
        path = csv_dir / file_name
        path.write_text(opl_content(meet_row, rows, header=header), encoding='utf-8')
        return path
    return _write

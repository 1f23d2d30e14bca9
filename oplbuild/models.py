"""Data models for the OPL results build."""

from dataclasses import dataclass, field
from typing import Dict, List

from .constants import KNOWN_COLUMNS


@dataclass
class ColumnIndex:
    """Positions of the known columns in one file's header row."""
    positions: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_header(cls, header: List[str]) -> 'ColumnIndex':
        positions = {}
        for name in KNOWN_COLUMNS:
            positions[name] = header.index(name) if name in header else -1
        return cls(positions=positions)

    def index_of(self, column: str) -> int:
        return self.positions.get(column, -1)

    def get(self, row: List[str], column: str) -> str:
        """Read a column from a row; missing columns and short rows read as ''."""
        idx = self.index_of(column)
        if idx < 0 or idx >= len(row):
            return ''
        return row[idx]

    def highest(self, columns) -> int:
        """Highest position among the given columns (-1 if none are present)."""
        return max((self.index_of(c) for c in columns), default=-1)

    def covers(self, row: List[str], columns) -> bool:
        """Whether a row has enough fields to reach every given column."""
        return len(row) > self.highest(columns)

"""Filtering of built meets by year, category and athlete name.

Filter criteria are an immutable snapshot passed in explicitly, so the same
predicate serves the build, the tests and any page that reloads the output.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel

from .utils import parse_meet_date

RESULT_LISTS = ('resultadosMasculino', 'resultadosFeminino', 'resultados')


def _as_dict(meet: Any) -> dict[str, Any]:
    if isinstance(meet, BaseModel):
        return meet.model_dump(by_alias=True)
    return meet


def athlete_names(meet: Any) -> list[str]:
    """All athlete names in a meet, for either output layout."""
    data = _as_dict(meet)
    names = []
    for key in RESULT_LISTS:
        names.extend(r.get('atleta', '') for r in data.get(key) or [])
    return names


@dataclass(frozen=True)
class ResultsFilter:
    """Filter criteria; None or '' means 'any'."""
    ano: Optional[int] = None
    categoria: Optional[str] = None
    busca: str = ''

    def matches(self, meet: Any) -> bool:
        data = _as_dict(meet)

        if self.ano is not None:
            meet_date = parse_meet_date(data.get('data', ''))
            if meet_date is None or meet_date.year != self.ano:
                return False

        if self.categoria and data.get('categoria') != self.categoria:
            return False

        term = self.busca.strip().lower()
        if term and not any(term in name.lower() for name in athlete_names(data)):
            return False

        return True


def apply_filters(meets: list, criteria: ResultsFilter) -> list:
    """Meets matching the criteria, in input order."""
    return [meet for meet in meets if criteria.matches(meet)]

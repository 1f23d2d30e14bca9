"""Validation functions for built meets."""

from collections import Counter

from .constants import CATEGORY_FEMALE, CATEGORY_MALE, CATEGORY_MIXED
from .schemas import Meet
from .utils import parse_meet_date

NUMERIC_FIELDS = ('squat', 'bench', 'deadlift', 'total', 'pontos')


def validate_result(meet_name: str, result) -> tuple[list[str], list[str]]:
    """
    Validate one competitor line.

    Checks:
    - Numeric fields are either absent or positive
    - A total without any recorded lift is flagged for review

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []

    for name in NUMERIC_FIELDS:
        value = getattr(result, name, None)
        if value is not None and value <= 0:
            errors.append(f'{meet_name}: {result.atleta} has {name}={value} (must be null or positive)')

    lifts = (result.squat, result.bench, result.deadlift)
    if result.total is not None and all(lift is None for lift in lifts):
        warnings.append(f'{meet_name}: {result.atleta} has a total but no recorded lifts')

    return errors, warnings


def is_ranked(results: list, score_field: str) -> bool:
    """Whether results are ordered by score descending with absent scores last."""
    seen_absent = False
    previous = None
    for result in results:
        score = getattr(result, score_field)
        if score is None:
            seen_absent = True
            continue
        if seen_absent:
            return False
        if previous is not None and score > previous:
            return False
        previous = score
    return True


def validate_meet(meet) -> tuple[list[str], list[str]]:
    """
    Validate a meet of either layout.

    Checks:
    - The meet has at least one result
    - Results are ranked (points for partitioned meets, total for single-list meets)
    - The meet category agrees with the male/female buckets
    - The date parses as an ISO date (warning only)
    - No athlete appears twice in the same list (warning only)

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []
    name = meet.nome

    if not meet.all_results:
        errors.append(f'{name}: meet has no results')

    if isinstance(meet, Meet):
        buckets = {
            'resultadosMasculino': meet.resultados_masculino,
            'resultadosFeminino': meet.resultados_feminino,
        }
        score_field = 'pontos'

        if meet.resultados_masculino and meet.resultados_feminino:
            expected = CATEGORY_MIXED
        elif meet.resultados_feminino:
            expected = CATEGORY_FEMALE
        elif meet.resultados_masculino:
            expected = CATEGORY_MALE
        else:
            expected = meet.categoria
        if meet.categoria != expected:
            errors.append(f'{name}: category {meet.categoria} should be {expected}')
    else:
        buckets = {'resultados': meet.resultados}
        score_field = 'total'

    for bucket_name, results in buckets.items():
        if not is_ranked(results, score_field):
            errors.append(f'{name}: {bucket_name} not ordered by {score_field}')

        duplicates = [a for a, count in Counter(r.atleta for r in results).items() if count > 1]
        if duplicates:
            warnings.append(f'{name}: duplicate athletes in {bucket_name}: {", ".join(sorted(duplicates))}')

        for result in results:
            result_errors, result_warnings = validate_result(name, result)
            errors.extend(result_errors)
            warnings.extend(result_warnings)

    if parse_meet_date(meet.data) is None:
        warnings.append(f'{name}: date {meet.data!r} is not an ISO date')

    return errors, warnings


def validate_meets(meets: list) -> tuple[list[str], list[str]]:
    """
    Validate every meet in a build.

    Returns:
        Tuple of (errors, warnings)
        - errors: Issues that must stop the output from being written
        - warnings: Issues to review but not block the build
    """
    errors: list[str] = []
    warnings: list[str] = []

    for meet in meets:
        meet_errors, meet_warnings = validate_meet(meet)
        errors.extend(meet_errors)
        warnings.extend(meet_warnings)

    return errors, warnings

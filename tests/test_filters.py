"""Unit tests for results filtering."""

import dataclasses

import pytest

from oplbuild.filters import ResultsFilter, apply_filters, athlete_names
from oplbuild.schemas import CompetitorResult, Meet

MEETS = [
    {
        'nome': 'Copa Marco', 'data': '2024-03-05', 'local': 'Brasília, DF', 'categoria': 'Misto',
        'resultadosMasculino': [{'atleta': 'Carlos Lima'}],
        'resultadosFeminino': [{'atleta': 'Maria Souza'}],
    },
    {
        'nome': 'Copa Janeiro', 'data': '2024-01-10', 'local': 'Brasília, DF', 'categoria': 'Masculino',
        'resultadosMasculino': [{'atleta': 'João Da Silva'}],
        'resultadosFeminino': [],
    },
    {
        'nome': 'Open 2023', 'data': '2023-11-30', 'local': 'Goiania, GO', 'categoria': 'Feminino',
        'resultados': [{'atleta': 'Ana Souza'}],
    },
    {
        'nome': 'Sem Data', 'data': 'TBD', 'local': 'Brasília', 'categoria': 'Misto',
        'resultadosMasculino': [], 'resultadosFeminino': [{'atleta': 'Bia'}],
    },
]


def _names(meets):
    return [m['nome'] for m in meets]


class TestResultsFilter:
    """Tests for filter criteria."""

    def test_no_criteria_matches_all(self):
        assert _names(apply_filters(MEETS, ResultsFilter())) == [m['nome'] for m in MEETS]

    def test_year(self):
        assert _names(apply_filters(MEETS, ResultsFilter(ano=2024))) == ['Copa Marco', 'Copa Janeiro']

    def test_unparsable_date_never_matches_year(self):
        assert 'Sem Data' not in _names(apply_filters(MEETS, ResultsFilter(ano=2023)))

    def test_category(self):
        assert _names(apply_filters(MEETS, ResultsFilter(categoria='Masculino'))) == ['Copa Janeiro']

    def test_athlete_search_case_insensitive(self):
        assert _names(apply_filters(MEETS, ResultsFilter(busca='SOUZA'))) == ['Copa Marco', 'Open 2023']

    def test_combined(self):
        criteria = ResultsFilter(ano=2024, categoria='Misto', busca='maria')
        assert _names(apply_filters(MEETS, criteria)) == ['Copa Marco']

    def test_criteria_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ResultsFilter().ano = 2024

    def test_input_not_modified(self):
        meets = list(MEETS)
        apply_filters(meets, ResultsFilter(ano=1999))
        assert meets == MEETS

    def test_models(self):
        meet = Meet(
            nome='Copa', data='2024-01-10', local='x', categoria='Masculino',
            resultados_masculino=[CompetitorResult(atleta='Carlos Lima', pontos=10)],
        )
        assert apply_filters([meet], ResultsFilter(busca='lima')) == [meet]
        assert athlete_names(meet) == ['Carlos Lima']

    def test_search_term_is_trimmed(self):
        """Stray spaces typed around a name still match."""
        assert _names(apply_filters(MEETS, ResultsFilter(busca='  maria souza  '))) == ['Copa Marco']

    def test_blank_search_matches_all(self):
        assert len(apply_filters(MEETS, ResultsFilter(busca='   '))) == len(MEETS)

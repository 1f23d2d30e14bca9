"""Pydantic schemas for the build configuration and the output document."""

from typing import Literal

from pydantic import BaseModel, Field, field_serializer, field_validator

from .constants import (
    CATEGORY_LABELS,
    DEFAULT_CSV_DIR,
    DEFAULT_OUTPUT_PATH,
    EMPTY_CATEGORY,
)


def _json_number(value: float | None) -> int | float | None:
    """Emit integral values as JSON integers (200, not 200.0)."""
    if value is not None and float(value).is_integer():
        return int(value)
    return value


class SingleListResult(BaseModel):
    """One competitor's line in the single-list layout."""

    atleta: str = Field(..., min_length=1)
    categoria: str = EMPTY_CATEGORY
    squat: float | None = Field(None, gt=0)
    bench: float | None = Field(None, gt=0)
    deadlift: float | None = Field(None, gt=0)
    total: float | None = Field(None, gt=0)

    @field_serializer('squat', 'bench', 'deadlift', 'total')
    def serialize_number(self, value):
        return _json_number(value)

    class Config:
        extra = 'forbid'


class CompetitorResult(SingleListResult):
    """One competitor's line in a sex-partitioned meet."""

    pontos: float | None = None

    @field_serializer('pontos')
    def serialize_points(self, value):
        return _json_number(value)


class Meet(BaseModel):
    """A competition with results split into male and female buckets."""

    nome: str
    data: str
    local: str
    categoria: str
    resultados_masculino: list[CompetitorResult] = Field(
        default_factory=list, alias='resultadosMasculino'
    )
    resultados_feminino: list[CompetitorResult] = Field(
        default_factory=list, alias='resultadosFeminino'
    )

    @field_validator('categoria')
    @classmethod
    def validate_categoria(cls, v):
        """Ensure the meet category is one of the known labels."""
        if v not in CATEGORY_LABELS:
            raise ValueError(f'Invalid meet category: {v}')
        return v

    @property
    def all_results(self) -> list[CompetitorResult]:
        return self.resultados_masculino + self.resultados_feminino

    class Config:
        extra = 'forbid'
        populate_by_name = True


class SingleListMeet(BaseModel):
    """A competition with one unpartitioned result list, ranked by total."""

    nome: str
    data: str
    local: str
    categoria: str
    resultados: list[SingleListResult] = Field(default_factory=list)

    @field_validator('categoria')
    @classmethod
    def validate_categoria(cls, v):
        """Ensure the meet category is one of the known labels."""
        if v not in CATEGORY_LABELS:
            raise ValueError(f'Invalid meet category: {v}')
        return v

    @property
    def all_results(self) -> list[SingleListResult]:
        return list(self.resultados)

    class Config:
        extra = 'forbid'


class BuildConfig(BaseModel):
    """Build configuration settings (build_config.json)."""

    csv_dir: str = Field(DEFAULT_CSV_DIR, min_length=1)
    output_path: str = Field(DEFAULT_OUTPUT_PATH, min_length=1)
    output_layout: Literal['partitioned', 'single'] = 'partitioned'
    indent: int = Field(2, ge=0, le=8)
    log_dir: str | None = None

    class Config:
        extra = 'forbid'

"""Модели текстового отчёта."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from core.models import CalculationOutput

Locale = Literal["en", "ar"]
RiskLevel = Literal["Low", "Medium", "High"]


class Recommendations(BaseModel):
    solutions: list[str] = Field(default_factory=list)
    risk_level: RiskLevel = Field(alias="riskLevel")

    model_config = ConfigDict(populate_by_name=True)


class Narrative(BaseModel):
    """Текстовая часть отчёта (шаблон или внешний генератор)."""

    report: str = Field(alias="doctorReport")
    recommendations: Recommendations
    design_notes: str = Field(default="", alias="designNotes")

    model_config = ConfigDict(populate_by_name=True)


class AnalysisResult(BaseModel):
    """Числовой результат с наложенным текстовым отчётом."""

    locale: Locale = "en"
    output: CalculationOutput
    narrative: Narrative
    narrative_source: Literal["fallback", "narrator"] = "fallback"

    model_config = ConfigDict(frozen=True)

"""Текстовый отчёт по результатам расчёта.

Использование:
    from report import analyze_soil_profile, enhance_report, HttpNarrator
"""

from .fallback import fallback_narrative
from .models import AnalysisResult, Narrative, Recommendations
from .narrator import HttpNarrator, Narrator
from .service import analyze_soil_profile, enhance_report

__all__ = [
    "AnalysisResult",
    "HttpNarrator",
    "Narrative",
    "Narrator",
    "Recommendations",
    "analyze_soil_profile",
    "enhance_report",
    "fallback_narrative",
]

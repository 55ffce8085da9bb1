"""Шаблонный отчёт без внешнего генератора."""

import datetime as dt

from core.models import CalculationOutput
from report.models import Locale, Narrative, Recommendations, RiskLevel

_SOLUTIONS_REVIEW = {
    "en": ["Increase foundation depth", "Use gravel bedding", "Increase footing dimensions"],
    "ar": ["زيادة عمق التأسيس", "استخدام فرشة إحلال (Gravel Bedding)", "زيادة أبعاد الأساس"],
}

_SOLUTIONS_SAFE = {
    "en": ["Foundation is safe, no special measures.", "Monitor settlement during construction."],
    "ar": ["التأسيس آمن، لا توجد توصيات خاصة.", "متابعة الهبوط أثناء التنفيذ."],
}

_REPORT = {
    "en": (
        "## Geotechnical Analysis Report\n"
        "**Date:** {date}\n"
        "**Status:** {status}\n\n"
        "Based on input soil layers, bearing capacity and settlement have been calculated.\n"
        "The Factor of Safety is **{fos:.2f}**, which is {verdict}.\n\n"
        "**Total Settlement:** {total:.2f} mm.\n"
    ),
    "ar": (
        "## تقرير التحليل الجيوتقني\n"
        "**التاريخ:** {date}\n"
        "**الحالة:** {status}\n\n"
        "بناءً على البيانات المدخلة وطبقات التربة، تم حساب قدرة التحمل والهبوط المتوقع.\n"
        "تشير النتائج إلى أن عامل الأمان هو **{fos:.2f}**، وهو {verdict}.\n\n"
        "**الهبوط المتوقع:** {total:.2f} مم.\n"
    ),
}

_STATUS = {
    "en": {"High": "High Risk", "other": "Stable"},
    "ar": {"High": "تحذير: مخاطر عالية", "other": "مستقر"},
}

_VERDICT = {
    "en": {True: "acceptable", False: "requires review"},
    "ar": {True: "مقبول هندسياً", False: "يتطلب مراجعة"},
}

_DESIGN_NOTES = {
    "en": "Reinforcement calculated based on max moment. Suggested: {bar}.",
    "ar": "تم حساب التسليح بناءً على العزم الأقصى. يوصى باستخدام {bar}.",
}

ACCEPTABLE_FOS = 3.0


def risk_level(fos: float) -> RiskLevel:
    if fos < 1.5:
        return "High"
    if fos < 2.5:
        return "Medium"
    return "Low"


def fallback_narrative(
    output: CalculationOutput,
    locale: Locale = "en",
    today: dt.date | None = None,
) -> Narrative:
    """Отчёт по шаблону: уровень риска по FOS, типовые мероприятия."""
    fos = output.bearing_capacity.factor_of_safety
    risk = risk_level(fos)

    needs_review = output.foundation_design.punching_shear_check == "Unsafe" or fos < ACCEPTABLE_FOS
    solutions = (_SOLUTIONS_REVIEW if needs_review else _SOLUTIONS_SAFE)[locale]

    today = today or dt.date.today()
    report = _REPORT[locale].format(
        date=today.isoformat(),
        status=_STATUS[locale].get(risk, _STATUS[locale]["other"]),
        fos=fos,
        verdict=_VERDICT[locale][fos >= ACCEPTABLE_FOS],
        total=output.settlement.total,
    )

    return Narrative(
        report=report,
        recommendations=Recommendations(solutions=list(solutions), risk_level=risk),
        design_notes=_DESIGN_NOTES[locale].format(bar=output.foundation_design.bar_suggestion),
    )

"""Расчёт с отчётом: мгновенный шаблон и фоновое обогащение текста."""

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor

from core.calculator import calculate
from core.models import CalculationParams, CalibrationRecord, Foundation, SoilLayer
from report.fallback import fallback_narrative
from report.models import AnalysisResult, Locale
from report.narrator import DEFAULT_TIMEOUT, Narrator

logger = logging.getLogger(__name__)

# Общий пул для генерации текста
_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="narrator")


def analyze_soil_profile(
    layers: list[SoilLayer],
    foundation: Foundation,
    calibration: list[CalibrationRecord] | None = None,
    locale: Locale = "en",
    params: CalculationParams | None = None,
) -> AnalysisResult:
    """Детерминированный расчёт + шаблонный отчёт (без внешних вызовов)."""
    output = calculate(layers, foundation, params=params, calibration=calibration)
    return AnalysisResult(locale=locale, output=output, narrative=fallback_narrative(output, locale))


def _enhance(
    result: AnalysisResult,
    layers: list[SoilLayer],
    foundation: Foundation,
    narrator: Narrator,
) -> AnalysisResult:
    try:
        narrative = narrator.narrate(result.output, layers, foundation, result.locale)
    except Exception as exc:
        logger.warning("Генератор отчёта недоступен, используется шаблон: %s", exc)
        return result

    return result.model_copy(update={"narrative": narrative, "narrative_source": "narrator"})


def enhance_report(
    result: AnalysisResult,
    layers: list[SoilLayer],
    foundation: Foundation,
    narrator: Narrator,
    executor: Executor | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Future[AnalysisResult]:
    """Запустить генерацию текста в фоне.

    Future всегда завершается результатом не позже чем через timeout секунд:
    при ошибке или тайм-ауте генератора возвращается исходный result с
    шаблонным отчётом. Числовые поля не меняются. Ответ, пришедший после
    тайм-аута, отбрасывается.
    """
    executor = executor or _executor
    enhanced: Future[AnalysisResult] = Future()
    enhanced.set_running_or_notify_cancel()
    lock = threading.Lock()

    def settle(value: AnalysisResult) -> bool:
        with lock:
            if enhanced.done():
                return False
            enhanced.set_result(value)
            return True

    def on_deadline():
        if settle(result):
            logger.warning("Генератор отчёта не ответил за %.1f с, используется шаблон", timeout)

    def on_finished(task: Future):
        deadline.cancel()
        if task.cancelled() or task.exception() is not None:
            settle(result)
        else:
            settle(task.result())

    deadline = threading.Timer(timeout, on_deadline)
    deadline.daemon = True

    task = executor.submit(_enhance, result, layers, foundation, narrator)
    task.add_done_callback(on_finished)
    deadline.start()
    return enhanced

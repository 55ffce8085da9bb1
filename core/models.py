"""Модели данных для расчёта фундамента мелкого заложения."""

import math
from typing import Annotated, Literal

from pydantic import BaseModel, Field, computed_field, model_validator

SoilType = Literal["sand", "clay", "silt", "gravel", "rock"]

CONSOLIDATING_SOIL_TYPES = frozenset({"clay", "silt"})


# --- Грунт ---


class LabData(BaseModel):
    """Лабораторные характеристики слоя (используются при use_measured=True)."""

    use_measured: bool = Field(default=False, description="Использовать лабораторные данные")
    unit_weight: float | None = Field(default=None, gt=0, description="Удельный вес γ, кН/м³")
    cohesion: float | None = Field(default=None, ge=0, description="Сцепление c, кПа")
    friction_angle: float | None = Field(default=None, ge=0, le=50, description="Угол трения φ, °")
    elastic_modulus: float | None = Field(default=None, gt=0, description="Модуль деформации E, МПа")
    poisson_ratio: float | None = Field(default=None, ge=0, lt=0.5, description="Коэффициент Пуассона ν")
    cc: float | None = Field(default=None, ge=0, description="Индекс компрессии Cc")
    cr: float | None = Field(default=None, ge=0, description="Индекс рекомпрессии Cr")
    cv: float | None = Field(default=None, gt=0, description="Коэффициент консолидации cv, м²/год")
    c_alpha: float | None = Field(default=None, ge=0, description="Индекс вторичной консолидации Cα")

    def measured(self, field: str) -> float | None:
        """Лабораторное значение поля или None, если данные не используются."""
        if not self.use_measured:
            return None
        return getattr(self, field)


class SoilLayer(BaseModel):
    """Слой грунта в интервале глубин [depth_from, depth_to)."""

    depth_from: float = Field(ge=0, description="Кровля слоя, м")
    depth_to: float = Field(gt=0, description="Подошва слоя, м")
    soil_type: SoilType
    spt_n: float = Field(ge=0, description="Число ударов SPT N")
    name: str = ""
    lab: LabData = Field(default_factory=LabData)

    @model_validator(mode="after")
    def check_interval(self):
        if self.depth_to <= self.depth_from:
            raise ValueError(
                f"Слой {self.depth_from}–{self.depth_to} м: подошва должна быть ниже кровли"
            )
        return self

    @computed_field
    @property
    def thickness(self) -> float:
        return self.depth_to - self.depth_from

    @property
    def is_consolidating(self) -> bool:
        """Глины и пылеватые грунты — учитываются в расчёте консолидации."""
        return self.soil_type in CONSOLIDATING_SOIL_TYPES


class SoilProfile(BaseModel):
    """Геологический разрез: непрерывная последовательность слоёв."""

    layers: list[SoilLayer] = Field(min_length=1)

    @model_validator(mode="after")
    def check_contiguous(self):
        for upper, lower in zip(self.layers, self.layers[1:]):
            if not math.isclose(upper.depth_to, lower.depth_from, abs_tol=1e-9):
                kind = "перекрываются" if lower.depth_from < upper.depth_to else "разрыв между слоями"
                raise ValueError(
                    f"Слои {upper.depth_from}–{upper.depth_to} м и "
                    f"{lower.depth_from}–{lower.depth_to} м: {kind}"
                )
        return self

    @computed_field
    @property
    def total_depth(self) -> float:
        return self.layers[-1].depth_to


class CalibrationRecord(BaseModel):
    """Результат калибровки корреляций (пока не влияет на формулы)."""

    soil_type: SoilType
    spt_n: float = Field(ge=0)
    actual_phi: float | None = Field(default=None, ge=0)
    actual_c: float | None = Field(default=None, ge=0)
    actual_e: float | None = Field(default=None, gt=0)
    description: str = ""


# --- Фундамент ---


class _Rectangular(BaseModel):
    width: float = Field(gt=0, description="Ширина B, м")
    length: float = Field(gt=0, description="Длина L, м")

    @property
    def B(self) -> float:
        return min(self.width, self.length)

    @property
    def L(self) -> float:
        return max(self.width, self.length)

    @property
    def area(self) -> float:
        return self.B * self.L

    def shape_factors(self, n_q: float, n_c: float, tan_phi_ref: float) -> tuple[float, float, float]:
        """Коэффициенты формы sc, sq, sγ для прямоугольной подошвы (Vesic)."""
        ratio = self.B / self.L
        return 1.0 + ratio * (n_q / n_c), 1.0 + ratio * tan_phi_ref, 1.0 - 0.4 * ratio


class IsolatedFooting(_Rectangular):
    """Отдельный фундамент под колонну."""

    shape: Literal["isolated"] = "isolated"

    @property
    def column_size(self) -> float:
        return 0.4


class RaftFoundation(_Rectangular):
    """Фундаментная плита."""

    shape: Literal["raft"] = "raft"

    @property
    def column_size(self) -> float:
        return 0.3 * self.B


class StripFooting(BaseModel):
    """Ленточный фундамент (приближение вытянутым прямоугольником L = k·B)."""

    shape: Literal["strip"] = "strip"
    width: float = Field(gt=0, description="Ширина B, м")
    elongation: float = Field(default=10.0, ge=2.0, description="Отношение L/B для расчёта")

    @property
    def B(self) -> float:
        return self.width

    @property
    def L(self) -> float:
        return self.width * self.elongation

    @property
    def area(self) -> float:
        return self.B * self.L

    @property
    def column_size(self) -> float:
        return 0.3 * self.B

    def shape_factors(self, n_q: float, n_c: float, tan_phi_ref: float) -> tuple[float, float, float]:
        return 1.0, 1.0, 1.0


class CircularFooting(BaseModel):
    """Круглый фундамент."""

    shape: Literal["circular"] = "circular"
    diameter: float = Field(gt=0, description="Диаметр D, м")

    @property
    def B(self) -> float:
        return self.diameter

    @property
    def L(self) -> float:
        return self.diameter

    @property
    def area(self) -> float:
        return math.pi * (self.diameter / 2.0) ** 2

    @property
    def column_size(self) -> float:
        return 0.3 * self.diameter

    def shape_factors(self, n_q: float, n_c: float, tan_phi_ref: float) -> tuple[float, float, float]:
        return 1.0 + n_q / n_c, 1.0 + tan_phi_ref, 0.6


FootingGeometry = Annotated[
    IsolatedFooting | RaftFoundation | StripFooting | CircularFooting,
    Field(discriminator="shape"),
]


class Foundation(BaseModel):
    """Фундамент и нагрузки."""

    geometry: FootingGeometry
    depth: float = Field(ge=0, description="Глубина заложения Df, м")
    load: float = Field(ge=0, description="Вертикальная нагрузка, кН")
    moment: float | None = Field(default=None, description="Момент, кН·м (не учитывается)")
    concrete_grade: float = Field(default=25.0, gt=0, description="Прочность бетона f'c, МПа")
    steel_grade: float = Field(default=420.0, gt=0, description="Предел текучести арматуры fy, МПа")
    groundwater_depth: float = Field(default=100.0, ge=0, description="Уровень грунтовых вод, м")
    slope_angle: float | None = Field(default=None, ge=0, lt=90, description="Уклон поверхности β, °")
    target_fos: float = Field(default=3.0, gt=0, description="Требуемый коэффициент запаса")

    @property
    def shape(self) -> str:
        return self.geometry.shape

    @computed_field
    @property
    def B(self) -> float:
        """Ширина (диаметр для круглого)."""
        return self.geometry.B

    @computed_field
    @property
    def L(self) -> float:
        """Длина (для ленточного — расчётная L = k·B)."""
        return self.geometry.L

    @computed_field
    @property
    def area(self) -> float:
        """Площадь подошвы, м²."""
        return self.geometry.area

    @computed_field
    @property
    def pressure(self) -> float:
        """Среднее давление под подошвой p = N/A, кПа."""
        return self.load / self.area

    @property
    def is_elongated(self) -> bool:
        """Вытянутая в плане подошва (L/B ≥ 2)."""
        return self.L / self.B >= 2.0


# --- Параметры расчёта ---


class CalculationParams(BaseModel):
    """Эмпирические константы и параметры дискретизации."""

    # Несущая способность
    reference_phi: float = Field(default=30.0, ge=0, lt=90, description="φ для коэф. формы/глубины, °")
    gamma_water: float = Field(default=9.81, gt=0, description="Удельный вес воды, кН/м³")
    fos_cap: float = Field(default=99.0, gt=0, description="Значение FOS при нулевом знаменателе")

    # Упругая осадка
    sublayers: int = Field(default=10, ge=1, description="Число подслоёв в зоне влияния")
    iz_peak: float = Field(default=0.5, gt=0, description="Пиковое значение Iz")
    iz_base_compact: float = Field(default=0.1, ge=0, description="Iz на подошве (L/B < 2)")
    iz_base_elongated: float = Field(default=0.2, ge=0, description="Iz на подошве (L/B ≥ 2)")
    iz_peak_depth_compact: float = Field(default=0.5, gt=0, description="Глубина пика Iz / B (L/B < 2)")
    iz_peak_depth_elongated: float = Field(default=1.0, gt=0, description="Глубина пика Iz / B (L/B ≥ 2)")
    influence_depth_compact: float = Field(default=2.0, gt=0, description="Зона влияния / B (L/B < 2)")
    influence_depth_elongated: float = Field(default=4.0, gt=0, description="Зона влияния / B (L/B ≥ 2)")

    # Консолидация
    time_factor_90: float = Field(default=0.848, gt=0, description="Tv для U = 90%")
    min_design_life: float = Field(default=30.0, gt=0, description="Минимальный срок службы, лет")
    settlement_safe: float = Field(default=25.0, gt=0, description="Граница Safe, мм")
    settlement_warning: float = Field(default=50.0, gt=0, description="Граница Warning, мм")

    # Конструирование (ACI 318)
    initial_depth: float = Field(default=0.3, gt=0, description="Начальная рабочая высота d, м")
    depth_step: float = Field(default=0.05, gt=0, description="Шаг увеличения d, м")
    max_iterations: int = Field(default=20, ge=1, description="Предельное число итераций")
    cover: float = Field(default=0.1, ge=0, description="Защитный слой, м")
    phi_shear: float = Field(default=0.75, gt=0, le=1, description="Коэффициент φ для среза")
    shear_coefficient: float = Field(default=0.33, gt=0, description="Vc = k·√f'c·b0·d")
    min_steel_ratio: float = Field(default=0.0018, gt=0, description="Минимальный процент армирования")
    min_spacing: int = Field(default=100, gt=0, description="Минимальный шаг стержней, мм")
    max_spacing: int = Field(default=300, gt=0, description="Максимальный шаг стержней, мм")
    spacing_round: int = Field(default=25, gt=0, description="Округление шага, мм")
    fallback_bar: int = Field(default=20, description="Диаметр по умолчанию, мм")

    # Устойчивость откоса
    slope_fos_min: float = Field(default=1.5, gt=0, description="Минимальный FOS откоса")
    slope_default_depth: float = Field(default=2.0, gt=0, description="Глубина плоскости при Df = 0, м")

    # Поле напряжений
    grid_rows: int = Field(default=8, ge=2, description="Число узлов по глубине")
    grid_cols: int = Field(default=13, ge=2, description="Число узлов по горизонтали (нечётное: узел на оси)")
    grid_top: float = Field(default=0.1, ge=0, description="Глубина верхнего ряда узлов, м")
    poisson_default: float = Field(default=0.3, ge=0, lt=0.5, description="ν по умолчанию")
    plastic_low: float = Field(default=0.5, gt=0, description="Граница «minimal»")
    plastic_high: float = Field(default=0.8, gt=0, description="Граница «significant»")

    # Кривые
    load_steps: int = Field(default=15, ge=1, description="Число шагов кривой нагрузка–осадка")
    time_steps: int = Field(default=20, ge=1, description="Число шагов кривой время–осадка")
    depth_step_curve: float = Field(default=1.0, gt=0, description="Шаг кривой τ(z), м")

    @model_validator(mode="after")
    def check_bands(self):
        if self.min_spacing >= self.max_spacing:
            raise ValueError("min_spacing должен быть меньше max_spacing")
        if self.settlement_safe >= self.settlement_warning:
            raise ValueError("settlement_safe должен быть меньше settlement_warning")
        if self.plastic_low >= self.plastic_high:
            raise ValueError("plastic_low должен быть меньше plastic_high")
        return self


class AnalysisInput(BaseModel):
    """Полный набор исходных данных одного расчёта."""

    profile: SoilProfile
    foundation: Foundation
    calibration: list[CalibrationRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_depth_in_profile(self):
        if self.foundation.depth > self.profile.total_depth:
            raise ValueError(
                f"Глубина заложения {self.foundation.depth} м ниже подошвы разреза "
                f"{self.profile.total_depth} м"
            )
        if self.foundation.depth < self.profile.layers[0].depth_from:
            raise ValueError("Глубина заложения выше кровли разреза")
        return self


# --- Результаты ---


class ConsolidationParams(BaseModel):
    cc: float
    cr: float
    cv: float
    c_alpha: float


class LayerParameters(BaseModel):
    """Расчётные характеристики слоя."""

    depth: str
    description: str
    gamma: float
    phi: float
    c: float
    E: float
    shear_strength_at_bottom: float
    consolidation: ConsolidationParams | None = None


class BearingFactors(BaseModel):
    Nc: float
    Nq: float
    Ngamma: float


class BearingCapacityResult(BaseModel):
    """Несущая способность по Vesic."""

    method: Literal["Vesic"] = "Vesic"
    q_ult: float = Field(description="Предельное давление, кПа")
    q_allow: float = Field(description="Допускаемое давление, кПа")
    factors: BearingFactors
    factor_of_safety: float = Field(description="Фактический коэффициент запаса")


SettlementStatus = Literal["Safe", "Warning", "Failure"]


class SettlementResult(BaseModel):
    """Осадка, мм."""

    method: Literal["Schmertmann + Consolidation"] = "Schmertmann + Consolidation"
    total: float
    elastic: float
    primary: float
    secondary: float
    time_to_90_years: float
    time_to_max_settlement: str
    status: SettlementStatus


class SlopeStabilityResult(BaseModel):
    factor_of_safety: float
    status: Literal["Stable", "Unstable"]
    method: str = "Infinite Slope Method"
    notes: str


class FoundationDesignResult(BaseModel):
    """Конструирование плиты фундамента (ACI 318)."""

    effective_depth: float = Field(description="Рабочая высота d, м")
    min_thickness: float = Field(description="Минимальная толщина, м")
    reinforcement_area: int = Field(description="Площадь арматуры, мм²/м")
    bar_suggestion: str
    punching_shear_check: Literal["Safe", "Unsafe"]
    punching_demand: float = Field(description="Vu, кН")
    punching_capacity: float = Field(description="φVc, кН")
    notes: str = ""


class StressNode(BaseModel):
    x: float = Field(description="Смещение от оси, м")
    z: float = Field(description="Глубина от подошвы, м")
    stress: float = Field(ge=0, description="σz, кПа")


class StressFieldResult(BaseModel):
    max_displacement: float = Field(description="мм")
    max_von_mises_stress: float = Field(description="Давление под подошвой, кПа")
    plastic_points: str
    mesh_nodes: int
    stress_mesh: list[StressNode]


class CurvePoint(BaseModel):
    x: float
    y: float


class DerivedCurves(BaseModel):
    load_settlement: list[CurvePoint]
    shear_strength: list[CurvePoint]
    time_settlement: list[CurvePoint]


class CalculationOutput(BaseModel):
    """Результаты расчёта."""

    layers: list[LayerParameters]
    bearing_capacity: BearingCapacityResult
    settlement: SettlementResult
    slope_stability: SlopeStabilityResult | None = None
    foundation_design: FoundationDesignResult
    stress_field: StressFieldResult
    curves: DerivedCurves

"""Корреляционные таблицы и коэффициенты несущей способности.

Источники:
- Peck, Hanson & Thornburn — φ(N) для несвязных грунтов
- Stroud (1974) — cu ≈ 6.25·N
- Vesic (1973) — коэффициенты Nc, Nq, Nγ и формы
- Hansen (1970) — коэффициенты глубины
"""

from functools import lru_cache

import numpy as np

# --- Константы ---

NC_CLAY = 5.14  # Коэффициент несущей способности для глин (φ=0)

DEFAULT_CV = 0.5  # м²/год
DEFAULT_C_ALPHA = 0.005
CR_TO_CC = 0.2  # Cr ≈ Cc/5

# Пороговые таблицы: (верхняя граница N, значение), последняя строка для N ≥ всех границ
_GAMMA_TABLE = {
    "sand": ((10, 16.0), (30, 18.0), (np.inf, 20.0)),
    "gravel": ((np.inf, 20.0),),
    "clay": ((4, 16.0), (8, 17.0), (np.inf, 19.0)),
    "silt": ((np.inf, 17.0),),
    "rock": ((np.inf, 25.0),),
}

_CC_TABLE = ((4, 0.4), (8, 0.25), (15, 0.15), (np.inf, 0.1))

_CONSISTENCY_TABLE = (
    (2, "Very Soft"),
    (4, "Soft"),
    (8, "Medium Stiff"),
    (15, "Stiff"),
    (30, "Very Stiff"),
    (np.inf, "Hard"),
)

_DENSITY_TABLE = (
    (4, "Very Loose"),
    (10, "Loose"),
    (30, "Medium Dense"),
    (50, "Dense"),
    (np.inf, "Very Dense"),
)

# Модуль деформации E = a·N + b, МПа
_MODULUS_COEFFICIENTS = {
    "sand": (2.5, 0.0),
    "gravel": (3.0, 0.0),
    "clay": (0.8, 5.0),
    "silt": (1.5, 3.0),
    "rock": (0.0, 500.0),
}

# Сцепление c = k·N, кПа (для скалы постоянное значение)
_COHESION_PER_BLOW = {"clay": 6.25, "silt": 3.0, "sand": 0.0, "gravel": 0.0}
ROCK_COHESION = 200.0

# Стандартные стержни: (диаметр, мм; площадь, мм²)
BAR_TABLE = ((12, 113.0), (16, 201.0), (20, 314.0), (25, 491.0))


def _lookup(table, n: float):
    for upper, value in table:
        if n < upper:
            return value
    return table[-1][1]


# --- Оценка характеристик по SPT ---


@lru_cache(maxsize=256)
def estimate_gamma(spt_n: float, soil_type: str) -> float:
    """Удельный вес γ, кН/м³."""
    return float(_lookup(_GAMMA_TABLE.get(soil_type, ((np.inf, 18.0),)), spt_n))


@lru_cache(maxsize=256)
def estimate_phi(spt_n: float, soil_type: str) -> float:
    """Угол внутреннего трения φ, ° (для песка и гравия не более 45°)."""
    if soil_type in ("sand", "gravel"):
        return float(min(45.0, 25.0 + 0.3 * spt_n + 0.00054 * spt_n**2))
    if soil_type == "silt":
        return float(min(35.0, 20.0 + 0.25 * spt_n))
    if soil_type == "clay":
        return 0.0  # недренированные условия
    if soil_type == "rock":
        return 40.0
    return 28.0


@lru_cache(maxsize=256)
def estimate_cohesion(spt_n: float, soil_type: str) -> float:
    """Сцепление c, кПа."""
    if soil_type == "rock":
        return ROCK_COHESION
    return float(_COHESION_PER_BLOW.get(soil_type, 0.0) * spt_n)


@lru_cache(maxsize=256)
def estimate_modulus(spt_n: float, soil_type: str) -> float:
    """Модуль деформации E, МПа."""
    a, b = _MODULUS_COEFFICIENTS.get(soil_type, (2.0, 0.0))
    return float(a * spt_n + b)


@lru_cache(maxsize=64)
def estimate_cc(spt_n: float) -> float:
    """Индекс компрессии Cc для глин и пылеватых грунтов."""
    return float(_lookup(_CC_TABLE, spt_n))


def estimate_cr(cc: float) -> float:
    """Индекс рекомпрессии Cr ≈ Cc/5."""
    return cc * CR_TO_CC


def density_description(spt_n: float, soil_type: str) -> str:
    """Плотность (несвязные) или консистенция (связные) по N."""
    if soil_type in ("clay", "silt"):
        return _lookup(_CONSISTENCY_TABLE, spt_n)
    return _lookup(_DENSITY_TABLE, spt_n)


# --- Коэффициенты несущей способности (Vesic) ---


@lru_cache(maxsize=256)
def bearing_factors(phi_deg: float) -> tuple[float, float, float]:
    """Коэффициенты Nc, Nq, Nγ.

    Nq = e^(π·tanφ) · tan²(45° + φ/2)
    Nc = (Nq − 1) / tanφ
    Nγ = 2·(Nq + 1)·tanφ

    При φ = 0: Nc = 5.14, Nq = 1, Nγ = 0.
    """
    if phi_deg <= 0:
        return NC_CLAY, 1.0, 0.0

    phi_rad = np.radians(phi_deg)
    tan_phi = np.tan(phi_rad)

    n_q = np.exp(np.pi * tan_phi) * np.tan(np.pi / 4.0 + phi_rad / 2.0) ** 2
    n_c = (n_q - 1.0) / tan_phi
    n_gamma = 2.0 * (n_q + 1.0) * tan_phi

    return float(n_c), float(n_q), float(n_gamma)


@lru_cache(maxsize=512)
def depth_factors(D: float, B: float, phi_ref_deg: float) -> tuple[float, float, float]:
    """Коэффициенты глубины dc, dq, dγ (Hansen).

    k = D/B при D/B ≤ 1, иначе k = arctan(D/B)
    dc = 1 + 0.4·k
    dq = 1 + 2·tanφ·(1 − sinφ)²·k
    dγ = 1
    """
    if B <= 0:
        return 1.0, 1.0, 1.0

    ratio = D / B
    k = ratio if ratio <= 1.0 else np.arctan(ratio)

    phi_rad = np.radians(phi_ref_deg)
    d_c = 1.0 + 0.4 * k
    d_q = 1.0 + 2.0 * np.tan(phi_rad) * (1.0 - np.sin(phi_rad)) ** 2 * k

    return float(d_c), float(d_q), 1.0


# --- Консолидация ---


def degree_of_consolidation(Tv: float) -> float:
    """Средняя степень консолидации U(Tv), аппроксимация Terzaghi."""
    if Tv <= 0:
        return 0.0
    if Tv <= 0.2827:
        U = np.sqrt(4.0 * Tv / np.pi)
    else:
        U = 1.0 - (8.0 / np.pi**2) * np.exp(-(np.pi**2) * Tv / 4.0)
    return float(min(1.0, max(0.0, U)))

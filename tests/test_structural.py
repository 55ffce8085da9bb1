import re

import pytest

from core.models import CalculationParams, Foundation, IsolatedFooting, RaftFoundation
from core.structural import (
    bar_suggestion,
    foundation_design,
    punching_capacity,
    punching_demand,
    required_steel,
    solve_effective_depth,
)

BAR_PATTERN = re.compile(r"^Φ\d+ @ \d+mm c/c$")


def _raft(**kwargs):
    defaults = dict(
        geometry=RaftFoundation(width=10.0, length=10.0), depth=2.0, load=16000.0, concrete_grade=30.0,
    )
    defaults.update(kwargs)
    return Foundation(**defaults)


def _overloaded():
    return Foundation(
        geometry=IsolatedFooting(width=3.0, length=3.0), depth=1.5, load=20000.0, concrete_grade=20.0,
    )


def test_punching_demand_and_capacity():
    params = CalculationParams()
    assert punching_demand(1000.0, 100.0, 0.4, 0.6) == pytest.approx(900.0)
    # 0.75·0.33·√25·4·1.0·0.6·1000
    assert punching_capacity(25.0, 0.4, 0.6, params) == pytest.approx(0.75 * 0.33 * 5.0 * 4.0 * 0.6 * 1000.0)


def test_raft_design():
    params = CalculationParams()
    result = foundation_design(_raft(), params)

    assert result.effective_depth == pytest.approx(0.7)
    assert result.min_thickness == pytest.approx(0.8)
    assert result.punching_shear_check == "Safe"
    assert result.punching_capacity >= result.punching_demand
    assert result.bar_suggestion == "Φ25 @ 100mm c/c"


def test_unsafe_when_iterations_exhausted():
    params = CalculationParams()
    result = foundation_design(_overloaded(), params)

    # 0.3 + 20·0.05
    assert result.effective_depth == pytest.approx(1.3)
    assert result.min_thickness == pytest.approx(1.4)
    assert result.punching_shear_check == "Unsafe"
    assert result.punching_capacity < result.punching_demand


@pytest.mark.parametrize("foundation", [_raft(), _overloaded(), _raft(load=2000.0)])
def test_check_agrees_with_forces(foundation):
    result = foundation_design(foundation, CalculationParams())
    safe = result.punching_demand <= result.punching_capacity
    assert (result.punching_shear_check == "Safe") == safe


def test_small_load_stops_at_initial_depth():
    params = CalculationParams()
    d = solve_effective_depth(100.0, 100.0 / 4.0, 0.4, 25.0, params)
    assert d == params.initial_depth


def test_stronger_concrete_never_thicker():
    params = CalculationParams()
    thicknesses = [
        foundation_design(_raft(concrete_grade=fc), params).min_thickness for fc in (20.0, 25.0, 30.0, 40.0)
    ]
    assert thicknesses == sorted(thicknesses, reverse=True)


def test_required_steel_has_minimum():
    params = CalculationParams()
    # Малый вылет: работает минимальное армирование 0.18%
    As = required_steel(50.0, 1.0, 0.8, 0.3, 0.4, 420.0, params)
    assert As == pytest.approx(0.0018 * 1000.0 * 0.4 * 1000.0)


@pytest.mark.parametrize("As", [300.0, 800.0, 1500.0, 3000.0, 6000.0, 20000.0])
def test_bar_suggestion_format(As):
    assert BAR_PATTERN.match(bar_suggestion(As, CalculationParams()))


def test_bar_suggestion_picks_smallest_fitting_bar():
    # Φ12: 113/500·1000 = 226 мм → 225
    assert bar_suggestion(500.0, CalculationParams()) == "Φ12 @ 225mm c/c"


def test_bar_suggestion_fallback_clamped_to_band():
    params = CalculationParams()
    # Ни один стержень не проходит: Φ20, шаг не меньше минимального
    assert bar_suggestion(20000.0, params) == "Φ20 @ 100mm c/c"
    assert bar_suggestion(100.0, params) == "Φ20 @ 300mm c/c"

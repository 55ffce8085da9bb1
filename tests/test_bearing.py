import math

import pytest

from core.bearing import bearing_capacity, ultimate_pressure
from core.models import CalculationParams, Foundation, IsolatedFooting, LabData, SoilLayer, StripFooting
from core.tables import NC_CLAY


def _clay():
    return [SoilLayer(depth_from=0.0, depth_to=10.0, soil_type="clay", spt_n=8)]


def _sand():
    return [SoilLayer(depth_from=0.0, depth_to=10.0, soil_type="sand", spt_n=20)]


def _footing(**kwargs):
    defaults = dict(geometry=IsolatedFooting(width=2.0, length=2.0), depth=1.0, load=600.0)
    defaults.update(kwargs)
    return Foundation(**defaults)


def test_undrained_clay_matches_hand_calculation():
    params = CalculationParams()
    q_ult, factors = ultimate_pressure(_clay(), _footing(), params)

    tan30 = math.tan(math.radians(30.0))
    s_c = 1.0 + 1.0 / NC_CLAY
    s_q = 1.0 + tan30
    d_c = 1.0 + 0.4 * 0.5
    d_q = 1.0 + 2.0 * tan30 * (1.0 - 0.5) ** 2 * 0.5
    # c = 6.25·8 = 50 кПа, γ = 19 кН/м³
    expected = 50.0 * NC_CLAY * s_c * d_c + 19.0 * 1.0 * 1.0 * s_q * d_q

    assert factors == (NC_CLAY, 1.0, 0.0)
    assert q_ult == pytest.approx(expected)


@pytest.mark.parametrize("spt_n", [2, 8, 30])
def test_clay_factors_reported_for_phi_zero(spt_n):
    layers = [SoilLayer(depth_from=0.0, depth_to=10.0, soil_type="clay", spt_n=spt_n)]
    result = bearing_capacity(layers, _footing(), CalculationParams())
    assert result.factors.Nc == NC_CLAY
    assert result.factors.Nq == 1.0
    assert result.factors.Ngamma == 0.0
    assert result.method == "Vesic"


@pytest.mark.parametrize("target_fos", [2.0, 3.0, 3.5])
def test_allowable_is_ultimate_over_target(target_fos):
    result = bearing_capacity(_sand(), _footing(target_fos=target_fos), CalculationParams())
    assert result.q_allow == pytest.approx(result.q_ult / target_fos, abs=0.01)


def test_target_fos_does_not_change_ultimate():
    params = CalculationParams()
    low = bearing_capacity(_sand(), _footing(target_fos=2.0), params)
    high = bearing_capacity(_sand(), _footing(target_fos=3.5), params)
    assert low.q_ult == high.q_ult
    assert low.factor_of_safety == high.factor_of_safety
    assert low.q_allow > high.q_allow


def test_factor_of_safety_uses_applied_pressure():
    result = bearing_capacity(_sand(), _footing(load=600.0), CalculationParams())
    assert result.factor_of_safety == pytest.approx(result.q_ult / 150.0, abs=0.01)


def test_load_does_not_change_capacity():
    params = CalculationParams()
    light = bearing_capacity(_sand(), _footing(load=100.0), params)
    heavy = bearing_capacity(_sand(), _footing(load=5000.0), params)
    assert light.q_ult == heavy.q_ult
    assert light.q_allow == heavy.q_allow
    assert light.factor_of_safety > heavy.factor_of_safety


def test_zero_load_gives_capped_factor_of_safety():
    result = bearing_capacity(_sand(), _footing(load=0.0), CalculationParams())
    assert result.factor_of_safety == 99.0


def test_shallow_groundwater_reduces_capacity():
    params = CalculationParams()
    dry = bearing_capacity(_sand(), _footing(groundwater_depth=100.0), params)
    wet = bearing_capacity(_sand(), _footing(groundwater_depth=1.0), params)
    partial = bearing_capacity(_sand(), _footing(groundwater_depth=2.0), params)
    assert wet.q_ult < partial.q_ult < dry.q_ult


def test_strip_capacity_below_square():
    params = CalculationParams()
    square = bearing_capacity(_sand(), _footing(), params)
    strip = bearing_capacity(_sand(), _footing(geometry=StripFooting(width=2.0)), params)
    # sc, sq > 1 для квадрата перевешивают sγ = 0.6
    assert strip.q_ult < square.q_ult


def test_layer_at_foundation_level_is_used():
    layers = [
        SoilLayer(depth_from=0.0, depth_to=1.0, soil_type="clay", spt_n=4),
        SoilLayer(depth_from=1.0, depth_to=10.0, soil_type="sand", spt_n=20),
    ]
    result = bearing_capacity(layers, _footing(depth=1.0), CalculationParams())
    assert result.factors.Nq > 1.0
    assert result.factors.Ngamma > 0.0


def test_light_submerged_soil_gives_non_negative_capacity():
    layers = [
        SoilLayer(
            depth_from=0.0, depth_to=10.0, soil_type="sand", spt_n=20,
            lab=LabData(use_measured=True, unit_weight=8.0),
        )
    ]
    # Df = 0, c = 0: остаётся только член с Nγ
    result = bearing_capacity(layers, _footing(depth=0.0, groundwater_depth=0.0), CalculationParams())
    assert result.q_ult == 0.0
    assert result.factor_of_safety == 0.0

import pytest

from core.helpers import (
    average_gamma_above,
    consolidating_layers,
    effective_unit_weight,
    get_layer_at_depth,
    resolve,
    soil_params,
    spread_stress,
    time_to_consolidation,
)
from core.models import Foundation, LabData, RaftFoundation, SoilLayer
from core.tables import DEFAULT_CV, estimate_gamma, estimate_phi


def _layers():
    return [
        SoilLayer(depth_from=0.0, depth_to=2.0, soil_type="clay", spt_n=4, name="top clay"),
        SoilLayer(depth_from=2.0, depth_to=6.0, soil_type="sand", spt_n=20, name="sand"),
        SoilLayer(depth_from=6.0, depth_to=10.0, soil_type="silt", spt_n=10, name="silt"),
    ]


def test_resolve_prefers_measured_value():
    assert resolve(12.5, lambda: 99.0) == 12.5
    assert resolve(0.0, lambda: 99.0) == 0.0
    assert resolve(None, lambda: 99.0) == 99.0


def test_soil_params_per_field_fallback():
    layer = SoilLayer(
        depth_from=0.0, depth_to=5.0, soil_type="sand", spt_n=20,
        lab=LabData(use_measured=True, unit_weight=19.5),
    )
    soil = soil_params(layer)
    assert soil.gamma == 19.5
    # остальное по корреляциям
    assert soil.phi == pytest.approx(estimate_phi(20, "sand"))
    assert soil.cv == DEFAULT_CV
    assert soil.nu is None


def test_soil_params_ignores_lab_when_flag_is_off():
    layer = SoilLayer(
        depth_from=0.0, depth_to=5.0, soil_type="clay", spt_n=8,
        lab=LabData(use_measured=False, unit_weight=21.0, cc=0.5, cv=2.0),
    )
    soil = soil_params(layer)
    assert soil.gamma == estimate_gamma(8, "clay")
    assert soil.cc == 0.15
    assert soil.cr == pytest.approx(0.03)
    assert soil.cv == DEFAULT_CV


def test_measured_cc_drives_cr():
    layer = SoilLayer(
        depth_from=0.0, depth_to=5.0, soil_type="clay", spt_n=8,
        lab=LabData(use_measured=True, cc=0.5),
    )
    assert soil_params(layer).cr == pytest.approx(0.1)


@pytest.mark.parametrize(
    ("depth", "name"),
    [(0.0, "top clay"), (1.99, "top clay"), (2.0, "sand"), (6.0, "silt"), (10.0, "silt"), (25.0, "silt")],
)
def test_get_layer_at_depth(depth, name):
    assert get_layer_at_depth(_layers(), depth).name == name


def test_average_gamma_above():
    layers = _layers()
    # 2 м глины (17) + 1 м песка (18)
    assert average_gamma_above(layers, 3.0) == pytest.approx((17.0 * 2 + 18.0 * 1) / 3)
    assert average_gamma_above(layers, 0.0) == 18.0


@pytest.mark.parametrize(
    ("gw", "expected_below"),
    [(10.0, 18.0), (1.0, 18.0 - 9.81), (2.0, 18.0 - 9.81), (3.0, 8.19 + 0.5 * 9.81)],
)
def test_effective_unit_weight_groundwater(gw, expected_below):
    above, below = effective_unit_weight(18.0, gw, Df=2.0, B=2.0)
    assert above == 18.0
    assert below == pytest.approx(expected_below)


def test_consolidating_layers_clip_at_foundation_level():
    foundation = Foundation(geometry=RaftFoundation(width=6.0, length=6.0), depth=1.0, load=1000.0)
    windows = consolidating_layers(_layers(), foundation)

    assert [w.layer.name for w in windows] == ["top clay", "silt"]
    assert windows[0].z_top == 1.0
    assert windows[0].H == pytest.approx(1.0)
    assert windows[1].drainage_path == pytest.approx(2.0)


def test_layers_above_foundation_do_not_consolidate():
    foundation = Foundation(geometry=RaftFoundation(width=6.0, length=6.0), depth=2.0, load=1000.0)
    names = [w.layer.name for w in consolidating_layers(_layers(), foundation)]
    assert names == ["silt"]


def test_time_to_consolidation():
    assert time_to_consolidation(2.0, 0.5, 0.848) == pytest.approx(0.848 * 4.0 / 0.5)
    assert time_to_consolidation(2.0, 0.0, 0.848) == 0.0


def test_spread_stress_two_to_one():
    assert spread_stress(100.0, 2.0, 2.0, 0.0) == 100.0
    assert spread_stress(100.0, 2.0, 2.0, 2.0) == pytest.approx(25.0)


def test_submerged_unit_weight_never_negative():
    # лабораторный γ легче воды
    _, below = effective_unit_weight(8.0, 0.0, Df=1.0, B=2.0)
    assert below == 0.0
    _, partial = effective_unit_weight(8.0, 2.0, Df=1.0, B=2.0)
    assert partial == pytest.approx(0.5 * 8.0)

import math

import pytest
from pydantic import ValidationError

from core.calculator import calculate
from core.models import (
    CalculationParams,
    CircularFooting,
    Foundation,
    IsolatedFooting,
    LabData,
    RaftFoundation,
    SoilLayer,
    SoilProfile,
    StripFooting,
)


def _foundation(**kwargs):
    defaults = dict(geometry=IsolatedFooting(width=2.0, length=2.0), depth=1.5, load=800.0)
    defaults.update(kwargs)
    return Foundation(**defaults)


def test_profile_gap_is_rejected():
    layers = [
        SoilLayer(depth_from=0.0, depth_to=3.0, soil_type="sand", spt_n=15),
        SoilLayer(depth_from=4.0, depth_to=8.0, soil_type="clay", spt_n=6),
    ]
    with pytest.raises(ValidationError, match="разрыв"):
        SoilProfile(layers=layers)


def test_profile_overlap_is_rejected():
    layers = [
        SoilLayer(depth_from=0.0, depth_to=5.0, soil_type="sand", spt_n=15),
        SoilLayer(depth_from=4.0, depth_to=8.0, soil_type="clay", spt_n=6),
    ]
    with pytest.raises(ValidationError, match="перекрываются"):
        SoilProfile(layers=layers)


def test_empty_profile_is_rejected():
    with pytest.raises(ValidationError):
        SoilProfile(layers=[])


@pytest.mark.parametrize("depth_to", [2.0, 1.0])
def test_layer_bottom_must_be_below_top(depth_to):
    with pytest.raises(ValidationError):
        SoilLayer(depth_from=2.0, depth_to=depth_to, soil_type="sand", spt_n=10)


def test_foundation_below_profile_is_rejected():
    layers = [SoilLayer(depth_from=0.0, depth_to=3.0, soil_type="sand", spt_n=15)]
    with pytest.raises(ValidationError, match="ниже подошвы разреза"):
        calculate(layers, _foundation(depth=4.0))


@pytest.mark.parametrize(
    "geometry",
    [
        {"shape": "isolated", "width": 0.0, "length": 2.0},
        {"shape": "raft", "width": 10.0, "length": -1.0},
        {"shape": "circular", "diameter": 0.0},
        {"shape": "strip", "width": 1.0, "elongation": 1.0},
        {"shape": "hexagon", "width": 1.0},
    ],
)
def test_invalid_geometry_is_rejected(geometry):
    with pytest.raises(ValidationError):
        Foundation(geometry=geometry, depth=1.0, load=100.0)


def test_negative_load_is_rejected():
    with pytest.raises(ValidationError):
        _foundation(load=-1.0)


def test_geometry_from_dict_uses_shape_discriminator():
    foundation = Foundation(geometry={"shape": "raft", "width": 12.0, "length": 8.0}, depth=2.0, load=1000.0)
    assert isinstance(foundation.geometry, RaftFoundation)
    # B: меньшая сторона
    assert foundation.B == 8.0
    assert foundation.L == 12.0
    assert foundation.area == 96.0


def test_strip_is_modelled_as_elongated_rectangle():
    foundation = _foundation(geometry=StripFooting(width=1.5))
    assert foundation.L == pytest.approx(15.0)
    assert foundation.is_elongated
    assert foundation.geometry.shape_factors(20.0, 30.0, 0.5) == (1.0, 1.0, 1.0)


def test_circular_area_and_factors():
    foundation = _foundation(geometry=CircularFooting(diameter=2.0), load=math.pi * 100.0)
    assert foundation.area == pytest.approx(math.pi)
    assert foundation.pressure == pytest.approx(100.0)
    s_c, s_q, s_gamma = foundation.geometry.shape_factors(18.4, 30.14, math.tan(math.radians(30.0)))
    assert s_c == pytest.approx(1.0 + 18.4 / 30.14)
    assert s_q == pytest.approx(1.0 + math.tan(math.radians(30.0)))
    assert s_gamma == 0.6


@pytest.mark.parametrize(
    ("geometry", "expected"),
    [
        (IsolatedFooting(width=3.0, length=3.0), 0.4),
        (RaftFoundation(width=10.0, length=20.0), 3.0),
        (StripFooting(width=2.0), 0.6),
        (CircularFooting(diameter=5.0), 1.5),
    ],
)
def test_column_size_by_shape(geometry, expected):
    assert geometry.column_size == pytest.approx(expected)


def test_lab_values_hidden_without_flag():
    lab = LabData(unit_weight=21.0, cc=0.3)
    assert lab.measured("unit_weight") is None
    assert lab.measured("cc") is None

    lab = LabData(use_measured=True, unit_weight=21.0)
    assert lab.measured("unit_weight") == 21.0
    assert lab.measured("cohesion") is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_spacing": 300, "max_spacing": 100},
        {"settlement_safe": 60.0},
        {"plastic_low": 0.9},
        {"grid_rows": 1},
    ],
)
def test_inconsistent_params_are_rejected(overrides):
    with pytest.raises(ValidationError):
        CalculationParams(**overrides)

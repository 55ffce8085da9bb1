"""Расчётные характеристики слоёв разреза."""

import numpy as np

from core.helpers import soil_params
from core.models import ConsolidationParams, LayerParameters, SoilLayer
from core.tables import density_description


def _depth_label(layer: SoilLayer) -> str:
    return f"{layer.depth_from:g}m - {layer.depth_to:g}m"


def layer_parameters(layer: SoilLayer) -> LayerParameters:
    soil = soil_params(layer)
    tau_bottom = soil.c + soil.gamma * layer.depth_to * np.tan(np.radians(soil.phi))

    consolidation = None
    if layer.is_consolidating:
        consolidation = ConsolidationParams(cc=soil.cc, cr=soil.cr, cv=soil.cv, c_alpha=soil.c_alpha)

    return LayerParameters(
        depth=_depth_label(layer),
        description=(
            f"{layer.soil_type.capitalize()} layer, SPT N={layer.spt_n:g}, "
            f"{density_description(layer.spt_n, layer.soil_type)}"
        ),
        gamma=soil.gamma,
        phi=soil.phi,
        c=soil.c,
        E=soil.E,
        shear_strength_at_bottom=round(float(tau_bottom), 1),
        consolidation=consolidation,
    )


def analyze_layers(layers: list[SoilLayer]) -> list[LayerParameters]:
    return [layer_parameters(layer) for layer in layers]

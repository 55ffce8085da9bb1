import logging
import sys
import tomllib

from pydantic import TypeAdapter

from core.calculator import calculate
from core.models import CalculationParams, CalibrationRecord, Foundation, LabData, SoilLayer
from plot import ReportPlotter
from report.fallback import fallback_narrative


def load_input(
    path: str,
) -> tuple[list[SoilLayer], Foundation, CalculationParams, list[CalibrationRecord], dict]:
    """Загрузить входные данные из TOML."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    layers = [
        SoilLayer(
            depth_from=L["depth_from"],
            depth_to=L["depth_to"],
            soil_type=L["soil_type"],
            spt_n=L["spt_n"],
            name=L.get("name", ""),
            lab=LabData(**L.get("lab", {})),
        )
        for L in data["layers"]
    ]

    foundation_data = dict(data["foundation"])
    geometry = {"shape": foundation_data.pop("shape", "isolated")}
    for key in ("width", "length", "diameter", "elongation"):
        if key in foundation_data:
            geometry[key] = foundation_data.pop(key)
    foundation = Foundation(geometry=geometry, **foundation_data)

    params = CalculationParams(**data.get("calculation", {}))
    calibration = TypeAdapter(list[CalibrationRecord]).validate_python(data.get("calibration", []))

    project = {
        "name": data.get("project", {}).get("name", ""),
        "locale": data.get("project", {}).get("locale", "en"),
    }
    return layers, foundation, params, calibration, project


def main(input_file: str = "input.toml"):
    """Загрузка → расчёт → вывод → графики."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    layers, foundation, params, calibration, project = load_input(input_file)
    result = calculate(layers, foundation, params=params, calibration=calibration)

    bc = result.bearing_capacity
    st = result.settlement
    fd = result.foundation_design

    print(f"Проект: {project['name']}")
    print(f"q_ult = {bc.q_ult:.2f} кПа, q_allow = {bc.q_allow:.2f} кПа, FOS = {bc.factor_of_safety:.2f}")
    print(
        f"Осадка: {st.total:.2f} мм (упругая {st.elastic:.2f}, первичная {st.primary:.2f}, "
        f"вторичная {st.secondary:.2f}) — {st.status}, t90: {st.time_to_max_settlement}"
    )
    print(
        f"Плита: h = {fd.min_thickness:.2f} м, As = {fd.reinforcement_area} мм²/м, "
        f"{fd.bar_suggestion}, продавливание: {fd.punching_shear_check}"
    )
    if result.slope_stability:
        ss = result.slope_stability
        print(f"Откос: FOS = {ss.factor_of_safety:.2f} — {ss.status}")

    print()
    print(fallback_narrative(result, project["locale"]).report)

    # --- Отрисовка ---
    plotter = ReportPlotter(theme="light")
    plotter.plot_curves(result.curves)
    plotter.add_pressure_lines(bc, foundation.pressure)
    plotter.add_settlement_limits(params.settlement_safe, params.settlement_warning)
    plotter.add_layers(layers, foundation.depth)
    plotter.plot_stress_field(result.stress_field)

    fig = plotter.get_figure()
    output_name = input_file.replace(".toml", ".html")
    fig.write_html(output_name)
    print(f"График: {output_name}")

    return result


if __name__ == "__main__":
    input_file = sys.argv[1] if len(sys.argv) > 1 else "input.toml"
    main(input_file)

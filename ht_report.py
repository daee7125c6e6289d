# ht_report.py
from typing import List

from ht_calc import CalcInput, CalcOutput, DEFAULT_RATES, InspectionType, RateConfig


def money(amount: float) -> str:
    """AUD display format, e.g. $12,614.45 or -$10.00."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"

def percent(rate: float) -> str:
    return f"{rate * 100:g}%"

def duty_label(config: RateConfig, capped: bool) -> str:
    label = f"Stamp duty ({percent(config.duty_rate)}"
    if capped:
        label += f", capped ${config.duty_cap:,.0f}"
    return label + ")"

def breakdown_lines(
    calc_input: CalcInput,
    out: CalcOutput,
    config: RateConfig = DEFAULT_RATES,
) -> List[str]:
    """
    One line per figure, in display order. Lines for insurance, first-time
    licensing and inspection only appear when their toggle is on. Figures are
    read from `out` as calculated.
    """
    lines = [
        f"Asset price (ex-GST): {money(calc_input.price_ex_gst)}",
        f"Axles: {calc_input.axles}",
        f"GST added to duty base: {money(out.gst if calc_input.include_gst_in_duty else 0)}",
        f"Dutiable value: {money(out.dutiable)}",
        f"{duty_label(config, calc_input.apply_duty_cap)}: {money(out.duty)}",
        f"Licence fee ({config.licence_per_axle:.0f} per axle): {money(out.licence_fee)}",
    ]
    if calc_input.include_insurance_lines:
        lines.append(
            f"Insurance lines: base {money(out.insurance_base)}, "
            f"GST {money(out.insurance_gst)}, duty {money(out.insurance_duty)}"
        )
    if calc_input.first_time_licensing:
        lines.append(f"Recording fee: {money(out.recording_fee)}")
        lines.append(f"Plate fee: {money(out.plate_fee)}")
    inspection_type = InspectionType(calc_input.inspection_type)
    if inspection_type != InspectionType.NONE:
        lines.append(f"Inspection fee ({inspection_type.label}): {money(out.inspection_fee)}")
    lines.append(f"Road rego subtotal: {money(out.road_rego_subtotal)}")
    lines.append(f"TOTAL on-road: {money(out.total_on_road)}")
    return lines

def format_breakdown(
    calc_input: CalcInput,
    out: CalcOutput,
    config: RateConfig = DEFAULT_RATES,
) -> str:
    return "\n".join(breakdown_lines(calc_input, out, config))

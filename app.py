# app.py
import logging
import os

import streamlit as st

from ht_calc import DEFAULT_RATES, InspectionType, calculate
from ht_inputs import MAX_AXLES, MIN_AXLES, build_input
from ht_report import duty_label, format_breakdown, money, percent

logging.basicConfig(
    level=os.environ.get("HT_CALC_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# =========================
# Page config
# =========================
st.set_page_config(
    page_title="HT Axle Licence & Stamp Duty Calculator",
    page_icon="🚛",
    layout="centered",
)

st.title("2025 Licence & Stamp Duty Calculator: HT Class (Axle Calc)")
st.caption("WA, first-time licensing by default. Values are configurable and rounded to cents.")

# =========================
# Defaults & session reset
# =========================
APP_DEFAULTS = {
    "price": "75000",
    "axles": 3,
    "include_gst_in_duty": True,
    "apply_duty_cap": True,
    "first_time_licensing": True,
    "include_insurance_lines": True,
    "inspection": InspectionType.INITIAL.value,
}

# Reset puts the price at zero, everything else back to the defaults
RESET_VALUES = dict(APP_DEFAULTS, price="0")

RATE_FIELDS = {
    "gst_rate": "GST rate",
    "duty_rate": "Duty rate",
    "duty_cap": "Duty cap",
    "licence_per_axle": "Licence / axle",
    "recording_fee": "Recording fee",
    "plate_fee": "Plate fee",
    "insurance_base": "Ins. base",
    "insurance_gst_rate": "Ins. GST",
    "insurance_duty_rate": "Ins. duty",
    "inspection_initial": "Inspection (initial)",
    "inspection_reinspection": "Inspection (reinspection)",
}

def rate_key(field: str) -> str:
    return f"rate_{field}"

def reset_state(values=RESET_VALUES):
    for k, v in values.items():
        st.session_state[k] = v

def reset_rates():
    for field in RATE_FIELDS:
        st.session_state[rate_key(field)] = float(getattr(DEFAULT_RATES, field))

def set_axles(n: int):
    st.session_state["axles"] = n

if "initialized" not in st.session_state:
    reset_state(APP_DEFAULTS)
    reset_rates()
    st.session_state["initialized"] = True

config = DEFAULT_RATES.replace(
    **{field: st.session_state[rate_key(field)] for field in RATE_FIELDS}
)

# =========================
# Inputs
# =========================
col1, col2 = st.columns(2)

with col1:
    st.text_input("Asset price (ex-GST)", placeholder="e.g. 75000", key="price")

with col2:
    st.number_input(
        "Axles", min_value=MIN_AXLES, max_value=MAX_AXLES, step=1, key="axles"
    )
    preset_cols = st.columns(5)
    for n, pc in zip(range(1, 6), preset_cols):
        pc.button(f"{n}", key=f"preset_{n}", on_click=set_axles, args=(n,))

col3, col4 = st.columns(2)

with col3:
    st.checkbox(f"Include GST ({percent(config.gst_rate)}) in duty base", key="include_gst_in_duty")
    st.checkbox(f"Apply duty cap ({money(config.duty_cap)})", key="apply_duty_cap")
    st.checkbox("First-time licensing (include plate + recording)", key="first_time_licensing")
    st.checkbox("Include insurance micro-lines", key="include_insurance_lines")

    inspection_fees = {
        InspectionType.NONE.value: None,
        InspectionType.INITIAL.value: config.inspection_initial,
        InspectionType.REINSPECTION.value: config.inspection_reinspection,
    }

    def inspection_label(value: str) -> str:
        label = InspectionType(value).label
        fee = inspection_fees[value]
        return label if fee is None else f"{label} inspection ({money(fee)})"

    st.radio(
        "Inspection fee (Major Motors)",
        list(inspection_fees),
        format_func=inspection_label,
        key="inspection",
    )

with col4:
    with st.expander("Config (rates)"):
        for field, label in RATE_FIELDS.items():
            if field.endswith("_rate"):
                st.number_input(label, min_value=0.0, step=0.01, format="%.4f", key=rate_key(field))
            else:
                st.number_input(label, min_value=0.0, step=1.0, format="%.2f", key=rate_key(field))
        st.button("Restore default rates", key="reset_rates", on_click=reset_rates)

# =========================
# Results
# =========================
calc_input = build_input(
    price=st.session_state["price"],
    axles=st.session_state["axles"],
    include_gst_in_duty=st.session_state["include_gst_in_duty"],
    apply_duty_cap=st.session_state["apply_duty_cap"],
    first_time_licensing=st.session_state["first_time_licensing"],
    include_insurance_lines=st.session_state["include_insurance_lines"],
    inspection_type=st.session_state["inspection"],
)
out = calculate(calc_input, config)
logger.debug("Recalculated %s -> total %s", calc_input, out.total_on_road)

st.markdown("### Breakdown")

c1, c2 = st.columns(2)
c1.metric("Dutiable value", money(out.dutiable))
c2.metric(duty_label(config, calc_input.apply_duty_cap), money(out.duty))

c3, c4 = st.columns(2)
c3.metric("Licence fee", money(out.licence_fee))
c4.metric("Road rego subtotal", money(out.road_rego_subtotal))

if calc_input.include_insurance_lines:
    i1, i2, i3 = st.columns(3)
    i1.metric("Insurance base", money(out.insurance_base))
    i2.metric("Insurance GST", money(out.insurance_gst))
    i3.metric("Insurance duty", money(out.insurance_duty))

if calc_input.first_time_licensing:
    f1, f2 = st.columns(2)
    f1.metric("Recording fee", money(out.recording_fee))
    f2.metric("Number plate issue", money(out.plate_fee))

if calc_input.inspection_type != InspectionType.NONE:
    st.metric(f"Inspection fee ({calc_input.inspection_type.label})", money(out.inspection_fee))

st.metric("Total on-road", money(out.total_on_road))

st.markdown("#### Copy breakdown")
st.code(format_breakdown(calc_input, out, config), language=None)

st.button("Reset", key="reset", on_click=reset_state)

st.caption(
    "Notes: Duty rate and cap follow WA RevenueWA heavy vehicle duty (3% up to $12,000). "
    "Licence fee is configured per axle for HT class. Trailers generally do not pay Motor "
    "Injury Insurance (MII) in WA; the optional insurance micro-lines mirror the dealer "
    "workbook. Inspection fees (Major Motors) are selectable as Initial or Reinspection and "
    "are included in the total when chosen."
)

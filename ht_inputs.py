# ht_inputs.py
import logging
import math
import re

from ht_calc import CalcInput, InspectionType

logger = logging.getLogger(__name__)

MIN_AXLES = 1
MAX_AXLES = 9

_NON_NUMERIC = re.compile(r"[^0-9.]")

# =========================
# Form value sanitising
# =========================
def parse_price(raw) -> float:
    """Price text from the form -> dollars. Anything unreadable becomes 0."""
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        cleaned = _NON_NUMERIC.sub("", str(raw or ""))
        try:
            value = float(cleaned) if cleaned else 0.0
        except ValueError:
            logger.warning("Could not read price %r, using 0", raw)
            return 0.0
    if not math.isfinite(value):
        logger.warning("Non-finite price %r, using 0", raw)
        return 0.0
    return value

def clamp_axles(raw) -> int:
    """Axle count from the form, clamped to 1-9. Blank or unreadable -> 1."""
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        value = 0
    clamped = max(MIN_AXLES, min(MAX_AXLES, value or MIN_AXLES))
    if clamped != value:
        logger.debug("Axles %r clamped to %d", raw, clamped)
    return clamped

def parse_inspection_type(raw) -> InspectionType:
    if isinstance(raw, InspectionType):
        return raw
    try:
        return InspectionType(str(raw).strip().lower())
    except ValueError:
        logger.debug("Unknown inspection type %r, using none", raw)
        return InspectionType.NONE

def build_input(
    price,
    axles,
    include_gst_in_duty: bool,
    apply_duty_cap: bool,
    first_time_licensing: bool,
    include_insurance_lines: bool,
    inspection_type,
) -> CalcInput:
    """Fresh CalcInput from raw form values."""
    return CalcInput(
        price_ex_gst=parse_price(price),
        axles=clamp_axles(axles),
        include_gst_in_duty=bool(include_gst_in_duty),
        apply_duty_cap=bool(apply_duty_cap),
        first_time_licensing=bool(first_time_licensing),
        include_insurance_lines=bool(include_insurance_lines),
        inspection_type=parse_inspection_type(inspection_type),
    )

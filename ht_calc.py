# ht_calc.py
from dataclasses import asdict, dataclass, replace as dc_replace
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

# =========================
# Rates
# =========================
@dataclass(frozen=True)
class RateConfig:
    """WA HT class rates. Amounts in dollars, rates as fractions."""
    gst_rate: float = 0.10
    duty_rate: float = 0.03
    duty_cap: float = 12000
    licence_per_axle: float = 572
    recording_fee: float = 10.45
    plate_fee: float = 32.00
    insurance_base: float = 14.59
    insurance_gst_rate: float = 0.10
    insurance_duty_rate: float = 0.11
    inspection_initial: float = 284.00
    inspection_reinspection: float = 172.00

    def replace(self, **changes) -> "RateConfig":
        return dc_replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_RATES = RateConfig()


class InspectionType(str, Enum):
    NONE = "none"
    INITIAL = "initial"
    REINSPECTION = "reinspection"

    @property
    def label(self) -> str:
        return {"none": "None", "initial": "Initial", "reinspection": "Reinspection"}[self.value]


@dataclass(frozen=True)
class CalcInput:
    price_ex_gst: float
    axles: int
    include_gst_in_duty: bool = True
    apply_duty_cap: bool = True
    first_time_licensing: bool = True
    include_insurance_lines: bool = False
    inspection_type: InspectionType = InspectionType.NONE


@dataclass(frozen=True)
class CalcOutput:
    gst: float
    dutiable: float
    duty: float
    licence_fee: float
    insurance_base: float
    insurance_gst: float
    insurance_duty: float
    recording_fee: float
    plate_fee: float
    inspection_fee: float
    road_rego_subtotal: float
    total_on_road: float

    def to_dict(self) -> dict:
        return asdict(self)


# =========================
# Cents helpers
# =========================
def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    # str() gives the shortest repr, so 1458.9999999999998 stays below the tie
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))

def to_cents(dollars: float) -> int:
    return round_half_away(dollars * 100)

def from_cents(cents: int) -> float:
    return cents / 100

# =========================
# Core calculation
# =========================
def calculate(calc_input: CalcInput, config: RateConfig = DEFAULT_RATES) -> CalcOutput:
    """
    Itemised on-road cost for one HT vehicle.

    Every amount is taken to integer cents as soon as a rate is applied, all
    sums are done in cents, and the fields are converted back to dollars at the
    end. Inputs are used as given: negative prices or axle counts outside 1-9
    are not rejected or clamped here. NaN and infinity are outside the domain
    and raise; the form boundary replaces them before they get here.
    """
    price = to_cents(calc_input.price_ex_gst)
    gst = round_half_away(price * config.gst_rate) if calc_input.include_gst_in_duty else 0
    dutiable = price + gst

    duty = round_half_away(dutiable * config.duty_rate)
    if calc_input.apply_duty_cap:
        duty = min(duty, to_cents(config.duty_cap))

    licence_fee = round_half_away(to_cents(config.licence_per_axle) * calc_input.axles)

    insurance_base = insurance_gst = insurance_duty = 0
    if calc_input.include_insurance_lines:
        insurance_base = to_cents(config.insurance_base)
        insurance_gst = round_half_away(insurance_base * config.insurance_gst_rate)
        insurance_duty = round_half_away(insurance_base * config.insurance_duty_rate)

    recording_fee = plate_fee = 0
    if calc_input.first_time_licensing:
        recording_fee = to_cents(config.recording_fee)
        plate_fee = to_cents(config.plate_fee)

    inspection_type = InspectionType(calc_input.inspection_type)
    if inspection_type == InspectionType.INITIAL:
        inspection_fee = to_cents(config.inspection_initial)
    elif inspection_type == InspectionType.REINSPECTION:
        inspection_fee = to_cents(config.inspection_reinspection)
    else:
        inspection_fee = 0

    road_rego_subtotal = (
        licence_fee + insurance_base + insurance_gst + insurance_duty
        + recording_fee + plate_fee + inspection_fee
    )
    total_on_road = road_rego_subtotal + duty

    return CalcOutput(
        gst=from_cents(gst),
        dutiable=from_cents(dutiable),
        duty=from_cents(duty),
        licence_fee=from_cents(licence_fee),
        insurance_base=from_cents(insurance_base),
        insurance_gst=from_cents(insurance_gst),
        insurance_duty=from_cents(insurance_duty),
        recording_fee=from_cents(recording_fee),
        plate_fee=from_cents(plate_fee),
        inspection_fee=from_cents(inspection_fee),
        road_rego_subtotal=from_cents(road_rego_subtotal),
        total_on_road=from_cents(total_on_road),
    )

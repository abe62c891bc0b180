from __future__ import annotations

import structlog

from .models import EstimateResult, NormalizedInputs, NormalizeResult, RawInputs
from .normalize import normalize

log = structlog.get_logger(__name__)

# ACSM walking equation coefficients (ml O2 per kg per min).
HORIZONTAL_COEF = 0.1
VERTICAL_COEF = 1.8
RESTING_VO2 = 3.5

# Energy released per litre of O2 consumed.
KCAL_PER_LITRE_O2 = 5.0


def kmh_to_m_per_min(speed_kmh: float) -> float:
    return speed_kmh * 1000 / 60


def acsm_walking_vo2(speed_m_min: float, grade: float) -> float:
    """VO2 in ml/kg/min for walking at ``speed_m_min`` on a fractional grade."""
    return HORIZONTAL_COEF * speed_m_min + VERTICAL_COEF * speed_m_min * grade + RESTING_VO2


def estimate(inputs: NormalizedInputs) -> EstimateResult:
    """Estimate oxygen uptake and energy expenditure for an uphill walk."""
    speed_m_min = kmh_to_m_per_min(inputs.speed_kmh)
    grade = inputs.grade_percent / 100

    vo2 = acsm_walking_vo2(speed_m_min, grade)
    kcal_per_min = (vo2 * inputs.weight_kg / 1000) * KCAL_PER_LITRE_O2
    total_kcal = kcal_per_min * inputs.duration_min
    return EstimateResult(vo2=vo2, kcal_per_min=kcal_per_min, total_kcal=total_kcal)


def calculate(raw: RawInputs, lang: str = "fr") -> tuple[NormalizeResult, EstimateResult | None]:
    checked = normalize(raw, lang)
    if not checked.ok or checked.inputs is None:
        return checked, None
    result = estimate(checked.inputs)
    log.debug(
        "estimate_computed",
        vo2=result.vo2,
        kcal_per_min=result.kcal_per_min,
        total_kcal=result.total_kcal,
    )
    return checked, result

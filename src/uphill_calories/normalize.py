from __future__ import annotations

import math

import structlog

from .models import (
    DISPLAY_DECIMALS,
    FIELD_ORDER,
    FIELD_RANGES,
    FieldError,
    FieldName,
    NormalizedInputs,
    NormalizeResult,
    RawInputs,
)
from .parsing import round_half_up
from .texts import field_error_message

log = structlog.get_logger(__name__)


def clamp(n: float, lower: float, upper: float) -> float:
    return min(max(n, lower), upper)


def _is_valid(field: FieldName, value: float) -> bool:
    if not math.isfinite(value):
        return False
    # A flat walk (0 %) is allowed, every other field must be strictly positive.
    if field == "grade":
        return value >= 0
    return value > 0


def validate(raw: RawInputs, lang: str = "fr") -> list[FieldError]:
    """Check every field and collect one error per invalid field."""
    values = raw.by_field()
    return [
        FieldError(field=name, message=field_error_message(name, lang))
        for name in FIELD_ORDER
        if not _is_valid(name, values[name])
    ]


def normalize(raw: RawInputs, lang: str = "fr") -> NormalizeResult:
    """Validate raw inputs, then clamp them into the supported domain.

    Out-of-range values that are finite and positive are not errors: they
    are moved to the nearest bound and reported in ``adjusted``.
    """
    errors = validate(raw, lang)
    if errors:
        log.debug("inputs_rejected", fields=[e.field for e in errors])
        return NormalizeResult(ok=False, inputs=None, errors=errors)

    values = raw.by_field()
    clamped = {name: clamp(values[name], *FIELD_RANGES[name]) for name in FIELD_ORDER}
    adjusted = [name for name in FIELD_ORDER if clamped[name] != values[name]]
    if adjusted:
        log.info("inputs_clamped", fields=adjusted)

    inputs = NormalizedInputs(
        weight_kg=clamped["weight"],
        speed_kmh=clamped["speed"],
        grade_percent=clamped["grade"],
        duration_min=clamped["duration"],
    )
    return NormalizeResult(ok=True, inputs=inputs, adjusted=adjusted)


def display_inputs(inputs: NormalizedInputs) -> dict[FieldName, float | int]:
    """Clamped values rounded the way they are shown back to the user."""
    shown: dict[FieldName, float | int] = {}
    for name, value in inputs.by_field().items():
        decimals = DISPLAY_DECIMALS[name]
        rounded = round_half_up(value, decimals)
        shown[name] = int(rounded) if decimals == 0 else rounded
    return shown

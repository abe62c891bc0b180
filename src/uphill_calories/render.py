from __future__ import annotations

from typing import Any

from .models import EstimateResult, FieldError, NormalizedInputs, NormalizeResult
from .normalize import display_inputs
from .parsing import round_half_up
from .texts import label, method_text


def rounded_result(result: EstimateResult) -> dict[str, float | int]:
    return {
        "total_kcal": int(round_half_up(result.total_kcal, 0)),
        "kcal_per_min": round_half_up(result.kcal_per_min, 1),
        "vo2": round_half_up(result.vo2, 1),
    }


def format_errors(errors: list[FieldError], lang: str = "fr") -> str:
    return " ".join([label("error_prefix", lang), *(e.message for e in errors)])


def format_inputs(inputs: NormalizedInputs, lang: str = "fr") -> str:
    shown = display_inputs(inputs)
    lines = [label("inputs_used", lang)]
    lines.extend(f"  {label(name, lang)}: {value}" for name, value in shown.items())
    return "\n".join(lines)


def format_result(
    inputs: NormalizedInputs,
    result: EstimateResult,
    lang: str = "fr",
    with_method: bool = True,
) -> str:
    shown = rounded_result(result)
    parts = [
        format_inputs(inputs, lang),
        "",
        label("result_title", lang),
        label("total", lang).format(kcal=shown["total_kcal"]),
        label("per_min", lang).format(kcal_per_min=shown["kcal_per_min"]),
        "",
        label("details", lang),
        label("vo2", lang).format(vo2=shown["vo2"]),
        label("assumptions", lang),
    ]
    if with_method:
        parts.extend(["", label("method_title", lang), "", method_text(lang)])
    return "\n".join(parts)


def result_payload(checked: NormalizeResult, result: EstimateResult | None) -> dict[str, Any]:
    """JSON-ready view of a calculation."""
    if not checked.ok or checked.inputs is None or result is None:
        return {"errors": [{"field": e.field, "message": e.message} for e in checked.errors]}
    return {
        "inputs": display_inputs(checked.inputs),
        "adjusted": list(checked.adjusted),
        **rounded_result(result),
    }

import pytest

from uphill_calories.energy import acsm_walking_vo2, calculate, estimate, kmh_to_m_per_min
from uphill_calories.models import NormalizedInputs, RawInputs
from uphill_calories.render import rounded_result


def _inputs(weight_kg: float = 70.0, speed_kmh: float = 5.0, grade_percent: float = 10.0, duration_min: float = 30.0) -> NormalizedInputs:
    return NormalizedInputs(
        weight_kg=weight_kg,
        speed_kmh=speed_kmh,
        grade_percent=grade_percent,
        duration_min=duration_min,
    )


def test_reference_scenario() -> None:
    result = estimate(_inputs())
    assert kmh_to_m_per_min(5.0) == pytest.approx(83.3333, rel=1e-5)
    assert result.vo2 == pytest.approx(26.8333, rel=1e-5)
    assert result.kcal_per_min == pytest.approx(9.3917, rel=1e-4)
    assert result.total_kcal == pytest.approx(281.75, rel=1e-9)
    assert rounded_result(result) == {"total_kcal": 282, "kcal_per_min": 9.4, "vo2": 26.8}


def test_flat_walk_uses_horizontal_component_only() -> None:
    assert acsm_walking_vo2(100.0, 0.0) == pytest.approx(13.5)


@pytest.mark.parametrize(("low", "high"), [(0.5, 1.0), (3.0, 3.1), (5.0, 6.5), (8.9, 9.0)])
def test_total_kcal_increases_with_speed(low: float, high: float) -> None:
    assert estimate(_inputs(speed_kmh=low)).total_kcal < estimate(_inputs(speed_kmh=high)).total_kcal


@pytest.mark.parametrize(("low", "high"), [(0.0, 0.1), (5.0, 8.0), (29.5, 30.0)])
def test_total_kcal_increases_with_grade(low: float, high: float) -> None:
    assert estimate(_inputs(grade_percent=low)).total_kcal < estimate(_inputs(grade_percent=high)).total_kcal


@pytest.mark.parametrize("duration", [1.0, 7.0, 30.0, 45.5, 300.0])
def test_total_kcal_is_linear_in_duration(duration: float) -> None:
    single = estimate(_inputs(duration_min=duration)).total_kcal
    double = estimate(_inputs(duration_min=2 * duration)).total_kcal
    assert double == 2 * single


def test_heavier_weight_is_clamped_before_estimate() -> None:
    checked, result = calculate(RawInputs(300.0, 5.0, 10.0, 30.0))
    assert checked.adjusted == ["weight"]
    assert result == estimate(_inputs(weight_kg=250.0))


def test_calculate_returns_no_estimate_on_invalid_input() -> None:
    checked, result = calculate(RawInputs(70.0, float("nan"), 10.0, 30.0))
    assert result is None
    assert [e.field for e in checked.errors] == ["speed"]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .parsing import parse_number

FieldName = Literal["weight", "speed", "grade", "duration"]

FIELD_ORDER: tuple[FieldName, ...] = ("weight", "speed", "grade", "duration")

# Supported physiological domain for the ACSM walking equation.
FIELD_RANGES: dict[FieldName, tuple[float, float]] = {
    "weight": (20.0, 250.0),
    "speed": (0.5, 9.0),
    "grade": (0.0, 30.0),
    "duration": (1.0, 600.0),
}

DISPLAY_DECIMALS: dict[FieldName, int] = {
    "weight": 1,
    "speed": 1,
    "grade": 1,
    "duration": 0,
}


@dataclass(frozen=True)
class RawInputs:
    """Values as entered by the user, not validated."""

    weight_kg: float
    speed_kmh: float
    grade_percent: float
    duration_min: float

    @classmethod
    def from_text(cls, weight: str, speed: str, grade: str, duration: str) -> RawInputs:
        return cls(
            weight_kg=parse_number(weight),
            speed_kmh=parse_number(speed),
            grade_percent=parse_number(grade),
            duration_min=parse_number(duration),
        )

    def by_field(self) -> dict[FieldName, float]:
        return {
            "weight": self.weight_kg,
            "speed": self.speed_kmh,
            "grade": self.grade_percent,
            "duration": self.duration_min,
        }


@dataclass(frozen=True)
class NormalizedInputs:
    """Finite values clamped into FIELD_RANGES."""

    weight_kg: float
    speed_kmh: float
    grade_percent: float
    duration_min: float

    def as_raw(self) -> RawInputs:
        return RawInputs(
            weight_kg=self.weight_kg,
            speed_kmh=self.speed_kmh,
            grade_percent=self.grade_percent,
            duration_min=self.duration_min,
        )

    def by_field(self) -> dict[FieldName, float]:
        return self.as_raw().by_field()


@dataclass(frozen=True)
class EstimateResult:
    vo2: float
    kcal_per_min: float
    total_kcal: float


@dataclass(frozen=True)
class FieldError:
    field: FieldName
    message: str


@dataclass(frozen=True)
class NormalizeResult:
    ok: bool
    inputs: NormalizedInputs | None
    errors: list[FieldError] = field(default_factory=list)
    adjusted: list[FieldName] = field(default_factory=list)

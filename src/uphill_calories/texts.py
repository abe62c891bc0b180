from __future__ import annotations

from typing import Literal

Lang = Literal["fr", "en"]

SUPPORTED_LANGS: tuple[Lang, ...] = ("fr", "en")

FIELD_ERRORS: dict[str, dict[str, str]] = {
    "fr": {
        "weight": "Poids invalide.",
        "speed": "Vitesse invalide.",
        "grade": "Inclinaison invalide.",
        "duration": "Durée invalide.",
    },
    "en": {
        "weight": "Invalid weight.",
        "speed": "Invalid speed.",
        "grade": "Invalid grade.",
        "duration": "Invalid duration.",
    },
}

LABELS: dict[str, dict[str, str]] = {
    "fr": {
        "title": "Calories brûlées en marche en montée",
        "weight": "Poids (kg)",
        "speed": "Vitesse (km/h)",
        "grade": "Inclinaison (%)",
        "duration": "Durée (min)",
        "calculate": "Calculer",
        "error_prefix": "Erreur :",
        "result_title": "Résultat (estimation)",
        "total": "{kcal} kcal brûlées au total",
        "per_min": "{kcal_per_min} kcal / min",
        "details": "Détails",
        "vo2": "VO₂ estimée : {vo2} ml/kg/min",
        "assumptions": "Hypothèses : équation de marche ACSM + 1 L d'O₂ ≈ 5 kcal.",
        "inputs_used": "Valeurs utilisées",
        "method_title": "Comment est-ce calculé ?",
    },
    "en": {
        "title": "Calories burned walking uphill",
        "weight": "Weight (kg)",
        "speed": "Speed (km/h)",
        "grade": "Incline (%)",
        "duration": "Duration (min)",
        "calculate": "Calculate",
        "error_prefix": "Error:",
        "result_title": "Result (estimate)",
        "total": "{kcal} kcal total burned",
        "per_min": "{kcal_per_min} kcal / min",
        "details": "Details",
        "vo2": "Estimated VO₂: {vo2} ml/kg/min",
        "assumptions": "Assumptions: ACSM walking equation + 1 L O₂ ≈ 5 kcal.",
        "inputs_used": "Values used",
        "method_title": "How is this calculated?",
    },
}

# Static explanatory block, independent of the inputs.
METHOD: dict[str, str] = {
    "en": """\
This calculator uses the ACSM walking equation
to estimate oxygen consumption (VO₂) during uphill walking.

VO₂ (ml/kg/min) =
0.1 × speed (m/min)
+ 1.8 × speed (m/min) × grade
+ 3.5

Calories burned per minute are then estimated with:

Calories / min =
(VO₂ × weight ÷ 1000) × 5

- Speed is converted from km/h to m/min
- Grade is incline as a fraction (8% → 0.08)
- Weight is in kilograms
- 5 kcal ≈ energy from 1 liter of oxygen

Note: This calculator is intended for walking speeds
(up to ~9 km/h). Higher speeds are considered running and require
a different equation.""",
    "fr": """\
Ce calculateur utilise l'équation de marche de l'ACSM
pour estimer la consommation d'oxygène (VO₂) lors de la marche en montée.

VO₂ (ml/kg/min) =
0.1 × vitesse (m/min)
+ 1.8 × vitesse (m/min) × pente
+ 3.5

Les calories brûlées par minute sont ensuite estimées avec :

Calories / min =
(VO₂ × poids ÷ 1000) × 5

- La vitesse est convertie de km/h en m/min
- La pente est l'inclinaison en fraction (8 % → 0.08)
- Le poids est en kilogrammes
- 5 kcal ≈ énergie fournie par 1 litre d'oxygène

Remarque : ce calculateur est prévu pour des vitesses de marche
(jusqu'à ~9 km/h). Au-delà, il s'agit de course, qui nécessite
une autre équation.""",
}


def check_lang(lang: str) -> Lang:
    lowered = lang.strip().lower()
    if lowered not in SUPPORTED_LANGS:
        raise ValueError(f"lang must be one of: {', '.join(SUPPORTED_LANGS)}")
    return lowered  # type: ignore[return-value]


def field_error_message(field: str, lang: str = "fr") -> str:
    return FIELD_ERRORS[check_lang(lang)][field]


def label(key: str, lang: str = "fr") -> str:
    return LABELS[check_lang(lang)][key]


def method_text(lang: str = "fr") -> str:
    return METHOD[check_lang(lang)]

import pytest

from uphill_calories.config import Settings, load_settings
from uphill_calories.texts import field_error_message, label


def test_defaults() -> None:
    assert load_settings({}) == Settings(lang="fr", verbose=False, log_json=False)


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "UPHILL_CALORIES_LANG": "EN",
            "UPHILL_CALORIES_VERBOSE": "yes",
            "UPHILL_CALORIES_LOG_JSON": "1",
        }
    )
    assert settings == Settings(lang="en", verbose=True, log_json=True)


def test_unknown_language() -> None:
    with pytest.raises(ValueError):
        load_settings({"UPHILL_CALORIES_LANG": "de"})
    with pytest.raises(ValueError):
        label("title", "de")


def test_field_error_message() -> None:
    assert field_error_message("duration") == "Durée invalide."
    assert field_error_message("speed", "en") == "Invalid speed."

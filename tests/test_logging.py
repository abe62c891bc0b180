import json
import logging
from collections.abc import Generator

import pytest
import structlog

from uphill_calories.logging import configure_logging
from uphill_calories.models import RawInputs
from uphill_calories.normalize import normalize


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("uphill_calories")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.reset_defaults()


def test_verbose_enables_debug() -> None:
    configure_logging(verbose=True)
    assert logging.getLogger("uphill_calories").level == logging.DEBUG
    assert logging.getLogger().level == logging.WARNING


def test_non_verbose_sets_warning() -> None:
    configure_logging(verbose=False)
    assert logging.getLogger("uphill_calories").level == logging.WARNING


def test_clamping_is_logged_as_json(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=True, log_json=True)
    normalize(RawInputs(300.0, 5.0, 10.0, 30.0))
    lines = [json.loads(line) for line in capfd.readouterr().err.strip().splitlines()]
    clamped = [line for line in lines if line["event"] == "inputs_clamped"]
    assert clamped
    assert clamped[0]["fields"] == ["weight"]
    assert clamped[0]["logger"] == "uphill_calories.normalize"
    assert clamped[0]["level"] == "info"


def test_rejection_hidden_when_not_verbose(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=False, log_json=True)
    normalize(RawInputs(-1.0, 5.0, 10.0, 30.0))
    assert "inputs_rejected" not in capfd.readouterr().err

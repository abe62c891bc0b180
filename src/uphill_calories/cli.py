import json
from typing import Optional

import typer

from .config import load_settings
from .energy import calculate
from .logging import configure_logging
from .models import RawInputs
from .render import format_errors, format_result, result_payload
from .texts import check_lang, method_text

app = typer.Typer(help="Calories burned walking uphill (ACSM walking equation)")


def _resolve_lang(lang: Optional[str]) -> str:
    if lang is None:
        return load_settings().lang
    try:
        return check_lang(lang)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--lang") from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logs on stderr"),
    log_json: bool = typer.Option(False, "--log-json", help="JSON log lines on stderr"),
) -> None:
    settings = load_settings()
    configure_logging(verbose=verbose or settings.verbose, log_json=log_json or settings.log_json)


@app.command()
def estimate(
    weight: str = typer.Option(..., "--weight", help="Body weight in kg (20-250)"),
    speed: str = typer.Option(..., "--speed", help="Walking speed in km/h (0.5-9)"),
    grade: str = typer.Option(..., "--grade", help="Incline in percent (0-30)"),
    duration: str = typer.Option(..., "--duration", help="Duration in minutes (1-600)"),
    lang: Optional[str] = typer.Option(None, "--lang", help="Output language: fr, en"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object"),
    no_method: bool = typer.Option(False, "--no-method", help="Skip the explanation block"),
) -> None:
    """Estimate VO2, kcal/min and total kcal for an uphill walk."""
    language = _resolve_lang(lang)
    raw = RawInputs.from_text(weight, speed, grade, duration)
    checked, result = calculate(raw, language)

    if as_json:
        typer.echo(json.dumps(result_payload(checked, result), ensure_ascii=False))
        if result is None:
            raise typer.Exit(code=1)
        return

    if checked.inputs is None or result is None:
        typer.echo(format_errors(checked.errors, language), err=True)
        raise typer.Exit(code=1)
    typer.echo(format_result(checked.inputs, result, language, with_method=not no_method))


@app.command()
def method(
    lang: Optional[str] = typer.Option(None, "--lang", help="Output language: fr, en"),
) -> None:
    """Explain how the estimate is calculated."""
    typer.echo(method_text(_resolve_lang(lang)))


if __name__ == "__main__":
    app()

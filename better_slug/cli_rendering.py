"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
slug results, detection output, locale listings and benchmark summaries.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import ValidationError
from .models.datatypes import LanguageInfo, SlugResult
from .telemetry.timing import TimingStats


def echo_command_error(command_name: str, exc: Exception) -> None:
    """Print concise red diagnostics for one failure."""

    typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    if isinstance(exc, ValidationError):
        typer.secho(f"Field: {exc.field}", fg=typer.colors.YELLOW, err=True)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    echo_command_error(command_name, exc)
    raise typer.Exit(code=1) from exc


def to_json(payload: object) -> str:
    """Serialize a payload deterministically without escaping non-ASCII text."""

    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def echo_result(result: SlugResult, *, as_json: bool = False) -> None:
    """Print one slug, or its JSON record."""

    if as_json:
        typer.echo(to_json(result.to_dict()))
    else:
        typer.echo(result.slug)


def render_results(results: list[SlugResult], *, as_json: bool = False) -> str:
    """Render batch results as slug lines or one JSON array."""

    if as_json:
        return json.dumps(
            [result.to_dict() for result in results],
            ensure_ascii=False,
            sort_keys=True,
            indent=2,
        )
    return "\n".join(result.slug for result in results)


def echo_detection(locale: str | None, rtl: bool, *, as_json: bool = False) -> None:
    """Print the detected locale and writing direction."""

    direction = "rtl" if rtl else "ltr"
    if as_json:
        typer.echo(to_json({"locale": locale, "direction": direction}))
        return
    typer.echo(f"Locale: {locale or 'unknown'}")
    typer.echo(f"Direction: {direction}")


def echo_locale_rows(rows: list[tuple[LanguageInfo, bool]]) -> None:
    """Print one aligned row per supported locale."""

    for info, has_map in rows:
        charmap_label = "charmap" if has_map else "-"
        typer.echo(
            f"{info.code:<3} {info.direction:<3} {charmap_label:<7} "
            f"{info.name} ({info.native_name})"
        )


def echo_benchmark(name: str, stats: TimingStats | None) -> None:
    """Print timing stats for a benchmarked command to stderr."""

    if stats is None:
        typer.echo(f"[benchmark] {name}: no samples", err=True)
        return
    typer.echo(
        f"[benchmark] {name}: count={stats.count} total_ms={stats.total:.3f} "
        f"average_ms={stats.average:.3f} min_ms={stats.minimum:.3f} "
        f"max_ms={stats.maximum:.3f}",
        err=True,
    )

"""Adapt a ServiceResult to the requested output mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from formgrid.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from formgrid.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """JSON for machines, a one-liner for --quiet, Rich text otherwise."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)

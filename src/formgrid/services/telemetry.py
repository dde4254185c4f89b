"""Operation timing for service calls.

Disabled by default. When enabled via --verbose, ``@traced`` times each
service operation, logs a ``span.complete`` event and merges the timing
into ``ServiceResult.meta``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import ParamSpec, TypeVar

import structlog

from formgrid.services.result import ServiceResult

log = structlog.get_logger("formgrid.telemetry")

_enabled: ContextVar[bool] = ContextVar("_telemetry_enabled", default=False)

_P = ParamSpec("_P")
_R = TypeVar("_R")


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def telemetry_enabled() -> bool:
    return _enabled.get()


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and record the span in ServiceResult.meta."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not telemetry_enabled():
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            log.debug("span.complete", span_name=func.__qualname__, ok=False)
            raise
        duration_ms = round((time.perf_counter() - start) * 1000, 3)

        ok = True
        if isinstance(result, ServiceResult):
            ok = result.ok
            span = {"name": func.__qualname__, "duration_ms": duration_ms}
            meta = {**(result.meta or {}), "telemetry": span}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
        log.debug("span.complete", span_name=func.__qualname__, duration_ms=duration_ms, ok=ok)
        return result

    return wrapper

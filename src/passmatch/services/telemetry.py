"""Timing telemetry — the @traced decorator.

Disabled by default (a single ContextVar.get per call). When enabled via
--verbose, each traced service call is timed and the duration is merged
into ServiceResult.meta.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import Any, ParamSpec, TypeVar

from passmatch.config.logging import get_logger
from passmatch.services.result import ServiceResult

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)

_P = ParamSpec("_P")
_R = TypeVar("_R")


def _inject_meta(result: ServiceResult, name: str, duration_ms: float) -> ServiceResult:
    """Return a copy of *result* with timing merged into meta (it is frozen)."""
    telemetry: dict[str, Any] = {"name": name, "duration_ms": round(duration_ms, 2)}
    merged = {**(result.meta or {}), "telemetry": telemetry}
    return result.model_copy(update={"meta": merged})


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:
    """Decorator: time a service method and inject the span into ServiceResult.meta."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _verbose_enabled.get():
            return func(*args, **kwargs)

        log = get_logger("telemetry")
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            duration = (time.perf_counter() - start) * 1000
            log.debug(
                "span.complete", span_name=func.__qualname__, duration_ms=round(duration, 2), ok=False
            )
            raise

        duration = (time.perf_counter() - start) * 1000
        ok = True
        if isinstance(result, ServiceResult):
            ok = result.ok
            result = _inject_meta(result, func.__qualname__, duration)  # type: ignore[assignment]
        log.debug(
            "span.complete", span_name=func.__qualname__, duration_ms=round(duration, 2), ok=ok
        )
        return result

    return wrapper


def enable_telemetry() -> None:
    """Enable timing telemetry (called by AppContext when verbose)."""
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    """Disable timing telemetry."""
    _verbose_enabled.set(False)

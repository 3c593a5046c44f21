"""Observability helpers: injected event reporters and tool instrumentation."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from functools import wraps
from typing import Any, Callable, Dict, List, Mapping, ParamSpec, Tuple, TypeVar

from pydantic import BaseModel, ValidationError

from coverage_app.logging_config import (
    ensure_correlation_id,
    get_logger,
    log_event,
    redact_for_log,
)

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


class Reporter(ABC):
    """Receives structured events emitted while coverage is computed."""

    @abstractmethod
    def record(self, event: str, payload: Mapping[str, Any]) -> None:
        """Record a single event."""


class NullReporter(Reporter):
    def record(self, event: str, payload: Mapping[str, Any]) -> None:
        return None


class LoggingReporter(Reporter):
    """Forward events to the structured JSON logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self.logger = logger or get_logger("coverage.events")
        self.level = level

    def record(self, event: str, payload: Mapping[str, Any]) -> None:
        log_event(self.logger, self.level, event, **dict(payload))


class InMemoryReporter(Reporter):
    """Collect events in memory, e.g. for diagnostics panels or tests."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._events: List[Tuple[str, Dict[str, Any]]] = []

    def record(self, event: str, payload: Mapping[str, Any]) -> None:
        with self._lock:
            self._events.append((event, dict(payload)))

    @property
    def events(self) -> List[Tuple[str, Dict[str, Any]]]:
        with self._lock:
            return list(self._events)

    def named(self, event: str) -> List[Dict[str, Any]]:
        return [payload for name, payload in self.events if name == event]


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        if isinstance(value, (list, tuple)):
            preview[key] = f"{len(value)} entries"
        else:
            preview[key] = value
    return redact_for_log(preview)


def instrument_tool(
    tool_name: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap a callable to emit structured logs and optional input validation."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            start = time.perf_counter()

            if input_model:
                try:
                    validated = input_model.model_validate(kwargs)
                    kwargs = validated.model_dump()
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "tool_validation_failed",
                        tool=tool_name,
                        correlation_id=correlation_id,
                        errors=redact_for_log(exc.errors(include_url=False, include_context=False)),
                    )
                    if on_validation_error:
                        return on_validation_error(exc)
                    raise

            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_started",
                tool=tool_name,
                correlation_id=correlation_id,
                kwargs=_preview_kwargs(kwargs),
            )
            try:
                result = func(*args, **kwargs)
            except Exception:
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "tool_call_failed",
                    tool=tool_name,
                    correlation_id=correlation_id,
                    duration_ms=duration_ms,
                    exc_info=True,
                )
                raise
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_completed",
                tool=tool_name,
                correlation_id=correlation_id,
                duration_ms=duration_ms,
            )
            return result

        return wrapper

    return decorator


__all__ = [
    "Reporter",
    "NullReporter",
    "LoggingReporter",
    "InMemoryReporter",
    "instrument_tool",
]

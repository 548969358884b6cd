"""Structured logging for the editor, backed by telelog.

Everything that logs goes through here. Settings come from ``LINED_*``
environment variables:

``LINED_LOG_LEVEL``     minimum level (default ``INFO``)
``LINED_LOG_FILE``      append records to this file
``LINED_LOG_CONSOLE``   also write to stderr; off by default because the
                        Textual host owns the terminal
``LINED_LOG_JSON``      JSON records instead of text
``LINED_LOG_BUFFERED``  buffer writes (size from ``LINED_LOG_BUFFER_SIZE``)
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LINED_"
DEFAULT_LOGGER_NAME = "lined"

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    raw = _env(name)
    return raw is not None and raw.lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


@dataclass(slots=True)
class TelemetrySettings:
    level: str = "INFO"
    log_file: str = ""
    console: bool = False
    json: bool = False
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        buffer_size = None
        if _env_flag("LOG_BUFFERED"):
            try:
                buffer_size = int(_env("LOG_BUFFER_SIZE") or "2048")
            except ValueError:
                buffer_size = 2048
        return cls(
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            log_file=_env("LOG_FILE") or "",
            console=_env_flag("LOG_CONSOLE"),
            json=_env_flag("LOG_JSON"),
            buffer_size=buffer_size,
        )

    def build(self) -> Any:
        """Translate the settings into a ``telelog.Config`` with profiling on."""

        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(not _env_flag("NO_COLOR"))
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


def configure(settings: Optional[TelemetrySettings] = None) -> None:
    """Rebuild the telelog configuration and drop cached loggers."""

    global _CONFIG
    _CONFIG = (settings or TelemetrySettings.from_env()).build()
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` called ``name`` (default ``lined``)."""

    if _CONFIG is None:
        configure()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(payload))
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class Span:
    """Yielded by :func:`span`; metadata added here rides along on failure."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            payload["component"] = self.component
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[Span]:
    """Profile a block, optionally tracked as a telelog component.

    ``component=True`` uses ``name`` as the component id. ``metadata`` is
    pushed as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = Span(log, name, component_name, dict(context))
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "TelemetrySettings",
    "Span",
    "configure",
    "get_logger",
    "record_event",
    "span",
]

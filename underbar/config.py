import json
import logging
import threading
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Optional, Tuple

from .types import KeyFunction, Scheduler

logger = logging.getLogger(__name__)


def _stringify_keys(value: Any) -> Any:
    """copy of value with every dict key turned into a string, as json itself does"""
    if isinstance(value, dict):
        return {str(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify_keys(v) for v in value]
    return value


def json_key(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> str:
    """deterministic cache key: json of the argument list, dict keys sorted, repr for the rest"""
    # keys are stringified first so dicts mixing int and str keys can still be sorted
    payload = _stringify_keys([list(args), kwargs])
    return json.dumps(payload, sort_keys=True, default=repr)


def timer_schedule(callback: Callable[[], Any], duration_ms: float) -> threading.Timer:
    """run callback on a daemon timer thread no earlier than duration_ms from now"""

    def fire():
        try:
            callback()
        except Exception as e:
            # nobody is waiting on a delayed call, so the log is the only place this can go
            logger.error(f"delayed call {getattr(callback, '__name__', callback)!r} failed: {e}", exc_info=True)

    timer = threading.Timer(max(duration_ms, 0) / 1000.0, fire)
    timer.daemon = True
    timer.start()
    return timer


@dataclass
class Settings:
    """process-wide hooks for the decorators and random algorithms"""
    key_function: KeyFunction = json_key
    scheduler: Scheduler = timer_schedule
    random_state: Optional[int] = None


_settings = Settings()


def get_settings() -> Settings:
    return _settings


def configure(**overrides: Any) -> Settings:
    """replace selected settings. unknown names raise valueerror."""
    global _settings
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"unknown settings: {', '.join(sorted(unknown))}")
    for name in ('key_function', 'scheduler'):
        if name in overrides and not callable(overrides[name]):
            raise TypeError(f"{name} must be callable, got {type(overrides[name]).__name__}")

    _settings = replace(_settings, **overrides)
    logger.debug(f"settings updated: {sorted(overrides)}")
    return _settings


def reset() -> Settings:
    """restore the default settings"""
    global _settings
    _settings = Settings()
    return _settings

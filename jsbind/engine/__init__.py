"""Script engine adapters."""

from .base import (
    DEFAULT_PRELUDE,
    EngineError,
    JSValue,
    ObjectRef,
    ScriptEngine,
)


def create_engine() -> ScriptEngine:
    """Return the default V8-backed engine."""
    from .mini_racer import MiniRacerEngine

    return MiniRacerEngine()


__all__ = [
    "DEFAULT_PRELUDE",
    "EngineError",
    "JSValue",
    "ObjectRef",
    "ScriptEngine",
    "create_engine",
]

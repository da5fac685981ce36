"""Abstract capability the classifier consumes from a JavaScript engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional

from ..logging import get_logger

# Browser libraries attach their exports to ``self`` or ``window``.
DEFAULT_PRELUDE = """
var self = globalThis;
var window = globalThis;
"""

FUNCTION = "function"
STRING = "string"
BOOLEAN = "boolean"
NUMBER = "number"
UNDEFINED = "undefined"
NULL = "null"
ARRAY = "array"
OBJECT = "object"
OTHER = "other"

PRIMITIVE_KINDS = frozenset({STRING, BOOLEAN, NUMBER, UNDEFINED, NULL})
VALUE_KINDS = PRIMITIVE_KINDS | {FUNCTION, ARRAY, OBJECT, OTHER}


class EngineError(RuntimeError):
    """Raised when the engine cannot evaluate source or read a property."""


@dataclass(frozen=True)
class ObjectRef:
    """Identity handle for an object living inside the engine."""

    handle: int


@dataclass(frozen=True)
class JSValue:
    """Snapshot of a property value as seen through the engine."""

    kind: str
    value: Any = None
    ref: Optional[ObjectRef] = None
    class_name: str = ""

    def __post_init__(self) -> None:
        if self.kind not in VALUE_KINDS:
            raise ValueError(f"Unknown value kind {self.kind!r}")

    def is_function(self) -> bool:
        return self.kind == FUNCTION

    def is_primitive(self) -> bool:
        return self.kind in PRIMITIVE_KINDS

    def is_array(self) -> bool:
        return self.kind == ARRAY

    def is_object(self) -> bool:
        return self.ref is not None


class ScriptEngine(ABC):
    """Black-box access to a JavaScript object graph."""

    def __init__(self) -> None:
        self.logger = get_logger("engine")

    @abstractmethod
    def run(self, source: str, *, filename: str = "<script>") -> None:
        """Evaluate ``source`` in the global scope."""

    @abstractmethod
    def lookup(self, name: str) -> ObjectRef:
        """Resolve a global binding to an object handle."""

    @abstractmethod
    def keys(self, ref: ObjectRef) -> List[str]:
        """Return the object's own enumerable keys in enumeration order."""

    @abstractmethod
    def get(self, ref: ObjectRef, key: str) -> JSValue:
        """Read one property of the object."""

    @abstractmethod
    def source_text(self, value: JSValue) -> str:
        """Return the textual source of a function value."""

    def bootstrap(self, preludes: Iterable[Path] = ()) -> None:
        """Evaluate the built-in prelude followed by any extra prelude files."""
        self.run(DEFAULT_PRELUDE, filename="<prelude>")
        for path in preludes:
            self.run_file(Path(path))

    def run_file(self, path: Path) -> None:
        source = path.read_text(encoding="utf-8")
        self.logger.debug("Evaluating %s (%d bytes)", path, len(source))
        self.run(source, filename=str(path))

    def close(self) -> None:
        """Release engine resources."""


__all__ = [
    "ARRAY",
    "BOOLEAN",
    "DEFAULT_PRELUDE",
    "EngineError",
    "FUNCTION",
    "JSValue",
    "NULL",
    "NUMBER",
    "OBJECT",
    "OTHER",
    "ObjectRef",
    "STRING",
    "ScriptEngine",
    "UNDEFINED",
]

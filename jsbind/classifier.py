"""Walks a JavaScript object graph and synthesizes binding elements."""

from __future__ import annotations

from enum import Enum
from typing import Set

from .binding import Binding
from .elements import Method, Struct, Variable
from .engine import EngineError, JSValue, ObjectRef, ScriptEngine
from .engine.base import BOOLEAN, NUMBER, STRING as JS_STRING
from .extract import SignatureExtractor
from .logging import get_logger
from .render import ANY, ANY_SLICE, BOOL, FLOAT64, STRING
from .sanitize import is_capitalized

CONSTRUCTOR_SLOT = "constructor"

_SCALAR_TYPES = {
    JS_STRING: STRING,
    BOOLEAN: BOOL,
    NUMBER: FLOAT64,
}


class PropertyKind(Enum):
    """Closed set of shapes a property can take."""

    CONSTRUCTOR = "constructor"
    METHOD = "method"
    SCALAR = "scalar"
    ARRAY = "array"
    OBJECT = "object"
    OPAQUE = "opaque"


def classify_property(key: str, value: JSValue) -> PropertyKind:
    """Decide how a single property is bound."""
    if value.is_function():
        if is_capitalized(key):
            return PropertyKind.CONSTRUCTOR
        return PropertyKind.METHOD
    if value.is_primitive():
        return PropertyKind.SCALAR
    if value.is_array():
        return PropertyKind.ARRAY
    if value.is_object():
        return PropertyKind.OBJECT
    return PropertyKind.OPAQUE


def scalar_type(value: JSValue) -> str:
    return _SCALAR_TYPES.get(value.kind, ANY)


class Classifier:
    """Appends one Struct per visited object, plus its constructors and methods.

    Keys are visited in the engine's enumeration order and nested objects are
    flattened into sibling elements, so the binding's element order is fully
    determined by the input graph. With ``guard_cycles`` enabled an object that
    is already on the current path (an ancestor) is not descended into again;
    shared references that are not cycles are classified under every key.
    """

    def __init__(
        self,
        binding: Binding,
        engine: ScriptEngine,
        extractor: SignatureExtractor,
        *,
        guard_cycles: bool = True,
    ) -> None:
        self.binding = binding
        self.engine = engine
        self.extractor = extractor
        self.guard_cycles = guard_cycles
        self._ancestors: Set[ObjectRef] = set()
        self.logger = get_logger("classifier")

    def classify(self, name: str, ref: ObjectRef) -> None:
        if self._is_cycle(ref):
            self.logger.debug("Skipping %s: object is its own ancestor", name)
            return

        self._ancestors.add(ref)
        try:
            self._classify_keys(name, ref)
        finally:
            self._ancestors.discard(ref)

    def _is_cycle(self, ref: ObjectRef) -> bool:
        return self.guard_cycles and ref in self._ancestors

    def _classify_keys(self, name: str, ref: ObjectRef) -> None:
        struct = Struct(name)
        for key in self.engine.keys(ref):
            value = self.engine.get(ref, key)
            kind = classify_property(key, value)
            self.logger.debug(
                "%s.%s -> %s (%s)", name, key, kind.value, value.class_name or value.kind
            )

            if kind is PropertyKind.CONSTRUCTOR:
                self._add_constructor(key, value)
            elif kind is PropertyKind.METHOD:
                if key == CONSTRUCTOR_SLOT:
                    continue
                self._add_method(struct, key, value)
            elif kind is PropertyKind.SCALAR:
                struct.fields.append(Variable(key, scalar_type(value)))
            elif kind is PropertyKind.ARRAY:
                struct.fields.append(Variable(key, ANY_SLICE))
            elif kind is PropertyKind.OBJECT and value.ref is not None:
                self.classify(key, value.ref)
            else:
                struct.fields.append(Variable(key, ANY))

        self.binding.add_element(struct)

    def _add_constructor(self, key: str, value: JSValue) -> None:
        source = self.engine.source_text(value)
        self.binding.add_element(
            Method(
                name=key,
                owner=None,
                params=self.extractor.params(source),
                returns=None,
                is_constructor=True,
            )
        )

        if value.ref is None:
            raise EngineError(f"Constructor {key!r} has no object handle")
        prototype = self.engine.get(value.ref, "prototype")
        if prototype.ref is None or self._is_cycle(prototype.ref):
            # Arrow and bound functions carry no prototype; a prototype on the
            # current path still needs a struct for the constructor to return.
            self.binding.add_element(Struct(key))
            return
        self.classify(key, prototype.ref)

    def _add_method(self, struct: Struct, key: str, value: JSValue) -> None:
        source = self.engine.source_text(value)
        method = Method(
            name=key,
            owner=struct,
            params=self.extractor.params(source),
            returns=self.extractor.returns(source) or ANY,
        )
        struct.methods.append(method)
        self.binding.add_element(method)


__all__ = ["CONSTRUCTOR_SLOT", "Classifier", "PropertyKind", "classify_property", "scalar_type"]

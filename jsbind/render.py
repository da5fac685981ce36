"""Declaration rendering helpers shared by the element types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .elements import Element

STRING = "string"
BOOL = "bool"
FLOAT64 = "float64"
INT = "int"
ANY = "interface{}"
ANY_SLICE = "[]interface{}"

# Accessors available on *js.Object for converting a dynamic call result.
RETURN_ACCESSORS: Dict[str, str] = {
    FLOAT64: "Float",
    INT: "Int",
    STRING: "Str",
    ANY: "Interface",
}


class RenderError(RuntimeError):
    """Raised when an element cannot be rendered as valid Go source."""


def cast_return(expression: str, go_type: str) -> str:
    """Wrap ``expression`` in the accessor converting it to ``go_type``."""
    accessor = RETURN_ACCESSORS.get(go_type)
    if accessor is None:
        supported = ", ".join(RETURN_ACCESSORS)
        raise RenderError(
            f"Unsupported return type {go_type!r}; functions may only return {supported}"
        )
    return f"{expression}.{accessor}()"


def render(element: "Element") -> List[str]:
    """Render a single element to its declaration lines."""
    return element.text()


__all__ = [
    "ANY",
    "ANY_SLICE",
    "BOOL",
    "FLOAT64",
    "INT",
    "RETURN_ACCESSORS",
    "RenderError",
    "STRING",
    "cast_return",
    "render",
]

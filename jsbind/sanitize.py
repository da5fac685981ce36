"""Identifier escaping for names emitted into generated Go source."""

from __future__ import annotations

from typing import FrozenSet

ESCAPE_SUFFIX = "_"

GO_KEYWORDS: FrozenSet[str] = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

# GopherJS compiles the bindings back to JavaScript, so its reserved words are
# escaped as well.
JS_RESERVED: FrozenSet[str] = frozenset(
    {
        "class",
        "delete",
        "do",
        "enum",
        "export",
        "extends",
        "finally",
        "function",
        "in",
        "instanceof",
        "new",
        "super",
        "this",
        "throw",
        "try",
        "typeof",
        "void",
        "while",
        "with",
        "yield",
    }
)

RESERVED_WORDS: FrozenSet[str] = GO_KEYWORDS | JS_RESERVED


def sanitize_name(name: str) -> str:
    """Return ``name`` with the escape suffix appended when it is reserved."""
    if name in RESERVED_WORDS:
        return name + ESCAPE_SUFFIX
    return name


def capitalize(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    if not name:
        return name
    return name[:1].upper() + name[1:]


def is_capitalized(name: str) -> bool:
    return bool(name) and capitalize(name) == name


__all__ = [
    "ESCAPE_SUFFIX",
    "GO_KEYWORDS",
    "JS_RESERVED",
    "RESERVED_WORDS",
    "capitalize",
    "is_capitalized",
    "sanitize_name",
]

"""Contract for recovering call signatures from function source text."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..elements import VarList
from ..render import ANY, BOOL, FLOAT64, INT, STRING

_RETURN_TAG = re.compile(r"@returns?\s*\{\s*([^}]+?)\s*\}")
_LEADING_COMMENTS = re.compile(r"\s*(?:(?:/\*.*?\*/|//[^\n]*)\s*)*", re.DOTALL)

# JSDoc type names mapped onto the Go types the renderer understands.
_RETURN_TYPES: Dict[str, str] = {
    "string": STRING,
    "String": STRING,
    "number": FLOAT64,
    "Number": FLOAT64,
    "float": FLOAT64,
    "double": FLOAT64,
    "int": INT,
    "integer": INT,
    "boolean": BOOL,
    "Boolean": BOOL,
    "*": ANY,
    "any": ANY,
    "object": ANY,
    "Object": ANY,
}


class SignatureExtractor(ABC):
    """Recovers parameters and a declared return type from function source."""

    name = "base"

    @abstractmethod
    def params(self, source: str) -> VarList:
        """Return the ordered parameter list, every entry typed as opaque."""

    def returns(self, source: str) -> Optional[str]:
        """Return the Go type declared by a ``@return {T}`` tag, if any.

        Only comments ahead of the first statement of the function body count,
        so annotations on nested helpers are ignored.
        """
        return declared_return_type(source)


def declared_return_type(source: str) -> Optional[str]:
    return return_type_from_comments(leading_body_comments(source))


def leading_body_comments(source: str) -> str:
    """Return the comments opening the body that follows the parameter list."""
    close = source.find(")")
    if close < 0:
        return ""
    body = source.find("{", close)
    if body < 0:
        return ""
    match = _LEADING_COMMENTS.match(source, body + 1)
    return match.group(0) if match else ""


def return_type_from_comments(comments: str) -> Optional[str]:
    match = _RETURN_TAG.search(comments)
    if match is None:
        return None
    declared = match.group(1)
    return _RETURN_TYPES.get(declared, declared)


__all__ = [
    "SignatureExtractor",
    "declared_return_type",
    "leading_body_comments",
    "return_type_from_comments",
]

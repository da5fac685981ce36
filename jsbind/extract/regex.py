"""Text-scanning signature extractor."""

from __future__ import annotations

import re

from ..elements import VarList, var_list
from .base import SignatureExtractor

COMMENT_PATTERN = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)
PARENS_PATTERN = re.compile(r"function\s*\*?\s*[\w$]*\s*\(([^)]*)\)", re.DOTALL)
SPLIT_PATTERN = re.compile(r"\s*,\s*")


class RegexSignatureExtractor(SignatureExtractor):
    """Reads the first ``function (...)`` header after stripping comments.

    Arrow functions and method shorthand have no ``function`` header and
    yield an empty list.
    """

    name = "regex"

    def params(self, source: str) -> VarList:
        header = COMMENT_PATTERN.sub("", source)
        match = PARENS_PATTERN.search(header)
        if match is None:
            return VarList()
        inner = match.group(1).strip()
        if not inner:
            return VarList()
        return var_list(name for name in SPLIT_PATTERN.split(inner) if name)


__all__ = ["RegexSignatureExtractor"]

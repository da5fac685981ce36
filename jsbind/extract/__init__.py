"""Function signature extractors."""

from __future__ import annotations

from typing import Callable, Dict

from .base import SignatureExtractor, declared_return_type
from .regex import RegexSignatureExtractor

EXTRACTOR_NAMES = ("auto", "tree-sitter", "regex")


def _auto() -> SignatureExtractor:
    from .tree_sitter import TreeSitterSignatureExtractor

    return TreeSitterSignatureExtractor(fallback=RegexSignatureExtractor())


def _tree_sitter() -> SignatureExtractor:
    from .tree_sitter import TreeSitterSignatureExtractor

    return TreeSitterSignatureExtractor()


_FACTORIES: Dict[str, Callable[[], SignatureExtractor]] = {
    "auto": _auto,
    "tree-sitter": _tree_sitter,
    "regex": RegexSignatureExtractor,
}


def build_extractor(name: str = "auto") -> SignatureExtractor:
    """Instantiate the extractor registered under ``name``."""
    factory = _FACTORIES.get(name.lower())
    if factory is None:
        choices = ", ".join(EXTRACTOR_NAMES)
        raise ValueError(f"Unknown extractor {name!r}; expected one of {choices}")
    return factory()


__all__ = [
    "EXTRACTOR_NAMES",
    "RegexSignatureExtractor",
    "SignatureExtractor",
    "build_extractor",
    "declared_return_type",
]

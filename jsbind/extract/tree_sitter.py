"""Tree-sitter backed signature extractor for JavaScript sources."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from ..elements import VarList, var_list
from ..logging import get_logger
from .base import SignatureExtractor, return_type_from_comments

_FUNCTION_NODES = {
    "function",
    "function_expression",
    "function_declaration",
    "generator_function",
    "generator_function_declaration",
    "arrow_function",
    "method_definition",
}
_CLASS_NODES = {"class", "class_declaration"}

# Function.prototype.toString yields declarations, expressions, arrows,
# classes or bare method shorthand; each needs a different wrapper to parse.
_WRAPPERS = ("({source})", "({{{source}}})")


class TreeSitterSignatureExtractor(SignatureExtractor):
    """Reads ``formal_parameters`` from a parsed syntax tree.

    Sources that do not parse cleanly (native functions, for instance) are
    handed to ``fallback`` when one is given, otherwise they yield no
    parameters. A return type is read only from the comments that open the
    function's own body.
    """

    name = "tree-sitter"

    def __init__(self, fallback: Optional[SignatureExtractor] = None) -> None:
        self._parser = Parser(Language(tree_sitter_javascript.language()))
        self._fallback = fallback
        self.logger = get_logger("extract")

    def params(self, source: str) -> VarList:
        located = self._locate(source)
        if located is None:
            if self._fallback is None:
                return VarList()
            self.logger.debug("Falling back to %s extractor", self._fallback.name)
            return self._fallback.params(source)
        node, wrapped = located
        if node.type in _CLASS_NODES:
            return VarList()
        return var_list(self._formal_names(node, wrapped))

    def returns(self, source: str) -> Optional[str]:
        located = self._locate(source)
        if located is None:
            return self._fallback.returns(source) if self._fallback else None
        node, wrapped = located
        body = node.child_by_field_name("body")
        if node.type in _CLASS_NODES or body is None or body.type != "statement_block":
            return None
        comments: List[str] = []
        for child in body.named_children:
            if child.type != "comment":
                break
            comments.append(_text(child, wrapped))
        return return_type_from_comments("\n".join(comments))

    def _locate(self, source: str) -> Optional[Tuple[Node, bytes]]:
        """Return the outermost function node (or constructor-less class)."""
        for wrapper in _WRAPPERS:
            wrapped = wrapper.format(source=source).encode("utf-8")
            tree = self._parser.parse(wrapped)
            if tree.root_node.has_error:
                continue
            node = self._function_node(tree.root_node, wrapped)
            if node is not None:
                return node, wrapped
        return None

    def _function_node(self, root: Node, source: bytes) -> Optional[Node]:
        for node in _preorder(root):
            if node.type in _CLASS_NODES:
                constructor = _class_constructor(node, source)
                return node if constructor is None else constructor
            if node.type in _FUNCTION_NODES:
                return node
        return None

    def _formal_names(self, function: Node, source: bytes) -> List[str]:
        single = function.child_by_field_name("parameter")
        if single is not None:
            return [_text(single, source)]
        parameters = function.child_by_field_name("parameters")
        if parameters is None:
            return []
        names: List[str] = []
        for index, child in enumerate(
            node for node in parameters.named_children if node.type != "comment"
        ):
            names.append(_binding_name(child, source) or f"arg{index}")
        return names


def _preorder(node: Node) -> Iterator[Node]:
    yield node
    for child in node.named_children:
        yield from _preorder(child)


def _class_constructor(node: Node, source: bytes) -> Optional[Node]:
    body = node.child_by_field_name("body")
    if body is None:
        return None
    for member in body.named_children:
        if member.type != "method_definition":
            continue
        name = member.child_by_field_name("name")
        if name is not None and _text(name, source) == "constructor":
            return member
    return None


def _binding_name(node: Node, source: bytes) -> Optional[str]:
    if node.type == "identifier":
        return _text(node, source)
    if node.type == "assignment_pattern":
        left = node.child_by_field_name("left")
        return _binding_name(left, source) if left is not None else None
    if node.type == "rest_pattern":
        for child in node.named_children:
            name = _binding_name(child, source)
            if name:
                return name
    return None


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


__all__ = ["TreeSitterSignatureExtractor"]

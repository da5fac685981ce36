"""Entities synthesized from a JavaScript object graph.

Every entity is an :class:`Element` that renders itself to Go declaration
lines targeting GopherJS. Names keep the original JavaScript key; the Go
identifier is derived separately so the runtime lookup (``js`` struct tags,
``Call`` keys, ``js.Global.Get``) always uses the untouched key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .render import ANY, cast_return
from .sanitize import capitalize, sanitize_name


@dataclass(frozen=True)
class Variable:
    """A name/type pair used for parameters and struct fields."""

    name: str
    type: str = ANY

    def sanitized(self) -> "Variable":
        return Variable(sanitize_name(self.name), self.type)

    def capitalized(self) -> "Variable":
        return Variable(capitalize(self.name), self.type)


class VarList(List[Variable]):
    """Ordered variables with the three list renderings used in declarations."""

    def sanitized(self) -> "VarList":
        return VarList(var.sanitized() for var in self)

    def params(self) -> str:
        return ", ".join(f"{var.name} {var.type}" for var in self)

    def names(self) -> str:
        return ", ".join(var.name for var in self)

    def types(self) -> str:
        return ", ".join(var.type for var in self)


class Element(ABC):
    """Contract for anything a binding can emit."""

    @abstractmethod
    def text(self) -> List[str]:
        """Return the declaration as ordered source lines."""


@dataclass(eq=False)
class Struct(Element):
    """A Go struct wrapping one JavaScript object (namespace or prototype)."""

    name: str
    methods: List["Method"] = field(default_factory=list)
    fields: List[Variable] = field(default_factory=list)

    @property
    def go_name(self) -> str:
        return capitalize(self.name)

    def text(self) -> List[str]:
        lines = [f"type {self.go_name} struct {{", "js.Object"]
        for var in self.fields:
            go_field = var.sanitized().capitalized()
            lines.append(f'{go_field.name} {go_field.type} `js:"{var.name}"`')
        lines.append("}")
        return lines


@dataclass(eq=False)
class Method(Element):
    """A constructor, bound instance method or free function.

    ``is_constructor`` is fixed when the method is discovered; ``go_name`` is
    the exported Go identifier. The two are independent of each other.
    """

    name: str
    owner: Optional[Struct] = None
    params: VarList = field(default_factory=VarList)
    returns: Optional[str] = None
    is_constructor: bool = False
    go_name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.params, VarList):
            self.params = VarList(self.params)
        if not self.go_name:
            self.go_name = capitalize(self.name)

    def text(self) -> List[str]:
        if self.is_constructor:
            return self._constructor_text()

        clean = self.params.sanitized()
        if self.owner is not None:
            header = f"func (self *{self.owner.go_name}) {self.go_name}({clean.params()})"
            target = "self"
        else:
            header = f"func {self.go_name}({clean.params()})"
            target = "js.Global"

        invocation = f'{target}.Call({_call_args(self.name, clean)})'
        if self.returns is None:
            return [header + " {", invocation, "}"]

        casted = cast_return(invocation, self.returns)
        return [f"{header} {self.returns} {{", "return " + casted, "}"]

    def _constructor_text(self) -> List[str]:
        clean = self.params.sanitized()
        return [
            f"func New{self.go_name}({clean.params()}) *{self.go_name} {{",
            f'return &{self.go_name}{{js.Global.Get("{self.name}").New({clean.names()})}}',
            "}",
        ]


@dataclass(eq=False)
class Interface(Element):
    """A structural contract listing method signatures only."""

    name: str
    methods: List[Method] = field(default_factory=list)

    def text(self) -> List[str]:
        lines = [f"type {self.name} interface {{"]
        for method in self.methods:
            signature = f"{method.go_name}({method.params.sanitized().types()})"
            if method.returns is not None:
                signature += f" {method.returns}"
            lines.append(signature)
        lines.append("}")
        return lines


def _call_args(key: str, params: VarList) -> str:
    args = [f'"{key}"']
    if params:
        args.append(params.names())
    return ", ".join(args)


def var_list(names: Iterable[str], type_: str = ANY) -> VarList:
    """Build a :class:`VarList` of ``names`` sharing one type."""
    return VarList(Variable(name, type_) for name in names)


__all__ = ["Element", "Interface", "Method", "Struct", "VarList", "Variable", "var_list"]

"""Intermediate form of a parsed template."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class SourceLocation:
    source: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.source}:{self.line}:{self.column}"


@dataclass(frozen=True)
class LiteralValue:
    text: str
    location: SourceLocation


@dataclass(frozen=True)
class NameValue:
    name: str
    location: SourceLocation


@dataclass(frozen=True)
class Substitution:
    """A ``$(name)`` point standing for one caller-supplied value."""

    name: str
    location: SourceLocation


Value = Union[LiteralValue, NameValue, Substitution]


@dataclass(frozen=True)
class FuncDefNode:
    name: str
    args: list[str]
    body: list["Node"]
    location: SourceLocation


@dataclass(frozen=True)
class IfElseNode:
    lhs: str
    rhs: Value
    body_if: list["Node"]
    body_else: list["Node"]
    location: SourceLocation


@dataclass(frozen=True)
class ReturnNode:
    value: Value
    location: SourceLocation


@dataclass(frozen=True)
class AssignNode:
    target: str
    value: Value
    location: SourceLocation


@dataclass(frozen=True)
class RawNode:
    text: str
    location: SourceLocation


@dataclass(frozen=True)
class SpliceNode:
    """A substitution point in statement position.

    ``multi`` marks ``$(name)*``: the value is a sequence whose elements are
    appended one by one.
    """

    name: str
    multi: bool
    location: SourceLocation


Node = Union[FuncDefNode, IfElseNode, ReturnNode, AssignNode, RawNode, SpliceNode]


@dataclass(frozen=True)
class TemplateIR:
    name: str
    statements: list[Node] = field(default_factory=list)

    def substitutions(self) -> list[str]:
        names: list[str] = []
        for point in iter_substitutions(self.statements):
            if point.name not in names:
                names.append(point.name)
        return names


def iter_substitutions(nodes: list[Node]):
    for node in nodes:
        if isinstance(node, SpliceNode):
            yield node
        elif isinstance(node, FuncDefNode):
            yield from iter_substitutions(node.body)
        elif isinstance(node, IfElseNode):
            if isinstance(node.rhs, Substitution):
                yield node.rhs
            yield from iter_substitutions(node.body_if)
            yield from iter_substitutions(node.body_else)
        elif isinstance(node, (ReturnNode, AssignNode)):
            if isinstance(node.value, Substitution):
                yield node.value

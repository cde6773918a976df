"""Statements and expressions of the generated Python code.

Every node renders itself as a sequence of lines at a given depth. Builders
are fluent: they mutate the node and hand back the same object so rule
bodies can chain calls.
"""

from __future__ import annotations

import json
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator

from codemaker.constants import INDENT_UNIT


def indent(depth: int, text: str) -> str:
    return f"{INDENT_UNIT * depth}{text}"


class Expression(ABC):
    @abstractmethod
    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Literal(Expression):
    """Source text of a literal, already quoted and escaped."""

    text: str

    def render(self) -> str:
        return self.text

    @classmethod
    def of(cls, value: Any) -> "Literal":
        if value is None or isinstance(value, bool):
            return cls(repr(value))
        if isinstance(value, float) and not math.isfinite(value):
            raise TypeError(f"Cannot quote non-finite float {value!r} as a Python literal")
        if isinstance(value, (int, float)):
            return cls(repr(value))
        if isinstance(value, str):
            return cls(json.dumps(value, ensure_ascii=False))
        raise TypeError(f"Cannot quote {type(value).__name__} as a Python literal")


@dataclass(frozen=True)
class Variable(Expression):
    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class Equals(Expression):
    lhs: Expression
    rhs: Expression

    def render(self) -> str:
        return f"{self.lhs.render()} == {self.rhs.render()}"


class Statement(ABC):
    @abstractmethod
    def render(self, depth: int = 0) -> Iterator[str]:
        """Yield the statement's lines, indented for ``depth``."""


class Block:
    def __init__(self, statements: Iterable[Statement] = ()) -> None:
        self.statements: list[Statement] = []
        self.extend(statements)

    def push(self, statement: Statement) -> "Block":
        if not isinstance(statement, Statement):
            raise TypeError(
                f"Expected a Statement, got {type(statement).__name__}"
            )
        self.statements.append(statement)
        return self

    def extend(self, statements: Iterable[Statement]) -> "Block":
        for statement in statements:
            self.push(statement)
        return self

    def is_empty(self) -> bool:
        return not self.statements

    def render(self, depth: int = 0) -> Iterator[str]:
        if not self.statements:
            yield indent(depth, "pass")
            return
        for statement in self.statements:
            yield from statement.render(depth)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)


class Assignment(Statement):
    def __init__(self, target: str, value: str | Expression) -> None:
        self.target = target
        self.value = value

    def render(self, depth: int = 0) -> Iterator[str]:
        yield indent(depth, f"{self.target} = {self.value}")


class Return(Statement):
    def __init__(self, expression: Expression) -> None:
        self.expression = expression

    def render(self, depth: int = 0) -> Iterator[str]:
        yield indent(depth, f"return {self.expression}")


class Raw(Statement):
    """A verbatim line of code."""

    def __init__(self, line: str) -> None:
        self.line = line

    def render(self, depth: int = 0) -> Iterator[str]:
        yield indent(depth, self.line)


class FunctionDefinition(Statement):
    def __init__(self, name: str, args: Iterable[str] = ()) -> None:
        self.name = name
        self.args: list[str] = list(args)
        self.body = Block()

    def add_arg(self, arg: str) -> "FunctionDefinition":
        self.args.append(arg)
        return self

    def push(self, statement: Statement) -> "FunctionDefinition":
        self.body.push(statement)
        return self

    def extend(self, statements: Iterable[Statement]) -> "FunctionDefinition":
        self.body.extend(statements)
        return self

    def render(self, depth: int = 0) -> Iterator[str]:
        yield indent(depth, f"def {self.name}({', '.join(self.args)}):")
        yield from self.body.render(depth + 1)


class IfElse(Statement):
    def __init__(self, condition: Expression) -> None:
        self.condition = condition
        self.body_if = Block()
        self.body_else = Block()

    def with_body_if(self, build: Callable[[Block], Block]) -> "IfElse":
        self.body_if = build(self.body_if)
        return self

    def with_body_else(self, build: Callable[[Block], Block]) -> "IfElse":
        self.body_else = build(self.body_else)
        return self

    def render(self, depth: int = 0) -> Iterator[str]:
        yield indent(depth, f"if {self.condition}:")
        yield from self.body_if.render(depth + 1)
        if not self.body_else.is_empty():
            yield indent(depth, "else:")
            yield from self.body_else.render(depth + 1)

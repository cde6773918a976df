"""Compile the intermediate form into syntax-model builder calls.

Each node becomes a closure over the substitution values. Statement
positions compile to appenders that either ``push`` one element or
``extend`` with a spliced sequence; the substituted objects themselves are
passed through untouched.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Mapping

from codemaker.errors import TemplateArgumentError, TemplateSyntaxError
from codemaker.python.syntax import (
    Assignment,
    Block,
    Equals,
    Expression,
    FunctionDefinition,
    IfElse,
    Literal,
    Raw,
    Return,
    Statement,
    Variable,
)
from codemaker.quote.ir import (
    AssignNode,
    FuncDefNode,
    IfElseNode,
    LiteralValue,
    NameValue,
    Node,
    RawNode,
    ReturnNode,
    SourceLocation,
    SpliceNode,
    Substitution,
    TemplateIR,
    Value,
)
from codemaker.quote.parser import parse

logger = logging.getLogger(__name__)

Values = Mapping[str, Any]
ValueBuilder = Callable[[Values], Any]
StatementBuilder = Callable[[Values], Statement]
Appender = Callable[[Any, Values], Any]


class TemplateKind(str, Enum):
    STATEMENTS = "statements"
    STATEMENT = "statement"
    FUNCTION_DEFINITION = "function_definition"


def compile_value(value: Value) -> ValueBuilder:
    if isinstance(value, Substitution):
        name = value.name
        return lambda values: values[name]
    if isinstance(value, LiteralValue):
        text = value.text
        return lambda values: Literal(text)
    if isinstance(value, NameValue):
        name = value.name
        return lambda values: Variable(name)
    raise TypeError(f"Unknown template value: {value!r}")


def compile_body(nodes: list[Node]) -> Appender:
    appenders = [compile_appender(node) for node in nodes]

    def append_all(target: Any, values: Values) -> Any:
        for append in appenders:
            target = append(target, values)
        return target

    return append_all


def compile_appender(node: Node) -> Appender:
    if isinstance(node, SpliceNode):
        name = node.name
        if node.multi:
            return lambda target, values: target.extend(values[name])
        return lambda target, values: target.push(values[name])
    build = compile_statement(node)
    return lambda target, values: target.push(build(values))


def compile_statement(node: Node) -> StatementBuilder:
    if isinstance(node, FuncDefNode):
        return _compile_funcdef(node)
    if isinstance(node, IfElseNode):
        return _compile_ifelse(node)
    if isinstance(node, ReturnNode):
        value = compile_value(node.value)
        return lambda values: Return(value(values))
    if isinstance(node, AssignNode):
        target = node.target
        value = compile_value(node.value)
        return lambda values: Assignment(target, value(values))
    if isinstance(node, RawNode):
        text = node.text
        return lambda values: Raw(text)
    if isinstance(node, SpliceNode):
        name = node.name
        return lambda values: values[name]
    raise TypeError(f"Unknown template node: {node!r}")


def _compile_funcdef(node: FuncDefNode) -> StatementBuilder:
    name = node.name
    args = tuple(node.args)
    body = compile_body(node.body)

    def build(values: Values) -> FunctionDefinition:
        function = FunctionDefinition(name)
        for arg in args:
            function.add_arg(arg)
        return body(function, values)

    return build


def _compile_ifelse(node: IfElseNode) -> StatementBuilder:
    lhs = node.lhs
    rhs = compile_value(node.rhs)
    body_if = compile_body(node.body_if)
    body_else = compile_body(node.body_else)

    def build(values: Values) -> IfElse:
        condition: Expression = Equals(Variable(lhs), rhs(values))
        return (
            IfElse(condition)
            .with_body_if(lambda block: body_if(block, values))
            .with_body_else(lambda block: body_else(block, values))
        )

    return build


class Template:
    """A compiled template; call it with substitution values to build nodes."""

    def __init__(self, ir: TemplateIR, kind: TemplateKind, source: str) -> None:
        self.ir = ir
        self.kind = kind
        self.source = source
        self.substitutions: tuple[str, ...] = tuple(ir.substitutions())
        self._build = self._compile()

    @property
    def name(self) -> str:
        return self.ir.name

    def _compile(self) -> Callable[[Values], Any]:
        statements = self.ir.statements
        if self.kind == TemplateKind.STATEMENTS:
            body = compile_body(statements)
            return lambda values: list(body(Block(), values))

        if len(statements) != 1:
            location = (
                statements[1].location
                if statements
                else SourceLocation(self.name, 1, 1)
            )
            raise TemplateSyntaxError(
                f"expected exactly one statement for a {self.kind.value} template",
                location,
            )

        node = statements[0]
        if isinstance(node, SpliceNode) and node.multi:
            raise TemplateSyntaxError(
                f"a {self.kind.value} template cannot be a spliced sequence",
                node.location,
            )
        if self.kind == TemplateKind.FUNCTION_DEFINITION and not isinstance(
            node, FuncDefNode
        ):
            raise TemplateSyntaxError(
                "expected a function definition", node.location
            )
        return compile_statement(node)

    def __call__(self, **values: Any) -> Any:
        missing = [name for name in self.substitutions if name not in values]
        if missing:
            raise TemplateArgumentError(
                self.name, f"missing substitution value(s): {', '.join(missing)}"
            )
        unexpected = sorted(set(values) - set(self.substitutions))
        if unexpected:
            raise TemplateArgumentError(
                self.name, f"unexpected substitution value(s): {', '.join(unexpected)}"
            )
        return self._build(values)

    def __repr__(self) -> str:
        return f"Template({self.name!r}, kind={self.kind.value})"


def compile_template(
    text: str,
    kind: TemplateKind | str = TemplateKind.STATEMENTS,
    name: str = "<template>",
) -> Template:
    kind = TemplateKind(kind)
    template = Template(parse(text, name=name), kind=kind, source=text)
    logger.debug(
        "Compiled %s template %s with %d statement(s), substitutions: %s",
        kind.value,
        name,
        len(template.ir.statements),
        ", ".join(template.substitutions) or "none",
    )
    return template

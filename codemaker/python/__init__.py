"""In-memory model of generated Python source."""

from codemaker.python.modules import Module, Package
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

__all__ = [
    "Assignment",
    "Block",
    "Equals",
    "Expression",
    "FunctionDefinition",
    "IfElse",
    "Literal",
    "Module",
    "Package",
    "Raw",
    "Return",
    "Statement",
    "Variable",
]

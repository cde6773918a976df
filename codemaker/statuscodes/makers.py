"""Roles that turn a status-code table into Python source.

The generated module holds one constant per status code followed by a
``status_for_code`` function mapping a code back to its status text. The
lookup function is written as templates; the constants are built by hand.
"""

from __future__ import annotations

from dataclasses import dataclass

from codemaker import python as py
from codemaker.quote import TemplateKind, compile_template
from codemaker.rules import Role, rule
from codemaker.statuscodes.models import NamingConvention, StatusCode, StatusCodes

LOOKUP_FUNCTION_NAME = "status_for_code"

LOOKUP_FUNCTION = compile_template(
    """
    def status_for_code(code): {
        $(checks)*
        return $(default)
    }
    """,
    kind=TemplateKind.FUNCTION_DEFINITION,
    name="status_for_code",
)

LOOKUP_CHECK = compile_template(
    """
    if code == $(code): {
        return $(name)
    }
    """,
    kind=TemplateKind.STATEMENT,
    name="status_check",
)


@dataclass(frozen=True)
class LookupFunctionMaker(Role):
    """Build the lookup function; ``default`` is returned for unknown codes."""

    REQUIRED_RULES = (
        (StatusCodes, py.FunctionDefinition),
        (StatusCode, py.Statement),
    )

    default: py.Expression

    @rule(StatusCodes, py.FunctionDefinition)
    def lookup_function(self, codes: StatusCodes) -> py.FunctionDefinition:
        checks = self.make_from_iter(codes.codes, py.Statement, input_type=StatusCode)
        return LOOKUP_FUNCTION(checks=checks, default=self.default)

    @rule(StatusCode, py.Statement)
    def lookup_check(self, entry: StatusCode) -> py.Statement:
        return LOOKUP_CHECK(
            code=py.Literal.of(entry.code), name=py.Literal.of(entry.name)
        )


@dataclass(frozen=True)
class StatusModuleMaker(Role):
    INPUT_TYPE = StatusCodes
    OUTPUT_TYPE = py.Module
    REQUIRED_RULES = ((StatusCode, py.Assignment),)

    module_name: str
    default: py.Expression
    naming: NamingConvention = NamingConvention.UPPER_SNAKE

    @rule(StatusCodes, py.Module)
    def module_from_codes(self, codes: StatusCodes) -> py.Module:
        lookup = LookupFunctionMaker(default=self.default)
        return (
            py.Module(self.module_name)
            .extend(self.make_from_iter(codes.codes, py.Assignment, input_type=StatusCode))
            .push(lookup.make_from(codes, py.FunctionDefinition))
        )

    # Each code becomes a module-level constant.
    @rule(StatusCode, py.Assignment)
    def constant_for_code(self, entry: StatusCode) -> py.Assignment:
        return py.Assignment(self.naming.apply(entry.name), py.Literal.of(entry.code))


@dataclass(frozen=True)
class StatusPackageMaker(Role):
    INPUT_TYPE = StatusCodes
    OUTPUT_TYPE = py.Package

    package_name: str
    module: StatusModuleMaker

    @rule(StatusCodes, py.Package)
    def package_from_codes(self, codes: StatusCodes) -> py.Package:
        module_name = self.module.module_name
        return (
            py.Package(self.package_name)
            .push(py.Raw(f"from .{module_name} import {LOOKUP_FUNCTION_NAME}"))
            .add_module(self.module.make(codes))
        )

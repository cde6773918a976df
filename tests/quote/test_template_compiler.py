"""Tests for compiling templates into syntax-model builders."""

import pytest

from codemaker import python as py
from codemaker.errors import TemplateArgumentError, TemplateSyntaxError
from codemaker.quote import TemplateKind, compile_template, quoted


def _render(statement: py.Statement) -> list[str]:
    return list(statement.render(0))


def test_function_template_with_multi_substitution_splices_in_order() -> None:
    template = compile_template(
        """
        def describe(code): {
            $(checks)*
            return $(fallback)
        }
        """,
        kind=TemplateKind.FUNCTION_DEFINITION,
    )
    checks = [py.Raw("if code == 1: return 'one'"), py.Raw("if code == 2: return 'two'")]

    function = template(checks=checks, fallback=py.Literal("None"))

    assert isinstance(function, py.FunctionDefinition)
    assert _render(function) == [
        "def describe(code):",
        "    if code == 1: return 'one'",
        "    if code == 2: return 'two'",
        "    return None",
    ]


def test_multi_substitution_accepts_any_iterable() -> None:
    template = compile_template("def f(): { $(body)* }", kind="function_definition")
    function = template(body=(py.Raw(f"x{index} = {index}") for index in range(3)))
    assert [statement.line for statement in function.body] == ["x0 = 0", "x1 = 1", "x2 = 2"]


def test_empty_multi_substitution_leaves_body_empty() -> None:
    template = compile_template("def f(): { $(body)* }", kind=TemplateKind.FUNCTION_DEFINITION)
    assert _render(template(body=[])) == ["def f():", "    pass"]


def test_single_substitution_in_statement_position_pushes_one_element() -> None:
    template = compile_template("def f(): { $(only) }", kind=TemplateKind.FUNCTION_DEFINITION)
    statement = py.Return(py.Literal("1"))
    function = template(only=statement)
    assert function.body.statements == [statement]


def test_single_substitution_passes_value_through_untouched() -> None:
    marker = py.Variable("anything")
    template = compile_template("return $(value)", kind=TemplateKind.STATEMENT)
    statement = template(value=marker)
    assert isinstance(statement, py.Return)
    assert statement.expression is marker


def test_if_else_template() -> None:
    template = compile_template(
        """
        if code == $(code): {
            return $(name)
        } else: {
            raw raise KeyError(code)
        }
        """,
        kind=TemplateKind.STATEMENT,
    )
    statement = template(code=py.Literal("404"), name=py.Literal('"Not Found"'))

    assert isinstance(statement, py.IfElse)
    assert statement.condition == py.Equals(py.Variable("code"), py.Literal("404"))
    assert _render(statement) == [
        "if code == 404:",
        '    return "Not Found"',
        "else:",
        "    raise KeyError(code)",
    ]


def test_if_template_without_else_omits_clause() -> None:
    template = compile_template("if x == 'a': { return 1 }", kind=TemplateKind.STATEMENT)
    assert _render(template()) == ["if x == 'a':", "    return 1"]


def test_quoted_literals_and_variables() -> None:
    template = compile_template(
        "LIMIT = 10\nNAME = 'x'\nALIAS = LIMIT\nFLAG = True",
    )
    statements = template()
    assert [line for statement in statements for line in _render(statement)] == [
        "LIMIT = 10",
        "NAME = 'x'",
        "ALIAS = LIMIT",
        "FLAG = True",
    ]
    assert statements[2].value == py.Variable("LIMIT")


def test_statements_template_returns_list_with_splices() -> None:
    template = compile_template("raw import os\n$(constants)*\n$(function)")
    function = py.FunctionDefinition("f")
    statements = template(
        constants=[py.Assignment("A", "1"), py.Assignment("B", "2")],
        function=function,
    )
    assert len(statements) == 4
    assert statements[0].line == "import os"
    assert statements[-1] is function


def test_each_call_builds_fresh_nodes() -> None:
    template = compile_template("def f(): { return 1 }", kind=TemplateKind.FUNCTION_DEFINITION)
    first = template()
    second = template()
    assert first is not second
    assert first.body is not second.body
    assert _render(first) == _render(second)


def test_template_lists_substitutions() -> None:
    template = compile_template("def f(): { $(a)* return $(b) }", kind=TemplateKind.FUNCTION_DEFINITION)
    assert template.substitutions == ("a", "b")


def test_missing_substitution_value() -> None:
    template = compile_template("return $(value)", kind=TemplateKind.STATEMENT, name="ret")
    with pytest.raises(TemplateArgumentError, match="missing substitution value"):
        template()


def test_unexpected_substitution_value() -> None:
    template = compile_template("return 1", kind=TemplateKind.STATEMENT)
    with pytest.raises(TemplateArgumentError, match="unexpected substitution value"):
        template(extra=1)


def test_statement_kind_requires_exactly_one_statement() -> None:
    with pytest.raises(TemplateSyntaxError, match="exactly one statement") as excinfo:
        compile_template("return 1\nreturn 2", kind=TemplateKind.STATEMENT, name="two")
    assert excinfo.value.location.line == 2


def test_empty_statement_template_is_rejected() -> None:
    with pytest.raises(TemplateSyntaxError, match="exactly one statement"):
        compile_template("  ", kind=TemplateKind.STATEMENT)


def test_function_kind_requires_function_definition() -> None:
    with pytest.raises(TemplateSyntaxError, match="expected a function definition"):
        compile_template("return 1", kind=TemplateKind.FUNCTION_DEFINITION)


def test_statement_kind_cannot_be_multi_splice() -> None:
    with pytest.raises(TemplateSyntaxError, match="spliced sequence"):
        compile_template("$(many)*", kind=TemplateKind.STATEMENT)


def test_compile_errors_do_not_affect_other_templates() -> None:
    good = compile_template("return 1", kind=TemplateKind.STATEMENT)
    with pytest.raises(TemplateSyntaxError):
        compile_template("return $", kind=TemplateKind.STATEMENT)
    assert _render(good()) == ["return 1"]


def test_quoted_shorthand() -> None:
    template = quoted("statement", "return $(x)", name="short")
    assert template.kind == TemplateKind.STATEMENT
    assert template.name == "short"
    assert _render(template(x=py.Variable("y"))) == ["return y"]

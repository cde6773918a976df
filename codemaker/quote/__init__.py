"""Quasi-quotation templates for building syntax-model nodes."""

from __future__ import annotations

from codemaker.quote.compiler import Template, TemplateKind, compile_template
from codemaker.quote.ir import SourceLocation, TemplateIR
from codemaker.quote.parser import parse


def quoted(kind: TemplateKind | str, text: str, name: str = "<template>") -> Template:
    """Shorthand for :func:`compile_template` accepting the kind by value."""
    return compile_template(text, kind=kind, name=name)


__all__ = [
    "SourceLocation",
    "Template",
    "TemplateIR",
    "TemplateKind",
    "compile_template",
    "parse",
    "quoted",
]

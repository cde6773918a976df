from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from codemaker.quote.ir import SourceLocation


class CodemakerError(Exception):
    """Base user-facing application error."""


def type_label(tag: Any) -> str:
    if isinstance(tag, type):
        return tag.__qualname__
    return repr(tag)


class RuleResolutionError(CodemakerError):
    def __init__(self, role: str, input_type: Any, output_type: Any, message: str) -> None:
        self.role = role
        self.input_type = input_type
        self.output_type = output_type
        self.message = message
        super().__init__(
            f"{message}: {role} ({type_label(input_type)} -> {type_label(output_type)})"
        )


class DuplicateRuleError(RuleResolutionError):
    def __init__(self, role: str, input_type: Any, output_type: Any) -> None:
        super().__init__(role, input_type, output_type, message="Duplicate rule")


class MissingRuleError(RuleResolutionError):
    def __init__(self, role: str, input_type: Any, output_type: Any) -> None:
        super().__init__(role, input_type, output_type, message="No rule registered")


class TemplateError(CodemakerError):
    """Base error for quasi-quotation templates."""


class TemplateSyntaxError(TemplateError):
    def __init__(self, message: str, location: SourceLocation) -> None:
        self.message = message
        self.location = location
        super().__init__(f"{location}: {message}")


class TemplateArgumentError(TemplateError):
    def __init__(self, template: str, message: str) -> None:
        self.template = template
        self.message = message
        super().__init__(f"{message} (template {template})")


class CodemakerFileError(CodemakerError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingInputFileError(CodemakerFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing input file")


class InvalidYamlFormatError(CodemakerFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidInputSchemaError(CodemakerFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid input schema ({detail})")


class UnreadableInputFileError(CodemakerFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Unreadable input file ({detail})")

"""Split template text into positioned tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from codemaker.errors import TemplateSyntaxError
from codemaker.quote.ir import SourceLocation


class TokenKind(str, Enum):
    NAME = "name"
    NUMBER = "number"
    STRING = "string"
    OP = "op"
    RAW = "raw"
    EOF = "eof"


RAW_KEYWORD = "raw"

_TOKEN_RE = re.compile(
    r"""
    (?P<newline>\n)
    |(?P<space>[ \t\r]+)
    |(?P<comment>\#[^\n]*)
    |(?P<name>[A-Za-z_][A-Za-z0-9_]*)
    |(?P<number>-?\d+(?:\.\d+)?)
    |(?P<string>"(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*')
    |(?P<op>==|[(){}:,=*$])
    """,
    re.VERBOSE,
)

_REST_OF_LINE_RE = re.compile(r"[^\n]*")

# After these, `raw` is an ordinary name rather than the start of a raw line.
_NAME_CONTEXT_OPS = frozenset({"(", ",", "=", "==", "$"})
_NAME_CONTEXT_KEYWORDS = frozenset({"def", "if", "return"})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    location: SourceLocation

    def is_op(self, text: str) -> bool:
        return self.kind == TokenKind.OP and self.text == text

    def is_name(self, text: str) -> bool:
        return self.kind == TokenKind.NAME and self.text == text


def tokenize(text: str, source: str = "<template>") -> list[Token]:
    tokens: list[Token] = []
    pos = 0
    line = 1
    line_start = 0

    while pos < len(text):
        location = SourceLocation(source, line, pos - line_start + 1)
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            char = text[pos]
            if char in "\"'":
                raise TemplateSyntaxError("unterminated string literal", location)
            raise TemplateSyntaxError(f"unexpected character {char!r}", location)

        kind = match.lastgroup
        value = match.group()
        pos = match.end()

        if kind == "newline":
            line += 1
            line_start = pos
        elif kind in ("space", "comment"):
            continue
        elif kind == "name" and value == RAW_KEYWORD and _starts_raw_line(tokens, text, pos):
            rest = _REST_OF_LINE_RE.match(text, pos)
            tokens.append(Token(TokenKind.RAW, rest.group().strip(), location))
            pos = rest.end()
        else:
            tokens.append(Token(TokenKind(kind), value, location))

    tokens.append(Token(TokenKind.EOF, "", SourceLocation(source, line, pos - line_start + 1)))
    return tokens


def _starts_raw_line(tokens: list[Token], text: str, pos: int) -> bool:
    """Whether a ``raw`` ending at ``pos`` sits in statement position."""
    if tokens:
        previous = tokens[-1]
        if previous.kind == TokenKind.OP and previous.text in _NAME_CONTEXT_OPS:
            return False
        if previous.kind == TokenKind.NAME and previous.text in _NAME_CONTEXT_KEYWORDS:
            return False
    follow = text[pos:].lstrip(" \t")
    return not (follow.startswith("=") and not follow.startswith("=="))

"""Parse template tokens into the intermediate form."""

from __future__ import annotations

from codemaker.errors import TemplateSyntaxError
from codemaker.quote.ir import (
    AssignNode,
    FuncDefNode,
    IfElseNode,
    LiteralValue,
    NameValue,
    Node,
    RawNode,
    ReturnNode,
    SpliceNode,
    Substitution,
    TemplateIR,
    Value,
)
from codemaker.quote.lexer import RAW_KEYWORD, Token, TokenKind, tokenize

KEYWORDS = frozenset({"def", "if", "else", "return"})
LITERAL_NAMES = frozenset({"True", "False", "None"})


class TemplateParser:
    def __init__(self, tokens: list[Token], name: str) -> None:
        self.tokens = tokens
        self.name = name
        self.index = 0

    def parse(self) -> TemplateIR:
        statements: list[Node] = []
        while self.peek().kind != TokenKind.EOF:
            if self.peek().is_op("}"):
                raise TemplateSyntaxError("unmatched '}'", self.peek().location)
            statements.append(self.parse_statement())
        return TemplateIR(name=self.name, statements=statements)

    def peek(self, offset: int = 0) -> Token:
        index = min(self.index + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def advance(self) -> Token:
        token = self.peek()
        if token.kind != TokenKind.EOF:
            self.index += 1
        return token

    def expect_op(self, text: str, context: str) -> Token:
        token = self.peek()
        if not token.is_op(text):
            raise TemplateSyntaxError(
                f"expected '{text}' {context}, found {_describe(token)}", token.location
            )
        return self.advance()

    def expect_name(self, context: str) -> Token:
        token = self.peek()
        if token.kind != TokenKind.NAME or token.text in KEYWORDS:
            raise TemplateSyntaxError(
                f"expected a name {context}, found {_describe(token)}", token.location
            )
        return self.advance()

    def parse_statement(self) -> Node:
        token = self.peek()
        if token.is_op("$"):
            return self.parse_splice()
        if token.kind == TokenKind.RAW:
            return self.parse_raw()
        if token.kind != TokenKind.NAME:
            raise TemplateSyntaxError(
                f"expected a statement, found {_describe(token)}", token.location
            )
        if token.text == "def":
            return self.parse_funcdef()
        if token.text == "if":
            return self.parse_ifelse()
        if token.text == "return":
            return self.parse_return()
        if token.text not in KEYWORDS and self.peek(1).is_op("="):
            return self.parse_assign()
        raise TemplateSyntaxError(
            f"unknown statement keyword '{token.text}'", token.location
        )

    def parse_body(self, context: str) -> list[Node]:
        opening = self.expect_op("{", context)
        body: list[Node] = []
        while not self.peek().is_op("}"):
            if self.peek().kind == TokenKind.EOF:
                raise TemplateSyntaxError("unmatched '{'", opening.location)
            body.append(self.parse_statement())
        self.advance()
        return body

    def parse_funcdef(self) -> FuncDefNode:
        marker = self.advance()
        name = self.expect_name("after 'def'").text
        opening = self.expect_op("(", "after function name")
        args: list[str] = []
        while not self.peek().is_op(")"):
            if self.peek().kind == TokenKind.EOF or self.peek().is_op("{"):
                raise TemplateSyntaxError("unmatched '('", opening.location)
            args.append(self.expect_name("in parameter list").text)
            if self.peek().is_op(","):
                self.advance()
            elif self.peek().kind == TokenKind.NAME:
                self.expect_op(",", "between parameters")
            elif not self.peek().is_op(")"):
                raise TemplateSyntaxError("unmatched '('", opening.location)
        self.advance()
        self.expect_op(":", "after parameter list")
        body = self.parse_body("to open function body")
        return FuncDefNode(name=name, args=args, body=body, location=marker.location)

    def parse_ifelse(self) -> IfElseNode:
        marker = self.advance()
        lhs = self.expect_name("in condition").text
        self.expect_op("==", "in condition")
        rhs = self.parse_value()
        self.expect_op(":", "after condition")
        body_if = self.parse_body("to open if body")
        body_else: list[Node] = []
        if self.peek().is_name("else"):
            self.advance()
            self.expect_op(":", "after 'else'")
            body_else = self.parse_body("to open else body")
        return IfElseNode(
            lhs=lhs,
            rhs=rhs,
            body_if=body_if,
            body_else=body_else,
            location=marker.location,
        )

    def parse_return(self) -> ReturnNode:
        marker = self.advance()
        return ReturnNode(value=self.parse_value(), location=marker.location)

    def parse_assign(self) -> AssignNode:
        target = self.advance()
        self.advance()
        return AssignNode(
            target=target.text, value=self.parse_value(), location=target.location
        )

    def parse_raw(self) -> RawNode:
        marker = self.advance()
        if not marker.text:
            raise TemplateSyntaxError(
                f"expected text after '{RAW_KEYWORD}'", marker.location
            )
        return RawNode(text=marker.text, location=marker.location)

    def parse_value(self) -> Value:
        token = self.peek()
        if token.is_op("$"):
            return self.parse_substitution()
        if token.kind in (TokenKind.STRING, TokenKind.NUMBER):
            self.advance()
            return LiteralValue(text=token.text, location=token.location)
        if token.kind == TokenKind.NAME and token.text in LITERAL_NAMES:
            self.advance()
            return LiteralValue(text=token.text, location=token.location)
        if token.kind == TokenKind.NAME and token.text not in KEYWORDS:
            self.advance()
            return NameValue(name=token.text, location=token.location)
        raise TemplateSyntaxError(
            f"expected a value, found {_describe(token)}", token.location
        )

    def parse_substitution(self) -> Substitution:
        marker = self.advance()
        if not self.peek().is_op("("):
            raise TemplateSyntaxError(
                "malformed substitution marker, expected '$(name)'", marker.location
            )
        self.advance()
        name = self.peek()
        if name.kind != TokenKind.NAME or name.text in KEYWORDS:
            raise TemplateSyntaxError(
                "malformed substitution marker, expected a name inside '$( )'",
                marker.location,
            )
        self.advance()
        if not self.peek().is_op(")"):
            raise TemplateSyntaxError(
                "malformed substitution marker, missing ')'", marker.location
            )
        self.advance()
        return Substitution(name=name.text, location=marker.location)

    def parse_splice(self) -> SpliceNode:
        point = self.parse_substitution()
        multi = False
        if self.peek().is_op("*"):
            self.advance()
            multi = True
        return SpliceNode(name=point.name, multi=multi, location=point.location)


def _describe(token: Token) -> str:
    if token.kind == TokenKind.EOF:
        return "end of template"
    return f"'{token.text}'"


def parse(text: str, name: str = "<template>") -> TemplateIR:
    return TemplateParser(tokenize(text, source=name), name=name).parse()

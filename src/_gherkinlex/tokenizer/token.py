from dataclasses import dataclass
from typing import Any

from _gherkinlex.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token in a feature file.

    The value depends on the kind: Token(TokenKind.SCOPE) carries a ScopeKind,
    Token(TokenKind.KEYWORD) carries a StepKeyword, Token(TokenKind.NEWLINE)
    carries nothing and every other kind carries the text read from the file,
    ie. Token(TokenKind.TITLE, "Login") for the line "Feature: Login".
    """

    kind: TokenKind
    value: Any = None

    def is_description(self):
        return self.kind == TokenKind.DESCRIPTION

    def is_structural(self):
        """
        :returns: Whether the token is anything but a description or a
            newline, ie. whether the file it came from contains gherkin.
        """
        return not (self.is_description() or self.kind == TokenKind.NEWLINE)

    @classmethod
    def newline(cls):
        return cls(TokenKind.NEWLINE)

    @classmethod
    def tag(cls, text):
        return cls(TokenKind.TAG, text)

    @classmethod
    def table_cell(cls, text):
        return cls(TokenKind.TABLE_CELL, text)

    @classmethod
    def table_header(cls, text):
        return cls(TokenKind.TABLE_HEADER, text)

    @classmethod
    def title(cls, text):
        return cls(TokenKind.TITLE, text)

    @classmethod
    def string(cls, text):
        return cls(TokenKind.STRING, text)

    @classmethod
    def integer(cls, text):
        return cls(TokenKind.INTEGER, text)

    @classmethod
    def match(cls, text):
        return cls(TokenKind.MATCH, text)

    @classmethod
    def scope(cls, scope_kind):
        return cls(TokenKind.SCOPE, scope_kind)

    @classmethod
    def keyword(cls, step_keyword):
        return cls(TokenKind.KEYWORD, step_keyword)

    @classmethod
    def description(cls, text):
        return cls(TokenKind.DESCRIPTION, text)

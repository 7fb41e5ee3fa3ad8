import gherkinlex.version
from _gherkinlex.language import Language
from _gherkinlex.reading import LexResult, lazy_lex, lex, lex_string
from _gherkinlex.scope import ScopeKind, StepKeyword
from _gherkinlex.tokenizer import Lexer, Token, TokenKind
from _gherkinlex.tokenizer.errors import (
    GherkinWarning,
    NoValidGherkinWarning,
    UnsupportedLanguageError,
    UnsupportedLanguageWarning,
)

__version__ = gherkinlex.version.version

__all__ = [
    "GherkinWarning",
    "Language",
    "LexResult",
    "Lexer",
    "NoValidGherkinWarning",
    "ScopeKind",
    "StepKeyword",
    "Token",
    "TokenKind",
    "UnsupportedLanguageError",
    "UnsupportedLanguageWarning",
    "lazy_lex",
    "lex",
    "lex_string",
]

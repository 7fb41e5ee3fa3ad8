import pathlib
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import List

from _gherkinlex.language import DEFAULT_LANGUAGE
from _gherkinlex.tokenizer import Lexer, Token


@dataclass
class LexResult:
    """
    The tokens of a feature file, together with the problems found while
    tokenizing it.
    """

    tokens: List[Token] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)

    def __iter__(self):
        return iter(self.tokens)


def make_lexer(filelike, uri=None, language=DEFAULT_LANGUAGE):
    if isinstance(filelike, (str, pathlib.Path)):
        text = pathlib.Path(filelike).read_text(encoding="utf-8")
        return Lexer.from_string(
            text, uri=str(filelike) if uri is None else uri, language=language
        )
    if uri is None:
        uri = getattr(filelike, "name", None)
    return Lexer.from_string(filelike.read(), uri=uri, language=language)


def lex(filelike, uri=None, language=DEFAULT_LANGUAGE):
    """
    Tokenizes a feature file,
    ie. result = lex("features/login.feature")

    :param filelike: A file name or a text stream.
    :param uri: Name of the file in diagnostics, defaults to the file name.
    :param language: The language of the keywords, unless the file declares
        its language.
    :returns: A LexResult with the tokens and diagnostics of the file.
    """
    lexer = make_lexer(filelike, uri, language)
    lexer.warning_stacklevel += 1
    tokens = lexer.lex()
    return LexResult(tokens, list(lexer.diagnostics))


def lex_string(text, uri="", language=DEFAULT_LANGUAGE):
    lexer = Lexer.from_string(text, uri=uri, language=language)
    lexer.warning_stacklevel += 1
    tokens = lexer.lex()
    return LexResult(tokens, list(lexer.diagnostics))


@contextmanager
def lazy_lex(filelike, uri=None, language=DEFAULT_LANGUAGE):
    """
    Lazily tokenizes a feature file:

        with lazy_lex("features/login.feature") as lexer:
            for token in lexer:
                ...

    The yielded Lexer is an iterator of tokens, its diagnostics are complete
    once all tokens are consumed.
    """
    lexer = make_lexer(filelike, uri, language)
    yield lexer

"""
In this module, a tokenizer is a generator that takes a stream and generates
tokens. If an error occurs, the function winds back the stream to the position
to where it started generating and raises a TokenizationError. A tokenizer may
also succeed without generating any tokens, ie. for comments.

Token combinator is any function which returns a tokenizer.

Gherkin is line oriented and a line is tokenized left to right, we only
require backtracking capabilities when classifying the start of a line
(scope keyword, step keyword or description), and only within that line.
This means that there is no bookkeeping of backtracking points.

The state carried from one token to the next (whether the lexer is at the
start of a line, the last scope and step keyword on the current line and the
language of the keywords) is kept by Lexer, see Lexer.
"""

from .lexer import Lexer
from .token import Token
from .token_kind import TokenKind

__all__ = ["Lexer", "Token", "TokenKind"]

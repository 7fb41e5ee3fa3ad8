import io
import re
import warnings
from functools import cached_property
from urllib.parse import urlparse

from _gherkinlex.language import DEFAULT_LANGUAGE, resolve_language
from _gherkinlex.scope import ScopeKind
from _gherkinlex.tokenizer.combinators import one_of, repeated
from _gherkinlex.tokenizer.common import (
    COMMENT,
    NEWLINE,
    QUOTE,
    SCOPE_TERMINATOR,
    TABLE_CELL_DELIMITER,
    TABLE_HEADER_CLOSE,
    TABLE_HEADER_OPEN,
    TAG_MARKER,
    is_space,
    is_symbol,
    is_tag_character,
    peek,
    read_cell_until,
    read_line_until,
    skip_space,
    strip_space,
)
from _gherkinlex.tokenizer.errors import (
    NoValidGherkinWarning,
    TokenizationError,
    UnsupportedLanguageError,
    UnsupportedLanguageWarning,
)
from _gherkinlex.tokenizer.token import Token

LANGUAGE_DIRECTIVE = re.compile(r"^\s*language\s*:\s*(.*?)\s*$")


def file_name(uri):
    """
    :returns: The last path component of a file name or uri, used to name
        the file in diagnostics.
    """
    if not uri:
        return ""
    path = urlparse(str(uri)).path or str(uri)
    return re.split(r"[\\/]", path.rstrip("\\/"))[-1]


class Lexer:
    """
    The lexer is an iterable of tokens for a given text stream of feature file
    contents.

    Tokenization is line oriented: a line is either a comment, a row of table
    cells, tags, or starts with a scope keyword ("Feature:"), a step keyword
    ("Given") or is a description. What follows a keyword on the same line is
    tokenized according to that keyword, ie. the line 'Given I have 3 "red"
    <fruit>' gives

        [
            Token(TokenKind.KEYWORD, StepKeyword.GIVEN),
            Token(TokenKind.MATCH, "I have "),
            Token(TokenKind.INTEGER, "3"),
            Token(TokenKind.MATCH, " "),
            Token(TokenKind.STRING, "red"),
            Token(TokenKind.MATCH, " "),
            Token(TokenKind.TABLE_HEADER, "fruit"),
        ]

    Problems with the file never stop tokenization, they are collected in
    diagnostics and emitted as warnings, see GherkinWarning.
    """

    # Stack level of warnings, counted from tokenize_feature_file, which is
    # resumed from next_token or lex, which are called by user code.
    warning_stacklevel = 3

    def __init__(self, stream, uri=None, language=DEFAULT_LANGUAGE):
        """
        :param stream: A seekable text stream containing the feature file.
        :param uri: File name or uri of the feature file, only used in
            diagnostics.
        :param language: The language keywords are in until the file
            declares otherwise with a '# language:' comment.
        """
        self.stream = stream
        self.uri = uri
        self.language = resolve_language(language)
        if self.language is None:
            raise UnsupportedLanguageError(f"No gherkin dialect for {language!r}")

        self.at_line_start = True
        self.last_scope = None
        self.last_keyword = None

        self.has_gherkin = False
        self.diagnostics = []
        self.pending_warnings = []
        self._tokens = None

    @classmethod
    def from_string(cls, text, uri="", language=DEFAULT_LANGUAGE):
        return cls(io.StringIO(text.replace("\r\n", NEWLINE)), uri, language)

    @property
    def file_name(self):
        return file_name(self.uri)

    def __iter__(self):
        if self._tokens is None:
            self._tokens = self.tokenize_feature_file()
        return self._tokens

    def next_token(self):
        """
        :returns: The next token, or None at end of stream.
        """
        return next(iter(self), None)

    def lex(self):
        """
        :returns: The list of all remaining tokens.
        """
        return list(self)

    def diagnose(self, category, problem):
        message = f"File: {self.file_name} {problem}"
        self.diagnostics.append(message)
        self.pending_warnings.append((message, category))

    def emit_warnings(self, stacklevel):
        for message, category in self.pending_warnings:
            warnings.warn(message, category, stacklevel=stacklevel + 1)
        self.pending_warnings.clear()

    def reset_line(self):
        self.at_line_start = True
        self.last_scope = None
        self.last_keyword = None

    def switch_language(self, name):
        language = resolve_language(name)
        if language is None:
            self.diagnose(
                UnsupportedLanguageWarning, "declares an unsupported language"
            )
        else:
            self.language = language

    def tokenize_feature_file(self):
        """
        Tokenize the whole feature file.
        """
        for token in repeated(self.tokenize_next)():
            if token.is_structural():
                self.has_gherkin = True
            self.emit_warnings(stacklevel=self.warning_stacklevel)
            yield token
        yield from self.tokenize_end_of_file()
        if not self.has_gherkin:
            self.diagnose(NoValidGherkinWarning, "does not contain any valid gherkin")
        self.emit_warnings(stacklevel=self.warning_stacklevel)

    def tokenize_next(self):
        """
        Tokenize from the current character, yields at most one token. Comments
        and characters without meaning where they occur are consumed without
        yielding.
        """
        if not peek(self.stream):
            raise TokenizationError(f"End of stream at {self.stream.tell()}")
        yield from self.tokenize_token()

    @cached_property
    def tokenize_token(self):
        # Order matters, the first tokenizer that applies wins.
        return one_of(
            self.tokenize_newline,
            self.tokenize_comment,
            self.tokenize_tag,
            self.tokenize_table_cell,
            self.tokenize_line_start,
            self.tokenize_table_header,
            self.tokenize_title,
            self.tokenize_string,
            self.tokenize_integer,
            self.tokenize_match,
            self.skip_character,
        )

    @property
    def tokenize_line_start(self):
        """
        Tokenize the first token of a line, see tokenize_scope,
        tokenize_step_keyword and tokenize_description.
        """
        return one_of(
            self.tokenize_leading_space,
            self.tokenize_scope,
            self.tokenize_step_keyword,
            self.tokenize_description,
        )

    def expect_char(self, char):
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if read_char != char:
            self.stream.seek(start)
            raise TokenizationError(f"Expected {char!r} at {start}, got {read_char!r}")

    def expect_line_start(self):
        if not self.at_line_start:
            raise TokenizationError(
                f"Expected start of line at {self.stream.tell()}"
            )

    def tokenize_newline(self):
        self.expect_char(NEWLINE)
        self.reset_line()
        yield Token.newline()

    def tokenize_comment(self):
        """
        Tokenize a comment, including the newline ending it.

        Note: does not actually yield a token for the comment, a
        '# language: <name>' comment switches the language of the lexer.
        """
        self.expect_char(COMMENT)
        comment = read_line_until(self.stream, lambda c: False)
        self.stream.read(1)
        self.reset_line()

        directive = LANGUAGE_DIRECTIVE.match(comment)
        if directive:
            self.switch_language(directive.group(1))
        return iter([])

    def tokenize_tag(self):
        self.expect_char(TAG_MARKER)
        yield Token.tag(read_line_until(self.stream, lambda c: not is_tag_character(c)))

    def tokenize_table_cell(self):
        """
        Tokenize a table cell, yields Token(TokenKind.TABLE_CELL, "a|b") for
        stream containing '| a\\|b |'. The closing delimiter is left in the
        stream as it opens the next cell.

        A cell which is not closed by a delimiter is dropped.
        """
        self.expect_char(TABLE_CELL_DELIMITER)
        contents = strip_space(
            read_cell_until(self.stream, lambda c: c == TABLE_CELL_DELIMITER)
        )
        if peek(self.stream) == TABLE_CELL_DELIMITER:
            yield Token.table_cell(contents)

    def tokenize_leading_space(self):
        self.expect_line_start()
        if not is_space(peek(self.stream)):
            raise TokenizationError(f"Expected space at {self.stream.tell()}")
        skip_space(self.stream)
        return iter([])

    def read_scope_text(self):
        return read_line_until(self.stream, lambda c: c == SCOPE_TERMINATOR)

    def tokenize_scope(self):
        """
        Tokenize a scope keyword, yields Token(TokenKind.SCOPE,
        ScopeKind.FEATURE) for stream containing "Feature: Login" and leaves
        the stream at "Login".
        """
        self.expect_line_start()
        start = self.stream.tell()
        classification = self.language.classify(self.read_scope_text())
        if classification.kind not in ScopeKind.structural():
            self.stream.seek(start)
            raise TokenizationError(f"Expected scope keyword at {start}")

        self.at_line_start = False
        self.last_scope = classification.kind
        if peek(self.stream) == SCOPE_TERMINATOR:
            self.stream.read(1)
        skip_space(self.stream)
        yield Token.scope(classification.kind)

    def tokenize_step_keyword(self):
        """
        Tokenize a step keyword, yields Token(TokenKind.KEYWORD,
        StepKeyword.GIVEN) for stream containing "Given I log in" and leaves
        the stream at "I log in".
        """
        self.expect_line_start()
        start = self.stream.tell()
        classification = self.language.classify(self.read_scope_text())
        self.stream.seek(start)
        if not classification.kind.is_step():
            raise TokenizationError(f"Expected step keyword at {start}")

        self.stream.read(len(classification.spelling))
        skip_space(self.stream)
        self.at_line_start = False
        self.last_keyword = classification.keyword
        yield Token.keyword(classification.keyword)

    def tokenize_description(self):
        self.expect_line_start()
        self.at_line_start = False
        line = read_line_until(self.stream, lambda c: False)
        yield Token.description(strip_space(line))

    def tokenize_table_header(self):
        """
        Tokenize a table header, yields Token(TokenKind.TABLE_HEADER, "name")
        for stream containing "<name>".
        """
        self.expect_char(TABLE_HEADER_OPEN)
        header = read_line_until(self.stream, lambda c: c == TABLE_HEADER_CLOSE)
        if peek(self.stream) == TABLE_HEADER_CLOSE:
            self.stream.read(1)
        yield Token.table_header(header)

    def tokenize_title(self):
        if self.last_scope is None:
            raise TokenizationError(
                f"Expected scope before title at {self.stream.tell()}"
            )
        title = read_line_until(self.stream, lambda c: c == TABLE_HEADER_OPEN)
        if not title:
            # Header opens and newlines are tokenized before titles, so this
            # only guards against looping without consuming the stream.
            self.stream.read(1)
            return
        yield Token.title(title)

    def tokenize_string(self):
        self.expect_char(QUOTE)
        string = read_line_until(self.stream, lambda c: c == QUOTE)
        if peek(self.stream) == QUOTE:
            self.stream.read(1)
        yield Token.string(string)

    def tokenize_integer(self):
        integer = read_line_until(self.stream, lambda c: not c.isdigit())
        if not integer:
            raise TokenizationError(f"Expected integer at {self.stream.tell()}")
        yield Token.integer(integer)

    def tokenize_match(self):
        if self.last_keyword is None:
            raise TokenizationError(
                f"Expected step keyword before match at {self.stream.tell()}"
            )
        match = read_line_until(self.stream, is_symbol)
        if not match:
            raise TokenizationError(f"Expected match at {self.stream.tell()}")
        yield Token.match(match)

    def skip_character(self):
        self.stream.read(1)
        return iter([])

    def tokenize_end_of_file(self):
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if read_char:
            self.stream.seek(start)
            raise TokenizationError(f"Expected end of file at {start} got {read_char}")
        return iter([])

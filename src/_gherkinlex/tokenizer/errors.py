class TokenizationError(Exception):
    """
    A tokenizer will throw a TokenizationError if the expected token
    is not found at the start of the stream (however, it could be that
    any other valid token not covered by that tokenizer is at the
    start of the stream).
    """

    pass


class UnsupportedLanguageError(ValueError):
    """
    Raised when a lexer is created with a language that has no
    gherkin dialect.
    """

    pass


class GherkinWarning(UserWarning):
    """
    Base class for the non-fatal problems found while tokenizing a
    feature file.
    """

    pass


class UnsupportedLanguageWarning(GherkinWarning):
    """
    Emitted when a '# language:' comment names a language without a
    gherkin dialect. The previous language is kept.
    """

    pass


class NoValidGherkinWarning(GherkinWarning):
    """
    Emitted when a file contains nothing but descriptions and blank lines.
    """

    pass

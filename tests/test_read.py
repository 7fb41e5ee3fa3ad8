import io

import pytest

from gherkinlex import (
    NoValidGherkinWarning,
    ScopeKind,
    Token,
    lazy_lex,
    lex,
    lex_string,
)


def test_lex_file(tmp_path):
    test_file = tmp_path / "login.feature"
    test_file.write_text("Feature: Login\n  Scenario: σ\n", encoding="utf-8")

    result = lex(test_file)

    assert result.tokens == [
        Token.scope(ScopeKind.FEATURE),
        Token.title("Login"),
        Token.newline(),
        Token.scope(ScopeKind.SCENARIO),
        Token.title("σ"),
        Token.newline(),
    ]
    assert result.diagnostics == []
    assert list(result) == result.tokens


def test_lex_file_diagnostics_name_the_file(tmp_path):
    test_file = tmp_path / "empty.feature"
    test_file.write_text("nothing here\n", encoding="utf-8")

    with pytest.warns(NoValidGherkinWarning):
        result = lex(str(test_file))

    assert result.diagnostics == [
        "File: empty.feature does not contain any valid gherkin"
    ]


def test_lex_stream():
    with pytest.warns(NoValidGherkinWarning):
        result = lex(io.StringIO("text"), uri="stream.feature")
    assert result.diagnostics == [
        "File: stream.feature does not contain any valid gherkin"
    ]


def test_lex_string_language():
    result = lex_string("Funcionalidade: X\n", language="pt")
    assert result.tokens[0] == Token.scope(ScopeKind.FEATURE)


def test_lazy_lex(tmp_path):
    test_file = tmp_path / "lazy.feature"
    test_file.write_text("@a\n@b\n", encoding="utf-8")

    with lazy_lex(test_file) as lexer:
        assert lexer.next_token() == Token.tag("a")
        assert lexer.diagnostics == []
        assert list(lexer) == [Token.newline(), Token.tag("b"), Token.newline()]


def test_lex_stream_normalises_line_endings():
    text = "Feature: A\r\n  Given b\r\n| c |\r\n"
    result = lex(io.StringIO(text))
    assert result.tokens == lex_string(text).tokens
    assert Token.title("A") in result.tokens


def test_warnings_point_at_caller():
    with pytest.warns(NoValidGherkinWarning) as record:
        lex(io.StringIO("text"))
        lex_string("text")
    assert [w.filename for w in record] == [__file__, __file__]

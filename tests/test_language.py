import pytest

from _gherkinlex.language import Language, resolve_language
from _gherkinlex.scope import UNKNOWN, Classification, ScopeKind, StepKeyword


@pytest.fixture
def english():
    return Language.for_name("en")


@pytest.mark.parametrize(
    "text, kind",
    [
        ("Feature", ScopeKind.FEATURE),
        ("Ability", ScopeKind.FEATURE),
        ("Rule", ScopeKind.RULE),
        ("Background", ScopeKind.BACKGROUND),
        ("Scenario", ScopeKind.SCENARIO),
        ("Example", ScopeKind.SCENARIO),
        ("Scenario Outline", ScopeKind.SCENARIO_OUTLINE),
        ("Examples", ScopeKind.EXAMPLES),
        ("Feature ", ScopeKind.FEATURE),
    ],
)
def test_classify_scope(english, text, kind):
    assert english.classify(text).kind == kind


@pytest.mark.parametrize(
    "text, keyword, spelling",
    [
        ("Given I am here", StepKeyword.GIVEN, "Given "),
        ("When I go", StepKeyword.WHEN, "When "),
        ("Then I am there", StepKeyword.THEN, "Then "),
        ("And so on", StepKeyword.AND, "And "),
        ("But not", StepKeyword.BUT, "But "),
        ("* bullet", StepKeyword.AND, "* "),
        ("Given", StepKeyword.GIVEN, "Given"),
    ],
)
def test_classify_step(english, text, keyword, spelling):
    assert english.classify(text) == Classification(ScopeKind.STEP, keyword, spelling)


@pytest.mark.parametrize("text", ["", "Features", "Givens", "As a user", "Scenario x"])
def test_classify_unknown(english, text):
    assert english.classify(text) == UNKNOWN


@pytest.mark.parametrize("name", ["fr", "French", "français", "FRENCH"])
def test_for_name(name):
    language = Language.for_name(name)
    assert language.code == "fr"
    assert language.classify("Fonctionnalité").kind == ScopeKind.FEATURE


@pytest.mark.parametrize("name", ["", "xx", "Gibberish"])
def test_for_unknown_name(name):
    assert resolve_language(name) is None


def test_scope_kinds():
    assert ScopeKind.STEP.is_step()
    assert ScopeKind.STEP not in ScopeKind.structural()
    assert ScopeKind.UNKNOWN not in ScopeKind.structural()

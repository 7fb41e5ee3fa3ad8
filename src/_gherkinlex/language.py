"""
Localized keywords, taken from the gherkin dialects. A Language maps the
spellings of scope and step keywords in one dialect to ScopeKind and
StepKeyword.
"""

from functools import lru_cache

from gherkin.dialect import DIALECTS, Dialect

from _gherkinlex.scope import UNKNOWN, Classification, ScopeKind, StepKeyword

DEFAULT_LANGUAGE = "en"

# The bullet step keyword is listed under every step kind in the dialects,
# it continues the previous step.
BULLET = "*"


class Language:
    def __init__(self, code, dialect):
        """
        :param code: The dialect code, ie. "en".
        :param dialect: A gherkin.dialect.Dialect.
        """
        self.code = code
        self.dialect = dialect

        self.scopes = {}
        for kind, spellings in (
            (ScopeKind.FEATURE, dialect.feature_keywords),
            (ScopeKind.RULE, dialect.rule_keywords),
            (ScopeKind.BACKGROUND, dialect.background_keywords),
            (ScopeKind.SCENARIO, dialect.scenario_keywords),
            (ScopeKind.SCENARIO_OUTLINE, dialect.scenario_outline_keywords),
            (ScopeKind.EXAMPLES, dialect.examples_keywords),
        ):
            for spelling in spellings:
                self.scopes.setdefault(spelling.strip(), kind)

        steps = {}
        for keyword, spellings in (
            (StepKeyword.GIVEN, dialect.given_keywords),
            (StepKeyword.WHEN, dialect.when_keywords),
            (StepKeyword.THEN, dialect.then_keywords),
            (StepKeyword.AND, dialect.and_keywords),
            (StepKeyword.BUT, dialect.but_keywords),
        ):
            for spelling in spellings:
                if spelling.strip() == BULLET:
                    steps[spelling] = StepKeyword.AND
                else:
                    steps.setdefault(spelling, keyword)
        # Longest first, so "Soient " is preferred over "Soit " and similar.
        self.steps = sorted(steps.items(), key=lambda s: len(s[0]), reverse=True)

    def __repr__(self):
        return f"Language({self.code!r})"

    @classmethod
    def for_name(cls, name):
        """
        :param name: A dialect code ("fr"), english name ("French") or
            native name ("français"), case is ignored.
        :returns: The language, or None if there is no such dialect.
        """
        return resolve_language(name)

    def classify(self, text):
        """
        Classify text read from the start of a line up to a scope
        terminator.

        :returns: A Classification, with kind ScopeKind.UNKNOWN if the text
            does not start with a keyword of this language.
        """
        stripped = text.strip()
        if stripped in self.scopes:
            return Classification(self.scopes[stripped], spelling=stripped)
        for spelling, keyword in self.steps:
            if text.startswith(spelling):
                return Classification(ScopeKind.STEP, keyword, spelling)
            if stripped == spelling.strip():
                return Classification(ScopeKind.STEP, keyword, stripped)
        return UNKNOWN


@lru_cache(maxsize=None)
def resolve_language(name):
    if not name:
        return None
    name = name.strip()
    dialect = Dialect.for_name(name)
    if dialect is not None:
        return Language(name, dialect)
    folded = name.casefold()
    for code, spec in DIALECTS.items():
        names = (code, spec.get("name", ""), spec.get("native", ""))
        if folded in (n.casefold() for n in names):
            return Language(code, Dialect(spec))
    return None

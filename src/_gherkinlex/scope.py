from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Optional


@unique
class StepKeyword(Enum):
    GIVEN = auto()
    WHEN = auto()
    THEN = auto()
    AND = auto()
    BUT = auto()


@unique
class ScopeKind(Enum):
    FEATURE = auto()
    RULE = auto()
    BACKGROUND = auto()
    SCENARIO = auto()
    SCENARIO_OUTLINE = auto()
    EXAMPLES = auto()
    STEP = auto()
    UNKNOWN = auto()

    @classmethod
    def structural(cls):
        """
        The scopes that open a block and are followed by a title.
        """
        return (
            cls.FEATURE,
            cls.RULE,
            cls.BACKGROUND,
            cls.SCENARIO,
            cls.SCENARIO_OUTLINE,
            cls.EXAMPLES,
        )

    def is_step(self):
        return self == ScopeKind.STEP


@dataclass(frozen=True)
class Classification:
    """
    The result of classifying the start of a line, ie.
    Classification(ScopeKind.STEP, StepKeyword.GIVEN, "Given ") for
    "Given I am logged in".

    :param spelling: The keyword as it is spelled in the classified text,
        for steps this is the prefix to skip to get to the step text.
    """

    kind: ScopeKind
    keyword: Optional[StepKeyword] = None
    spelling: str = ""


UNKNOWN = Classification(ScopeKind.UNKNOWN)

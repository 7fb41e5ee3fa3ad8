from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    NEWLINE = auto()
    TAG = auto()
    TABLE_CELL = auto()
    TABLE_HEADER = auto()
    TITLE = auto()
    STRING = auto()
    INTEGER = auto()
    MATCH = auto()
    SCOPE = auto()
    KEYWORD = auto()
    DESCRIPTION = auto()

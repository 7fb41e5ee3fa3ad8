"""
Character level helpers for reading from a text stream. The stream position
is the cursor: after a read, the stream is positioned at the first character
that was not consumed.
"""

NEWLINE = "\n"
COMMENT = "#"
TAG_MARKER = "@"
TABLE_CELL_DELIMITER = "|"
ESCAPE = "\\"
TABLE_HEADER_OPEN = "<"
TABLE_HEADER_CLOSE = ">"
QUOTE = '"'
SCOPE_TERMINATOR = ":"

# Escapes recognized inside table cells, mapped to what they decode to.
CELL_ESCAPES = {
    TABLE_CELL_DELIMITER: TABLE_CELL_DELIMITER,
    "n": NEWLINE,
    ESCAPE: ESCAPE,
}


def is_space(char):
    return char != NEWLINE and char.isspace()


def is_tag_character(char):
    return not char.isspace() and char not in (TAG_MARKER, COMMENT)


def is_symbol(char):
    """
    Symbols end the free text following a step keyword.
    """
    return char in (QUOTE, TABLE_HEADER_OPEN) or char.isdigit()


def peek(stream):
    """
    :returns: The character at the current position, or "" at end of stream.
    """
    start = stream.tell()
    char = stream.read(1)
    stream.seek(start)
    return char


def read_line_until(stream, predicate):
    """
    Read characters until end of line, end of stream or a character
    for which predicate is true. None of those are consumed.
    """
    chars = []
    position = stream.tell()
    read_char = stream.read(1)
    while read_char and read_char != NEWLINE and not predicate(read_char):
        chars.append(read_char)
        position = stream.tell()
        read_char = stream.read(1)
    stream.seek(position)
    return "".join(chars)


def read_cell_until(stream, predicate):
    """
    As read_line_until, but a backslash followed by a cell delimiter, another
    backslash or the letter n is read as one escaped character, so an
    escaped delimiter never satisfies predicate.
    """
    chars = []
    position = stream.tell()
    read_char = stream.read(1)
    while read_char and read_char != NEWLINE:
        if read_char == ESCAPE:
            after_escape = stream.tell()
            next_char = stream.read(1)
            if next_char in CELL_ESCAPES:
                chars.append(CELL_ESCAPES[next_char])
                position = stream.tell()
                read_char = stream.read(1)
                continue
            stream.seek(after_escape)
        if predicate(read_char):
            break
        chars.append(read_char)
        position = stream.tell()
        read_char = stream.read(1)
    stream.seek(position)
    return "".join(chars)


def skip_space(stream):
    """
    Skip a run of space characters, not including newlines.

    :returns: Whether any space was skipped.
    """
    start = stream.tell()
    read_line_until(stream, lambda c: not is_space(c))
    return stream.tell() != start


def strip_space(text):
    """
    Remove leading and trailing space characters, keeping newlines.
    """
    start = 0
    end = len(text)
    while start < end and is_space(text[start]):
        start += 1
    while end > start and is_space(text[end - 1]):
        end -= 1
    return text[start:end]

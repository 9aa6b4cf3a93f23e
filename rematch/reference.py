"""
The classic string-walking matcher.

Works on the pattern text itself instead of a symbol sequence:

    c    matches the literal character c
    .    matches any single character
    ^    matches the beginning of the text
    $    matches the end of the text
    *    matches zero or more of the previous character

A '^' that is not first or a '$' that is not last is read as a literal
character here; the symbol matcher rejects those patterns instead.
"""

from .config import ANY_CHAR, REPEAT, START_ANCHOR, END_ANCHOR


def match_regexp(regexp: str, text: str) -> bool:

    if regexp.startswith(START_ANCHOR):
        return match_here(regexp[1:], text)

    while True:
        if match_here(regexp, text):
            return True
        if not text:
            return False
        text = text[1:]


def match_here(regexp: str, text: str) -> bool:

    if not regexp:
        return True

    if len(regexp) >= 2 and regexp[1] == REPEAT:
        return match_star(regexp[0], regexp[2:], text)

    if regexp == END_ANCHOR:
        return not text

    if text and (regexp[0] == ANY_CHAR or regexp[0] == text[0]):
        return match_here(regexp[1:], text[1:])

    return False


def match_star(starred: str, regexp: str, text: str) -> bool:

    while True:
        # zero instances of `starred` at this point
        if match_here(regexp, text):
            return True
        if not text or not (starred == ANY_CHAR or text[0] == starred):
            return False
        text = text[1:]

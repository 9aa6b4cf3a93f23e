from typing import Iterator

from .config import START_ANCHOR, END_ANCHOR, REPEAT
from .symbols import Symbol, Symbols, StartAnchor, EndAnchor, Atom, Repeated, kind_of


def iter_symbols(pattern: str) -> Iterator[Symbol]:
    """
    Lazily yields the symbols of `pattern`, one forward pass.

        ^     -> StartAnchor
        $     -> EndAnchor
        c*    -> Repeated(kind(c))
        c     -> Atom(kind(c))

    Anchor placement is not checked here (see matcher.check_anchors).
    """
    i, n = 0, len(pattern)

    def peek(k: int = 0) -> str:
        return pattern[i + k] if i + k < n else ""

    while i < n:
        c = pattern[i]

        # anchors win over lookahead: "^*" is StartAnchor, Literal('*')
        if c == START_ANCHOR:
            yield StartAnchor()
            i += 1
            continue

        if c == END_ANCHOR:
            yield EndAnchor()
            i += 1
            continue

        if peek(1) == REPEAT:
            yield Repeated(kind_of(c))
            i += 2
            continue

        yield Atom(kind_of(c))
        i += 1


def tokenize(pattern: str) -> Symbols:
    return tuple(iter_symbols(pattern))

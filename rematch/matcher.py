from typing import Sequence

from .errors import AnchorPlacementError
from .symbols import Symbol, Kind, StartAnchor, EndAnchor, Atom, Repeated


# =====================
# Anchor placement
# =====================

def check_anchors(symbols: Sequence[Symbol]) -> None:
    """
    '^' is only legal as the first symbol and '$' only as the last.
    Anything else is a malformed pattern, not a non-match.
    """
    last = len(symbols) - 1

    for i, sym in enumerate(symbols):
        if isinstance(sym, StartAnchor) and i != 0:
            raise AnchorPlacementError("^ anchor in illegal position", sym, i)
        if isinstance(sym, EndAnchor) and i != last:
            raise AnchorPlacementError("$ anchor in illegal position", sym, i)


# =====================
# Matching
# =====================

def is_match(symbols: Sequence[Symbol], text: str) -> bool:

    check_anchors(symbols)

    if symbols and isinstance(symbols[0], StartAnchor):
        return match_here(symbols, 1, text, 0)

    # every offset, including the empty suffix at len(text)
    for ti in range(len(text) + 1):
        if match_here(symbols, 0, text, ti):
            return True

    return False


def match_here(symbols: Sequence[Symbol], si: int, text: str, ti: int) -> bool:
    """
    Does symbols[si:] match at text[ti:]?
    Neither suffix is copied; si and ti only move forward.

    Runs of atoms are consumed in a loop, so only repetitions recurse.
    """
    while si < len(symbols):
        sym = symbols[si]

        if isinstance(sym, Repeated):
            return match_star(sym.kind, symbols, si + 1, text, ti)

        if isinstance(sym, EndAnchor):
            return ti == len(text)

        if isinstance(sym, Atom):
            if ti == len(text) or not sym.kind.matches(text[ti]):
                return False
            si += 1
            ti += 1
            continue

        if isinstance(sym, StartAnchor):
            raise AnchorPlacementError("^ anchor in illegal position", sym, si)

        raise TypeError(f"unsupported pattern symbol: {sym!r}")

    return True


def match_star(kind: Kind, symbols: Sequence[Symbol], si: int, text: str, ti: int) -> bool:
    """
    Zero-or-more of `kind`, then symbols[si:].

    Tries the continuation with nothing consumed first; only on failure
    eats one more matching character and decides again.
    """
    while True:
        if match_here(symbols, si, text, ti):
            return True

        if ti == len(text) or not kind.matches(text[ti]):
            return False

        ti += 1

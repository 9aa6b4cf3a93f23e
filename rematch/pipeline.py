from typing import Iterable, Iterator

from .tokenizer import tokenize
from .matcher import check_anchors, is_match
from .errors import AnchorPlacementError
from .symbols import Symbols, StartAnchor
from .logger import log_compile, log_anchor_violation


def compile(pattern: str) -> Symbols:
    symbols = tokenize(pattern)

    try:
        check_anchors(symbols)
    except AnchorPlacementError as e:
        log_anchor_violation(pattern, e.index, e.message)
        raise

    anchored = bool(symbols) and isinstance(symbols[0], StartAnchor)
    log_compile(pattern, len(symbols), anchored)
    return symbols


def match_regexp(pattern: str, text: str) -> bool:
    return is_match(compile(pattern), text)


def search_lines(pattern: str, lines: Iterable[str], invert: bool = False) -> Iterator[str]:
    """
    Yields the lines `pattern` matches (or does not, with invert=True).
    The pattern is compiled once, before the first line is read.
    """
    symbols = compile(pattern)

    def gen() -> Iterator[str]:
        for line in lines:
            if is_match(symbols, line) != invert:
                yield line

    return gen()

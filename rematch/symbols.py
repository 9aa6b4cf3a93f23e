from dataclasses import dataclass
from typing import Tuple, Union

from .config import ANY_CHAR


# =====================
# Character kinds
# =====================

@dataclass(frozen=True)
class AnyChar:

    def matches(self, ch: str) -> bool:
        return True

    def __str__(self) -> str:
        return ANY_CHAR


@dataclass(frozen=True)
class Literal:
    char: str

    def matches(self, ch: str) -> bool:
        return ch == self.char

    def __str__(self) -> str:
        return self.char


Kind = Union[AnyChar, Literal]


def kind_of(c: str) -> Kind:
    if c == ANY_CHAR:
        return AnyChar()
    return Literal(c)


# =====================
# Pattern symbols
# =====================

@dataclass(frozen=True)
class StartAnchor:
    pass


@dataclass(frozen=True)
class EndAnchor:
    pass


@dataclass(frozen=True)
class Atom:
    kind: Kind   # exactly one character


@dataclass(frozen=True)
class Repeated:
    kind: Kind   # zero or more


Symbol = Union[StartAnchor, EndAnchor, Atom, Repeated]

Symbols = Tuple[Symbol, ...]

from dataclasses import dataclass
from typing import Optional

from .symbols import Symbol


@dataclass
class PatternError(Exception):
    """Base class for malformed patterns"""
    message: str
    def __str__(self) -> str:
        return self.message


@dataclass
class AnchorPlacementError(PatternError):
    # '^' not first or '$' not last; never reported as a plain non-match
    symbol: Optional[Symbol] = None
    index: Optional[int] = None

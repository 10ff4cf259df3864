"""
Core abstractions for city name resolution.

Defines the matcher protocol and the tagged result type it produces.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class MatchKind(Enum):
    """Outcome of resolving user input against the reference list."""
    EXACT = "exact"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class MatchResult:
    """
    Immutable result of name resolution.

    Attributes:
        kind: EXACT, FUZZY or NONE
        name: The canonical name (None for NONE)
        score: Similarity score. Dice scores are not bounded by 1.0 because
            repeated letters count every pair of equal positions.
        strategy: Which predicate produced the result ("exact", "close_match", "dice", "none")
        original_query: The raw input that was resolved
    """
    kind: MatchKind
    name: Optional[str]
    score: float
    strategy: str
    original_query: str

    @classmethod
    def exact(cls, name: str, query: str) -> "MatchResult":
        return cls(MatchKind.EXACT, name, 1.0, "exact", query)

    @classmethod
    def fuzzy(cls, name: str, score: float, strategy: str, query: str) -> "MatchResult":
        return cls(MatchKind.FUZZY, name, score, strategy, query)

    @classmethod
    def no_match(cls, query: str) -> "MatchResult":
        return cls(MatchKind.NONE, None, 0.0, "none", query)

    @property
    def found(self) -> bool:
        """True for EXACT and FUZZY results."""
        return self.kind is not MatchKind.NONE

    def __post_init__(self):
        if self.score < 0.0:
            raise ValueError(f"Score must not be negative, got {self.score}")
        if self.found and not self.name:
            raise ValueError(f"{self.kind.name} result requires a name")


class NameMatcher(ABC):
    """Strategy that resolves a query against an ordered list of canonical names."""

    @abstractmethod
    def resolve(
        self,
        query: str,
        candidates: Sequence[str],
    ) -> MatchResult:
        """
        Resolve a query against candidate names.

        :param query: Raw user input
        :param candidates: Canonical names, in tie-break order
        :return: MatchResult (kind NONE if this strategy found nothing)
        """
        pass

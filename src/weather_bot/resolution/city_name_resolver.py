"""
Concrete resolver for city names.

Combines matchers and policy into the complete matching step.
"""
from typing import Sequence, Tuple

from .exact_matcher import ExactNameMatcher
from .fuzzy_matcher import FuzzyNameMatcher
from .name_matcher import MatchResult
from .resolution_policy import ResolutionPolicy


class CityNameResolver:
    """
    Resolves free-text input to one entry of a fixed reference list.

    Usage:
        resolver = CityNameResolver(PROVINCES)
        result = resolver.match("istanbull")
        if result.kind is MatchKind.FUZZY:
            ask_user_to_confirm(result.name)  # "istanbul"
    """

    def __init__(
        self,
        reference: Sequence[str],
        min_score: float = 0.0,
        close_match_cutoff: float = 0.5,
    ):
        """
        :param reference: Canonical names; order is the tie-break order
        :param min_score: Dice score a fuzzy candidate must exceed
        :param close_match_cutoff: Ratio at which a candidate is accepted outright
        """
        if not reference:
            raise ValueError("Reference list must not be empty")

        self._reference: Tuple[str, ...] = tuple(reference)
        self._policy = ResolutionPolicy(
            matchers=[
                ExactNameMatcher(),
                FuzzyNameMatcher(
                    close_match_cutoff=close_match_cutoff,
                    min_score=min_score,
                ),
            ]
        )

    @property
    def reference(self) -> Tuple[str, ...]:
        return self._reference

    def match(self, raw: str) -> MatchResult:
        """
        Resolve raw user input.

        :param raw: Text as typed by the user (e.g., "İSTANBUL", "istanbull")
        :return: EXACT, FUZZY or NONE result
        """
        return self._policy.resolve(raw, self._reference)

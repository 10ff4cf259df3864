"""
Resolution policy for matcher escalation.

Implements the escalation logic: exact → fuzzy.
"""
from typing import List, Sequence

from .name_matcher import NameMatcher, MatchResult


class ResolutionPolicy:
    """
    Policy for escalating through multiple matching strategies.

    Tries matchers in order and returns the first result that found a name.
    Later matchers are never consulted once an earlier one succeeds.
    """

    def __init__(self, matchers: List[NameMatcher]):
        """
        :param matchers: Matchers to try in order (e.g., [ExactNameMatcher, FuzzyNameMatcher])
        """
        if not matchers:
            raise ValueError("At least one matcher must be provided")

        self._matchers = matchers

    def resolve(
        self,
        query: str,
        candidates: Sequence[str],
    ) -> MatchResult:
        """
        Resolve query by trying matchers in order.

        :param query: Query to resolve
        :param candidates: Canonical names in list order
        :return: First found MatchResult, or no match
        """
        for matcher in self._matchers:
            result = matcher.resolve(query, candidates)
            if result.found:
                return result

        return MatchResult.no_match(query)

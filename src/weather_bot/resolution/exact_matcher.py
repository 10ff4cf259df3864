"""
Exact matching strategy for name resolution.

Case-insensitive full-string equality, no letter filtering.
"""
from typing import Sequence

from .name_matcher import NameMatcher, MatchResult
from .normalizer import fold_case


class ExactNameMatcher(NameMatcher):
    """
    Exact match strategy.

    Used as the first strategy in escalation. Punctuation and whitespace are
    significant here, so "ankara!" falls through to the fuzzy pass.
    """

    def resolve(
        self,
        query: str,
        candidates: Sequence[str],
    ) -> MatchResult:
        """
        Find the first candidate equal to the query after case folding.

        :param query: Query to match
        :param candidates: Canonical names in list order
        :return: EXACT result or no match
        """
        folded = fold_case(query)

        for candidate in candidates:
            if fold_case(candidate) == folded:
                return MatchResult.exact(candidate, query)

        return MatchResult.no_match(query)

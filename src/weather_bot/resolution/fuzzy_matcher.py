"""
Fuzzy matching strategy for name resolution.

Handles typos and near-misses ("istanbull" → "istanbul") with two predicates,
evaluated per candidate in list order:
- a close-match ratio (difflib Ratcliff/Obershelp) that short-circuits the scan
- a Dice-style letter overlap score, best candidate kept
"""
from collections import Counter
from difflib import SequenceMatcher, get_close_matches
from typing import Optional, Sequence

from .name_matcher import NameMatcher, MatchResult
from .normalizer import fold_case, normalize

MIN_COMPARABLE_LENGTH = 3


def dice_score(query: str, candidate: str) -> float:
    """
    Letter overlap score: 2 * pairs / (len(a) + len(b)) over normalized tokens.

    ``pairs`` counts every pair of positions holding the same letter, so
    repeated letters inflate the score (it can exceed 1.0).

    Returns 0.0 if either token is shorter than MIN_COMPARABLE_LENGTH.
    """
    a = normalize(query)
    b = normalize(candidate)

    if len(a) < MIN_COMPARABLE_LENGTH or len(b) < MIN_COMPARABLE_LENGTH:
        return 0.0

    counts_b = Counter(b)
    pairs = sum(count * counts_b[letter] for letter, count in Counter(a).items())

    return 2.0 * pairs / (len(a) + len(b))


class FuzzyNameMatcher(NameMatcher):
    """
    Fuzzy match strategy.

    For each candidate in order:
    1. If the close-match ratio reaches ``close_match_cutoff``, return it immediately.
    2. Otherwise score it with dice_score and keep the first highest scorer.

    The two predicates can disagree on the best candidate; whichever candidate
    first trips the close-match predicate wins over any earlier Dice leader.
    """

    def __init__(
        self,
        close_match_cutoff: float = 0.5,
        min_score: float = 0.0,
    ):
        """
        Initialize fuzzy matcher.

        :param close_match_cutoff: Ratio (0.0-1.0) at which a candidate is accepted outright
        :param min_score: Dice score a candidate must exceed to be offered
        """
        if not 0.0 <= close_match_cutoff <= 1.0:
            raise ValueError(
                f"close_match_cutoff must be between 0.0 and 1.0, got {close_match_cutoff}"
            )
        if min_score < 0.0:
            raise ValueError(f"min_score must not be negative, got {min_score}")

        self.close_match_cutoff = close_match_cutoff
        self.min_score = min_score

    def close_match_ratio(self, query: str, candidate: str) -> Optional[float]:
        """
        Ratio (0.0-1.0) if query and candidate count as a close match, else None.

        The ratio is not symmetric; the candidate is the first sequence, as
        in get_close_matches.
        """
        word = fold_case(query)
        possibility = fold_case(candidate)
        if not get_close_matches(word, [possibility], n=1, cutoff=self.close_match_cutoff):
            return None
        return SequenceMatcher(None, possibility, word).ratio()

    def resolve(
        self,
        query: str,
        candidates: Sequence[str],
    ) -> MatchResult:
        """
        Find the best fuzzy candidate.

        :param query: Query to match
        :param candidates: Canonical names in list order
        :return: FUZZY result or no match
        """
        if len(normalize(query)) < MIN_COMPARABLE_LENGTH:
            return MatchResult.no_match(query)

        best_name: Optional[str] = None
        best_score = 0.0

        for candidate in candidates:
            if len(normalize(candidate)) < MIN_COMPARABLE_LENGTH:
                continue

            ratio = self.close_match_ratio(query, candidate)
            if ratio is not None:
                return MatchResult.fuzzy(candidate, ratio, "close_match", query)

            score = dice_score(query, candidate)
            if score > best_score:
                best_score = score
                best_name = candidate

        if best_name is not None and best_score > self.min_score:
            return MatchResult.fuzzy(best_name, best_score, "dice", query)

        return MatchResult.no_match(query)

"""
Name resolution layer.

Turns noisy user input into one canonical city name.

Key components:
- normalize / fold_case: comparison projections
- MatchResult: tagged outcome (exact, fuzzy, none)
- Matchers: Exact and Fuzzy strategies
- ResolutionPolicy: escalation logic for matcher strategies
"""
from .normalizer import fold_case, normalize
from .name_matcher import NameMatcher, MatchKind, MatchResult
from .exact_matcher import ExactNameMatcher
from .fuzzy_matcher import FuzzyNameMatcher, dice_score
from .resolution_policy import ResolutionPolicy
from .city_name_resolver import CityNameResolver
from .resolver_factory import create_city_resolver

__all__ = [
    "fold_case",
    "normalize",
    "NameMatcher",
    "MatchKind",
    "MatchResult",
    "ExactNameMatcher",
    "FuzzyNameMatcher",
    "dice_score",
    "ResolutionPolicy",
    "CityNameResolver",
    "create_city_resolver",
]

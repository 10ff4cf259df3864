"""
Factory for creating the city name resolver from configuration.
"""
from typing import Optional, Sequence

from .city_name_resolver import CityNameResolver
from ..cities import PROVINCES
from ..config import WeatherBotConfig


def create_city_resolver(
    config: Optional[WeatherBotConfig] = None,
    reference: Sequence[str] = PROVINCES,
) -> CityNameResolver:
    """
    Create a CityNameResolver with thresholds taken from config.

    :param config: WeatherBotConfig instance (defaults used if None)
    :param reference: Canonical names to resolve against
    :return: Configured CityNameResolver
    """
    if config is None:
        return CityNameResolver(reference)

    return CityNameResolver(
        reference,
        min_score=config.fuzzy_min_score,
        close_match_cutoff=config.close_match_cutoff,
    )

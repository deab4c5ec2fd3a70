"""Location value object.

Neighborhood categories and the per-category lookup tables used by the
scoring models.
"""

from enum import Enum


class Location(str, Enum):
    """Neighborhood type of a property.

    Attributes:
        URBAN: City center or dense urban area
        SUBURBAN: Residential suburb
        RURAL: Countryside
    """

    URBAN = "urban"
    SUBURBAN = "suburban"
    RURAL = "rural"


# Price multiplier per neighborhood type
LOCATION_MULTIPLIERS: dict[str, float] = {
    Location.URBAN.value: 1.3,
    Location.SUBURBAN.value: 1.0,
    Location.RURAL.value: 0.8,
}

# Neural network input encoding per neighborhood type
LOCATION_INDICATORS: dict[str, float] = {
    Location.URBAN.value: 1.0,
    Location.SUBURBAN.value: 0.5,
    Location.RURAL.value: 0.0,
}

DEFAULT_LOCATION_MULTIPLIER = 1.0
DEFAULT_LOCATION_INDICATOR = 0.0


def location_multiplier(location: str) -> float:
    """Get the price multiplier for a location.

    Unrecognized locations are not an error, they fall back to 1.0.

    Args:
        location: Location name (e.g. "urban")

    Returns:
        Multiplier applied to the raw price estimate
    """
    return LOCATION_MULTIPLIERS.get(location, DEFAULT_LOCATION_MULTIPLIER)


def location_indicator(location: str) -> float:
    """Get the numeric encoding of a location for the network input.

    Args:
        location: Location name (e.g. "urban")

    Returns:
        1.0 for urban, 0.5 for suburban, 0.0 otherwise
    """
    return LOCATION_INDICATORS.get(location, DEFAULT_LOCATION_INDICATOR)

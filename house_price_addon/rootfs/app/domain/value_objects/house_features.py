"""House features value object.

Immutable data structure for price prediction inputs.
"""

import math
import re
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

from .location import Location

_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_finite(value: Any) -> float | None:
    """Convert a number to a finite float, None when it cannot be one."""
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _parse_int(value: Any) -> int:
    """Parse the leading integer of a form value, 0 when there is none."""
    if isinstance(value, (int, float)):
        number = _to_finite(value)
        if number is None:
            return 0
        return int(value) if isinstance(value, int) else int(number)
    match = _INT_PATTERN.match(str(value))
    if not match:
        return 0
    # float() first: int() on very long digit strings raises
    number = _to_finite(match.group(1))
    return int(number) if number is not None else 0


def _parse_float(value: Any) -> float:
    """Parse the leading number of a form value, 0.0 when there is none."""
    if isinstance(value, (int, float)):
        number = _to_finite(value)
    else:
        match = _FLOAT_PATTERN.match(str(value))
        number = _to_finite(match.group(1)) if match else None
    return number if number is not None else 0.0


@dataclass(frozen=True)
class HouseFeatures:
    """Attributes of one property to price.

    Values are not range checked: out-of-range or degenerate numbers flow
    through the scoring formulas and at worst produce the floor price.

    Attributes:
        sqft: Living area in square feet
        bedrooms: Number of bedrooms
        bathrooms: Number of bathrooms (half-bath steps)
        age: Age of the building in years
        location: Neighborhood type ("urban", "suburban" or "rural")
        garage_size: Garage capacity in cars
        lot_size: Lot size in acres
    """

    sqft: int
    bedrooms: int
    bathrooms: float
    age: int
    location: str
    garage_size: int
    lot_size: float

    # Values pre-filled in the prediction form
    DEFAULTS: ClassVar[Mapping[str, Any]] = MappingProxyType({
        "sqft": 2000,
        "bedrooms": 3,
        "bathrooms": 2.0,
        "age": 10,
        "location": Location.SUBURBAN.value,
        "garage_size": 2,
        "lot_size": 0.25,
    })

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "HouseFeatures":
        """Build features from raw form values.

        Integer fields keep the leading integer of their text and float
        fields the leading number; anything unparsable becomes 0. Missing
        fields take the form defaults. The camelCase keys ``garageSize``
        and ``lotSize`` are accepted as aliases.

        Args:
            data: Mapping of field name to raw value

        Returns:
            Coerced house features
        """

        def _raw(name: str, alias: str | None = None) -> Any:
            if name in data:
                return data[name]
            if alias is not None and alias in data:
                return data[alias]
            return cls.DEFAULTS[name]

        location = _raw("location")

        return cls(
            sqft=_parse_int(_raw("sqft")),
            bedrooms=_parse_int(_raw("bedrooms")),
            bathrooms=_parse_float(_raw("bathrooms")),
            age=_parse_int(_raw("age")),
            location=str(location.value if isinstance(location, Location) else location),
            garage_size=_parse_int(_raw("garage_size", "garageSize")),
            lot_size=_parse_float(_raw("lot_size", "lotSize")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert features to a plain dictionary."""
        return asdict(self)

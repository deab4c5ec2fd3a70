"""Value objects for the price prediction domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .house_features import HouseFeatures
from .location import Location, location_indicator, location_multiplier
from .model_profile import (
    BASE_MODEL_KINDS,
    MODEL_PROFILES,
    ModelKind,
    ModelProfile,
    get_model_profile,
)
from .prediction_result import PRICE_FLOOR, PredictionResult
from .prediction_summary import PredictionSummary

__all__ = [
    "BASE_MODEL_KINDS",
    "HouseFeatures",
    "Location",
    "MODEL_PROFILES",
    "ModelKind",
    "ModelProfile",
    "PRICE_FLOOR",
    "PredictionResult",
    "PredictionSummary",
    "get_model_profile",
    "location_indicator",
    "location_multiplier",
]

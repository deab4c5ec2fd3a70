"""Linear regression scorer.

Prices a property with a fixed weighted sum of its features.
"""

from domain.interfaces import IPriceScorer
from domain.value_objects import (
    HouseFeatures,
    ModelKind,
    PredictionResult,
    get_model_profile,
    location_multiplier,
)


class LinearRegressionScorer(IPriceScorer):
    """Weighted-sum price model.

    price = (base + sum(feature * coefficient)) * location multiplier
    """

    BASE_PRICE = 100000.0
    SQFT_PRICE = 120.0
    BEDROOM_PRICE = 15000.0
    BATHROOM_PRICE = 12000.0
    AGE_DEPRECIATION = -800.0
    GARAGE_PRICE = 8000.0
    LOT_PRICE = 25000.0

    @property
    def kind(self) -> ModelKind:
        return ModelKind.LINEAR_REGRESSION

    def predict(self, features: HouseFeatures) -> PredictionResult:
        """Price the property with the fixed coefficients."""
        price = (
            self.BASE_PRICE
            + features.sqft * self.SQFT_PRICE
            + features.bedrooms * self.BEDROOM_PRICE
            + features.bathrooms * self.BATHROOM_PRICE
            + features.age * self.AGE_DEPRECIATION
            + features.garage_size * self.GARAGE_PRICE
            + features.lot_size * self.LOT_PRICE
        ) * location_multiplier(features.location)

        return PredictionResult.from_profile(get_model_profile(self.kind), price)

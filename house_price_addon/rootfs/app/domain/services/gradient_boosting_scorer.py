"""Gradient boosting scorer.

Prices a property by refining a base estimate over a fixed number of
steps with decaying weight.
"""

from domain.interfaces import IPriceScorer
from domain.value_objects import (
    HouseFeatures,
    ModelKind,
    PredictionResult,
    get_model_profile,
    location_multiplier,
)


class GradientBoostingScorer(IPriceScorer):
    """Iterative refinement price model.

    Each step adds the learning-rate-scaled feature contribution, weighted
    by (1 - step / iterations), to the running estimate. The location
    multiplier is applied once at the end.
    """

    INITIAL_PREDICTION = 80000.0
    LEARNING_RATE = 0.1
    ITERATIONS = 50

    SQFT_WEIGHT = 110.0
    BEDROOM_WEIGHT = 13000.0
    BATHROOM_WEIGHT = 10500.0
    AGE_WEIGHT = -700.0
    GARAGE_WEIGHT = 7000.0
    LOT_WEIGHT = 23000.0

    @property
    def kind(self) -> ModelKind:
        return ModelKind.GRADIENT_BOOSTING

    def predict(self, features: HouseFeatures) -> PredictionResult:
        """Price the property after all refinement steps."""
        prediction = self.INITIAL_PREDICTION

        for step in range(self.ITERATIONS):
            residual = self._residual(features)
            prediction += residual * (1 - step / self.ITERATIONS)

        price = prediction * location_multiplier(features.location)
        return PredictionResult.from_profile(get_model_profile(self.kind), price)

    def _residual(self, features: HouseFeatures) -> float:
        """Contribution of the features for one refinement step."""
        return (
            features.sqft * self.SQFT_WEIGHT * self.LEARNING_RATE
            + features.bedrooms * self.BEDROOM_WEIGHT * self.LEARNING_RATE
            + features.bathrooms * self.BATHROOM_WEIGHT * self.LEARNING_RATE
            + features.age * self.AGE_WEIGHT * self.LEARNING_RATE
            + features.garage_size * self.GARAGE_WEIGHT * self.LEARNING_RATE
            + features.lot_size * self.LOT_WEIGHT * self.LEARNING_RATE
        )

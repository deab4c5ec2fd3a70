"""Neural network scorer.

Prices a property with a small fixed feed-forward network.
"""

import numpy as np

from domain.interfaces import IPriceScorer
from domain.value_objects import (
    HouseFeatures,
    ModelKind,
    PredictionResult,
    get_model_profile,
    location_indicator,
)


class NeuralNetworkScorer(IPriceScorer):
    """Two-layer tanh price model with fixed weights.

    Layer 1 transforms all 7 normalized inputs; layer 2 only reads the
    first 5 layer-1 units, so lot size and location never reach the
    output.
    """

    HIDDEN1_WEIGHT = 2.5
    HIDDEN1_BIAS = 0.1
    HIDDEN2_WEIGHT = 1.8
    HIDDEN2_BIAS = 0.2
    HIDDEN2_UNITS = 5
    OUTPUT_SCALE = 50000.0
    OUTPUT_BIAS = 150000.0

    @property
    def kind(self) -> ModelKind:
        return ModelKind.NEURAL_NETWORK

    def predict(self, features: HouseFeatures) -> PredictionResult:
        """Run the network forward and price the property."""
        inputs = self.encode(features)

        hidden1 = np.tanh(inputs * self.HIDDEN1_WEIGHT + self.HIDDEN1_BIAS)
        hidden2 = np.tanh(hidden1[: self.HIDDEN2_UNITS] * self.HIDDEN2_WEIGHT + self.HIDDEN2_BIAS)

        output = float(hidden2.sum()) * self.OUTPUT_SCALE + self.OUTPUT_BIAS
        return PredictionResult.from_profile(get_model_profile(self.kind), output)

    @staticmethod
    def encode(features: HouseFeatures) -> np.ndarray:
        """Normalize features into the network input vector.

        Args:
            features: Attributes of the property

        Returns:
            Array of 7 inputs: sqft/1000, bedrooms/5, bathrooms/4, age/50,
            garage_size/3, lot_size and the location indicator
        """
        return np.array(
            [
                features.sqft / 1000,
                features.bedrooms / 5,
                features.bathrooms / 4,
                features.age / 50,
                features.garage_size / 3,
                features.lot_size,
                location_indicator(features.location),
            ],
            dtype=float,
        )

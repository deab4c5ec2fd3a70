"""Price scorer interface.

Contract shared by every price model.
"""

from abc import ABC, abstractmethod

from domain.value_objects import HouseFeatures, ModelKind, PredictionResult


class IPriceScorer(ABC):
    """Contract for price scoring operations."""

    @property
    @abstractmethod
    def kind(self) -> ModelKind:
        """Model variant implemented by this scorer."""
        pass

    @abstractmethod
    def predict(self, features: HouseFeatures) -> PredictionResult:
        """Estimate the price of a property.

        Implementations accept any features, including zero, negative and
        unrecognized values, and never report a price below PRICE_FLOOR.

        Args:
            features: Attributes of the property

        Returns:
            PredictionResult with the estimated price and model metadata
        """
        pass

"""Valuation Application Service.

Main application service that exposes the price prediction engine
to callers such as the HTTP API.
"""

import logging
from datetime import datetime

from domain.services import PricePredictionEngine
from domain.value_objects import (
    HouseFeatures,
    ModelKind,
    ModelProfile,
    PredictionResult,
    PredictionSummary,
)

_LOGGER = logging.getLogger(__name__)


class ValuationApplicationService:
    """Application service for price predictions.

    This service is the main entry point for all valuation use cases.
    It delegates to the domain engine and logs each request.
    """

    def __init__(self, engine: PricePredictionEngine, seeded: bool = False) -> None:
        """Initialize the valuation application service.

        Args:
            engine: Price prediction engine
            seeded: Whether the engine's random source was given a fixed seed
        """
        self._engine = engine
        self._seeded = seeded

    def predict_all(self, features: HouseFeatures) -> list[PredictionResult]:
        """Price a property with every model.

        Args:
            features: Attributes of the property

        Returns:
            Results of all models, most accurate first
        """
        _LOGGER.debug(
            "Predicting price: sqft=%.0f, bedrooms=%d, bathrooms=%.1f, location=%s",
            features.sqft,
            features.bedrooms,
            features.bathrooms,
            features.location,
        )
        results = self._engine.predict_all(features)
        _LOGGER.debug(
            "Prediction results: %s",
            ", ".join(f"{r.model}={r.price:.0f}" for r in results),
        )
        return results

    def get_best(self, features: HouseFeatures) -> PredictionResult:
        """Price a property with the ensemble model only."""
        result = self._engine.get_best(features)
        _LOGGER.debug(
            "Best prediction: %.0f (confidence: %.2f)",
            result.price,
            result.confidence,
        )
        return result

    def predict_model(self, features: HouseFeatures, model_name: str) -> PredictionResult:
        """Price a property with one named model.

        Args:
            features: Attributes of the property
            model_name: Model label or enum name (e.g. "Random Forest")

        Returns:
            Result of that model

        Raises:
            ValueError: If the model name is unknown
        """
        kind = ModelKind.parse(model_name)
        result = self._engine.predict(features, kind)
        _LOGGER.debug("%s prediction: %.0f", kind.value, result.price)
        return result

    def summarize(
        self, features: HouseFeatures
    ) -> tuple[list[PredictionResult], PredictionSummary]:
        """Price a property with every model and summarize the results.

        Args:
            features: Attributes of the property

        Returns:
            Tuple of (sorted results, summary over those same results)
        """
        results = self.predict_all(features)
        return results, PredictionSummary.from_results(results)

    def list_models(self) -> list[ModelProfile]:
        """List the static profiles of all models, most accurate first."""
        return self._engine.profiles()

    def get_status(self) -> dict:
        """Get the current status of the valuation service.

        Returns:
            Dictionary with status information
        """
        return {
            "ready": True,
            "model_count": len(self.list_models()),
            "seeded": self._seeded,
            "timestamp": datetime.now().isoformat(),
        }

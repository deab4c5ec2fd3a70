"""Ensemble scorer.

Combines the base price models into one accuracy-weighted estimate.
"""

from typing import Sequence

from domain.interfaces import IPriceScorer
from domain.value_objects import (
    PRICE_FLOOR,
    HouseFeatures,
    ModelKind,
    PredictionResult,
    get_model_profile,
)


class EnsembleScorer(IPriceScorer):
    """Accuracy-weighted average over the base price models.

    Every base scorer runs exactly once per prediction. The price is the
    accuracy-weighted mean of their prices, the confidence the plain mean
    of their confidences, and the accuracy a fixed constant.
    """

    def __init__(self, scorers: Sequence[IPriceScorer]) -> None:
        """Initialize the ensemble scorer.

        Args:
            scorers: Base scorers to combine, evaluated in this order
        """
        if not scorers:
            raise ValueError("scorers cannot be empty")
        self._scorers = tuple(scorers)

    @property
    def kind(self) -> ModelKind:
        return ModelKind.ENSEMBLE

    def predict(self, features: HouseFeatures) -> PredictionResult:
        """Run every base scorer once and combine their results."""
        return self.combine([scorer.predict(features) for scorer in self._scorers])

    def combine(self, results: Sequence[PredictionResult]) -> PredictionResult:
        """Combine base model results into the ensemble result.

        Args:
            results: Results of the base models

        Returns:
            PredictionResult with the accuracy-weighted price

        Raises:
            ValueError: If results is empty
        """
        if not results:
            raise ValueError("results must contain at least one prediction")

        total_weight = sum(r.accuracy for r in results)
        weighted_price = sum(r.price * r.accuracy for r in results) / total_weight
        avg_confidence = sum(r.confidence for r in results) / len(results)

        # Base prices are all floored, so this only absorbs rounding
        return PredictionResult(
            model=self.kind.value,
            price=max(weighted_price, PRICE_FLOOR),
            confidence=avg_confidence,
            accuracy=get_model_profile(self.kind).accuracy,
        )

"""Prediction summary value object.

Aggregates derived from a list of model predictions.
"""

from dataclasses import dataclass
from typing import Sequence

from .prediction_result import PredictionResult


@dataclass(frozen=True)
class PredictionSummary:
    """Summary figures over the predictions of several models.

    Attributes:
        best: Prediction of the most accurate model
        average_price: Mean of all predicted prices
        min_price: Lowest predicted price
        max_price: Highest predicted price
        model_count: Number of predictions summarized
    """

    best: PredictionResult
    average_price: float
    min_price: float
    max_price: float
    model_count: int

    @classmethod
    def from_results(cls, results: Sequence[PredictionResult]) -> "PredictionSummary":
        """Summarize a sequence of predictions.

        Args:
            results: Predictions to summarize, in any order

        Returns:
            The summary; on equal accuracy the earliest prediction is best

        Raises:
            ValueError: If results is empty
        """
        if not results:
            raise ValueError("results must contain at least one prediction")

        best = results[0]
        for result in results[1:]:
            if result.accuracy > best.accuracy:
                best = result

        prices = [r.price for r in results]
        return cls(
            best=best,
            average_price=sum(prices) / len(prices),
            min_price=min(prices),
            max_price=max(prices),
            model_count=len(results),
        )

    @property
    def price_spread(self) -> float:
        """Difference between the highest and lowest price."""
        return self.max_price - self.min_price

    def to_dict(self) -> dict:
        """Convert the summary to its JSON shape."""
        return {
            "best": self.best.to_dict(),
            "average_price": self.average_price,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "price_spread": self.price_spread,
            "model_count": self.model_count,
        }

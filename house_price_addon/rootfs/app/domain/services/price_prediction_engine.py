"""Price prediction engine.

Domain service running the price models on one property.
"""

import random
import threading

from domain.interfaces import IPriceScorer
from domain.value_objects import (
    MODEL_PROFILES,
    HouseFeatures,
    ModelKind,
    ModelProfile,
    PredictionResult,
)

from .ensemble_scorer import EnsembleScorer
from .gradient_boosting_scorer import GradientBoostingScorer
from .linear_regression_scorer import LinearRegressionScorer
from .neural_network_scorer import NeuralNetworkScorer
from .random_forest_scorer import RandomForestScorer

# Evaluation order of predict_all, also the tie-break of the accuracy sort
PREDICTION_ORDER: tuple[ModelKind, ...] = (
    ModelKind.ENSEMBLE,
    ModelKind.RANDOM_FOREST,
    ModelKind.NEURAL_NETWORK,
    ModelKind.GRADIENT_BOOSTING,
    ModelKind.LINEAR_REGRESSION,
)


class PricePredictionEngine:
    """Entry point for price predictions.

    Holds one scorer per ModelKind. The ensemble reuses the base scorers,
    so the random forest shares a single random source everywhere.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        seed: int | None = None,
        lock: "threading.Lock | None" = None,
    ) -> None:
        """Initialize the price prediction engine.

        Args:
            rng: Random source for the random forest
            seed: Seed for a private random source, used when rng is None
            lock: Lock guarding rng, needed when rng is shared elsewhere
        """
        base_scorers: list[IPriceScorer] = [
            LinearRegressionScorer(),
            RandomForestScorer(rng=rng, seed=seed, lock=lock),
            GradientBoostingScorer(),
            NeuralNetworkScorer(),
        ]
        self._scorers: dict[ModelKind, IPriceScorer] = {s.kind: s for s in base_scorers}
        self._scorers[ModelKind.ENSEMBLE] = EnsembleScorer(base_scorers)

    def predict_all(self, features: HouseFeatures) -> list[PredictionResult]:
        """Run every model, most accurate first.

        The ensemble reuses the same scorer instances. The random forest
        result listed here still differs from the one folded into the
        ensemble price, because each call takes its own draws from the
        shared random source.

        Args:
            features: Attributes of the property

        Returns:
            Five results sorted by descending accuracy
        """
        results = [self._scorers[kind].predict(features) for kind in PREDICTION_ORDER]
        return sorted(results, key=lambda r: r.accuracy, reverse=True)

    def get_best(self, features: HouseFeatures) -> PredictionResult:
        """Run only the ensemble model."""
        return self._scorers[ModelKind.ENSEMBLE].predict(features)

    def predict(self, features: HouseFeatures, kind: ModelKind) -> PredictionResult:
        """Run a single model.

        Args:
            features: Attributes of the property
            kind: Model to run

        Returns:
            Result of that model
        """
        return self._scorers[kind].predict(features)

    def scorer(self, kind: ModelKind) -> IPriceScorer:
        """Get the scorer implementing a model."""
        return self._scorers[kind]

    @staticmethod
    def profiles() -> list[ModelProfile]:
        """Static metadata of all models, most accurate first."""
        ordered = [MODEL_PROFILES[kind] for kind in PREDICTION_ORDER]
        return sorted(ordered, key=lambda p: p.accuracy, reverse=True)

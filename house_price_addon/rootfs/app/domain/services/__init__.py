"""Domain services for price prediction.

Services contain pure business logic and operate on value objects.
"""

from .ensemble_scorer import EnsembleScorer
from .gradient_boosting_scorer import GradientBoostingScorer
from .linear_regression_scorer import LinearRegressionScorer
from .neural_network_scorer import NeuralNetworkScorer
from .price_prediction_engine import PREDICTION_ORDER, PricePredictionEngine
from .random_forest_scorer import RandomForestScorer

__all__ = [
    "EnsembleScorer",
    "GradientBoostingScorer",
    "LinearRegressionScorer",
    "NeuralNetworkScorer",
    "PREDICTION_ORDER",
    "PricePredictionEngine",
    "RandomForestScorer",
]

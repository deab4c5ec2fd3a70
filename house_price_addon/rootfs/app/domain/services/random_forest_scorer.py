"""Random forest scorer.

Prices a property by averaging many randomly jittered weighted sums,
one per simulated tree.
"""

import logging
import random
import threading

from domain.interfaces import IPriceScorer
from domain.value_objects import (
    PRICE_FLOOR,
    HouseFeatures,
    ModelKind,
    PredictionResult,
    get_model_profile,
    location_multiplier,
)

_LOGGER = logging.getLogger(__name__)


class RandomForestScorer(IPriceScorer):
    """Randomized ensemble-of-trees price model.

    Every tree draws a jitter factor and one coefficient per feature from
    COEFFICIENT_RANGES, prices the property with them and the result is
    averaged over all trees. Repeated calls give different prices unless
    the random source is seeded.
    """

    TREES = 100
    BASE_PRICE = 95000.0
    JITTER_RANGE = (0.9, 1.1)

    # Drawn in this order for every tree, after the jitter factor
    COEFFICIENT_RANGES: dict[str, tuple[float, float]] = {
        "sqft": (115.0, 125.0),
        "bedrooms": (14000.0, 16000.0),
        "bathrooms": (11000.0, 13000.0),
        "age": (-850.0, -750.0),
        "garage_size": (7500.0, 8500.0),
        "lot_size": (24000.0, 26000.0),
    }

    def __init__(
        self,
        rng: random.Random | None = None,
        seed: int | None = None,
        lock: "threading.Lock | None" = None,
    ) -> None:
        """Initialize the random forest scorer.

        Draws from the random source are serialised by the lock. Scorers
        given the same rng must also be given the same lock, otherwise
        their draws can interleave.

        Args:
            rng: Random source to draw from, possibly shared with the caller
            seed: Seed for a private random source, used when rng is None
            lock: Lock guarding rng, a private one when None
        """
        self._random = rng if rng is not None else random.Random(seed)
        self._lock = lock if lock is not None else threading.Lock()

    @property
    def kind(self) -> ModelKind:
        return ModelKind.RANDOM_FOREST

    def predict(self, features: HouseFeatures) -> PredictionResult:
        """Price the property as the mean over all trees."""
        multiplier = location_multiplier(features.location)
        total_price = 0.0

        with self._lock:
            for _ in range(self.TREES):
                total_price += self._tree_price(features) * multiplier

        price = total_price / self.TREES
        _LOGGER.debug("Random forest averaged %d trees: %.2f", self.TREES, price)
        return PredictionResult.from_profile(get_model_profile(self.kind), price)

    def _tree_price(self, features: HouseFeatures) -> float:
        """Price the property with one tree's randomly drawn coefficients."""
        jitter = self._random.uniform(*self.JITTER_RANGE)
        price = self.BASE_PRICE * jitter
        for name, (low, high) in self.COEFFICIENT_RANGES.items():
            price += getattr(features, name) * self._random.uniform(low, high) * jitter
        return price

    def price_bounds(self, features: HouseFeatures) -> tuple[float, float]:
        """Compute the range every random forest price falls in.

        Each term is bounded by its extreme coefficients, then by the
        extreme jitter factors, then scaled by the location multiplier.

        Args:
            features: Attributes of the property

        Returns:
            Tuple of (lowest, highest) possible price, floor applied
        """
        low_sum = self.BASE_PRICE
        high_sum = self.BASE_PRICE
        for name, (low, high) in self.COEFFICIENT_RANGES.items():
            value = getattr(features, name)
            term_low, term_high = sorted((value * low, value * high))
            low_sum += term_low
            high_sum += term_high

        jitter_low, jitter_high = self.JITTER_RANGE
        low = min(low_sum * jitter_low, low_sum * jitter_high)
        high = max(high_sum * jitter_low, high_sum * jitter_high)

        multiplier = location_multiplier(features.location)
        low, high = sorted((low * multiplier, high * multiplier))
        return max(low, PRICE_FLOOR), max(high, PRICE_FLOOR)

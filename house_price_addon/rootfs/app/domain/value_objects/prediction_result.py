"""Prediction result value object.

Immutable data structure for price model outputs.
"""

from dataclasses import asdict, dataclass

from .model_profile import ModelProfile

# Lowest price any model may report
PRICE_FLOOR = 50000.0


@dataclass(frozen=True)
class PredictionResult:
    """Price estimate produced by one model.

    Attributes:
        model: Display label of the model that produced the estimate
        price: Estimated market price, never below PRICE_FLOOR
        confidence: Assumed reliability of the model (0.0 to 1.0]
        accuracy: Model accuracy used for ranking and weighting (0.0 to 1.0]
    """

    model: str
    price: float
    confidence: float
    accuracy: float

    def __post_init__(self) -> None:
        """Validate prediction result values."""
        if not self.model:
            raise ValueError("model cannot be empty")
        if not 0.0 < self.confidence <= 1.0:
            raise ValueError(f"confidence must be in (0.0, 1.0], got {self.confidence}")
        if not 0.0 < self.accuracy <= 1.0:
            raise ValueError(f"accuracy must be in (0.0, 1.0], got {self.accuracy}")

    @classmethod
    def from_profile(cls, profile: ModelProfile, price: float) -> "PredictionResult":
        """Build a result carrying the static metadata of a model.

        The price is raised to PRICE_FLOOR when it falls below it.
        """
        return cls(
            model=profile.label,
            price=max(price, PRICE_FLOOR),
            confidence=profile.confidence,
            accuracy=profile.accuracy,
        )

    def to_dict(self) -> dict[str, float | str]:
        """Convert the result to its JSON shape."""
        return asdict(self)

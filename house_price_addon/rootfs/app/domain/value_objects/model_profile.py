"""Model profile value objects.

Closed set of price models and their static metadata.
"""

from dataclasses import dataclass
from enum import Enum


class ModelKind(str, Enum):
    """Price models known to the engine.

    The value is the display label carried by each PredictionResult.
    """

    LINEAR_REGRESSION = "Linear Regression"
    RANDOM_FOREST = "Random Forest"
    GRADIENT_BOOSTING = "Gradient Boosting"
    NEURAL_NETWORK = "Neural Network"
    ENSEMBLE = "Ensemble"

    @classmethod
    def parse(cls, name: str) -> "ModelKind":
        """Resolve a model from its label or enum name.

        Matching ignores case, and treats spaces, dashes and underscores
        alike, so "random-forest", "RANDOM_FOREST" and "Random Forest" all
        resolve to RANDOM_FOREST.

        Raises:
            ValueError: If no model matches
        """
        wanted = name.strip().lower().replace("-", " ").replace("_", " ")
        for kind in cls:
            if wanted in (kind.value.lower(), kind.name.lower().replace("_", " ")):
                return kind
        raise ValueError(f"Unknown model: {name!r}")


@dataclass(frozen=True)
class ModelProfile:
    """Static metadata of a price model.

    These figures are fixed per model, not measured on data.

    Attributes:
        kind: Model variant
        confidence: Assumed reliability (0.0 to 1.0]
        accuracy: Ranking and weighting key (0.0 to 1.0]
        description: Short human-readable description
    """

    kind: ModelKind
    confidence: float
    accuracy: float
    description: str = ""

    def __post_init__(self) -> None:
        """Validate model profile values."""
        if not 0.0 < self.confidence <= 1.0:
            raise ValueError(f"confidence must be in (0.0, 1.0], got {self.confidence}")
        if not 0.0 < self.accuracy <= 1.0:
            raise ValueError(f"accuracy must be in (0.0, 1.0], got {self.accuracy}")

    @property
    def label(self) -> str:
        """Display label of the model."""
        return self.kind.value


_BASE_PROFILES = (
    ModelProfile(
        ModelKind.LINEAR_REGRESSION,
        confidence=0.85,
        accuracy=0.82,
        description="Fixed weighted sum of the property features",
    ),
    ModelProfile(
        ModelKind.RANDOM_FOREST,
        confidence=0.92,
        accuracy=0.89,
        description="Average of 100 randomly jittered weighted sums",
    ),
    ModelProfile(
        ModelKind.GRADIENT_BOOSTING,
        confidence=0.88,
        accuracy=0.86,
        description="50 decaying refinement steps from a base estimate",
    ),
    ModelProfile(
        ModelKind.NEURAL_NETWORK,
        confidence=0.90,
        accuracy=0.87,
        description="Two tanh layers over normalized features",
    ),
)

BASE_MODEL_KINDS: tuple[ModelKind, ...] = tuple(p.kind for p in _BASE_PROFILES)

MODEL_PROFILES: dict[ModelKind, ModelProfile] = {p.kind: p for p in _BASE_PROFILES}
MODEL_PROFILES[ModelKind.ENSEMBLE] = ModelProfile(
    ModelKind.ENSEMBLE,
    confidence=sum(p.confidence for p in _BASE_PROFILES) / len(_BASE_PROFILES),
    accuracy=0.93,
    description="Accuracy-weighted average of the four base models",
)


def get_model_profile(kind: ModelKind) -> ModelProfile:
    """Get the static profile of a model."""
    return MODEL_PROFILES[kind]

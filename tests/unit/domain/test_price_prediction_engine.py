"""Tests for the price prediction engine and prediction summaries."""

import pytest
from domain.services import PricePredictionEngine
from domain.value_objects import (
    PRICE_FLOOR,
    HouseFeatures,
    ModelKind,
    PredictionResult,
    PredictionSummary,
)

EXPECTED_ORDER = [
    "Ensemble",
    "Random Forest",
    "Neural Network",
    "Gradient Boosting",
    "Linear Regression",
]


@pytest.fixture
def features() -> HouseFeatures:
    """Reference property used across engine tests."""
    return HouseFeatures(
        sqft=2000,
        bedrooms=3,
        bathrooms=2.0,
        age=10,
        location="suburban",
        garage_size=2,
        lot_size=0.25,
    )


class TestPricePredictionEngine:
    """Tests for PricePredictionEngine."""

    def test_predict_all_returns_five_results(self, features: HouseFeatures) -> None:
        """Test that every model contributes one result."""
        results = PricePredictionEngine(seed=1).predict_all(features)
        assert len(results) == 5
        assert {r.model for r in results} == {kind.value for kind in ModelKind}

    def test_predict_all_sorted_by_accuracy(self, features: HouseFeatures) -> None:
        """Test the descending accuracy order."""
        results = PricePredictionEngine(seed=1).predict_all(features)

        assert [r.model for r in results] == EXPECTED_ORDER
        accuracies = [r.accuracy for r in results]
        assert accuracies == sorted(accuracies, reverse=True)
        assert accuracies == [0.93, 0.89, 0.87, 0.86, 0.82]

    @pytest.mark.parametrize("location", ["urban", "suburban", "rural", "unknown"])
    def test_predict_all_respects_price_floor(self, location: str) -> None:
        """Test the floor for every result on a degenerate property."""
        features = HouseFeatures(
            sqft=-1000, bedrooms=0, bathrooms=0.0, age=500,
            location=location, garage_size=0, lot_size=0.0,
        )
        for result in PricePredictionEngine(seed=2).predict_all(features):
            assert result.price >= PRICE_FLOOR

    def test_deterministic_models_repeat(self, features: HouseFeatures) -> None:
        """Test that the non-random models agree across calls and engines."""
        first = {r.model: r for r in PricePredictionEngine(seed=1).predict_all(features)}
        second = {r.model: r for r in PricePredictionEngine(seed=99).predict_all(features)}

        for name in ("Linear Regression", "Gradient Boosting", "Neural Network"):
            assert first[name] == second[name]

    def test_linear_result_matches_reference(self, features: HouseFeatures) -> None:
        """Test the exact linear price inside predict_all."""
        results = PricePredictionEngine(seed=1).predict_all(features)
        assert results[-1] == PredictionResult("Linear Regression", 423250.0, 0.85, 0.82)

    def test_same_seed_gives_same_results(self, features: HouseFeatures) -> None:
        """Test that seeded engines are reproducible."""
        assert (
            PricePredictionEngine(seed=10).predict_all(features)
            == PricePredictionEngine(seed=10).predict_all(features)
        )

    def test_ensemble_uses_its_own_forest_draw(self, features: HouseFeatures) -> None:
        """Test that the listed forest result is not the one inside the ensemble.

        The ensemble runs first and consumes the first forest draw; the
        standalone forest result comes from the second draw.
        """
        engine = PricePredictionEngine(seed=7)
        results = {r.model: r for r in engine.predict_all(features)}

        replay = PricePredictionEngine(seed=7)
        forest = replay.scorer(ModelKind.RANDOM_FOREST)
        ensemble_forest = forest.predict(features)
        standalone_forest = forest.predict(features)

        assert results["Random Forest"] == standalone_forest
        assert results["Random Forest"].price != ensemble_forest.price

        ensemble = replay.scorer(ModelKind.ENSEMBLE)
        expected = ensemble.combine([
            replay.predict(features, ModelKind.LINEAR_REGRESSION),
            ensemble_forest,
            replay.predict(features, ModelKind.GRADIENT_BOOSTING),
            replay.predict(features, ModelKind.NEURAL_NETWORK),
        ])
        assert results["Ensemble"].price == pytest.approx(expected.price, abs=1e-9)

    def test_ensemble_confidence_is_mean_of_base(self, features: HouseFeatures) -> None:
        """Test the ensemble confidence in the full run."""
        results = {r.model: r for r in PricePredictionEngine(seed=1).predict_all(features)}
        assert results["Ensemble"].confidence == pytest.approx(0.8875)

    def test_get_best_returns_ensemble(self, features: HouseFeatures) -> None:
        """Test that get_best runs the ensemble only."""
        result = PricePredictionEngine(seed=1).get_best(features)
        assert result.model == "Ensemble"
        assert result.accuracy == 0.93

    def test_get_best_consumes_one_forest_draw(self, features: HouseFeatures) -> None:
        """Test that get_best does not run the other models separately."""
        engine = PricePredictionEngine(seed=4)
        engine.get_best(features)
        after_best = engine.predict(features, ModelKind.RANDOM_FOREST)

        replay = PricePredictionEngine(seed=4)
        replay.predict(features, ModelKind.RANDOM_FOREST)
        assert replay.predict(features, ModelKind.RANDOM_FOREST) == after_best

    def test_predict_single_model(self, features: HouseFeatures) -> None:
        """Test running one model by kind."""
        result = PricePredictionEngine().predict(features, ModelKind.LINEAR_REGRESSION)
        assert result.price == 423250.0

    def test_profiles_sorted_by_accuracy(self) -> None:
        """Test the static profile listing."""
        profiles = PricePredictionEngine.profiles()
        assert [p.label for p in profiles] == EXPECTED_ORDER


class TestPredictionSummary:
    """Tests for PredictionSummary value object."""

    def test_summary_from_results(self) -> None:
        """Test best, average and range over results."""
        results = [
            PredictionResult("Ensemble", 400000.0, 0.8875, 0.93),
            PredictionResult("Random Forest", 420000.0, 0.92, 0.89),
            PredictionResult("Linear Regression", 300000.0, 0.85, 0.82),
        ]
        summary = PredictionSummary.from_results(results)

        assert summary.best.model == "Ensemble"
        assert summary.average_price == pytest.approx(373333.3333333)
        assert summary.min_price == 300000.0
        assert summary.max_price == 420000.0
        assert summary.price_spread == 120000.0
        assert summary.model_count == 3

    def test_best_is_found_in_any_order(self) -> None:
        """Test that the most accurate result wins regardless of position."""
        results = [
            PredictionResult("Linear Regression", 300000.0, 0.85, 0.82),
            PredictionResult("Ensemble", 400000.0, 0.8875, 0.93),
        ]
        assert PredictionSummary.from_results(results).best.model == "Ensemble"

    def test_first_result_wins_ties(self) -> None:
        """Test that equal accuracy keeps the earliest result."""
        results = [
            PredictionResult("A", 100000.0, 0.5, 0.9),
            PredictionResult("B", 200000.0, 0.5, 0.9),
        ]
        assert PredictionSummary.from_results(results).best.model == "A"

    def test_empty_results_raise_error(self) -> None:
        """Test that summarizing nothing raises ValueError."""
        with pytest.raises(ValueError, match="at least one"):
            PredictionSummary.from_results([])

    def test_summary_of_engine_output(self, features: HouseFeatures) -> None:
        """Test that engine output alone is enough to summarize."""
        results = PricePredictionEngine(seed=1).predict_all(features)
        summary = PredictionSummary.from_results(results)

        assert summary.best is results[0]
        assert summary.min_price <= summary.average_price <= summary.max_price
        assert summary.to_dict()["model_count"] == 5

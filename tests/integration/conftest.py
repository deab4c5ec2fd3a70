"""Pytest fixtures for integration tests.

This module provides fixtures for testing the Flask API with a seeded
prediction engine.
"""

from typing import Any, Dict, Generator
from unittest.mock import patch

import pytest

from application.services import ValuationApplicationService
from domain.services import PricePredictionEngine


@pytest.fixture
def valuation_service() -> ValuationApplicationService:
    """Create a ValuationApplicationService with a seeded engine."""
    return ValuationApplicationService(PricePredictionEngine(seed=1234), seeded=True)


@pytest.fixture
def flask_app(valuation_service: ValuationApplicationService) -> Generator[Any, None, None]:
    """Create a Flask test app with a seeded service.

    This fixture patches the global valuation_service in the server module.
    """
    with patch.dict("os.environ", {"FOREST_RANDOM_SEED": ""}):
        import infrastructure.api.server as server_module

        with patch.object(server_module, "valuation_service", valuation_service):
            app = server_module.app
            app.config["TESTING"] = True
            yield app


@pytest.fixture
def client(flask_app: Any) -> Any:
    """Create a Flask test client."""
    return flask_app.test_client()


@pytest.fixture
def sample_features() -> Dict[str, Any]:
    """Sample prediction form payload."""
    return {
        "sqft": 2000,
        "bedrooms": 3,
        "bathrooms": 2,
        "age": 10,
        "location": "suburban",
        "garage_size": 2,
        "lot_size": 0.25,
    }

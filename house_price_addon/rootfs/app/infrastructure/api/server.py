"""Flask HTTP API Server.

HTTP API for the house price prediction front end.
Provides endpoints for model listing and price prediction.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import ValuationApplicationService
from domain.services import PricePredictionEngine
from domain.value_objects import HouseFeatures, ModelProfile

# Configure logging
log_level = os.getenv("LOG_LEVEL", "info").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
_LOGGER = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)


def _read_seed() -> int | None:
    """Read the random forest seed from the environment."""
    seed_raw = os.getenv("FOREST_RANDOM_SEED")
    if not seed_raw:
        return None
    try:
        return int(seed_raw)
    except ValueError:
        _LOGGER.warning("Ignoring invalid FOREST_RANDOM_SEED value: %s", seed_raw)
        return None


# Initialize services
forest_seed = _read_seed()
engine = PricePredictionEngine(seed=forest_seed)
valuation_service = ValuationApplicationService(engine, seeded=forest_seed is not None)

if forest_seed is not None:
    _LOGGER.info("Random forest seeded with %d", forest_seed)
else:
    _LOGGER.info("Random forest using OS entropy")


def _read_features() -> HouseFeatures | None:
    """Parse house features from the JSON request body.

    Returns:
        Coerced features, or None if the body is not a JSON object
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return None
    return HouseFeatures.from_form(data)


def _profile_to_dict(profile: ModelProfile) -> dict[str, Any]:
    return {
        "model": profile.label,
        "name": profile.kind.name,
        "confidence": profile.confidence,
        "accuracy": profile.accuracy,
        "description": profile.description,
    }


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route("/api/v1/status", methods=["GET"])
def get_status() -> Response:
    """Get valuation service status."""
    try:
        return jsonify(valuation_service.get_status())
    except Exception as e:
        _LOGGER.exception("Error getting status")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/models", methods=["GET"])
def list_models() -> Response:
    """List all price models with their static metadata."""
    try:
        profiles = valuation_service.list_models()
        return jsonify({"models": [_profile_to_dict(p) for p in profiles]})
    except Exception as e:
        _LOGGER.exception("Error listing models")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/predict", methods=["POST"])
def predict() -> Response:
    """Price a property with every model.

    Request body:
    {
        "sqft": int,
        "bedrooms": int,
        "bathrooms": float,
        "age": int,
        "location": str ("urban", "suburban" or "rural"),
        "garage_size": int (or "garageSize"),
        "lot_size": float (or "lotSize")
    }

    Missing fields take the form defaults; unparsable numbers become 0.
    """
    try:
        features = _read_features()
        if features is None:
            return jsonify({"error": "No data provided"}), 400

        results, summary = valuation_service.summarize(features)

        return jsonify({
            "success": True,
            "features": features.to_dict(),
            "predictions": [r.to_dict() for r in results],
            "summary": summary.to_dict(),
        })

    except ValueError as e:
        _LOGGER.warning("Invalid prediction request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error making prediction")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/predict/best", methods=["POST"])
def predict_best() -> Response:
    """Price a property with the ensemble model only."""
    try:
        features = _read_features()
        if features is None:
            return jsonify({"error": "No data provided"}), 400

        result = valuation_service.get_best(features)

        return jsonify({
            "success": True,
            "features": features.to_dict(),
            "prediction": result.to_dict(),
        })

    except Exception as e:
        _LOGGER.exception("Error making best prediction")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/predict/<model_name>", methods=["POST"])
def predict_model(model_name: str) -> Response:
    """Price a property with one model, selected by label or name."""
    try:
        features = _read_features()
        if features is None:
            return jsonify({"error": "No data provided"}), 400

        try:
            result = valuation_service.predict_model(features, model_name)
        except ValueError as e:
            return jsonify({"error": str(e)}), 404

        return jsonify({
            "success": True,
            "features": features.to_dict(),
            "prediction": result.to_dict(),
        })

    except Exception as e:
        _LOGGER.exception("Error making prediction with %s", model_name)
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the server."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "5000"))

    # Enable remote debugging if DEBUG_MODE is set
    debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"
    if debug_mode:
        try:
            import debugpy
            debugpy.listen(("0.0.0.0", 5678))
            _LOGGER.info("Debugpy listening on port 5678, waiting for debugger to attach...")
            debugpy.wait_for_client()
            _LOGGER.info("Debugger attached")
        except Exception as e:
            _LOGGER.warning("Failed to start debugpy: %s", e)

    _LOGGER.info("Starting house price prediction API server on %s:%d", host, port)

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()

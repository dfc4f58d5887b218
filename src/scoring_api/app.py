"""Flask application for the hand scoring API."""

import logging
import os
from pathlib import Path

from flask import Flask, jsonify

from bitpoker.evaluation.evaluation_config import EvaluatorConfig
from bitpoker.evaluation.evaluator import HandEvaluator
from bitpoker.evaluation.hand_description import HandDescriber

from .config import Config
from .routes.score_routes import score_bp

logger = logging.getLogger(__name__)


def _evaluator_config(app: Flask) -> EvaluatorConfig:
    """Evaluator settings from the app config; a config file wins over single settings."""
    config_file = app.config.get("EVALUATOR_CONFIG")
    if config_file:
        return EvaluatorConfig.from_file(Path(config_file))
    return EvaluatorConfig(
        suit_order=app.config.get("EVALUATOR_SUIT_ORDER", "DHCS"),
        cache_size=app.config.get("EVALUATOR_CACHE_SIZE", 4096),
    )


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    evaluator_config = _evaluator_config(app)
    evaluator = HandEvaluator(evaluator_config)
    app.extensions["bitpoker_evaluator"] = evaluator
    app.extensions["bitpoker_describer"] = HandDescriber(evaluator)
    logger.info(f"Hand evaluator ready with configuration '{evaluator_config.name}'")

    # Register blueprints
    app.register_blueprint(score_bp)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.route("/health")
    def health():
        """Liveness probe."""
        return jsonify({"success": True, "status": "ok"})

    return app


def setup_logging():
    """Set up logging for the application."""
    logging.basicConfig(
        level=logging.INFO if os.environ.get("FLASK_ENV") == "production" else logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

"""Configuration settings for the hand scoring API."""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    DEBUG = False
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-in-production"
    JSON_SORT_KEYS = False

    # Evaluator settings, passed to EvaluatorConfig
    EVALUATOR_CONFIG = os.environ.get("BITPOKER_CONFIG")
    EVALUATOR_SUIT_ORDER = os.environ.get("BITPOKER_SUIT_ORDER", "DHCS")
    EVALUATOR_CACHE_SIZE = int(os.environ.get("BITPOKER_CACHE_SIZE", "4096"))

    # Request limits
    MAX_HANDS_PER_COMPARE = int(os.environ.get("MAX_HANDS_PER_COMPARE", "10"))


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = True

    # Fresh evaluations make cache behaviour irrelevant to tests
    EVALUATOR_CONFIG = None
    EVALUATOR_CACHE_SIZE = 0


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    TESTING = False


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "default")

    return config.get(config_name, config["default"])

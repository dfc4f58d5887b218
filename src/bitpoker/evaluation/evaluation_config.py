"""Configuration loader for the hand evaluator."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema

from bitpoker.core.card import SUIT_COUNT, Suit

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parents[3]
DEFAULT_CONFIG_DIR = PROJECT_ROOT / "data" / "evaluator"
SCHEMA_PATH = PROJECT_ROOT / "data" / "schemas" / "evaluator.json"

DEFAULT_SUIT_ORDER = "DHCS"
DEFAULT_CACHE_SIZE = 4096


class EvaluatorConfigError(ValueError):
    """Raised when an evaluator configuration is invalid."""


@dataclass(frozen=True)
class EvaluatorConfig:
    """
    Settings of a HandEvaluator.

    Attributes:
        name: Configuration name (file stem when loaded from disk)
        suit_order: Suit symbols in the order searched for a straight flush
        cache_size: Number of hand values memoized, 0 disables the cache
    """

    name: str = "default"
    suit_order: str = DEFAULT_SUIT_ORDER
    cache_size: int = DEFAULT_CACHE_SIZE

    def __post_init__(self):
        order = self.suit_order.upper()
        if len(order) != SUIT_COUNT or set(order) != set("CDHS"):
            raise EvaluatorConfigError(f"suit_order must name each suit once: {self.suit_order!r}")
        object.__setattr__(self, "suit_order", order)
        if not isinstance(self.cache_size, int) or self.cache_size < 0:
            raise EvaluatorConfigError(f"cache_size must be a non-negative integer: {self.cache_size!r}")

    @property
    def suits(self) -> tuple[Suit, ...]:
        """Suit scan order as enum members."""
        return tuple(Suit.from_symbol(symbol) for symbol in self.suit_order)

    @classmethod
    def from_dict(cls, data: dict[str, Any], name: str = "default") -> "EvaluatorConfig":
        """Build a configuration from parsed JSON, filling in defaults."""
        return cls(
            name=data.get("name", name),
            suit_order=data.get("suit_order", DEFAULT_SUIT_ORDER),
            cache_size=data.get("cache_size", DEFAULT_CACHE_SIZE),
        )

    @classmethod
    def from_file(cls, filepath: Path) -> "EvaluatorConfig":
        """
        Load and validate a configuration file.

        Raises:
            FileNotFoundError: If the file does not exist
            EvaluatorConfigError: If the file does not match the schema
        """
        with open(filepath) as f:
            data = json.load(f)

        try:
            jsonschema.validate(instance=data, schema=load_schema())
        except jsonschema.exceptions.ValidationError as e:
            raise EvaluatorConfigError(f"Invalid evaluator configuration {filepath}: {e.message}")

        return cls.from_dict(data, name=Path(filepath).stem)

    @classmethod
    def from_env(cls) -> "EvaluatorConfig":
        """
        Configuration from the environment.

        BITPOKER_CONFIG names a configuration file; BITPOKER_SUIT_ORDER and
        BITPOKER_CACHE_SIZE override single settings.
        """
        config_file = os.environ.get("BITPOKER_CONFIG")
        base = cls.from_file(Path(config_file)) if config_file else cls()

        cache_size = os.environ.get("BITPOKER_CACHE_SIZE")
        try:
            cache_size_value = int(cache_size) if cache_size is not None else base.cache_size
        except ValueError:
            raise EvaluatorConfigError(f"BITPOKER_CACHE_SIZE must be an integer: {cache_size!r}")

        return cls(
            name=base.name,
            suit_order=os.environ.get("BITPOKER_SUIT_ORDER", base.suit_order),
            cache_size=cache_size_value,
        )


def load_schema() -> dict[str, Any]:
    """JSON schema for evaluator configuration files."""
    with open(SCHEMA_PATH) as f:
        return json.load(f)


class EvaluatorConfigLoader:
    """Loads and manages named evaluator configurations."""

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing configuration JSON files.
                       Defaults to data/evaluator from project root.
        """
        self.config_dir = config_dir or DEFAULT_CONFIG_DIR
        self._configs: dict[str, EvaluatorConfig] = {}
        self._loaded = False

    def load_all_configs(self) -> None:
        """Load all configuration files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading evaluator configurations from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Configuration directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        json_files = sorted(self.config_dir.glob("*.json"))
        if not json_files:
            logger.warning(f"No JSON configuration files found in {self.config_dir}")

        for json_file in json_files:
            try:
                self._configs[json_file.stem] = EvaluatorConfig.from_file(json_file)
                logger.debug(f"Loaded evaluator configuration {json_file.stem}")
            except (OSError, json.JSONDecodeError, EvaluatorConfigError) as e:
                logger.error(f"Failed to load configuration from {json_file}: {e}")
                raise

        logger.info(f"Loaded {len(self._configs)} evaluator configurations")
        self._loaded = True

    def get_config(self, name: str) -> EvaluatorConfig | None:
        """
        Get a configuration by name.

        Args:
            name: File stem of the configuration (e.g., 'default')

        Returns:
            EvaluatorConfig if found, None otherwise
        """
        if not self._loaded:
            self.load_all_configs()

        return self._configs.get(name)

    def get_all_configs(self) -> dict[str, EvaluatorConfig]:
        """Get all loaded configurations."""
        if not self._loaded:
            self.load_all_configs()

        return self._configs.copy()


# Global instance
evaluator_config_loader = EvaluatorConfigLoader()

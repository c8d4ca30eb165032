"""Configuration management for the graph poet."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from .poet.bridge import FIRST_SEEN, TIE_BREAK_POLICIES
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CorpusConfig:
    """Configuration for corpus reading."""
    encoding: str = "utf-8"


@dataclass
class GenerationConfig:
    """Configuration for poem generation."""
    tie_break: str = FIRST_SEEN  # first_seen, alphabetical

    def validate_tie_break(self) -> bool:
        """Check if tie-break setting is valid."""
        return self.tie_break in TIE_BREAK_POLICIES


@dataclass
class Config:
    """Main configuration container."""
    corpus: CorpusConfig = field(default_factory=CorpusConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    log_level: str = "INFO"
    log_json: bool = False


def load_config(config_path: str = "config.json") -> Config:
    """Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Parsed configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            "Please copy config.json.sample to config.json and configure it."
        )

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object")

    config = Config()

    if "corpus" in data:
        config.corpus = CorpusConfig(
            encoding=data["corpus"].get("encoding", "utf-8"),
        )

    if "generation" in data:
        config.generation = GenerationConfig(
            tie_break=data["generation"].get("tie_break", FIRST_SEEN),
        )
        if not config.generation.validate_tie_break():
            logger.warning(
                f"Invalid tie_break '{config.generation.tie_break}', using '{FIRST_SEEN}'"
            )
            config.generation.tie_break = FIRST_SEEN

    config.log_level = data.get("log_level", "INFO")
    config.log_json = data.get("log_json", False)

    logger.info(f"Loaded configuration from {config_path}")
    return config


def create_default_config() -> Dict:
    """Create a default configuration dictionary."""
    return {
        "corpus": {
            "encoding": "utf-8"
        },
        "generation": {
            "tie_break": FIRST_SEEN
        },
        "log_level": "INFO",
        "log_json": False
    }

"""
Validation and loading of configuration files.
"""

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from number_parser.config_models import NumberParserConfig

logger = logging.getLogger(__name__)


def validate_config(config: dict) -> List[str]:
    """Validate configuration structure.

    Returns:
        List of validation errors (empty if valid)
    """
    if not isinstance(config, dict):
        return [f"Configuration must be a JSON object, got {type(config).__name__}"]

    errors = []
    try:
        NumberParserConfig.from_dict(config)
    except ValidationError as e:
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            errors.append(f"{location}: {err['msg']}" if location else err["msg"])
    return errors


def load_config(config_path: Path) -> NumberParserConfig:
    """Load and validate configuration from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or fails validation
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    logger.info(f"Loading configuration from {config_path}")
    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Config is not valid JSON: {e}") from e

    config_errors = validate_config(config)
    if config_errors:
        for error in config_errors:
            logger.error(f"Config validation error: {error}")
        raise ValueError(f"Configuration validation failed with {len(config_errors)} error(s)")
    logger.info("Configuration valid")

    return NumberParserConfig.from_dict(config)

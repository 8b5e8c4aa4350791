"""
Configurable logging setup for dentist_finder.

Loads the logging configuration from a YAML file. Every handler writes to
stderr so stdout only carries the report.
"""
import logging
import logging.config
import sys
from pathlib import Path
from typing import Optional

import yaml

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    config_path: Optional[str] = None,
    default_level: int = logging.WARNING,
    level_override: Optional[str] = None,
):
    """
    Configure logging from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.
                     If None, uses dentist_finder/config/logging_config.yaml
        default_level: Root level used when the configuration cannot be loaded
        level_override: Level name (e.g. "DEBUG") applied to the
                        dentist_finder logger after loading the configuration
    """
    if config_path is None:
        config_dir = Path(__file__).parent
        config_path = config_dir / "logging_config.yaml"

    config_path = Path(config_path)

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)

            logging.config.dictConfig(config)

            logger = logging.getLogger(__name__)
            logger.debug(f"Logging configured from: {config_path}")

        except (OSError, ValueError, yaml.YAMLError) as e:
            logging.basicConfig(level=default_level, format=LOG_FORMAT, stream=sys.stderr)
            logging.error(f"Error loading logging configuration: {e}")
            logging.warning("Using default logging configuration")
    else:
        logging.basicConfig(level=default_level, format=LOG_FORMAT, stream=sys.stderr)
        logging.warning(f"Logging configuration file not found: {config_path}")

    if level_override:
        logging.getLogger("dentist_finder").setLevel(level_override.upper())

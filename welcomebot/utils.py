"""
Utility functions for welcomebot.
Includes logging setup and request-body helpers.
"""
import logging
import colorlog
import json
from typing import Dict, Any, Optional

logger = logging.getLogger("welcomebot")


def setup_logging(level: str = "INFO"):
    """Set up colored logging with appropriate level."""
    root = logging.getLogger()

    # create_app may run more than once per process (tests, reloads)
    if not any(isinstance(h.formatter, colorlog.ColoredFormatter) for h in root.handlers):
        handler = colorlog.StreamHandler()
        handler.setFormatter(
            colorlog.ColoredFormatter(
                '%(log_color)s%(levelname)-8s%(reset)s %(asctime)s - %(name)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
                log_colors={
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                }
            )
        )
        root.addHandler(handler)

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    return logger


def parse_json_body(raw: Optional[bytes]) -> Dict[str, Any]:
    """Decode a request body into a dict, treating anything unusable as empty."""
    if not raw:
        return {}

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Ignoring undecodable request body: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring request body of type {type(data).__name__}")
        return {}

    return data


def truncate_text(text: str, max_length: int = 80) -> str:
    """Truncate text for log lines."""
    if len(text) <= max_length:
        return text

    return text[:max_length - 3] + "..."

"""
Configuration module for welcomebot.
Loads and validates environment variables.
"""
import os
import sys
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def parse_port(value: Optional[str], default: int = 8080) -> Optional[int]:
    """Parse a listen port given as '8080', ':8080' or 'host:8080'.

    Returns None when the value is not a number, for validate() to report.
    """
    if not value:
        return default
    try:
        return int(value.rsplit(":", 1)[-1])
    except ValueError:
        return None


class Config:
    """Application configuration, built once at process start."""

    def __init__(
            self,
            root_url: Optional[str] = None,
            port: Optional[int] = 8080,
            host: str = "0.0.0.0",
            log_level: str = "INFO",
            debug: bool = False,
            request_timeout: int = 10
    ):
        self.ROOT_URL = root_url.rstrip("/") if root_url else root_url
        self.SERVER_PORT = port
        self.SERVER_HOST = host
        self.LOG_LEVEL = log_level.upper()
        self.DEBUG = debug
        self.REQUEST_TIMEOUT = request_timeout

    @classmethod
    def from_env(cls) -> "Config":
        """Read configuration from the process environment."""
        return cls(
            root_url=os.environ.get("MANIFEST_ROOT_URL"),
            port=parse_port(os.environ.get("SERVER_PORT")),
            host=os.environ.get("SERVER_HOST", "0.0.0.0"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            debug=os.environ.get("DEBUG", "false").lower() == "true",
            request_timeout=int(os.environ.get("REQUEST_TIMEOUT", 10)),
        )

    def errors(self) -> List[str]:
        """Collect configuration problems."""
        errors = []

        if not self.ROOT_URL:
            errors.append("MANIFEST_ROOT_URL is required")
        elif not self.ROOT_URL.startswith(("http://", "https://")):
            errors.append("MANIFEST_ROOT_URL must start with http:// or https://")

        if self.SERVER_PORT is None:
            errors.append("SERVER_PORT must be a port number")
        elif not 0 < self.SERVER_PORT < 65536:
            errors.append("SERVER_PORT must be between 1 and 65535")

        if self.LOG_LEVEL not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            errors.append("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")

        return errors

    def validate(self):
        """Validate required configuration values."""
        errors = self.errors()
        if errors:
            print("Configuration errors:")
            for error in errors:
                print(f"  - {error}")
            sys.exit(1)

    @property
    def manifest_url(self) -> str:
        return f"{self.ROOT_URL}/manifest.json"

"""
Main application entry point for welcomebot.
"""
from flask import Flask
import sys
import signal
from typing import Optional
from .bot import WelcomeBot
from .config import Config
from .mattermost_client import MattermostClient
from .utils import logger, setup_logging


def create_app(config: Optional[Config] = None, client_factory=MattermostClient):
    """Create and configure the Flask application."""
    if config is None:
        config = Config.from_env()

    # Validate configuration
    config.validate()
    setup_logging(config.LOG_LEVEL)

    # Create Flask app
    app = Flask(__name__)
    app.config['DEBUG'] = config.DEBUG

    WelcomeBot(app, config, client_factory)

    logger.info("Application created successfully")
    logger.info(f"Manifest root URL: {config.ROOT_URL}")

    return app


def signal_handler(signum, frame):
    """Handle shutdown signals gracefully."""
    logger.info("Received shutdown signal, shutting down...")
    sys.exit(0)


def main():
    """Main entry point."""
    # Set up signal handlers
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    config = Config.from_env()
    app = create_app(config)

    logger.info(f"Use '/apps install http {config.manifest_url}' to install the app")
    logger.info(f"Starting server on {config.SERVER_HOST}:{config.SERVER_PORT}")

    # Flask's built-in server; use gunicorn or similar in production
    app.run(
        host=config.SERVER_HOST,
        port=config.SERVER_PORT,
        debug=config.DEBUG,
        use_reloader=False,
        threaded=True
    )


if __name__ == "__main__":
    main()

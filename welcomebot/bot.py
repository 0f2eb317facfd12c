"""
Welcome bot HTTP surface: the routes the Mattermost Apps framework calls.
"""
import os
from flask import Flask, Response, request, jsonify
from . import __version__
from .apps import CallRequest, data_response
from .commands import CommandDispatcher
from .config import Config
from .manifest import APP_ID, bindings_data, build_manifest
from .mattermost_client import MattermostClient
from .utils import logger, parse_json_body

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")
ICON_PATH = os.path.join(STATIC_DIR, "icon.png")

COMMANDS = (
    "help",
    "list",
    "preview",
    "set_channel_welcome",
    "get_channel_welcome",
    "delete_channel_welcome",
)


class WelcomeBot:
    """Main welcome bot class."""

    def __init__(self, flask_app: Flask, config: Config, client_factory=MattermostClient):
        """Initialize the bot and register its routes on the Flask app."""
        self.config = config
        self.manifest = build_manifest(config).to_dict()
        self.dispatcher = CommandDispatcher(config, client_factory)

        with open(ICON_PATH, "rb") as f:
            self.icon_data = f.read()

        self.setup_routes(flask_app)

        logger.info("WelcomeBot initialized successfully")

    def handle_call(self, command: str):
        """Decode a call request and dispatch it to the command handler."""
        call_request = CallRequest.from_dict(parse_json_body(request.get_data()))
        user = call_request.context.acting_user
        logger.info(f"Received {command} call from {user.id if user else 'unknown user'}")

        return jsonify(self.dispatcher.dispatch(command, call_request))

    def setup_routes(self, flask_app: Flask):
        """Set up Flask routes."""

        @flask_app.route("/manifest.json", methods=["GET"])
        def manifest():
            return jsonify(self.manifest)

        @flask_app.route("/static/icon.png", methods=["GET"])
        def icon():
            return Response(self.icon_data, mimetype="image/png")

        @flask_app.route("/bindings", methods=["GET", "POST"])
        def bindings():
            return jsonify(data_response(bindings_data()))

        for command in COMMANDS:
            flask_app.add_url_rule(
                f"/{command}",
                endpoint=command,
                view_func=lambda command=command: self.handle_call(command),
                methods=["POST"]
            )

        @flask_app.route("/", methods=["GET"])
        def index():
            """Root endpoint."""
            return jsonify({
                "name": APP_ID,
                "version": __version__,
                "status": "running"
            })

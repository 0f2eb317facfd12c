"""
welcomebot - A Mattermost app that keeps a welcome message per channel.
"""

__version__ = "0.1.0"

from .app import create_app
from .bot import WelcomeBot
from .commands import CommandDispatcher
from .config import Config
from .mattermost_client import MattermostClient
from .store import WelcomeMessageRepository

__all__ = [
    "create_app",
    "WelcomeBot",
    "CommandDispatcher",
    "Config",
    "MattermostClient",
    "WelcomeMessageRepository"
]

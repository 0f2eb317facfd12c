"""
Handlers for the /welcomebot commands.
"""
from typing import Callable, Dict, Any
from .apps import CallRequest, Channel, text_response, error_response
from .config import Config
from .errors import InvalidRequest, InvalidScope, StoreFailure, WelcomeBotError
from .manifest import COMMAND_TRIGGER
from .mattermost_client import MattermostClient
from .store import WelcomeMessageRepository
from .utils import logger

HELP_TEXT = (
    "#### Welcome Bot commands\n"
    f"* `/{COMMAND_TRIGGER} help` - show this usage information\n"
    f"* `/{COMMAND_TRIGGER} list` - show whether the current channel has a welcome message\n"
    f"* `/{COMMAND_TRIGGER} preview [team-name]` - preview the welcome message for the given team\n"
    f"* `/{COMMAND_TRIGGER} set_channel_welcome [team-name] [message]` - set the given text as the "
    "current channel's welcome message (not available in direct messages)\n"
    f"* `/{COMMAND_TRIGGER} get_channel_welcome` - show the current channel's welcome message\n"
    f"* `/{COMMAND_TRIGGER} delete_channel_welcome` - delete the current channel's welcome message\n"
)

WELCOME_TEMPLATE = (
    "### Welcome to {team}, @{username}!\n"
    "We're glad to have you here. Take a look around the channels and say hello."
)

NOT_CONFIGURED_TEXT = (
    "No welcome message is configured for this channel. "
    f"Use `/{COMMAND_TRIGGER} set_channel_welcome` to set one."
)
NO_CHANNEL_TEXT = "This command must be run from a channel."
DIRECT_CHANNEL_TEXT = "Welcome messages can't be set in direct message channels."

FAILURE_TEXT = {
    "read": "We couldn't read this channel's welcome message. Please try again later.",
    "write": "We couldn't set your message. Please try again later.",
    "delete": "We couldn't delete this channel's welcome message. Please try again later.",
}

Handler = Callable[[CallRequest], Dict[str, Any]]


class CommandDispatcher:
    """Routes a named command to its handler and renders errors as responses."""

    def __init__(self, config: Config, client_factory=MattermostClient):
        self.config = config
        self.client_factory = client_factory
        self.handlers: Dict[str, Handler] = {
            "help": self.show_help,
            "list": self.show_list,
            "preview": self.show_preview,
            "set_channel_welcome": self.set_channel_welcome,
            "get_channel_welcome": self.get_channel_welcome,
            "delete_channel_welcome": self.delete_channel_welcome,
        }

    def dispatch(self, command: str, request: CallRequest) -> Dict[str, Any]:
        handler = self.handlers.get(command)
        if handler is None:
            return error_response(f"Unknown command: {command}")

        try:
            return handler(request)
        except StoreFailure as e:
            return error_response(FAILURE_TEXT[e.operation])
        except WelcomeBotError as e:
            logger.warning(f"Rejected {command}: {e}")
            return error_response(str(e))
        except Exception as e:
            logger.exception(f"Error handling {command}: {e}")
            return error_response("Something went wrong on our end. Please try again later.")

    def _client(self, request: CallRequest) -> MattermostClient:
        context = request.context
        if not context.mattermost_site_url:
            raise InvalidRequest("context.mattermost_site_url")
        if not context.bot_access_token:
            raise InvalidRequest("context.bot_access_token")
        return self.client_factory(
            context.mattermost_site_url,
            context.bot_access_token,
            timeout=self.config.REQUEST_TIMEOUT
        )

    def _repository(self, request: CallRequest) -> WelcomeMessageRepository:
        return WelcomeMessageRepository(self._client(request))

    @staticmethod
    def _channel(request: CallRequest) -> Channel:
        channel = request.context.channel
        if channel is None or not channel.id:
            raise InvalidScope(NO_CHANNEL_TEXT)
        return channel

    def show_help(self, request: CallRequest) -> Dict[str, Any]:
        context = request.context
        user = context.acting_user

        # Also DM the usage when the call carries enough context to do so
        if user and user.id and context.bot_user_id and context.mattermost_site_url and context.bot_access_token:
            try:
                self._client(request).dm(context.bot_user_id, user.id, HELP_TEXT)
            except Exception as e:
                logger.error(f"Could not DM help to {user.id}: {e}")

        return text_response(HELP_TEXT)

    def show_list(self, request: CallRequest) -> Dict[str, Any]:
        channel = self._channel(request)
        text = self._repository(request).get(channel.id)

        if text is None:
            return text_response(NOT_CONFIGURED_TEXT)
        return text_response(
            "This channel has a welcome message configured. "
            f"Use `/{COMMAND_TRIGGER} get_channel_welcome` to show it."
        )

    def show_preview(self, request: CallRequest) -> Dict[str, Any]:
        team = request.value("team_name")
        if team is None and request.context.team:
            team = request.context.team.display_name or request.context.team.name
        if team is None:
            raise InvalidRequest("team_name")

        user = request.context.acting_user
        username = (user.username or user.id) if user else None

        message = WELCOME_TEMPLATE.format(team=team, username=username or "new-member")
        return text_response(f"Preview of the welcome message for **{team}**:\n\n{message}")

    def set_channel_welcome(self, request: CallRequest) -> Dict[str, Any]:
        channel = self._channel(request)
        if channel.is_direct:
            raise InvalidScope(DIRECT_CHANNEL_TEXT)

        message = request.value("message", allow_empty=True)
        if message is None:
            raise InvalidRequest("message")

        self._repository(request).set(channel.id, message)

        team = request.value("team_name")
        target = f"this channel in {team}" if team else "this channel"
        return text_response(f"The welcome message for {target} has been set.")

    def get_channel_welcome(self, request: CallRequest) -> Dict[str, Any]:
        channel = self._channel(request)
        text = self._repository(request).get(channel.id)

        if text is None:
            return text_response(NOT_CONFIGURED_TEXT)
        return text_response(text)

    def delete_channel_welcome(self, request: CallRequest) -> Dict[str, Any]:
        channel = self._channel(request)
        self._repository(request).delete(channel.id)
        return text_response("The welcome message for this channel has been deleted.")

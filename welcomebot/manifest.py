"""
Static declarations served to the Mattermost Apps framework: the app
manifest and the /welcomebot command bindings.
"""
from .apps import (
    Binding, Call, Expand, Field, Form, Manifest,
    EXPAND_ALL, EXPAND_SUMMARY
)
from .config import Config

APP_ID = "welcome-bot"
APP_VERSION = "v0.1.0"
APP_DISPLAY_NAME = "Welcome Bot"
HOMEPAGE_URL = "https://github.com/mattermost/mattermost-app-welcomebot"
ICON = "icon.png"
COMMAND_TRIGGER = "welcomebot"

PERMISSION_ACT_AS_BOT = "act_as_bot"
PERMISSION_ACT_AS_USER = "act_as_user"
LOCATION_CHANNEL_HEADER = "/channel_header"
LOCATION_COMMAND = "/command"


def build_manifest(config: Config) -> Manifest:
    """Build the manifest; the callback base is the configured root URL."""
    return Manifest(
        app_id=APP_ID,
        version=APP_VERSION,
        display_name=APP_DISPLAY_NAME,
        icon=ICON,
        homepage_url=HOMEPAGE_URL,
        requested_permissions=(PERMISSION_ACT_AS_BOT, PERMISSION_ACT_AS_USER),
        requested_locations=(LOCATION_CHANNEL_HEADER, LOCATION_COMMAND),
        root_url=config.ROOT_URL,
    )


# Context each call needs from the platform
USER_EXPAND = Expand(acting_user=EXPAND_SUMMARY, acting_user_access_token=EXPAND_ALL)
CHANNEL_EXPAND = Expand(acting_user=EXPAND_SUMMARY, channel=EXPAND_SUMMARY, team=EXPAND_SUMMARY)

HELP_CALL = Call("/help", USER_EXPAND)
LIST_CALL = Call("/list", CHANNEL_EXPAND)
PREVIEW_CALL = Call("/preview", USER_EXPAND)
SET_CHANNEL_WELCOME_CALL = Call("/set_channel_welcome", CHANNEL_EXPAND)
GET_CHANNEL_WELCOME_CALL = Call("/get_channel_welcome", CHANNEL_EXPAND)
DELETE_CHANNEL_WELCOME_CALL = Call("/delete_channel_welcome", CHANNEL_EXPAND)

TEAM_NAME_FIELD = Field(
    name="team_name",
    label="team_name",
    description="Name of the team the welcome message is for",
)

PREVIEW_FORM = Form(
    title=APP_DISPLAY_NAME,
    icon=ICON,
    fields=(TEAM_NAME_FIELD,),
    submit=PREVIEW_CALL,
)

SET_CHANNEL_WELCOME_FORM = Form(
    title=APP_DISPLAY_NAME,
    icon=ICON,
    fields=(
        TEAM_NAME_FIELD,
        Field(
            name="message",
            label="message",
            description="Welcome message shown to users joining this channel",
            is_required=True,
            subtype="textarea",
        ),
    ),
    submit=SET_CHANNEL_WELCOME_CALL,
)

BINDINGS = (
    Binding(
        location=LOCATION_COMMAND,
        bindings=(
            Binding(
                icon=ICON,
                label=COMMAND_TRIGGER,
                description="Welcome Bot app",
                hint="[help|list|preview|set_channel_welcome|get_channel_welcome|delete_channel_welcome]",
                bindings=(
                    Binding(label="help", description="Show usage information", submit=HELP_CALL),
                    Binding(label="list", description="Show whether this channel has a welcome message",
                            submit=LIST_CALL),
                    Binding(label="preview", hint="[team-name]",
                            description="Preview the welcome message for a team", form=PREVIEW_FORM),
                    Binding(label="set_channel_welcome", hint="[team-name] [message]",
                            description="Set this channel's welcome message", form=SET_CHANNEL_WELCOME_FORM),
                    Binding(label="get_channel_welcome", description="Show this channel's welcome message",
                            submit=GET_CHANNEL_WELCOME_CALL),
                    Binding(label="delete_channel_welcome", description="Delete this channel's welcome message",
                            submit=DELETE_CHANNEL_WELCOME_CALL),
                ),
            ),
        ),
    ),
)


def bindings_data():
    """Serialize the command bindings for the /bindings response."""
    return [b.to_dict() for b in BINDINGS]

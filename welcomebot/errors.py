"""
Exceptions raised by welcomebot.
"""
from typing import Optional


class WelcomeBotError(Exception):
    """Base class for errors that end a call with an error response."""


class MattermostAPIError(WelcomeBotError):
    """A Mattermost REST call failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StoreFailure(WelcomeBotError):
    """The key-value store could not be read or written."""

    def __init__(self, operation: str):
        super().__init__(f"Welcome message {operation} failed")
        self.operation = operation


class InvalidScope(WelcomeBotError):
    """The command was invoked somewhere it cannot operate."""


class InvalidRequest(WelcomeBotError):
    """The call request is missing a required field."""

    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field

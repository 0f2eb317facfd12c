"""
Welcome message storage on top of the Mattermost Apps key-value store.

One welcome message is kept per channel. The scope key is the channel id
taken from the call context; values are stored as JSON strings under the
app's ``wm`` prefix.
"""
from typing import Optional
from .errors import MattermostAPIError, StoreFailure
from .mattermost_client import MattermostClient
from .utils import logger, truncate_text

KV_PREFIX = "wm"


class WelcomeMessageRepository:
    """Reads and writes welcome messages. Holds no state between calls."""

    def __init__(self, client: MattermostClient, prefix: str = KV_PREFIX):
        self.client = client
        self.prefix = prefix

    def get(self, scope_key: str) -> Optional[str]:
        """Return the stored message, or None if none is configured."""
        try:
            value = self.client.kv_get(self.prefix, scope_key)
        except MattermostAPIError as e:
            logger.error(f"Failed to read welcome message for {scope_key}: {e}")
            raise StoreFailure("read") from e

        if value is None:
            return None
        if not isinstance(value, str):
            logger.error(f"Unexpected {type(value).__name__} stored for {scope_key}")
            raise StoreFailure("read")
        return value

    def set(self, scope_key: str, text: str):
        """Store text verbatim, replacing any previous message."""
        try:
            self.client.kv_set(self.prefix, scope_key, text)
        except MattermostAPIError as e:
            logger.error(f"Failed to store welcome message for {scope_key}: {e}")
            raise StoreFailure("write") from e
        logger.info(f"Stored welcome message for {scope_key}: {truncate_text(text)!r}")

    def delete(self, scope_key: str):
        try:
            self.client.kv_delete(self.prefix, scope_key)
        except MattermostAPIError as e:
            logger.error(f"Failed to delete welcome message for {scope_key}: {e}")
            raise StoreFailure("delete") from e
        logger.info(f"Deleted welcome message for {scope_key}")

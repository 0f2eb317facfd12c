"""
Mattermost REST client for the calls the app makes back to the server:
key-value store access and direct messages.
"""
import requests
import json
from typing import Dict, Any, Optional
from urllib.parse import quote
from .errors import MattermostAPIError
from .utils import logger

APPS_PLUGIN_PATH = "/plugins/com.mattermost.apps/api/v1"


class MattermostClient:
    """Client acting as the app's bot against one Mattermost server."""

    def __init__(self, site_url: str, access_token: str, timeout: int = 10):
        self.base_url = site_url.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "X-Requested-With": "XMLHttpRequest"
        }

    def _kv_url(self, prefix: str, key: str) -> str:
        return f"{self.base_url}{APPS_PLUGIN_PATH}/kv/{quote(prefix, safe='')}/{quote(key, safe='')}"

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        """Send a request, turning transport problems into MattermostAPIError."""
        try:
            logger.debug(f"{method} {url}")
            return requests.request(
                method,
                url,
                headers=self.headers,
                timeout=self.timeout,
                **kwargs
            )
        except requests.exceptions.Timeout:
            logger.error(f"Request timeout: {method} {url}")
            raise MattermostAPIError("Request timeout")
        except requests.exceptions.ConnectionError:
            logger.error(f"Connection error: {method} {url}")
            raise MattermostAPIError("Connection error")
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {method} {url}: {e}")
            raise MattermostAPIError(f"Request failed: {type(e).__name__}") from e

    @staticmethod
    def _check(response: requests.Response, ok=(200,)):
        if response.status_code not in ok:
            logger.error(f"API error: {response.status_code} - {response.text}")
            raise MattermostAPIError(f"API error: {response.status_code}", response.status_code)

    @staticmethod
    def _json_object(response: requests.Response) -> Dict[str, Any]:
        """Decode a created-object response, which must carry an id."""
        try:
            data = response.json()
        except ValueError:
            logger.error(f"Undecodable response: {response.status_code} - {response.text[:200]}")
            raise MattermostAPIError("Invalid JSON in response", response.status_code)

        if not isinstance(data, dict) or not data.get("id"):
            logger.error(f"Response without id: {response.text[:200]}")
            raise MattermostAPIError("Response without id", response.status_code)
        return data

    def kv_get(self, prefix: str, key: str) -> Optional[Any]:
        """
        Read a value from the app's key-value store.

        Returns:
            The decoded JSON value, or None if the key is not set
        """
        response = self._request("GET", self._kv_url(prefix, key))

        if response.status_code == 404:
            return None
        self._check(response)

        if not response.content:
            return None

        try:
            return response.json()
        except (json.JSONDecodeError, ValueError):
            logger.error(f"Undecodable KV value for {prefix}/{key}: {response.text[:200]}")
            raise MattermostAPIError("Invalid JSON in KV response", response.status_code)

    def kv_set(self, prefix: str, key: str, value: Any):
        """Store a JSON-encodable value, replacing any previous one."""
        response = self._request("PUT", self._kv_url(prefix, key), json=value)
        self._check(response, ok=(200, 201))

    def kv_delete(self, prefix: str, key: str):
        """Remove a key. Removing an absent key succeeds."""
        response = self._request("DELETE", self._kv_url(prefix, key))
        self._check(response, ok=(200, 204, 404))

    def create_direct_channel(self, user_id: str, other_user_id: str) -> Dict[str, Any]:
        url = f"{self.base_url}/api/v4/channels/direct"
        response = self._request("POST", url, json=[user_id, other_user_id])
        self._check(response, ok=(200, 201))
        return self._json_object(response)

    def create_post(self, channel_id: str, message: str) -> Dict[str, Any]:
        url = f"{self.base_url}/api/v4/posts"
        response = self._request("POST", url, json={"channel_id": channel_id, "message": message})
        self._check(response, ok=(200, 201))
        return self._json_object(response)

    def dm(self, bot_user_id: str, user_id: str, message: str) -> Dict[str, Any]:
        """Send a direct message from the bot to a user."""
        channel = self.create_direct_channel(bot_user_id, user_id)
        return self.create_post(channel["id"], message)

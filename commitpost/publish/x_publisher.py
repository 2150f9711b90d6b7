"""Publisher for X (formerly Twitter) using the v2 REST API."""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from commitpost.publish.base import BasePublisher
from commitpost.publish.exceptions import PublishError

logger = logging.getLogger(__name__)

X_API_BASE_URL = "https://api.twitter.com/2"
X_STATUS_URL = "https://x.com/i/web/status/{post_id}"
REQUEST_TIMEOUT_SECONDS = 30


def _error_message(data, response: requests.Response) -> str:
    """Collect every error message the API reported into one string."""
    if isinstance(data, dict):
        errors = data.get("errors") or []
        messages = [
            error.get("message")
            for error in errors
            if isinstance(error, dict) and error.get("message")
        ]
        if messages:
            return ", ".join(messages)
        if data.get("title"):
            return data["title"]
    return response.reason or ""


class XPublisher(BasePublisher):
    """Post to the X timeline or to an X community with a bearer token."""

    def __init__(
        self,
        bearer_token: str,
        session: Optional[requests.Session] = None,
        base_url: str = X_API_BASE_URL,
    ):
        self.bearer_token = bearer_token
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")

    def endpoint(self, community_id: Optional[str] = None) -> str:
        """Return the create-post endpoint for the timeline or a community."""
        if community_id:
            return f"{self.base_url}/communities/{quote(community_id, safe='')}/posts"
        return f"{self.base_url}/tweets"

    def publish(self, text: str, community_id: Optional[str] = None) -> str:
        url = self.endpoint(community_id)
        logger.info("Publishing generated post to X...")
        try:
            response = self.session.post(
                url,
                headers={
                    "Authorization": f"Bearer {self.bearer_token}",
                    "Content-Type": "application/json",
                },
                json={"text": text},
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            raise PublishError(f"X API request to {url} failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.ok:
            raise PublishError(
                f"X API request failed ({response.status_code}): {_error_message(data, response)}"
            )

        if not isinstance(data, dict):
            raise PublishError(
                f"X API returned a malformed response ({response.status_code}): {response.text}"
            )

        post = data.get("data") or {}
        return str(post.get("id") or "")

    def post_url(self, post_id: str) -> str:
        if not post_id:
            return ""
        return X_STATUS_URL.format(post_id=post_id)

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx

from fairdatause.config import Settings


logger = logging.getLogger(__name__)

TOKEN_URL = "https://www.reddit.com/api/v1/access_token"
USER_ABOUT_URL = "https://oauth.reddit.com/user/{username}/about"


@dataclass(frozen=True)
class Verified:
    verified: bool


@dataclass(frozen=True)
class CredentialsMissing:
    missing: list[str] = field(default_factory=list)


VerificationResult = Verified | CredentialsMissing


class RedditVerifier:
    """Checks that a Reddit account exists using an app-only OAuth token.

    Credentials are read from ``settings`` on every call. Missing credentials
    come back as ``CredentialsMissing``; every other failure (bad status,
    timeout, unreadable token response) is logged and reported as
    ``Verified(False)``.
    """

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        self.settings = settings
        self.transport = transport

    def verify(self, username: str) -> VerificationResult:
        missing = self.settings.missing_reddit_credentials()
        if missing:
            logger.error("Reddit API credentials not configured: %s", ", ".join(missing))
            return CredentialsMissing(missing)

        try:
            with self._client() as client:
                token = self._fetch_token(client)
                if token is None:
                    return Verified(False)
                return Verified(self._user_exists(client, token, username))
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Reddit verification for %r failed: %s", username, exc)
            return Verified(False)

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.settings.reddit_timeout_seconds,
            headers={"User-Agent": self.settings.reddit_user_agent},
            transport=self.transport,
        )

    def _fetch_token(self, client: httpx.Client) -> str | None:
        response = client.post(
            TOKEN_URL,
            auth=(self.settings.reddit_client_id, self.settings.reddit_client_secret),
            data={"grant_type": "client_credentials"},
        )
        if not response.is_success:
            logger.warning("Reddit OAuth token request returned %s", response.status_code)
            return None

        token = response.json()["access_token"]
        if not isinstance(token, str) or not token:
            logger.warning("Reddit OAuth token response did not include an access token")
            return None
        return token

    def _user_exists(self, client: httpx.Client, token: str, username: str) -> bool:
        url = USER_ABOUT_URL.format(username=quote(username, safe=""))
        response = client.get(url, headers={"Authorization": f"Bearer {token}"})
        logger.info("Reddit lookup for %r returned %s", username, response.status_code)
        return response.is_success

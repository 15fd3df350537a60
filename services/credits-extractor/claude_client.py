"""HTTP client for the Anthropic Messages API.

Uses httpx with configurable timeouts. One request per call: no retry,
no backoff. Any non-2xx reply or transport failure raises ClaudeAPIError.
"""

import logging

import httpx

from config import settings

logger = logging.getLogger(__name__)


class ClaudeAPIError(Exception):
    """Messages API call failed (non-2xx reply or transport error)."""


class ClaudeClient:
    """HTTP client for the Messages API."""

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        api_version: str | None = None,
        timeout: int | None = None,
        connect_timeout: int | None = None,
    ):
        self._api_key = api_key if api_key is not None else settings.ANTHROPIC_API_KEY
        self._api_url = api_url or settings.ANTHROPIC_API_URL
        self.model = model or settings.ANTHROPIC_MODEL
        self.max_tokens = max_tokens if max_tokens is not None else settings.MAX_OUTPUT_TOKENS

        read_timeout = timeout if timeout is not None else settings.UPSTREAM_TIMEOUT_SECONDS
        conn_timeout = connect_timeout if connect_timeout is not None else settings.UPSTREAM_CONNECT_TIMEOUT

        self._client = httpx.Client(
            headers={
                "content-type": "application/json",
                "x-api-key": self._api_key,
                "anthropic-version": api_version or settings.ANTHROPIC_VERSION,
            },
            timeout=httpx.Timeout(
                connect=float(conn_timeout),
                read=float(read_timeout),
                write=60.0,
                pool=30.0,
            ),
        )

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def close(self):
        self._client.close()

    def create_message(self, content: list[dict]) -> str:
        """Send one user message made of content blocks.

        Returns the reply's text blocks joined by newlines.
        Raises ClaudeAPIError on any failure.
        """
        payload = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": content}],
        }

        try:
            resp = self._client.post(self._api_url, json=payload)
        except httpx.HTTPError as e:
            logger.error("Claude API request failed: %s", e)
            raise ClaudeAPIError(f"Claude API request failed: {e}") from e

        if not resp.is_success:
            logger.error("Claude API error %d: %s", resp.status_code, resp.text)
            raise ClaudeAPIError(f"Claude API returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Claude API returned a non-JSON body: %s", resp.text[:500])
            raise ClaudeAPIError("Claude API returned a non-JSON body") from e

        if not isinstance(data, dict):
            logger.error("Claude API returned an unexpected body: %s", resp.text[:500])
            raise ClaudeAPIError("Claude API returned an unexpected body")

        return join_text_blocks(data.get("content") or [])


def join_text_blocks(blocks: list[dict]) -> str:
    """Concatenate the text of all ``text`` blocks, skipping tool use and the like."""
    return "\n".join(
        block.get("text", "")
        for block in blocks
        if block.get("type") == "text"
    )

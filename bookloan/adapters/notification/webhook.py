"""Webhook notification adapter.

Implements NotificationPort by POSTing a JSON payload per loan event to
an HTTP endpoint (a chat integration, an email relay, etc.).
"""

import logging
from datetime import UTC, datetime
from typing import Any

import httpx

from bookloan.core.ports import NotificationPort

logger = logging.getLogger(__name__)


class WebhookNotificationAdapter(NotificationPort):
    """Sends borrow and return events to a webhook URL."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 5.0,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
    ):
        """Initialize webhook notification adapter.

        Args:
            url: Endpoint receiving the POST requests.
            timeout_seconds: Request timeout.
            headers: Optional extra headers (e.g. an auth token).
            client: Optional preconfigured httpx.Client. When omitted one
                is created lazily and owned by this adapter.

        Raises:
            ValueError: If url is empty.
        """
        if not url:
            raise ValueError("url must be a non-empty string")
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.headers = headers or {}
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout_seconds,
                headers=self.headers,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def notify_borrow(self, member_id: int, title: str) -> None:
        """POST a borrow event."""
        self._send(self._build_payload("borrow", member_id, title))

    def notify_return(self, member_id: int, title: str) -> None:
        """POST a return event."""
        self._send(self._build_payload("return", member_id, title))

    def _send(self, payload: dict[str, Any]) -> None:
        """POST the payload and fail loudly on errors.

        Raises:
            httpx.RequestError: If the endpoint cannot be reached.
            httpx.HTTPStatusError: If the endpoint answers with a non-2xx status.
        """
        client = self._get_client()
        try:
            response = client.post(self.url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Webhook rejected {payload['event']} event: {e.response.status_code}",
                extra={"title": payload["title"], "response": e.response.text},
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                f"Failed to deliver {payload['event']} event: {e}",
                extra={"title": payload["title"]},
            )
            raise

        logger.debug(
            f"Delivered {payload['event']} event",
            extra={"title": payload["title"], "member_id": payload["member_id"]},
        )

    @staticmethod
    def _build_payload(event: str, member_id: int, title: str) -> dict[str, Any]:
        """Build the JSON body for an event."""
        return {
            "event": event,
            "member_id": member_id,
            "title": title,
            "sent_at": datetime.now(UTC).isoformat(),
        }

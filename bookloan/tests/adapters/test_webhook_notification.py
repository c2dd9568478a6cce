"""Unit tests for WebhookNotificationAdapter using httpx.MockTransport."""

import json

import httpx
import pytest

from bookloan.adapters.notification.webhook import WebhookNotificationAdapter

WEBHOOK_URL = "https://hooks.example.test/loans"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_borrow_posts_json_payload() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(204)

    adapter = WebhookNotificationAdapter(WEBHOOK_URL, client=_client(handler))
    adapter.notify_borrow(1, "1984")

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == WEBHOOK_URL
    payload = json.loads(request.content)
    assert payload["event"] == "borrow"
    assert payload["member_id"] == 1
    assert payload["title"] == "1984"
    assert "sent_at" in payload


def test_return_posts_return_event() -> None:
    payloads: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        payloads.append(json.loads(request.content))
        return httpx.Response(200, json={"ok": True})

    adapter = WebhookNotificationAdapter(WEBHOOK_URL, client=_client(handler))
    adapter.notify_return(4, "Dune")

    assert payloads[0]["event"] == "return"
    assert payloads[0]["member_id"] == 4


def test_error_status_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    adapter = WebhookNotificationAdapter(WEBHOOK_URL, client=_client(handler))

    with pytest.raises(httpx.HTTPStatusError):
        adapter.notify_borrow(1, "1984")


def test_transport_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = WebhookNotificationAdapter(WEBHOOK_URL, client=_client(handler))

    with pytest.raises(httpx.RequestError):
        adapter.notify_return(1, "1984")


def test_empty_url_rejected() -> None:
    with pytest.raises(ValueError):
        WebhookNotificationAdapter("")


def test_close_leaves_injected_client_open() -> None:
    client = _client(lambda request: httpx.Response(204))
    adapter = WebhookNotificationAdapter(WEBHOOK_URL, client=client)

    adapter.close()

    assert not client.is_closed
    client.close()


def test_close_owned_client() -> None:
    adapter = WebhookNotificationAdapter(WEBHOOK_URL)
    client = adapter._get_client()

    adapter.close()

    assert client.is_closed

"""Shared fixtures for unit tests."""

from __future__ import annotations

import json

import pytest

from tusk.client.runtime.rest import FetchDescriptor, RawResponse


def account_json(account_id: str = "1", username: str = "alice") -> dict:
    return {
        "id": account_id,
        "username": username,
        "acct": f"{username}@example.social",
        "display_name": username.title(),
        "url": f"https://example.social/@{username}",
        "created_at": "2023-01-01T00:00:00.000Z",
        "followers_count": 3,
        "following_count": 5,
        "statuses_count": 8,
    }


def status_json(status_id: str = "100", content: str = "<p>hello</p>") -> dict:
    return {
        "id": status_id,
        "uri": f"https://example.social/users/alice/statuses/{status_id}",
        "url": f"https://example.social/@alice/{status_id}",
        "created_at": "2024-05-01T12:30:00.000Z",
        "account": account_json(),
        "content": content,
        "visibility": "public",
        "sensitive": False,
        "spoiler_text": "",
        "reblogs_count": 2,
        "favourites_count": 4,
        "media_attachments": [],
        "mentions": [],
        "tags": [{"name": "python", "url": "https://example.social/tags/python"}],
        "emojis": [],
    }


def notification_json(notification_id: str = "500", kind: str = "favourite") -> dict:
    return {
        "id": notification_id,
        "type": kind,
        "created_at": "2024-05-01T12:31:00.000Z",
        "account": account_json("2", "bob"),
        "status": status_json(),
    }


def make_response(
    payload,
    *,
    status: int = 200,
    link: str | None = None,
    url: str = "https://example.social/api/v1/timelines/home",
) -> RawResponse:
    headers = {"Content-Type": "application/json"}
    if link is not None:
        headers["Link"] = link
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
    return RawResponse(status=status, url=url, headers=headers, body=body)


class FakeSender:
    """Sender serving canned responses keyed by URL and counting fetches."""

    def __init__(self, responses: dict[str, RawResponse] | None = None) -> None:
        self.responses = dict(responses or {})
        self.sent: list[FetchDescriptor] = []
        self.clones: list[FakeSender] = []
        self.closed = False

    @property
    def fetch_count(self) -> int:
        return len(self.sent)

    def send(self, descriptor: FetchDescriptor) -> RawResponse:
        self.sent.append(descriptor)
        response = self.responses[descriptor.url]
        if isinstance(response, Exception):
            raise response
        return response

    def clone(self) -> FakeSender:
        twin = type(self)(self.responses)
        self.clones.append(twin)
        return twin

    def close(self) -> None:
        self.closed = True


class FakeAsyncSender(FakeSender):
    """Async flavour of FakeSender."""

    async def send(self, descriptor: FetchDescriptor) -> RawResponse:  # type: ignore[override]
        return FakeSender.send(self, descriptor)

    async def close(self) -> None:  # type: ignore[override]
        FakeSender.close(self)


@pytest.fixture
def sample_account() -> dict:
    return account_json()


@pytest.fixture
def sample_status() -> dict:
    return status_json()


@pytest.fixture
def sample_notification() -> dict:
    return notification_json()


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def status_factory():
    return status_json


@pytest.fixture
def fake_sender():
    return FakeSender()


@pytest.fixture
def fake_async_sender():
    return FakeAsyncSender()

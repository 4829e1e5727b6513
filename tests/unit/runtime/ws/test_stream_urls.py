"""Unit tests for streaming URL construction."""

from urllib.parse import parse_qs, urlsplit

import pytest

from tusk.client.core import ConfigurationError, StreamKind
from tusk.client.runtime.ws import build_stream_url, stream_params, to_websocket_url


class TestToWebsocketUrl:
    """Test scheme translation."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.social", "wss://example.social"),
            ("http://localhost:3000", "ws://localhost:3000"),
            ("wss://example.social", "wss://example.social"),
        ],
    )
    def test_translation(self, url, expected):
        assert to_websocket_url(url) == expected

    def test_unsupported_scheme(self):
        with pytest.raises(ConfigurationError):
            to_websocket_url("ftp://example.social")


class TestStreamParams:
    """Test stream_params validation."""

    def test_hashtag_requires_tag(self):
        with pytest.raises(ConfigurationError):
            stream_params(StreamKind.HASHTAG)

    def test_hashtag_strips_hash(self):
        assert stream_params(StreamKind.HASHTAG_LOCAL, tag="#python")["tag"] == "python"

    def test_list_requires_id(self):
        with pytest.raises(ConfigurationError):
            stream_params(StreamKind.LIST)

    def test_token_omitted_when_absent(self):
        assert stream_params(StreamKind.PUBLIC) == {"stream": "public"}


class TestBuildStreamUrl:
    """Test build_stream_url."""

    def test_websocket_url(self):
        url = build_stream_url("https://example.social/", StreamKind.USER, "tok")
        parts = urlsplit(url)
        assert parts.scheme == "wss"
        assert parts.path == "/api/v1/streaming"
        assert parse_qs(parts.query) == {"access_token": ["tok"], "stream": ["user"]}

    def test_websocket_list_stream(self):
        url = build_stream_url("https://example.social", StreamKind.LIST, "tok", list_id="12")
        assert parse_qs(urlsplit(url).query)["list"] == ["12"]

    def test_sse_url_uses_per_stream_path(self):
        url = build_stream_url(
            "https://example.social", StreamKind.HASHTAG_LOCAL, tag="python", websocket=False
        )
        parts = urlsplit(url)
        assert parts.scheme == "https"
        assert parts.path == "/api/v1/streaming/hashtag/local"
        assert parse_qs(parts.query) == {"tag": ["python"]}

    def test_sse_url_without_query(self):
        url = build_stream_url("https://example.social", StreamKind.PUBLIC_LOCAL, websocket=False)
        assert url == "https://example.social/api/v1/streaming/public/local"

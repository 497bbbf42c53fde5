"""Tests for the source fetcher."""

import io

import pytest
import requests
from PIL import Image

from pixel_transforms.config import SETTINGS
from pixel_transforms.infrastructure import network
from pixel_transforms.infrastructure.network import SourceFetcher, join_base_and_path


def _png_bytes(mode="RGB", color=(1, 2, 3)) -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, (3, 2), color=color).save(buffer, "PNG")
    return buffer.getvalue()


class FakeResponse:
    def __init__(self, content: bytes = b"", status: int = 200) -> None:
        self.content = content
        self.status = status

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


class FakeSession:
    def __init__(self, outcomes) -> None:
        self.headers = {}
        self.calls = []
        self._outcomes = list(outcomes)

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(network.time, "sleep", lambda _seconds: None)


def test_fetch_source_decodes_png_as_rgba():
    session = FakeSession([FakeResponse(_png_bytes())])
    fetcher = SourceFetcher(session_factory=lambda: session)

    img = fetcher.fetch_source("http://example.com/img.png")

    assert img.mode == "RGBA"
    assert img.size == (3, 2)
    assert img.getpixel((0, 0)) == (1, 2, 3, 255)
    assert session.calls == [("http://example.com/img.png", SETTINGS.timeout)]
    assert session.headers["User-Agent"].startswith("pixel-transforms/")


def test_fetch_source_defaults_to_configured_url():
    session = FakeSession([FakeResponse(_png_bytes())])
    fetcher = SourceFetcher(session_factory=lambda: session)

    fetcher.fetch_source()

    assert session.calls[0][0] == SETTINGS.source_url


def test_fetch_source_retries_then_succeeds(monkeypatch):
    monkeypatch.setattr(SETTINGS, "retries", 2)
    session = FakeSession(
        [requests.ConnectionError("down"), FakeResponse(status=503), FakeResponse(_png_bytes())]
    )
    fetcher = SourceFetcher(session_factory=lambda: session)

    img = fetcher.fetch_source("http://example.com/img.png")

    assert img.size == (3, 2)
    assert len(session.calls) == 3


def test_fetch_source_gives_up_after_retries(monkeypatch):
    monkeypatch.setattr(SETTINGS, "retries", 1)
    session = FakeSession([requests.ConnectionError("down"), FakeResponse(b"not an image")])
    fetcher = SourceFetcher(session_factory=lambda: session)

    with pytest.raises(RuntimeError, match="example.com"):
        fetcher.fetch_source("http://example.com/img.png")
    assert len(session.calls) == 2


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("http://foo:1234", "abc/def.png", "http://foo:1234/abc/def.png"),
        ("http://foo:1234/", "/abc/def.png", "http://foo:1234/abc/def.png"),
        ("http://foo:1234/base", "img.png", "http://foo:1234/base/img.png"),
    ],
)
def test_join_base_and_path(base, path, expected):
    assert join_base_and_path(base, path) == expected


def test_fetch_source_treats_decompression_bombs_as_failures(monkeypatch):
    monkeypatch.setattr(SETTINGS, "retries", 0)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1)
    session = FakeSession([FakeResponse(_png_bytes())])
    fetcher = SourceFetcher(session_factory=lambda: session)

    with pytest.raises(RuntimeError):
        fetcher.fetch_source("http://example.com/huge.png")

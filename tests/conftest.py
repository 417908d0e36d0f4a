from __future__ import annotations

import pytest

from vkauth.models import ClientConfig


class FakeResponse:
    def __init__(self, text: str):
        self.text = text


class FakeFetcher:
    """Records requested URLs and answers with a canned body or error."""

    def __init__(self, body: str | None = None, error: Exception | None = None):
        self.body = body
        self.error = error
        self.urls: list[str] = []

    def get(self, url: str) -> FakeResponse:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body or "")


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        app_id="APP_ID",
        app_secret="APP_SECRET",
        redirect_url="REDIRECT_URI",
        scope="PERMISSIONS",
    )


@pytest.fixture
def make_fetcher():
    return FakeFetcher

"""Pytest fixtures for the Strain API client tests."""

import pytest

from strain_api.clients.strain_client import StrainClient


class FakeFetcher:
    """Records requested URLs and answers with canned bodies or errors."""

    def __init__(self, body=b"", error=None):
        self.body = body
        self.error = error
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def client(fetcher):
    return StrainClient("test-key", fetcher=fetcher)


@pytest.fixture
def make_fetcher():
    return FakeFetcher

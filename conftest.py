from __future__ import annotations

import json

import pytest
import requests

from dogbreeds.apis.base import BreedFetcher
from dogbreeds.apis.caching import CachingBreedFetcher
from dogbreeds.apis.dog_ceo import DogCeoApi
from dogbreeds.errors import BreedNotFoundError
from dogbreeds.settings import Settings


class FakeBreedFetcher(BreedFetcher):
    """In-memory breed fetcher which records every requested breed."""

    def __init__(self, sub_breeds: dict[str, list[str]]):
        self.sub_breeds = sub_breeds
        self.requested: list[str | None] = []

    def get_sub_breeds(self, breed: str | None) -> list[str]:
        self.requested.append(breed)
        if breed is None or not breed.strip():
            raise BreedNotFoundError("Breed name must not be empty.", breed=breed)
        normalized = breed.strip().lower()
        if normalized not in self.sub_breeds:
            raise BreedNotFoundError("Breed not found", breed=breed)
        # Handing out the stored list lets tests check the cache copies it
        return self.sub_breeds[normalized]


def make_response(status_code: int = 200, body: dict | str | bytes = b"") -> requests.Response:
    """Build a `requests.Response` the way the transport would."""
    if isinstance(body, dict):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode()
    res = requests.Response()
    res.status_code = status_code
    res._content = body
    res.encoding = "utf-8"
    return res


class RecordingGet:
    """Stand-in for `requests.get` that answers with a canned response or error."""

    def __init__(self, answer: requests.Response | Exception):
        self.answer = answer
        self.calls: list[tuple[str, dict]] = []

    def __call__(self, url: str, **kwargs) -> requests.Response:
        self.calls.append((url, kwargs))
        if isinstance(self.answer, Exception):
            raise self.answer
        return self.answer


@pytest.fixture
def fake_fetcher():
    """Provide a fake fetcher which knows a couple of breeds."""
    return FakeBreedFetcher({
        "dachshund": ["chihuahua", "dachshund"],
        "hound": ["afghan", "basset", "blood"],
        "pug": [],
    })


@pytest.fixture
def caching_fetcher(fake_fetcher):
    """Provide a caching fetcher on top of `fake_fetcher`."""
    return CachingBreedFetcher(fake_fetcher)


@pytest.fixture
def dog_api():
    """Provide Dog Ceo API handler with default settings."""
    return DogCeoApi(Settings())


@pytest.fixture
def stub_get(monkeypatch):
    """Provide a factory replacing `requests.get` with a `RecordingGet`."""
    def _stub(answer: requests.Response | Exception) -> RecordingGet:
        fake_get = RecordingGet(answer)
        monkeypatch.setattr(requests, "get", fake_get)
        return fake_get
    return _stub

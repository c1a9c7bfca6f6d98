"""Dog CEO API."""

import json
from typing import Callable

import requests
from loguru import logger

from dogbreeds.apis.base import BaseApi, BreedFetcher
from dogbreeds.errors import BreedNotFoundError
from dogbreeds.settings import Settings


class DogCeoApi(BaseApi, BreedFetcher):
    """Dog.Ceo API handler.

    Every failure is reported as `BreedNotFoundError`,
    callers can't tell a missing breed from a network outage without reading the message.
    """

    def __init__(self, settings: Settings = None):
        if settings is None:
            settings = Settings.from_env()
        self.settings = settings

    @property
    def BASE_URL(self) -> str:
        return self.settings.base_url

    def _send_request(
            self,
            method: Callable[..., requests.Response],
            endpoint: str,
            headers: dict[str, str] = None,
    ) -> requests.Response:
        # NOTE: no raise_for_status here, error bodies are reported to the caller
        logger.debug("Requesting {}{}", self.BASE_URL, endpoint)
        return method(
            f"{self.BASE_URL}{endpoint}",
            headers=headers,
            timeout=self.settings.timeout,
        )

    def get_sub_breeds(self, breed: str | None) -> list[str]:
        """Get sub breeds of `breed` in the order the API lists them.

        Raises:
            BreedNotFoundError: if `breed` is blank, the request fails or the API doesn't know the breed.
        """
        if breed is None or not breed.strip():
            raise BreedNotFoundError("Breed name must not be empty.", breed=breed)

        normalized = breed.strip().lower()
        try:
            res = self._send_request(
                requests.get,
                f"/breed/{normalized}/list",
                headers={"Accept": "application/json"},
            )
        except requests.RequestException as e:
            logger.warning("Request for {!r} sub breeds failed: {}", breed, e)
            raise BreedNotFoundError(
                f"Breed not found or request failed for '{breed}'.", breed=breed,
            ) from e

        if not res.content:
            raise BreedNotFoundError(f"Empty response from API for breed: {breed}", breed=breed)
        if not 200 <= res.status_code < 300:
            logger.warning("Dog CEO answered {} for {!r}", res.status_code, breed)
            raise BreedNotFoundError(f"Failed to fetch sub-breeds for '{breed}': {res.text}", breed=breed)

        return self._parse_sub_breeds(res, breed)

    @staticmethod
    def _parse_sub_breeds(res: requests.Response, breed: str) -> list[str]:
        """Extract sub breeds from a `{"status": ..., "message": [...]}` body."""
        try:
            payload = res.json()
        except ValueError as e:
            raise BreedNotFoundError(f"Breed not found or request failed for '{breed}'.", breed=breed) from e
        if not isinstance(payload, dict):
            raise BreedNotFoundError(f"Breed not found or request failed for '{breed}'.", breed=breed)

        if str(payload.get("status", "")).lower() != "success":
            message = payload.get("message")
            if message is None:
                message = "Breed not found"
            elif not isinstance(message, str):
                message = json.dumps(message)
            raise BreedNotFoundError(message, breed=breed)

        sub_breeds = payload.get("message")
        if not isinstance(sub_breeds, list) or not all(isinstance(s, str) for s in sub_breeds):
            raise BreedNotFoundError(f"Breed not found or request failed for '{breed}'.", breed=breed)
        return list(sub_breeds)

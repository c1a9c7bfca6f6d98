"""The basic abstract APIs."""

import abc
from typing import Callable

import requests


class BaseApi(abc.ABC):
    """The most basic abstract API."""
    BASE_URL: str

    @abc.abstractmethod
    def _send_request(
            self,
            method: Callable[..., requests.Response],
            endpoint: str,
            headers: dict[str, str] = None,
    ) -> requests.Response:
        """Request sender.

        Raises:
            RequestException: if the request could not be sent.
        """
        ...


class BreedFetcher(abc.ABC):
    """Anything able to list sub breeds of a breed."""

    @abc.abstractmethod
    def get_sub_breeds(self, breed: str | None) -> list[str]:
        """Get sub breeds of `breed`.

        Raises:
            BreedNotFoundError: if sub breeds could not be fetched for any reason.
        """
        ...

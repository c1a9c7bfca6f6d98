"""Environment driven settings."""
from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, field_validator

DEFAULT_BASE_URL = "https://dog.ceo/api"


class Settings(BaseModel):
    """Remote breed source settings.

    `timeout` of None leaves the timeout to the transport.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="DOG_CEO_BASE_URL")
    timeout: PositiveFloat | None = Field(default=None, alias="DOG_CEO_TIMEOUT")

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        return value.strip().rstrip("/") or DEFAULT_BASE_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> Settings:
        """Build settings from `DOG_CEO_*` variables of `environ` (`os.environ` by default).

        Blank variables count as unset.

        Raises:
            ValidationError: if `DOG_CEO_TIMEOUT` is not a positive number.
        """
        if environ is None:
            environ = os.environ
        return cls.model_validate({
            name: value
            for name in ("DOG_CEO_BASE_URL", "DOG_CEO_TIMEOUT")
            if (value := environ.get(name, "").strip())
        })

"""Remote endpoint configuration model."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class EndpointConfig(BaseModel, frozen=True):
    url: str = Field(min_length=1)
    path: str = ""
    method: Literal["POST", "PUT"] = "POST"
    api_key: str | None = None
    timeout_ms: int | None = Field(default=None, gt=0)
    ca_bundle: Path | None = None

    @property
    def full_url(self) -> str:
        return f"{self.url}{self.path}"

"""Retry configuration model."""

from typing import Literal

from pydantic import BaseModel, Field


class RetryConfig(BaseModel, frozen=True):
    max_attempts: int = Field(ge=0)
    base_delay_ms: int = Field(ge=0)
    strategy: Literal["stepped_linear", "exponential"]

"""Document store and query window configuration models."""

from datetime import date
from typing import Self

from pydantic import BaseModel, Field, model_validator


class StoreConfig(BaseModel, frozen=True):
    uri: str = Field(default="mongodb://127.0.0.1:27017", min_length=1)
    database: str = Field(default="local_mmo_exportcert", min_length=1)
    collection: str = Field(default="exportCertificates", min_length=1)


class QueryWindow(BaseModel, frozen=True):
    start_date: date = date(2025, 1, 9)
    end_date: date = date(2025, 2, 13)

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} is before start_date {self.start_date}"
            )
        return self

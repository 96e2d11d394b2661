"""RemoteResponse value object — status and body returned by a remote endpoint."""

from pydantic import BaseModel, ConfigDict


class RemoteResponse(BaseModel, frozen=True):
    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str

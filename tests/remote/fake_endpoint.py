"""FakeRemoteEndpoint and factory — in-memory RemoteEndpoint for use in tests."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from job_relay.config.domain.endpoint import EndpointConfig
from job_relay.remote.domain.response import RemoteResponse


class FakeRemoteEndpoint:
    """Satisfies the RemoteEndpoint protocol and records every payload sent.

    Each call pops from the front of side_effects: an exception is raised, a
    RemoteResponse is returned. Once exhausted, ``response`` is returned.
    """

    def __init__(
        self,
        response: RemoteResponse | None = None,
        side_effects: list[RemoteResponse | BaseException] | None = None,
        request_name: str = "PUT /api/certificates",
        target: str = "https://remote.example",
    ) -> None:
        self._response = response or RemoteResponse(status_code=200, body="ok")
        self._side_effects: list[RemoteResponse | BaseException] = list(side_effects or [])
        self._request_name = request_name
        self._target = target
        self.payloads: list[Any | None] = []

    @property
    def request_name(self) -> str:
        return self._request_name

    @property
    def target(self) -> str:
        return self._target

    async def send(self, payload: Any | None) -> RemoteResponse:
        self.payloads.append(payload)
        if self._side_effects:
            effect = self._side_effects.pop(0)
            if isinstance(effect, BaseException):
                raise effect
            return effect
        return self._response


class FakeRemoteEndpointFactory:
    """Hands out a single FakeRemoteEndpoint and records open/close."""

    def __init__(self, endpoint: FakeRemoteEndpoint) -> None:
        self.endpoint = endpoint
        self.opened: list[EndpointConfig] = []
        self.closed = 0

    @asynccontextmanager
    async def open(self, config: EndpointConfig) -> AsyncIterator[FakeRemoteEndpoint]:
        self.opened.append(config)
        try:
            yield self.endpoint
        finally:
            self.closed += 1

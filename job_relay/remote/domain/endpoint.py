"""RemoteEndpoint and RemoteEndpointFactory Protocols."""

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol

from job_relay.config.domain.endpoint import EndpointConfig
from job_relay.remote.domain.response import RemoteResponse


class RemoteEndpoint(Protocol):
    """Sends one request to a configured endpoint.

    ``send`` raises TransientCallError on a network failure or non-2xx status.
    """

    @property
    def request_name(self) -> str: ...

    @property
    def target(self) -> str: ...

    async def send(self, payload: Any | None) -> RemoteResponse: ...


class RemoteEndpointFactory(Protocol):
    """Opens an endpoint whose connection pool lives only inside the context."""

    def open(
        self, config: EndpointConfig
    ) -> AbstractAsyncContextManager[RemoteEndpoint]: ...

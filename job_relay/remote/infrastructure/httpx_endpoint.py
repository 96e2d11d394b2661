"""httpx-backed RemoteEndpoint and the factory that scopes its client."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from job_relay.config.domain.endpoint import EndpointConfig
from job_relay.remote.domain.observer import RemoteObserver
from job_relay.remote.domain.response import RemoteResponse
from job_relay.remote.infrastructure.errors import TransientCallError
from job_relay.remote.infrastructure.tls import load_verify


class HttpxRemoteEndpoint:
    """Sends the configured request through a caller-owned httpx.AsyncClient.

    Any 2xx status is success. Other statuses, transport errors and timeouts
    become TransientCallError so the retry loop can act on them.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: EndpointConfig,
        observer: RemoteObserver,
    ) -> None:
        self._client = client
        self._config = config
        self._observer = observer

    @property
    def request_name(self) -> str:
        return f"{self._config.method} {httpx.URL(self._config.full_url).path}"

    @property
    def target(self) -> str:
        return self._config.url

    async def send(self, payload: Any | None) -> RemoteResponse:
        """Send one request and return the response.

        Raises:
            TransientCallError: on transport failure, timeout, or non-2xx status.
        """
        method = self._config.method
        url = self._config.full_url
        self._observer.request_sent(method=method, url=url)

        try:
            response = await self._client.request(
                method,
                url,
                json=payload,
                headers=self._headers(),
            )
        except httpx.HTTPError as exc:
            raise TransientCallError(
                reason=f"{type(exc).__name__}: {exc}"
            ) from exc

        self._observer.response_received(
            method=method, url=url, status_code=response.status_code
        )
        if not response.is_success:
            raise TransientCallError(
                reason=f"unexpected status {response.status_code}",
                status_code=response.status_code,
            )
        return RemoteResponse(status_code=response.status_code, body=response.text)

    def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        if self._config.api_key:
            headers["X-API-KEY"] = self._config.api_key
        return headers


class HttpxRemoteEndpointFactory:
    """Opens one httpx.AsyncClient per run and closes it on every exit path.

    Keep-alive is disabled so no connection outlives a request.
    """

    def __init__(self, observer: RemoteObserver) -> None:
        self._observer = observer

    @asynccontextmanager
    async def open(self, config: EndpointConfig) -> AsyncIterator[HttpxRemoteEndpoint]:
        timeout = (
            httpx.Timeout(config.timeout_ms / 1000)
            if config.timeout_ms is not None
            else httpx.Timeout(None)
        )
        async with httpx.AsyncClient(
            timeout=timeout,
            verify=load_verify(ca_bundle=config.ca_bundle, observer=self._observer),
            limits=httpx.Limits(max_keepalive_connections=0),
        ) as client:
            yield HttpxRemoteEndpoint(
                client=client, config=config, observer=self._observer
            )

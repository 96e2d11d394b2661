"""Observer port for the remote-call domain."""

from typing import Protocol


class RemoteObserver(Protocol):
    def request_sent(self, method: str, url: str) -> None: ...

    def response_received(self, method: str, url: str, status_code: int) -> None: ...

    def ca_bundle_loaded(self, path: str) -> None: ...

    def ca_bundle_unavailable(self, path: str, reason: str) -> None: ...

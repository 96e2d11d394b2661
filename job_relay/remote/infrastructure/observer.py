"""Structlog implementation of the RemoteObserver port."""

import structlog


class StructlogRemoteObserver:
    """Delegates remote-call events to structlog.

    Satisfies the RemoteObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def request_sent(self, method: str, url: str) -> None:
        self._log.info("remote.request_sent", method=method, url=url)

    def response_received(self, method: str, url: str, status_code: int) -> None:
        self._log.info(
            "remote.response_received",
            method=method,
            url=url,
            status_code=status_code,
        )

    def ca_bundle_loaded(self, path: str) -> None:
        self._log.info("remote.ca_bundle_loaded", path=path)

    def ca_bundle_unavailable(self, path: str, reason: str) -> None:
        self._log.error(
            "remote.ca_bundle_unavailable",
            path=path,
            reason=reason,
            message="Make sure the CA pem bundle file exists and is readable",
        )

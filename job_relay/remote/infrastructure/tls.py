"""TLS verification settings built from an optional CA bundle file."""

import ssl
from pathlib import Path

from job_relay.remote.domain.observer import RemoteObserver


def load_verify(ca_bundle: Path | None, observer: RemoteObserver) -> ssl.SSLContext | bool:
    """Return an SSLContext trusting ``ca_bundle``, or True for the system store.

    An unreadable bundle is reported to the observer and the system trust store
    is used instead; it never aborts the run.
    """
    if ca_bundle is None:
        return True

    try:
        context = ssl.create_default_context(cafile=str(ca_bundle))
    except (OSError, ssl.SSLError) as exc:
        observer.ca_bundle_unavailable(path=str(ca_bundle), reason=str(exc))
        return True

    observer.ca_bundle_loaded(path=str(ca_bundle))
    return context

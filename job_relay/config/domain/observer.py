"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, job: str, source: str) -> None: ...

    def config_overridden(self, job: str, keys: list[str]) -> None: ...

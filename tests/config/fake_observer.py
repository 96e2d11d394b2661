"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, str]] = []
        self.overridden: list[list[str]] = []

    def config_loaded(self, job: str, source: str) -> None:
        self.loaded.append({"job": job, "source": source})

    def config_overridden(self, job: str, keys: list[str]) -> None:
        self.overridden.append(keys)

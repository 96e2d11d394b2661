"""Configuration failures; each aborts a run before any remote attempt."""

from pathlib import Path

from job_relay.core.errors import ConfigurationError


class MissingEnvVarsError(ConfigurationError):
    """Environment variables referenced without a fallback are unset.

    ``missing_vars`` keeps first-seen order; the message lists them sorted.
    """

    def __init__(self, missing_vars: list[str]) -> None:
        super().__init__(
            "Failed to load config: missing environment variables: "
            + ", ".join(sorted(missing_vars))
        )
        self.missing_vars = missing_vars


class ConfigValidationError(ConfigurationError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")
        self.reason = reason


class ConfigLoadError(ConfigurationError):
    """The file at ``path`` is absent, unreadable, or not a YAML mapping."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        super().__init__(f"Failed to load config: {reason}: {path}")
        self.path = path
        self.reason = reason

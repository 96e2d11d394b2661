"""Flattened, secret-masked view of a job config for the config log line."""

from typing import Any

from pydantic import BaseModel

_SECRET_KEYS = frozenset({"api_key", "connection_string"})
_MASK = "****"


def describe_config(config: BaseModel) -> dict[str, str]:
    """Flatten ``config`` to ``dotted.key -> str`` with secrets masked."""
    flat: dict[str, str] = {}
    _flatten(config.model_dump(mode="json"), prefix="", out=flat)
    return flat


def _flatten(data: dict[str, Any], prefix: str, out: dict[str, str]) -> None:
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            _flatten(value, prefix=f"{dotted}.", out=out)
        elif key in _SECRET_KEYS and value:
            out[dotted] = _MASK
        else:
            out[dotted] = str(value)

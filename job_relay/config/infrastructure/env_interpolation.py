"""${ENV_VAR} and ${ENV_VAR:-fallback} substitution over raw YAML data."""

import os
import re
from collections.abc import Callable

_REFERENCE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<fallback>[^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return unset variables referenced without a fallback, in first-seen order."""
    missing: list[str] = []

    def visit(text: str) -> str:
        for match in _REFERENCE.finditer(text):
            name = match["name"]
            if match["fallback"] is None and name not in os.environ and name not in missing:
                missing.append(name)
        return text

    _map_strings(data, visit)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Substitute every reference; unset variables take their fallback.

    Run ``collect_missing_vars`` first: a reference with neither a value nor a
    fallback raises KeyError here.
    """
    return _map_strings(data, lambda text: _REFERENCE.sub(_resolve, text))


def _resolve(match: re.Match[str]) -> str:
    fallback = match["fallback"]
    if fallback is None:
        return os.environ[match["name"]]
    return os.environ.get(match["name"], fallback)


def _map_strings(data: RawValue, fn: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return fn(data)
    if isinstance(data, list):
        return [_map_strings(item, fn) for item in data]
    if isinstance(data, dict):
        return {key: _map_strings(value, fn) for key, value in data.items()}
    return data

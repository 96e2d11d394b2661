"""Dotted ``key=value`` run-time overrides merged over a loaded config."""

from typing import Any

type Overrides = dict[str, Any]


def parse_overrides(pairs: list[str]) -> Overrides:
    """Parse ``a.b=value`` strings.

    Values stay strings and are coerced by the target field during validation,
    so ``endpoint.api_key=12345`` remains the string "12345". An empty value
    clears the field.

    Raises:
        ValueError: if a pair has no ``=`` or an empty key.
    """
    overrides: Overrides = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"override {pair!r} must look like key=value")
        overrides[key] = raw if raw.strip() else None
    return overrides


def apply_overrides(data: dict[str, Any], overrides: Overrides) -> dict[str, Any]:
    """Return a copy of ``data`` with each dotted key set, creating tables as needed."""
    merged = _deep_copy(data)
    for dotted, value in overrides.items():
        node = merged
        *parents, leaf = dotted.split(".")
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[leaf] = value
    return merged


def _deep_copy(data: dict[str, Any]) -> dict[str, Any]:
    return {
        key: _deep_copy(value) if isinstance(value, dict) else value
        for key, value in data.items()
    }


def merge_tables(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``layer`` over ``base``; nested tables merge key by key."""
    merged = _deep_copy(base)
    for key, value in layer.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_tables(current, value)
        else:
            merged[key] = value
    return merged

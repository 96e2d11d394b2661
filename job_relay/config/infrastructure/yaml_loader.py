"""YAML config loader — layers defaults, file, and overrides, then validates."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from job_relay.config.domain.observer import ConfigObserver
from job_relay.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from job_relay.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from job_relay.config.infrastructure.overrides import (
    Overrides,
    apply_overrides,
    merge_tables,
)


class YamlConfigLoader:
    """Resolves a job config: model defaults <- YAML file <- run-time overrides."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load[M: BaseModel](
        self,
        model: type[M],
        job: str,
        path: Path | None = None,
        overrides: Overrides | None = None,
    ) -> M:
        """
        Load, interpolate, merge, validate, and return a job config.

        Without ``path`` the model's defaults are used as the base layer.

        Raises:
            ConfigLoadError: if the file is missing, unreadable, or not a YAML mapping.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the merged config violates the schema.
        """
        layer: dict[str, Any] = {} if path is None else _parse_yaml(path=path)
        _check_missing_env_vars(raw=layer)
        layer = _interpolate(raw=layer)

        resolved = merge_tables(model().model_dump(), layer)
        if overrides:
            resolved = apply_overrides(resolved, overrides)

        cfg = _build_config(model=model, resolved=resolved)
        self._observer.config_loaded(
            job=job, source=str(path) if path is not None else "defaults"
        )
        if overrides:
            self._observer.config_overridden(job=job, keys=sorted(overrides))
        return cfg


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigLoadError(path=path, reason=f"unreadable ({exc})") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="top level is not a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _interpolate(raw: Any) -> Any:
    return interpolate(raw)


def _build_config[M: BaseModel](model: type[M], resolved: dict[str, Any]) -> M:
    try:
        return model.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc

"""Configuration loading & validation.

Precedence (last wins): base.yaml → overrides.local.yaml → ENV (MINDEPS__*).

Sections are validated by their own schema (``mindeps.config.schemas``);
unknown keys are rejected at every level.
"""
from __future__ import annotations

import logging
import os
import pathlib
import threading
from functools import lru_cache
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from mindeps import metrics
from mindeps.errors import validate_error_type

from .schemas.analysis import AnalysisConfig, OutputConfig
from .schemas.observability import LoggingConfig
from .schemas.scan import ScanConfig

log = logging.getLogger(__name__)


class AggregatedConfig(BaseModel):
    schema_version: int = 1
    scan: ScanConfig = ScanConfig()
    analysis: AnalysisConfig = AnalysisConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = ConfigDict(extra="forbid")


DEFAULT_CONFIG_DIR = "configs"
CONFIG_DIR_ENV = "MINDEPS_CONFIG_DIR"
ENV_PREFIX = "MINDEPS__"


class ConfigError(Exception):
    pass


def _load_yaml_if_exists(path: pathlib.Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name}: top level must be a mapping")
    return data


def _merge_dict(
    base: Dict[str, Any], override: Dict[str, Any]
) -> Dict[str, Any]:
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            base[k] = _merge_dict(base[k], v)
        else:
            base[k] = v
    return base


def _cast_env_value(value: str) -> Any:
    if value.lower() in {"true", "false"}:
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def _apply_env(cfg: Dict[str, Any]) -> None:
    prefix_len = len(ENV_PREFIX)
    for env_key, value in os.environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        path_parts = env_key[prefix_len:].lower().split("__")
        target = cfg
        for part in path_parts[:-1]:
            if part not in target or not isinstance(target[part], dict):
                target[part] = {}
            target = target[part]
        target[path_parts[-1]] = _cast_env_value(value)
        dotted_path = ".".join(path_parts)
        metrics.inc("env_override_total", {"path": dotted_path})
        log.info(
            "[config-env-override] path=%s value=*** source=env", dotted_path
        )


_lock = threading.Lock()


def _resolve_config_dir() -> pathlib.Path:
    """Resolve config directory each call honoring env var changes."""
    return pathlib.Path(os.getenv(CONFIG_DIR_ENV, DEFAULT_CONFIG_DIR))


def _migrate_legacy(data: Dict[str, Any]) -> Dict[str, Any]:
    if "schema_version" not in data:
        log.info("[config-migration] schema_version missing → assuming 1")
        data["schema_version"] = 1
    return data


def _normalize_and_validate(raw: Dict[str, Any]) -> None:
    """Cross-field bounds the schemas cannot express on their own.

    Validations (error → raise):
      - scan.delimiter non-empty (an empty delimiter matches every line)
      - scan.folders non-empty
      - output.arrow non-empty
    """
    errors: list[tuple[str, str, str]] = []  # (path, code, msg)
    scan = raw.get("scan") or {}
    output = raw.get("output") or {}
    if isinstance(scan, dict):
        if scan.get("delimiter") == "":
            errors.append(
                ("scan.delimiter", "config-out-of-range", "non-empty required")
            )
        if scan.get("folders") == []:
            errors.append(
                ("scan.folders", "config-out-of-range", "non-empty required")
            )
    if isinstance(output, dict) and output.get("arrow") == "":
        errors.append(
            ("output.arrow", "config-out-of-range", "non-empty required")
        )

    if errors:
        for path, code, _ in errors:
            validate_error_type(code)
            metrics.inc(
                "config_validation_errors_total",
                {"path": path, "code": code},
            )
        details = ", ".join(f"{p}:{c}:{m}" for p, c, m in errors)
        raise ConfigError(f"config validation failed: {details}")


def load_config(config_dir: str | pathlib.Path) -> AggregatedConfig:
    """Load and validate config from an explicit directory (uncached)."""
    cfg_dir = pathlib.Path(config_dir)
    base_cfg = _load_yaml_if_exists(cfg_dir / "base.yaml")
    overrides_cfg = _load_yaml_if_exists(cfg_dir / "overrides.local.yaml")
    merged = _merge_dict(base_cfg, overrides_cfg)
    _apply_env(merged)
    migrated = _migrate_legacy(merged)
    _normalize_and_validate(migrated)
    try:
        return AggregatedConfig.model_validate(migrated)
    except ValidationError as e:
        raise ConfigError(str(e)) from e


@lru_cache(maxsize=1)
def get_config() -> AggregatedConfig:  # noqa: D401
    with _lock:
        return load_config(_resolve_config_dir())


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    get_config.cache_clear()


def as_dict() -> Dict[str, Any]:
    return get_config().model_dump()

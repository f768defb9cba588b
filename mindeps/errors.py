"""Central error taxonomy.

Every failure surfaced by the pipeline or the CLI is classified into one of
the codes below (events, metrics labels). Unknown codes are a programming
error and fail loudly.
"""
from __future__ import annotations

_ALLOWED_ERROR_TYPES = {
    # graph
    "module-not-found",
    "contract-violation",
    "graph-cycle",
    # scan
    "manifest-unreadable",
    # config
    "config-invalid",
    "config-out-of-range",
    # infra
    "event-handler-error",
    "internal",
}


def validate_error_type(code: str) -> str:
    assert (
        code in _ALLOWED_ERROR_TYPES
    ), f"Unknown error_type '{code}' (not in taxonomy)"
    return code


def map_exception(e: Exception) -> str:
    # Local imports: graph/scan/config import this module.
    from mindeps.config.loader import ConfigError
    from mindeps.graph.exceptions import (
        ContractViolation,
        CycleError,
        UnknownModuleError,
    )
    from mindeps.scan.exceptions import ManifestReadError

    if isinstance(e, UnknownModuleError):
        return "module-not-found"
    if isinstance(e, ContractViolation):
        return "contract-violation"
    if isinstance(e, CycleError):
        return "graph-cycle"
    if isinstance(e, ManifestReadError):
        return "manifest-unreadable"
    if isinstance(e, ConfigError):
        if "out-of-range" in str(e):
            return "config-out-of-range"
        return "config-invalid"
    return "internal"


__all__ = ["validate_error_type", "map_exception"]

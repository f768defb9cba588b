"""Workspace scanning: package discovery + naive manifest candidates."""

from .exceptions import ManifestReadError  # noqa: F401
from .manifest import (  # noqa: F401
    candidates_from_text,
    collect_candidates,
    scan_manifest,
)
from .packages import ModuleFilter, PackageDir, discover_packages  # noqa: F401

__all__ = [
    "ManifestReadError",
    "PackageDir",
    "ModuleFilter",
    "discover_packages",
    "scan_manifest",
    "candidates_from_text",
    "collect_candidates",
]

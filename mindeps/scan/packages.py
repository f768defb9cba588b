"""Workspace package discovery.

A package is a direct sub-directory of one of the configured folders that
contains the manifest file and passes the module filter.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from mindeps import metrics
from mindeps.config.schemas.scan import ScanConfig

from .exceptions import ManifestReadError

log = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class PackageDir:
    folder: str
    name: str
    manifest_name: str = field(default="Cargo.toml", compare=False)

    @property
    def path(self) -> Path:
        return Path(self.folder) / self.name

    @property
    def manifest_path(self) -> Path:
        return self.path / self.manifest_name


@dataclass(frozen=True)
class ModuleFilter:
    """Inclusion predicate for package directory names."""

    exclude: frozenset = frozenset()
    exclude_suffixes: tuple = ()
    include_prefixes: tuple = ()

    @classmethod
    def from_config(cls, cfg: ScanConfig) -> "ModuleFilter":
        return cls(
            exclude=frozenset(cfg.exclude),
            exclude_suffixes=tuple(cfg.exclude_suffixes),
            include_prefixes=tuple(cfg.include_prefixes),
        )

    def __call__(self, name: str) -> bool:
        if name in self.exclude:
            return False
        if self.exclude_suffixes and name.endswith(self.exclude_suffixes):
            return False
        if self.include_prefixes:
            return name.startswith(self.include_prefixes)
        return True


def discover_packages(
    root: str | Path,
    folders: Iterable[str] = (".", "app"),
    manifest_name: str = "Cargo.toml",
    module_filter: ModuleFilter | None = None,
) -> List[PackageDir]:
    root_path = Path(root)
    accept = module_filter or ModuleFilter()
    found: List[PackageDir] = []
    for folder in folders:
        base = root_path / folder
        try:
            entries = sorted(base.iterdir())
        except OSError as e:
            raise ManifestReadError(f"read_dir {base}: {e}") from e
        for entry in entries:
            if not entry.is_dir() or not accept(entry.name):
                continue
            if not (entry / manifest_name).is_file():
                continue
            found.append(
                PackageDir(str(base), entry.name, manifest_name)
            )
    found.sort()
    unique: List[PackageDir] = []
    seen: dict[str, PackageDir] = {}
    for pkg in found:
        if pkg.name in seen:
            log.warning(
                "duplicate package %s in %s (keeping %s)",
                pkg.name,
                pkg.folder,
                seen[pkg.name].folder,
            )
            continue
        seen[pkg.name] = pkg
        unique.append(pkg)
    metrics.inc("modules_discovered_total", value=len(unique))
    log.info("discovered %d packages under %s", len(unique), root_path)
    return unique


__all__ = ["PackageDir", "ModuleFilter", "discover_packages"]

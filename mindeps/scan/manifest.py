"""Manifest candidate extraction.

This is a lexical approximation, not a manifest parser: every line that
contains the delimiter contributes its left-hand side, trimmed. For
``Cargo.toml`` that picks up dependency names such as ``foo = "1"`` and
``foo = { path = "../foo" }`` along with plenty of unrelated keys
(``version``, ``edition`` ...). The graph builder discards whatever does
not name a workspace package.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

from .exceptions import ManifestReadError
from .packages import PackageDir


def candidates_from_text(text: str, delimiter: str = "=") -> List[str]:
    out: List[str] = []
    for line in text.splitlines():
        left, sep, _ = line.partition(delimiter)
        if sep:
            out.append(left.strip())
    return out


def scan_manifest(path: str | Path, delimiter: str = "=") -> List[str]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(f"read_to_string {path}: {e}") from e
    return candidates_from_text(text, delimiter)


def collect_candidates(
    packages: Iterable[PackageDir], delimiter: str = "="
) -> Dict[str, List[str]]:
    return {
        pkg.name: scan_manifest(pkg.manifest_path, delimiter)
        for pkg in packages
    }


__all__ = ["candidates_from_text", "scan_manifest", "collect_candidates"]

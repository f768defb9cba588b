"""Pytest configuration ensuring project root is importable.

Adds repository root to sys.path explicitly to avoid interpreter/path quirks.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _isolate_config_env():  # noqa: D401
    """Ensure global config/env/logging side effects do not leak.

    - Clear aggregated config cache between tests
    - Restore MINDEPS_CONFIG_DIR to original value
    - Drop handlers installed by configure_logging (CLI tests)
    """
    from mindeps.config import clear_config_cache  # local import

    prev = os.environ.get("MINDEPS_CONFIG_DIR")
    clear_config_cache()
    try:
        yield
    finally:
        clear_config_cache()
        if prev is None:
            os.environ.pop("MINDEPS_CONFIG_DIR", None)
        else:
            os.environ["MINDEPS_CONFIG_DIR"] = prev
        logger = logging.getLogger("mindeps")
        for h in list(logger.handlers):
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def _write_pkg(root: Path, rel: str, manifest: str) -> None:
    d = root / rel
    d.mkdir(parents=True, exist_ok=True)
    (d / "Cargo.toml").write_text(manifest, encoding="utf-8")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Small cargo-like workspace.

    buck2 -> buck2_client, buck2_common; buck2_client -> buck2_common,
    buck2_core; buck2_common -> buck2_core. Plus an unrelated package,
    excluded packages and a directory without manifest.
    """
    root = tmp_path / "ws"
    _write_pkg(
        root,
        "buck2",
        '[package]\nname = "buck2"\nversion = "0.1.0"\n\n'
        "[dependencies]\n"
        'anyhow = "1.0"\n'
        'buck2_client = { path = "app/buck2_client" }\n'
        'buck2_common = { path = "buck2_common" }\n',
    )
    _write_pkg(
        root,
        "app/buck2_client",
        '[package]\nname = "buck2_client"\n\n[dependencies]\n'
        'buck2_common = { workspace = true }\n'
        'buck2_core = { workspace = true }\n',
    )
    _write_pkg(
        root,
        "buck2_common",
        '[package]\nname = "buck2_common"\n\n[dependencies]\n'
        "buck2_core = { workspace = true }\n",
    )
    _write_pkg(
        root,
        "buck2_core",
        '[package]\nname = "buck2_core"\nedition = "2021"\n\n'
        "[dependencies]\n"
        'superconsole = "0.2"\n',
    )
    _write_pkg(
        root,
        "buck2_unrelated",
        '[dependencies]\nbuck2_core = { path = "../buck2_core" }\n',
    )
    _write_pkg(root, "superconsole", '[package]\nname = "superconsole"\n')
    _write_pkg(root, "buck2_tests", '[dependencies]\nbuck2 = "0"\n')
    (root / "docs").mkdir()
    return root

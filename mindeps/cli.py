"""Command line entry point.

Examples:
    mindeps                       # target from config (default: buck2)
    mindeps --root ~/src/ws --target cli
    mindeps --format dot | dot -Tsvg -o deps.svg
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from mindeps import eventbus
from mindeps.config import ConfigError, get_config, load_config
from mindeps.config.loader import CONFIG_DIR_ENV
from mindeps.events import EVENT_TYPES
from mindeps.graph import GraphError
from mindeps.log import configure_logging
from mindeps.pipeline import analyze
from mindeps.render import render_dot, render_text
from mindeps.scan import ManifestReadError

log = logging.getLogger("mindeps.cli")


def _log_event(payload: Dict[str, Any]) -> None:
    fields = " ".join(
        f"{k}={v}"
        for k, v in sorted(payload.items())
        if k not in ("event", "ts")
    )
    log.debug("event %s %s", payload["event"], fields)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mindeps",
        description=(
            "Print the minimal direct-dependency edges leading to a target "
            "package of a multi-package workspace."
        ),
    )
    p.add_argument(
        "--root", default=".", help="workspace root (default: cwd)"
    )
    p.add_argument("--target", help="target package (default from config)")
    p.add_argument(
        "--format",
        choices=["text", "dot"],
        help="output format (default from config)",
    )
    p.add_argument(
        "--config-dir",
        help=f"config directory (overrides ${CONFIG_DIR_ENV})",
    )
    p.add_argument(
        "--no-cycle-check",
        action="store_true",
        help="reduce even if the ancestor graph has a cycle",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    handlers = [
        (name, lambda p, name=name: _log_event({**p, "event": name}))
        for name in (t.__name__ for t in EVENT_TYPES)
    ]
    for name, handler in handlers:
        eventbus.subscribe(name, handler)
    try:
        if args.config_dir:
            cfg = load_config(args.config_dir)
        else:
            cfg = get_config()
        configure_logging(cfg.logging)
        if args.no_cycle_check:
            cfg = cfg.model_copy(
                update={
                    "analysis": cfg.analysis.model_copy(
                        update={"check_acyclic": False}
                    )
                }
            )
        result = analyze(args.root, args.target, cfg)
        fmt = args.format or cfg.output.format
        if fmt == "dot":
            out = render_dot(result.minimal, f"{result.target}Dependencies")
        else:
            out = render_text(result.minimal, cfg.output.arrow)
    except (GraphError, ManifestReadError, ConfigError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        for name, handler in handlers:
            eventbus.unsubscribe(name, handler)
    sys.stdout.write(out)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

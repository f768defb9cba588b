import os
from pathlib import Path

from mindeps.cli import main


def _cfg_dir(tmp_path: Path, text: str = "") -> str:
    d = tmp_path / "cfg"
    d.mkdir(exist_ok=True)
    (d / "base.yaml").write_text(
        "schema_version: 1\n" + text, encoding="utf-8"
    )
    return str(d)


def test_cli_text_output(workspace: Path, tmp_path: Path, capsys):
    rc = main(
        [
            "--root",
            str(workspace),
            "--target",
            "buck2",
            "--config-dir",
            _cfg_dir(tmp_path),
        ]
    )
    assert rc == 0
    assert capsys.readouterr().out == (
        "buck2_client -> buck2\n"
        "buck2_common -> buck2_client\n"
        "buck2_core -> buck2_common\n"
    )


def test_cli_dot_output(workspace: Path, tmp_path: Path, capsys):
    rc = main(
        [
            "--root",
            str(workspace),
            "--format",
            "dot",
            "--config-dir",
            _cfg_dir(tmp_path),
        ]
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith('digraph "buck2Dependencies" {')
    assert '"buck2_core" -> "buck2_common";' in out


def test_cli_unknown_target_no_partial_output(
    workspace: Path, tmp_path: Path, capsys
):
    rc = main(
        [
            "--root",
            str(workspace),
            "--config-dir",
            _cfg_dir(tmp_path, "analysis:\n  target: missing\n"),
        ]
    )
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert "error: module not found: missing" in captured.err


def test_cli_bad_config(workspace: Path, tmp_path: Path, capsys):
    rc = main(
        [
            "--root",
            str(workspace),
            "--config-dir",
            _cfg_dir(tmp_path, "bogus: 1\n"),
        ]
    )
    assert rc == 1
    assert "error:" in capsys.readouterr().err


EDGES = (
    "buck2_client -> buck2\n"
    "buck2_common -> buck2_client\n"
    "buck2_core -> buck2_common\n"
)


def test_cli_stdout_is_only_edges_without_config_files(
    workspace: Path, tmp_path: Path, capsys
):
    empty = tmp_path / "empty"
    empty.mkdir()
    rc = main(["--root", str(workspace), "--config-dir", str(empty)])
    assert rc == 0
    assert capsys.readouterr().out == EDGES


def test_cli_env_override_keeps_dot_output_clean(
    workspace: Path, tmp_path: Path, monkeypatch, capsys
):
    monkeypatch.setenv("MINDEPS__OUTPUT__FORMAT", "dot")
    rc = main(["--root", str(workspace), "--config-dir", _cfg_dir(tmp_path)])
    assert rc == 0
    assert capsys.readouterr().out.startswith('digraph "buck2Dependencies" {')


def test_cli_config_dir_does_not_touch_environment(
    workspace: Path, tmp_path: Path, monkeypatch, capsys
):
    monkeypatch.delenv("MINDEPS_CONFIG_DIR", raising=False)
    rc = main(["--root", str(workspace), "--config-dir", _cfg_dir(tmp_path)])
    assert rc == 0
    assert "MINDEPS_CONFIG_DIR" not in os.environ


def test_cli_empty_target_is_not_found(
    workspace: Path, tmp_path: Path, capsys
):
    rc = main(
        [
            "--root",
            str(workspace),
            "--target",
            "",
            "--config-dir",
            _cfg_dir(tmp_path),
        ]
    )
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert "module not found" in captured.err


def test_cli_logs_stage_events_at_debug(
    workspace: Path, tmp_path: Path, capsys
):
    rc = main(
        [
            "--root",
            str(workspace),
            "--config-dir",
            _cfg_dir(tmp_path, "logging:\n  level: debug\n"),
        ]
    )
    captured = capsys.readouterr()
    assert rc == 0
    assert captured.out == EDGES
    assert "event GraphReduced" in captured.err
    assert "edges_after=3" in captured.err

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import yaml


def _run_cli(args: list[str], cwd: Path, env_extra: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env.setdefault("PYTHONPATH", str(cwd / "src"))
    env.pop("MUGGLE_ASSERT_CONFIG", None)
    env["COLUMNS"] = "200"
    if env_extra:
        env.update(env_extra)
    return subprocess.run(
        [sys.executable, "-m", "muggle_assert", *args],
        cwd=cwd,
        text=True,
        capture_output=True,
        env=env,
    )


def _root() -> Path:
    return Path(__file__).resolve().parents[2]


def test_config_prints_settings_from_path(tmp_path: Path) -> None:
    (tmp_path / "muggle-assert.yaml").write_text(
        yaml.safe_dump({"stack": {"limit": 7}}),
        encoding="utf-8",
    )

    result = _run_cli(["config", str(tmp_path)], cwd=_root())

    assert result.returncode == 0
    assert "stack.limit" in result.stdout
    assert "7" in result.stdout
    assert "report.max_repr" in result.stdout


def test_config_reads_environment(tmp_path: Path) -> None:
    config_path = tmp_path / "muggle-assert.yaml"
    config_path.write_text(yaml.safe_dump({"report": {"max_repr": 33}}), encoding="utf-8")

    result = _run_cli(["config"], cwd=_root(), env_extra={"MUGGLE_ASSERT_CONFIG": str(config_path)})

    assert result.returncode == 0
    assert "33" in result.stdout


def test_config_reports_invalid_file(tmp_path: Path) -> None:
    config_path = tmp_path / "muggle-assert.yaml"
    config_path.write_text("stack: [unclosed", encoding="utf-8")

    result = _run_cli(["config", str(config_path)], cwd=_root())

    assert result.returncode == 1
    assert "Invalid config" in result.stdout


def test_version_prints_something(tmp_path: Path) -> None:
    result = _run_cli(["version"], cwd=_root())

    assert result.returncode == 0
    assert result.stdout.strip()

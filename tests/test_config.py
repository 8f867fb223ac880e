from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from fndep.config import AnalysisConfig, FndepConfig, load_config
from fndep.context import AnalysisContext


def _write_config(path: Path, content: str) -> None:
    path.write_text(textwrap.dedent(content), encoding="utf-8")


def test_repo_root_relative_to_config_dir(tmp_path: Path) -> None:
    config_dir = tmp_path / "cfg"
    repo_root = tmp_path / "repo" / "app"
    (repo_root / "src").mkdir(parents=True)
    (repo_root / "src" / "main.c").write_text(
        "int add(int a, int b){ return a + b; }\nint main(){ return add(1,2); }\n",
        encoding="utf-8",
    )
    config_dir.mkdir()
    config_path = config_dir / "fndep.yml"
    _write_config(
        config_path,
        """
        version: 1
        project:
          name: "Test"
          repo_root: "../repo/app"
        analysis:
          max_depth: 3
        outputs:
          report_path: "outputs/report.json"
        """,
    )

    cfg = load_config(str(config_path))
    assert cfg.repo_root_path() == repo_root.resolve()
    assert cfg.report_path() == (repo_root / "outputs" / "report.json").resolve()
    assert cfg.analysis.max_depth == 3
    assert cfg.scan.max_files == 5000

    context = AnalysisContext.from_config(cfg)
    context.scan()
    assert context.analyze("main").ordered_names == ["add", "main"]


def test_absolute_repo_root(tmp_path: Path) -> None:
    config_path = tmp_path / "fndep.yml"
    _write_config(
        config_path,
        f"""
        version: 1
        project:
          name: "Abs"
          repo_root: "{tmp_path.as_posix()}"
        scan:
          extensions: ["c", ".h"]
          includes: ["src/**/*"]
        """,
    )
    cfg = load_config(str(config_path))
    assert cfg.repo_root_path() == tmp_path.resolve()
    assert cfg.scan.extensions == [".c", ".h"]
    assert cfg.scan.includes == ["src/**/*"]
    assert cfg.report_path() is None


def test_unsupported_version_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "fndep.yml"
    _write_config(config_path, "version: 2\n")
    with pytest.raises(ValueError):
        load_config(str(config_path))


def test_unknown_encoding_is_rejected() -> None:
    cfg = FndepConfig()
    with pytest.raises(ValueError):
        cfg.scan.encoding = "no-such-codec"


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yml"))


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "fndep.yml"
    config_path.write_text("", encoding="utf-8")
    cfg = load_config(str(config_path))
    assert cfg.version == 1
    assert cfg.analysis.max_depth == 10
    assert cfg.repo_root_path() == tmp_path.resolve()


def test_non_positive_depth_is_rejected_before_analysis() -> None:
    with pytest.raises(ValueError):
        AnalysisConfig(max_depth=0)
    cfg = FndepConfig()
    with pytest.raises(ValueError):
        cfg.analysis.max_depth = 0
    assert cfg.analysis.max_depth == 10

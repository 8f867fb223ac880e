"""CLI for fndep."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from fndep.config import FndepConfig, ProjectConfig, load_config
from fndep.context import AnalysisContext
from fndep.domain.models import AnalysisResult
from fndep.io.json_report import write_report

app = typer.Typer(help="Function dependency analyzer")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    function: str = typer.Argument(..., help="Root function name (case-sensitive)"),
    repo: str = typer.Option(".", "--repo", help="Directory to scan"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to config YAML"),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", min=1, help="Expansion depth bound"),
    max_files: Optional[int] = typer.Option(None, "--max-files", min=1, help="Maximum files to scan"),
    include: Optional[List[str]] = typer.Option(None, "--include", help="Glob of files to include"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Glob of files to exclude"),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Source file encoding"),
    out: Optional[str] = typer.Option(None, "--out", help="Write the JSON report here"),
) -> None:
    """Order the functions reachable from FUNCTION, leaves first."""
    result = analyze_command(
        function=function,
        repo=repo,
        config=config,
        max_depth=max_depth,
        max_files=max_files,
        include=include,
        exclude=exclude,
        encoding=encoding,
        out=out,
    )
    if not result.found:
        raise typer.Exit(code=1)


@app.command()
def functions(
    repo: str = typer.Option(".", "--repo", help="Directory to scan"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to config YAML"),
    max_files: Optional[int] = typer.Option(None, "--max-files", min=1, help="Maximum files to scan"),
    include: Optional[List[str]] = typer.Option(None, "--include", help="Glob of files to include"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Glob of files to exclude"),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Source file encoding"),
) -> None:
    """List every function discovered in the corpus."""
    functions_command(
        repo=repo,
        config=config,
        max_files=max_files,
        include=include,
        exclude=exclude,
        encoding=encoding,
    )


def analyze_command(
    *,
    function: str,
    repo: str = ".",
    config: Optional[str] = None,
    max_depth: Optional[int] = None,
    max_files: Optional[int] = None,
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    encoding: Optional[str] = None,
    out: Optional[str] = None,
) -> AnalysisResult:
    cfg = _build_config(
        repo=repo,
        config=config,
        max_depth=max_depth,
        max_files=max_files,
        include=include,
        exclude=exclude,
        encoding=encoding,
    )
    context = AnalysisContext.from_config(cfg)
    report = context.scan()
    for error in report.errors:
        typer.echo(f"Skipped {error.path}: {error.message}", err=True)

    result = context.analyze(function)
    _echo_result(result)

    report_path = Path(out) if out else cfg.report_path()
    if report_path:
        write_report(report_path, result)
        typer.echo(f"Wrote report to {report_path}")
    return result


def functions_command(
    *,
    repo: str = ".",
    config: Optional[str] = None,
    max_files: Optional[int] = None,
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    encoding: Optional[str] = None,
) -> List[str]:
    cfg = _build_config(
        repo=repo,
        config=config,
        max_depth=None,
        max_files=max_files,
        include=include,
        exclude=exclude,
        encoding=encoding,
    )
    context = AnalysisContext.from_config(cfg)
    report = context.scan()
    lines = [f"{record.name}\t{record.source_location}" for record in context.list_functions()]
    for line in lines:
        typer.echo(line)
    typer.echo(
        f"{report.functions_found} functions in {report.files_processed} files "
        f"({report.files_skipped_excluded} excluded, {report.files_skipped_extension} unsupported)"
    )
    return lines


def _build_config(
    *,
    repo: str,
    config: Optional[str],
    max_depth: Optional[int],
    max_files: Optional[int],
    include: Optional[List[str]],
    exclude: Optional[List[str]],
    encoding: Optional[str],
) -> FndepConfig:
    if config:
        cfg = load_config(config)
    else:
        cfg = FndepConfig(project=ProjectConfig(repo_root=repo))
    if max_depth is not None:
        cfg.analysis.max_depth = max_depth
    if max_files is not None:
        cfg.scan.max_files = max_files
    if include:
        cfg.scan.includes = list(include)
    if exclude:
        cfg.scan.excludes = list(exclude)
    if encoding:
        cfg.scan.encoding = encoding
    return cfg


def _echo_result(result: AnalysisResult) -> None:
    stats = result.stats
    typer.echo(
        f"Files processed: {stats.files_processed}, functions found: {stats.functions_found}, "
        f"dependencies: {stats.dependencies_found}"
    )
    if not result.found:
        typer.echo(f"Function '{result.root_function}' not found", err=True)
        return
    for item in result.sorted_functions:
        marker = " [ROOT]" if item.is_root else ""
        typer.echo(f"{item.name}\t{item.file}{marker}")
    if result.not_found:
        typer.echo(f"Not found: {', '.join(result.not_found)}")


if __name__ == "__main__":
    app()

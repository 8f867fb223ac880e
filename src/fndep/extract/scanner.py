"""File scanning utilities for function extraction."""

from __future__ import annotations

import fnmatch
import glob
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple


DEFAULT_EXCLUDES = [
    "**/.git/**",
    "**/.venv/**",
    "**/venv/**",
    "**/env/**",
    "**/__pycache__/**",
    "**/build/**",
    "**/dist/**",
    "**/target/**",
    "**/node_modules/**",
    "**/.mypy_cache/**",
    "**/.pytest_cache/**",
    "**/.tox/**",
]

DEFAULT_INCLUDES = ["**/*"]

CODE_EXTENSIONS = [
    ".js", ".ts", ".jsx", ".tsx", ".c", ".cpp", ".cc", ".h", ".hpp",
    ".glsl", ".vert", ".frag", ".comp", ".geom", ".tesc", ".tese",
    ".rchit", ".rgen", ".rmiss", ".slang", ".py", ".java", ".cs", ".go", ".rust", ".rs",
]

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class ScannedFile:
    path: Path
    relative_path: str


@dataclass(frozen=True)
class ScanSummary:
    total_files_matched: int
    skipped_excluded: int
    skipped_extension: int


def should_process_file(path: Path, extensions: Iterable[str] = CODE_EXTENSIONS) -> bool:
    """Extensionless files are accepted; ``.json`` never is."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        return False
    if not suffix:
        return True
    return suffix in {ext.lower() for ext in extensions}


def scan_files(
    *,
    repo_root: Path,
    includes: Sequence[str] = DEFAULT_INCLUDES,
    excludes: Sequence[str] = DEFAULT_EXCLUDES,
    extensions: Sequence[str] = CODE_EXTENSIONS,
) -> List[ScannedFile]:
    scanned, _summary = scan_files_with_summary(
        repo_root=repo_root,
        includes=includes,
        excludes=excludes,
        extensions=extensions,
    )
    return scanned


def scan_files_with_summary(
    *,
    repo_root: Path,
    includes: Sequence[str],
    excludes: Sequence[str],
    extensions: Sequence[str],
) -> Tuple[List[ScannedFile], ScanSummary]:
    """Glob ``includes`` under ``repo_root`` and return files in path order.

    The ordering is what makes first-definition-wins reproducible.
    """
    repo_root = repo_root.resolve()
    matches: set[Path] = set()
    for pattern in includes:
        if Path(pattern).is_absolute():
            glob_pattern = pattern
        else:
            glob_pattern = str(repo_root / pattern)
        for match in glob.glob(glob_pattern, recursive=True):
            matches.add(Path(match))

    scanned: List[ScannedFile] = []
    matched_files = 0
    skipped_excluded = 0
    skipped_extension = 0
    for path in sorted(matches, key=lambda item: item.as_posix()):
        if not path.is_file():
            continue
        resolved_path = path.resolve()
        try:
            rel_path = resolved_path.relative_to(repo_root).as_posix()
        except ValueError:
            continue
        matched_files += 1
        if _is_excluded(rel_path, excludes):
            skipped_excluded += 1
            continue
        if not should_process_file(path, extensions):
            skipped_extension += 1
            continue
        scanned.append(ScannedFile(path=resolved_path, relative_path=rel_path))
    scanned.sort(key=lambda item: item.relative_path)
    summary = ScanSummary(
        total_files_matched=matched_files,
        skipped_excluded=skipped_excluded,
        skipped_extension=skipped_extension,
    )
    return scanned, summary


def _is_excluded(rel_path: str, excludes: Sequence[str]) -> bool:
    anchored_path = f"/{rel_path}"
    return any(
        fnmatch.fnmatch(rel_path, pattern) or fnmatch.fnmatch(anchored_path, pattern)
        for pattern in excludes
    )


def read_text_with_fallback(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    data = path.read_bytes()
    for candidate in (encoding, "utf-8-sig", "latin-1"):
        try:
            return data.decode(candidate)
        except UnicodeDecodeError:
            continue
    return data.decode("latin-1", errors="replace")

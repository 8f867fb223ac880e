"""Build the function cache from an ordered corpus."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

from fndep.cache import FunctionCache
from fndep.domain.models import ScanError, ScanReport
from fndep.domain.ports import SourceFilePort
from fndep.extract.function_extractor import DEFAULT_MIN_BODY_LENGTH, extract_functions
from fndep.extract.scanner import DEFAULT_ENCODING, ScannedFile, read_text_with_fallback

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILES = 5000


@dataclass(frozen=True)
class SourceFile:
    path: str
    reader: Callable[[], str]

    def read(self) -> str:
        return self.reader()


def text_source(path: str, content: str) -> SourceFile:
    return SourceFile(path=path, reader=lambda: content)


def disk_sources(files: Iterable[ScannedFile], encoding: str = DEFAULT_ENCODING) -> List[SourceFile]:
    return [
        SourceFile(path=item.relative_path, reader=_disk_reader(item.path, encoding))
        for item in files
    ]


def _disk_reader(path: Path, encoding: str) -> Callable[[], str]:
    return lambda: read_text_with_fallback(path, encoding)


def build_cache(
    sources: Iterable[SourceFilePort],
    *,
    max_files: int = DEFAULT_MAX_FILES,
    min_body_length: int = DEFAULT_MIN_BODY_LENGTH,
) -> Tuple[FunctionCache, ScanReport]:
    """Extract functions from ``sources`` in the order given.

    Files that cannot be read are reported and skipped. At most ``max_files``
    sources are consumed.
    """
    cache = FunctionCache()
    report = ScanReport()

    for source in sources:
        if report.files_seen >= max_files:
            logger.warning("File limit of %d reached; remaining files skipped", max_files)
            break
        report.files_seen += 1

        try:
            content = source.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Error reading %s: %s", source.path, exc)
            report.errors.append(ScanError(path=source.path, message=str(exc)))
            continue

        functions = extract_functions(content, min_body_length=min_body_length)
        if functions:
            logger.debug(
                "%s: found %d functions: %s",
                source.path,
                len(functions),
                ", ".join(item.name for item in functions),
            )
        for item in functions:
            cache.add(item.name, source.path, item.body)
        cache.mark_file_processed()

    report.files_processed = cache.files_processed
    report.functions_found = cache.functions_found
    logger.info(
        "Scan complete: %d files processed, %d unique functions found",
        cache.files_processed,
        cache.functions_found,
    )
    return cache, report

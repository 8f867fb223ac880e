"""Per-run analysis context."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from fndep.cache import FunctionCache, FunctionRecord
from fndep.config import FndepConfig
from fndep.domain.models import AnalysisResult, ScanReport
from fndep.domain.ports import SourceFilePort
from fndep.extract.scanner import scan_files_with_summary
from fndep.usecases.analyze_function import analyze_function
from fndep.usecases.build_cache import build_cache, disk_sources

logger = logging.getLogger(__name__)


@dataclass
class AnalysisContext:
    """Everything one analysis run owns: configuration, cache and scan report.

    A context is built per run and discarded afterwards; nothing is shared
    between contexts.
    """

    config: FndepConfig = field(default_factory=FndepConfig)
    cache: Optional[FunctionCache] = None
    report: Optional[ScanReport] = None

    @classmethod
    def from_config(cls, config: FndepConfig) -> "AnalysisContext":
        return cls(config=config)

    @property
    def repo_root(self) -> Path:
        return self.config.repo_root_path()

    def scan(self) -> ScanReport:
        scan_cfg = self.config.scan
        files, summary = scan_files_with_summary(
            repo_root=self.repo_root,
            includes=scan_cfg.includes,
            excludes=scan_cfg.excludes,
            extensions=scan_cfg.extensions,
        )
        logger.info(
            "Scanning %d files under %s (%d excluded, %d unsupported extensions)",
            len(files),
            self.repo_root,
            summary.skipped_excluded,
            summary.skipped_extension,
        )
        report = self.load(disk_sources(files, scan_cfg.encoding))
        report.files_skipped_excluded = summary.skipped_excluded
        report.files_skipped_extension = summary.skipped_extension
        return report

    def load(self, sources: Iterable[SourceFilePort]) -> ScanReport:
        self.cache, self.report = build_cache(
            sources,
            max_files=self.config.scan.max_files,
            min_body_length=self.config.analysis.min_body_length,
        )
        return self.report

    def analyze(self, root_name: str, *, max_depth: Optional[int] = None) -> AnalysisResult:
        if self.cache is None:
            raise RuntimeError("Corpus has not been scanned; call scan() or load() first")
        depth = max_depth if max_depth is not None else self.config.analysis.max_depth
        return analyze_function(self.cache, root_name, max_depth=depth)

    def list_functions(self) -> List[FunctionRecord]:
        if self.cache is None:
            return []
        return list(self.cache)

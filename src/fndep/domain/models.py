"""Domain models for fndep analyses."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class DependencyNode(BaseModel):
    name: str
    source_location: Optional[str] = None
    body: Optional[str] = None
    calls: List[str] = Field(default_factory=list)

    @property
    def is_stub(self) -> bool:
        return self.source_location is None


DependencyGraph = Dict[str, DependencyNode]


class SortedFunction(BaseModel):
    name: str
    file: str
    body: str
    calls: List[str]
    is_root: bool = False


class FileGroupEntry(BaseModel):
    name: str
    is_root: bool = False
    calls: List[str]


class AnalysisStats(BaseModel):
    files_processed: int
    functions_found: int
    dependencies_found: int


class AnalysisResult(BaseModel):
    root_function: str
    found: bool
    graph: Dict[str, DependencyNode]
    sorted_functions: List[SortedFunction]
    not_found: List[str]
    unresolved_calls: List[str] = Field(default_factory=list)
    file_groups: Dict[str, List[FileGroupEntry]]
    stats: AnalysisStats

    @property
    def ordered_names(self) -> List[str]:
        return [item.name for item in self.sorted_functions]


class ScanError(BaseModel):
    path: str
    message: str


class ScanReport(BaseModel):
    files_seen: int = 0
    files_skipped_excluded: int = 0
    files_skipped_extension: int = 0
    files_processed: int = 0
    functions_found: int = 0
    errors: List[ScanError] = Field(default_factory=list)

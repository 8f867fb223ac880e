"""Configuration loading for fndep."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fndep.extract.function_extractor import DEFAULT_MIN_BODY_LENGTH
from fndep.extract.scanner import CODE_EXTENSIONS, DEFAULT_ENCODING, DEFAULT_EXCLUDES, DEFAULT_INCLUDES
from fndep.graph.tree_builder import DEFAULT_MAX_DEPTH
from fndep.paths import resolve_against
from fndep.usecases.build_cache import DEFAULT_MAX_FILES
from fndep.yaml_utils import load_yaml


class ProjectConfig(BaseModel):
    name: str = "fndep"
    repo_root: str = "."


class ScanConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    includes: List[str] = Field(default_factory=lambda: list(DEFAULT_INCLUDES))
    excludes: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDES))
    extensions: List[str] = Field(default_factory=lambda: list(CODE_EXTENSIONS))
    max_files: int = Field(DEFAULT_MAX_FILES, ge=1)
    encoding: str = DEFAULT_ENCODING

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, value: List[str]) -> List[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]


class AnalysisConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1)
    min_body_length: int = Field(DEFAULT_MIN_BODY_LENGTH, ge=0)


class OutputConfig(BaseModel):
    report_path: Optional[str] = None


class FndepConfig(BaseModel):
    version: int = 1
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)
    # Set by load_config; relative repo_root values resolve against it.
    config_path: Optional[str] = None

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != 1:
            raise ValueError("Only version 1 config is supported")
        return value

    def repo_root_path(self) -> Path:
        if self.config_path:
            return resolve_against(Path(self.config_path).parent, self.project.repo_root)
        return Path(self.project.repo_root).expanduser().resolve()

    def report_path(self) -> Optional[Path]:
        if not self.outputs.report_path:
            return None
        return resolve_against(self.repo_root_path(), self.outputs.report_path)


def load_config(path: str) -> FndepConfig:
    payload = load_yaml(path)
    payload["config_path"] = str(Path(path).resolve())
    return FndepConfig(**payload)

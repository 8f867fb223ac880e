"""Ports (interfaces) for fndep."""

from __future__ import annotations

from typing import Optional, Protocol

from fndep.cache import FunctionRecord


class FunctionLookupPort(Protocol):
    def get(self, name: str) -> Optional[FunctionRecord]:
        ...

    def has(self, name: str) -> bool:
        ...


class SourceFilePort(Protocol):
    """A corpus entry whose text is produced on demand."""

    path: str

    def read(self) -> str:
        ...

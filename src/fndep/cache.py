"""Name-keyed function cache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


@dataclass(frozen=True)
class FunctionRecord:
    name: str
    source_location: str
    body: str


class FunctionCache:
    """Write-once-per-name store of function definitions.

    The first definition seen for a name is kept; later ones are discarded.
    """

    def __init__(self) -> None:
        self._functions: Dict[str, FunctionRecord] = {}
        self.files_processed = 0
        self.functions_found = 0

    def add(self, name: str, source_location: str, body: str) -> bool:
        if name in self._functions:
            return False
        self._functions[name] = FunctionRecord(name=name, source_location=source_location, body=body)
        self.functions_found += 1
        return True

    def get(self, name: str) -> Optional[FunctionRecord]:
        return self._functions.get(name)

    def has(self, name: str) -> bool:
        return name in self._functions

    def names(self) -> List[str]:
        return list(self._functions)

    def mark_file_processed(self) -> None:
        self.files_processed += 1

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[FunctionRecord]:
        return iter(self._functions.values())

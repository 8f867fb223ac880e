"""JSON report writer."""

from __future__ import annotations

import json
from pathlib import Path

from fndep.domain.models import AnalysisResult


def write_report(path: Path, result: AnalysisResult) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(result.model_dump(), handle, ensure_ascii=False, indent=2)
        handle.write("\n")

"""Path helpers for config-relative settings."""

from __future__ import annotations

from pathlib import Path


def resolve_against(base_dir: Path, value: str) -> Path:
    """Resolve ``value`` under ``base_dir`` unless it is absolute or ``~``-prefixed."""
    candidate = Path(value).expanduser()
    if candidate.is_absolute():
        return candidate.resolve()
    return (base_dir / candidate).resolve()

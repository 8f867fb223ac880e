"""Call-site extraction from a single function body."""

from __future__ import annotations

import re
from typing import List, Optional

from fndep.extract.keywords import is_reserved

_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_CALL_RE = re.compile(
    r"\b([A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*(?:::[A-Za-z_][A-Za-z0-9_]*)*)\s*\("
)
# Closing parenthesis of an indentation-style header, with optional return annotation.
_HEADER_COLON_RE = re.compile(r"\)\s*(?:->[^:\n]*)?:")


def remove_comments(content: str) -> str:
    """Strip ``/* */`` and ``//`` comments.

    This is textual: markers inside string literals are stripped too.
    """
    content = _BLOCK_COMMENT_RE.sub("", content)
    lines = []
    for line in content.split("\n"):
        pos = line.find("//")
        lines.append(line[:pos] if pos >= 0 else line)
    return "\n".join(lines)


def extract_calls(body: str) -> List[str]:
    """Return called names in first-seen order.

    ``obj.method(`` yields both ``obj.method`` and ``method``; the cache is
    keyed by bare names.
    """
    cleaned = remove_comments(body)
    opener = _body_opener(cleaned)
    if opener is not None:
        cleaned = cleaned[opener:]

    seen = set()
    calls: List[str] = []
    for match in _CALL_RE.finditer(cleaned):
        qualified = match.group(1)
        candidates = [qualified]
        if "." in qualified:
            candidates.append(qualified.rsplit(".", 1)[-1])
        elif "::" in qualified:
            candidates.append(qualified.rsplit("::", 1)[-1])
        for name in candidates:
            if name in seen or is_reserved(name) or len(name) <= 1:
                continue
            seen.add(name)
            calls.append(name)
    return calls


def _body_opener(text: str) -> Optional[int]:
    brace = text.find("{")
    colon = _HEADER_COLON_RE.search(text)
    colon_end = colon.end() if colon else -1
    positions = [pos for pos in (brace, colon_end) if pos >= 0]
    if not positions:
        return None
    return min(positions)

"""Function extraction using layered textual templates."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Pattern, Tuple

from fndep.extract.keywords import PRIMITIVE_TYPES, is_reserved

logger = logging.getLogger(__name__)

DEFAULT_MIN_BODY_LENGTH = 10

_IDENT = r"[A-Za-z_][A-Za-z0-9_]*"
_PARAMS = r"\([^)]*\)"

# Ordered: typed signature, keyword, closure assignment, indentation, arrow.
TEMPLATES: List[Pattern[str]] = [
    re.compile(rf"\b([A-Za-z0-9_]+)\s+({_IDENT})\s*{_PARAMS}\s*\{{"),
    re.compile(rf"function\s+({_IDENT})\s*{_PARAMS}\s*\{{"),
    re.compile(rf"({_IDENT})\s*=\s*function\s*{_PARAMS}\s*\{{"),
    re.compile(rf"def\s+({_IDENT})\s*{_PARAMS}\s*:"),
    re.compile(rf"({_IDENT})\s*=\s*{_PARAMS}\s*=>\s*\{{"),
]

BRACKET = "bracket"
INDENT = "indent"


@dataclass(frozen=True)
class ExtractedFunction:
    name: str
    body: str


def extract_functions(
    content: str, *, min_body_length: int = DEFAULT_MIN_BODY_LENGTH
) -> List[ExtractedFunction]:
    """Return every (name, body) candidate found in ``content``.

    Each template is scanned over the whole text in priority order, so the
    same name may appear more than once; callers resolve duplicates by
    insertion order.
    """
    functions: List[ExtractedFunction] = []
    for template in TEMPLATES:
        for match in template.finditer(content):
            if template.groups >= 2:
                name = resolve_signature_name(match.group(1), match.group(2))
            else:
                name = match.group(1)
            if not name or is_reserved(name) or len(name) < 2:
                continue
            body = find_function_body(content, name)
            if body is None or len(body.strip()) <= min_body_length:
                continue
            functions.append(ExtractedFunction(name=name, body=body))
    return functions


def resolve_signature_name(first: str, second: str) -> str:
    """Pick the function name out of a ``<token> <identifier>(`` match."""
    if first in PRIMITIVE_TYPES:
        return second
    return first


def find_function_body(content: str, name: str) -> Optional[str]:
    for pattern, kind in _body_templates(name):
        match = pattern.search(content)
        if not match:
            continue
        if kind == INDENT:
            return extract_indented_block(content, match.start())
        return extract_bracketed_block(content, match.start())
    return None


@lru_cache(maxsize=4096)
def _body_templates(name: str) -> Tuple[Tuple[Pattern[str], str], ...]:
    escaped = re.escape(name)
    flags = re.IGNORECASE
    return (
        (re.compile(rf"\b{escaped}\s*{_PARAMS}\s*\{{", flags), BRACKET),
        (re.compile(rf"def\s+{escaped}\s*{_PARAMS}\s*:", flags), INDENT),
        (re.compile(rf"function\s+{escaped}\s*{_PARAMS}\s*\{{", flags), BRACKET),
        (re.compile(rf"{escaped}\s*=\s*function\s*{_PARAMS}\s*\{{", flags), BRACKET),
        (re.compile(rf"{escaped}\s*=\s*{_PARAMS}\s*=>\s*\{{", flags), BRACKET),
    )


def extract_bracketed_block(content: str, start: int) -> str:
    """Slice from ``start`` through the brace that closes the first ``{``.

    Returns an empty string when no brace follows ``start`` and the rest of
    the content when the block never closes.
    """
    open_pos = content.find("{", start)
    if open_pos == -1:
        return ""
    depth = 0
    for idx in range(open_pos, len(content)):
        char = content[idx]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return content[start : idx + 1]
    logger.debug("Unbalanced block at offset %d", start)
    return content[start:]


def extract_indented_block(content: str, start: int) -> str:
    lines = content[start:].split("\n")
    if len(lines) < 2:
        return lines[0]

    base_indent: Optional[int] = None
    for line in lines[1:]:
        if line.strip():
            base_indent = _indent_of(line)
            break
    if base_indent is None:
        return lines[0]

    block = [lines[0]]
    for line in lines[1:]:
        if line.strip() and _indent_of(line) < base_indent:
            break
        block.append(line)
    return "\n".join(block)


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())

"""Function and call extraction helpers for fndep."""

from fndep.extract.call_extractor import extract_calls, remove_comments
from fndep.extract.function_extractor import (
    ExtractedFunction,
    extract_bracketed_block,
    extract_functions,
    extract_indented_block,
    find_function_body,
    resolve_signature_name,
)
from fndep.extract.scanner import (
    CODE_EXTENSIONS,
    DEFAULT_EXCLUDES,
    DEFAULT_INCLUDES,
    ScannedFile,
    read_text_with_fallback,
    scan_files,
    should_process_file,
)

__all__ = [
    "CODE_EXTENSIONS",
    "DEFAULT_EXCLUDES",
    "DEFAULT_INCLUDES",
    "ExtractedFunction",
    "ScannedFile",
    "extract_bracketed_block",
    "extract_calls",
    "extract_functions",
    "extract_indented_block",
    "find_function_body",
    "read_text_with_fallback",
    "remove_comments",
    "resolve_signature_name",
    "scan_files",
    "should_process_file",
]

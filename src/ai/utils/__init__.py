"""Utilitários de IA: extração de JSON e sanitização para logs."""

from ai.utils._json_extractor import (
    parse_json_response,
    strip_code_fences,
)
from ai.utils.sanitizer import sanitize_pii, truncate_for_log

__all__ = [
    "parse_json_response",
    "sanitize_pii",
    "strip_code_fences",
    "truncate_for_log",
]

"""Headers HTTP do contrato do proxy."""

from __future__ import annotations

FALLBACK_HEADER = "X-Assistant-Fallback"

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

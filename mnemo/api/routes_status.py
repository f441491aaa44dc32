"""Status endpoint: completion API configuration, no secrets."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from mnemo.personas.catalog import CATALOG_ORDER
from mnemo.utils import config

router = APIRouter(tags=["status"])


@router.get("/status")
def status() -> Dict[str, Any]:
    """Safe for production: reports whether a key is set, never the key."""
    return {
        "api_key_configured": bool(config.ANTHROPIC_API_KEY),
        "api_base": config.API_BASE,
        "model": config.MODEL,
        "http_timeout_s": config.HTTP_TIMEOUT,
        "extraction_max_tokens": config.EXTRACTION_MAX_TOKENS,
        "response_max_tokens": config.RESPONSE_MAX_TOKENS,
        "personas": [pid.value for pid in CATALOG_ORDER],
    }

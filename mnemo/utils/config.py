"""Config from environment. Load .env from project root before reading."""
import os
from pathlib import Path
from typing import Optional

# Load .env from project root (parent of mnemo/)
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


# Completion API
ANTHROPIC_API_KEY: str = env("ANTHROPIC_API_KEY") or ""
API_BASE: str = env("MNEMO_API_BASE") or "https://api.anthropic.com/v1"
ANTHROPIC_VERSION: str = env("MNEMO_ANTHROPIC_VERSION") or "2023-06-01"
MODEL: str = env("MNEMO_MODEL") or "claude-sonnet-4-20250514"
HTTP_TIMEOUT: float = float(env("MNEMO_HTTP_TIMEOUT") or "60")

# Output budgets: persona answers are shorter than the extraction JSON
EXTRACTION_MAX_TOKENS: int = int(env("MNEMO_EXTRACTION_MAX_TOKENS") or "2000")
RESPONSE_MAX_TOKENS: int = int(env("MNEMO_RESPONSE_MAX_TOKENS") or "1000")

# API
API_HOST: str = env("MNEMO_API_HOST") or "0.0.0.0"
API_PORT: int = int(env("MNEMO_API_PORT") or "8000")

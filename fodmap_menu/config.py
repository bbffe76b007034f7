import os
from dataclasses import dataclass
from typing import Optional


def _parse_cors_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
CORS_ORIGINS = _parse_cors_origins(os.getenv("CORS_ORIGINS", "*"))
ALLOW_ALL_ORIGINS = CORS_ORIGINS == ["*"]

# -----------------------------------
# GPT / models configuration
# -----------------------------------

# GPT_MODEL: vision model used to read the menu photo
# Expected values: "gpt-4o-mini" (default) or "gpt-4o"
GPT_MODEL = os.getenv("GPT_MODEL", "gpt-4o-mini")

# MAX_OUTPUT_TOKENS: completion budget. Long menus overflowing it come back
# as truncated JSON.
MAX_OUTPUT_TOKENS = int(os.getenv("MAX_OUTPUT_TOKENS", "2000"))

# OPENAI_TIMEOUT_S: request timeout handed to the OpenAI client (no retries)
OPENAI_TIMEOUT_S = float(os.getenv("OPENAI_TIMEOUT_S", "60"))

# -----------------------------------
# Upload configuration
# -----------------------------------

# MAX_UPLOAD_BYTES: largest menu photo accepted by /analyze-menu/upload
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "image/webp")


@dataclass(frozen=True)
class PipelineConfig:
    """Settings for one menu analysis pipeline."""

    api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    max_tokens: int = 2000
    timeout_s: float = 60.0

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        model = (GPT_MODEL or "gpt-4o-mini").strip() or "gpt-4o-mini"
        return cls(
            api_key=OPENAI_API_KEY,
            model=model,
            max_tokens=MAX_OUTPUT_TOKENS,
            timeout_s=OPENAI_TIMEOUT_S,
        )

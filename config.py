"""
Central configuration — reads from .env file.

Nothing here is required at import time: a missing API key only fails when
an analysis actually needs the provider (see providers/manager.py).
"""
import os
from dotenv import load_dotenv

load_dotenv()

# ── Google Cloud Vision ────────────────────────────────────────────────────────
# Create a key at https://console.cloud.google.com → APIs & Services → Credentials
# with the Cloud Vision API enabled.
GOOGLE_VISION_API_KEY: str | None = os.getenv("GOOGLE_VISION_API_KEY") or None
VISION_API_URL: str               = os.getenv(
    "VISION_API_URL", "https://vision.googleapis.com/v1/images:annotate"
)
VISION_TIMEOUT_SECONDS: float     = float(os.getenv("VISION_TIMEOUT_SECONDS", "30"))

# maxResults per requested feature
VISION_MAX_LABELS: int = int(os.getenv("VISION_MAX_LABELS", "10"))
VISION_MAX_COLORS: int = int(os.getenv("VISION_MAX_COLORS", "1"))
VISION_MAX_TEXT:   int = int(os.getenv("VISION_MAX_TEXT", "5"))
VISION_MAX_LOGOS:  int = int(os.getenv("VISION_MAX_LOGOS", "5"))

# ── Brand ranking ──────────────────────────────────────────────────────────────
# Candidates scoring below BRAND_MIN_SCORE are dropped. Two scores closer than
# BRAND_TIE_EPSILON are ordered by source trust (logo > text > label) instead.
BRAND_MIN_SCORE:   float = float(os.getenv("BRAND_MIN_SCORE", "0.70"))
BRAND_TIE_EPSILON: float = float(os.getenv("BRAND_TIE_EPSILON", "0.05"))

# ── Logging ────────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

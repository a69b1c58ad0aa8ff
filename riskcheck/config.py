"""
riskcheck — Configuration
=========================
Environment-driven settings. Loads overrides from a project-level .env file.
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")

# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("RISKCHECK_LOG_LEVEL", "INFO")
LOG_FILE: Optional[str] = os.getenv("RISKCHECK_LOG_FILE", "") or None

# ── History sink ────────────────────────────────────────────────────────
HISTORY_PATH: str = os.getenv("RISKCHECK_HISTORY_PATH", "prediction_history.json")

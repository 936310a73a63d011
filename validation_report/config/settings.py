"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Metrics ---
METRICS_NAMESPACE: str = os.getenv("METRICS_NAMESPACE", "validation_report")

# --- Report ---
# 0 disables truncation
REPORT_MAX_MESSAGE_CHARS: int = int(os.getenv("REPORT_MAX_MESSAGE_CHARS", "500"))

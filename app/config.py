import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./landscaping.db")

# Staff API access - CRITICAL: set a long random token in production
ADMIN_API_TOKEN = os.getenv("ADMIN_API_TOKEN")
if not ADMIN_API_TOKEN:
    import warnings

    warnings.warn(
        "ADMIN_API_TOKEN not set! Admin endpoints will reject every request",
        RuntimeWarning,
        stacklevel=2,
    )

# Frontend origins allowed by CORS
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"
).split(",")

# Business-local scheduling
# Fixed standard-time offset from UTC (US Eastern = -5). Not DST aware.
BUSINESS_UTC_OFFSET_HOURS = int(os.getenv("BUSINESS_UTC_OFFSET_HOURS", "-5"))
JOB_DEFAULT_LOCAL_HOUR = int(os.getenv("JOB_DEFAULT_LOCAL_HOUR", "9"))
JOB_DEFAULT_LOCAL_MINUTE = int(os.getenv("JOB_DEFAULT_LOCAL_MINUTE", "0"))

# Recurring plan -> job generation horizon (days)
JOB_GENERATION_DEFAULT_DAYS = int(os.getenv("JOB_GENERATION_DEFAULT_DAYS", "14"))
JOB_GENERATION_MAX_DAYS = int(os.getenv("JOB_GENERATION_MAX_DAYS", "60"))
JOB_GENERATION_CRON_HOUR = int(os.getenv("JOB_GENERATION_CRON_HOUR", "5"))  # UTC

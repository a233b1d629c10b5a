import os
from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv("DB_PATH", "./data/calltriage.db")
RULES_PATH = os.getenv("RULES_PATH", "")  # empty -> built-in catalogue
BATCH_WORKERS = int(os.getenv("BATCH_WORKERS", "4"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Incompleteness gate
MIN_TRANSCRIPT_CHARS = int(os.getenv("MIN_TRANSCRIPT_CHARS", "20"))
MIN_TRANSCRIPT_WORDS = int(os.getenv("MIN_TRANSCRIPT_WORDS", "5"))
SHORT_CALL_SECONDS = int(os.getenv("SHORT_CALL_SECONDS", "15"))

# Statistical fallback
FALLBACK_SHORT_SECONDS = int(os.getenv("FALLBACK_SHORT_SECONDS", "20"))
FALLBACK_LONG_SECONDS = int(os.getenv("FALLBACK_LONG_SECONDS", "180"))

# Confidence level buckets used by reports
HIGH_CONFIDENCE = float(os.getenv("HIGH_CONFIDENCE", "0.85"))
MEDIUM_CONFIDENCE = float(os.getenv("MEDIUM_CONFIDENCE", "0.70"))

# Receptionist/staff first names never reported as the caller
STAFF_NAMES = [x.strip() for x in os.getenv("STAFF_NAMES", "").split(",") if x.strip()]

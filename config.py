import os
from dotenv import load_dotenv

load_dotenv()

TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN")
if not TELEGRAM_TOKEN:
    raise RuntimeError("TELEGRAM_TOKEN not found in .env")

# Cache lifetime reported to consumers; an hour unless configured
CRAIGSLIST_TTL = int(os.getenv("CRAIGSLIST_TTL", str(60 * 60)))
ID_FIELD = os.getenv("ID_FIELD", "featureId")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

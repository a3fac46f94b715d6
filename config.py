# Keyword lists and runtime settings used across the application
import os

from dotenv import load_dotenv

load_dotenv()

# Checked in declared order; any substring hit puts the question in this tier
HIGH_PRIORITY_KEYWORDS = (
    "urgent", "emergency", "asap", "critical", "broken", "not working",
    "error", "bug", "crash", "down", "failed", "immediately",
)

MEDIUM_PRIORITY_KEYWORDS = (
    "help", "issue", "problem", "question", "concern", "trouble",
    "difficulty", "support",
)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

KB_STORE_PATH = os.getenv("KB_STORE_PATH", os.path.join(BASE_DIR, "knowledge_base.json"))
QUEUE_STORE_PATH = os.getenv("QUEUE_STORE_PATH", os.path.join(BASE_DIR, "queue_store.json"))

QUEUE_PEEK_LIMIT = int(os.getenv("QUEUE_PEEK_LIMIT", 50))
WEBHOOK_TIMEOUT = 5  # seconds


def get_admin_api_key():
    """Read on every call so a rotated key takes effect without a restart."""
    return os.getenv("ADMIN_API_KEY")


def get_webhook_url():
    return os.getenv("SLACK_WEBHOOK_URL")

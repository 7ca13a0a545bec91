import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # .env in the working directory

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
COMPLETION_TEMPERATURE = float(os.getenv("COMPLETION_TEMPERATURE", "0.2"))

DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "Slovenian")

SCRAPE_TIMEOUT = int(os.getenv("SCRAPE_TIMEOUT", "15"))
SCRAPE_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

HISTORY_PATH = Path(os.getenv("HISTORY_PATH", str(Path.home() / ".ad-copy-engine" / "history.json")))
HISTORY_LIMIT = 100

LANGUAGES = [
    "Bulgarian", "Croatian", "Czech", "Danish", "Dutch", "English", "Estonian",
    "Finnish", "French", "German", "Greek", "Hungarian", "Irish", "Italian",
    "Latvian", "Lithuanian", "Maltese", "Polish", "Portuguese", "Romanian",
    "Slovak", "Slovenian", "Spanish", "Swedish",
]


def get_openai_api_key():
    """Read the API key at call time so a changed environment is picked up."""
    return os.getenv("OPENAI_API_KEY")

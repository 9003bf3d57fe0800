import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(os.getenv("ENV_FILE"), override=True)

# General
PRODUCT = os.getenv("PRODUCT", "vocabdrill")
VERSION = os.environ.get("VERSION", "0")
ENV = os.getenv("ENV", "dev")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")
LOG_FILE = os.getenv("LOG_FILE") or None

BASE_PATH = os.path.dirname(os.path.realpath(__file__))

# Content
BUNDLED_CONTENT_DIR = Path(BASE_PATH) / "data" / "vocabulary"
CONTENT_DIR = Path(os.getenv("VOCABDRILL_CONTENT_DIR", str(BUNDLED_CONTENT_DIR)))
STAGE_WIDTH = int(os.getenv("VOCABDRILL_STAGE_WIDTH", "20"))

# Languages: L1 is the language being learned, L2 the one used for translations
LEARNING_LANGUAGE = os.getenv("VOCABDRILL_LEARNING_LANGUAGE", "es")
NATIVE_LANGUAGE = os.getenv("VOCABDRILL_NATIVE_LANGUAGE", "en")
DEFAULT_DIRECTION = os.getenv(
    "VOCABDRILL_DEFAULT_DIRECTION", f"{LEARNING_LANGUAGE}-to-{NATIVE_LANGUAGE}"
)

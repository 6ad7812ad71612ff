import logging
import os
from pathlib import Path


def parse_corpus_files(value):
    """Comma-separated file names -> list, blanks dropped. None/empty -> None."""
    if not value:
        return None
    names = [n.strip() for n in value.split(",") if n.strip()]
    return names or None


def _optional_int(value):
    if value is None or value.strip() == "":
        return None
    return int(value)


# -----------------------
# Corpus
# -----------------------
CORPUS_DIR = Path(os.getenv("RIBBOT_CORPUS_DIR", "texts"))
CORPUS_FILES = parse_corpus_files(os.getenv("RIBBOT_CORPUS_FILES"))

# -----------------------
# Generation defaults
# -----------------------
DEFAULT_PREFIX_LEN = int(os.getenv("RIBBOT_PREFIX_LEN", 2))
DEFAULT_WORDS = int(os.getenv("RIBBOT_WORDS", 35))
MAX_WORDS_LIMIT = int(os.getenv("RIBBOT_MAX_WORDS_LIMIT", 1000))
MAX_PREFIX_LEN = int(os.getenv("RIBBOT_MAX_PREFIX_LEN", 8))
SEED = _optional_int(os.getenv("RIBBOT_SEED"))

# -----------------------
# Logging
# -----------------------
LOG_LEVEL = os.getenv("RIBBOT_LOG_LEVEL", "INFO").upper()


def configure_logging(level=None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

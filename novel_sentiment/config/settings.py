import os
import logging

import dotenv

dotenv.load_dotenv()

# ========= config =========
CONFIG = {
    "TOKENS": {},
    "SENTIMENT": {},
    "LOGGING": {},
}

# ========= tokens =========
TOKENS = {
    # a line starting with "chapter" and an Arabic or Roman numeral
    "chapter_regex": os.getenv(
        "NS_CHAPTER_REGEX", r"^\s*chapter\s+(?:\d+|[ivxlcdm]+)\b"
    ),
    "to_lower": True,
}

# ========= sentiment =========
SENTIMENT = {
    # lines per bucket for trajectory charts
    "bucket_size": int(os.getenv("NS_BUCKET_SIZE", "80")),
    "positive_label": os.getenv("NS_POSITIVE_LABEL", "positive"),
    "negative_label": os.getenv("NS_NEGATIVE_LABEL", "negative"),
    "default_lexicon": os.getenv("NS_DEFAULT_LEXICON", "bing"),
    "top_n": 10,
}

# ========= logging =========
LOGGING = {
    "level": getattr(logging, os.getenv("NS_LOG_LEVEL", "INFO").upper(), logging.INFO),
    "log_dir": os.getenv("NS_LOG_DIR") or None,  # None = console only
    "max_bytes": 10 * 1024 * 1024,
    "backup_count": 3,
}

# ========= reload =========
CONFIG["TOKENS"] = TOKENS
CONFIG["SENTIMENT"] = SENTIMENT
CONFIG["LOGGING"] = LOGGING

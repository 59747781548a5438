"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Server
    SERVER_VERSION = os.getenv("CHAT_SERVER_VERSION", "1.1")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] [%(correlation_id)s] %(message)s",
    )

    # Listing limits
    CONVERSATION_LIST_LIMIT: int = int(os.getenv("CONVERSATION_LIST_LIMIT", "50"))
    CONVERSATION_MESSAGE_LIMIT: int = int(
        os.getenv("CONVERSATION_MESSAGE_LIMIT", "200")
    )

    # Validation
    TITLE_MAX_LENGTH: int = int(os.getenv("TITLE_MAX_LENGTH", "100"))

    # Observability
    METRICS_ENABLED = os.getenv("METRICS_ENABLED", "true").lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

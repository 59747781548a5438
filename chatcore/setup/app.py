"""
Startup entry for whatever command/transport layer hosts the model.

Configures logging once and hands back the DI container.
"""

import logging

from dishka import Container

from chatcore.config.logging_config import setup_logging
from chatcore.config.settings import Config
from chatcore.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


def create_app(
    log_level: str = Config.LOG_LEVEL, log_file: str | None = Config.LOG_FILE
) -> Container:
    setup_logging(log_level, log_file)
    container = create_container()
    logger.info(f"[App] Chat model version {Config.SERVER_VERSION} ready")
    return container

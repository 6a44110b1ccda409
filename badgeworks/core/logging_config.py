import logging
import sys

from badgeworks.core.config import settings


def configure_logging() -> None:
    """Logging a stdout para el proceso de la API."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

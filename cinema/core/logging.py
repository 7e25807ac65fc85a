import logging

from .config import settings


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def setup_logging() -> None:
    """Configure root logging once at startup"""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # passlib probes the bcrypt backend version and warns on newer releases
    logging.getLogger("passlib").setLevel(logging.ERROR)

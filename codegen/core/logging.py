import logging
from contextlib import contextmanager

from .config import Settings, get_settings

LOGGER_NAME = "codegen"
# emits one DEBUG record per skipped snippet
LOOKUP_LOGGER_NAME = "codegen.generation.context"


def apply_log_levels(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.getLogger(LOGGER_NAME).setLevel(level)
    lookups = logging.getLogger(LOOKUP_LOGGER_NAME)
    if settings.log_snippet_lookups:
        lookups.setLevel(logging.NOTSET)
    else:
        lookups.setLevel(max(level, logging.INFO))


@contextmanager
def configure_logging(settings: Settings | None = None):
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    apply_log_levels(settings)
    try:
        yield
    finally:
        logging.shutdown()

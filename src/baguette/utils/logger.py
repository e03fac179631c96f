## Logging setup for baguette
# baguette/src/baguette/utils/logger.py

import logging
import sys

# Centralized logging config
logging.basicConfig(
    level=logging.INFO,  # DEBUG adds per-10k progress lines from the cleaner
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)


def get_logger(name: str) -> logging.Logger:
    """Return a logger instance for the given module/class."""
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    """Switch the package loggers between INFO and DEBUG."""
    logging.getLogger("baguette").setLevel(logging.DEBUG if verbose else logging.INFO)

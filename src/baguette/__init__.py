# src/baguette/__init__.py

# Cleaning pipeline
from .cleaning.pipeline import clean_post, normalize_post
from .cleaning.tokens import BOUNDARY

# Driver
from .data.clean_posts import CleanSummary, clean_posts, run_cleaner

# Configs
from .utils.config_util import CleanerConfig, ScraperConfig

__all__ = [
    # Cleaning
    "clean_post",
    "normalize_post",
    "BOUNDARY",

    # Driver
    "CleanSummary",
    "clean_posts",
    "run_cleaner",

    # Configs
    "CleanerConfig",
    "ScraperConfig",
]

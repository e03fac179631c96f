from .pipeline import clean_post, normalize_post
from .tokens import BOUNDARY

__all__ = ["clean_post", "normalize_post", "BOUNDARY"]

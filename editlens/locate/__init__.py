from .matcher import find_all_matches

__all__ = ["find_all_matches"]

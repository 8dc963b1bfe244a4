from .equality import are_equal

__all__ = ["are_equal"]

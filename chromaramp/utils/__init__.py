from .num_utils import fuzzy_equal

__all__ = ['fuzzy_equal']

# src/phasedarray_core/cache/__init__.py
"""
Exposes the public interface of the cache package.
"""
from .service import ArrayModelCache
from .keys import create_array_state_key, create_gain_pattern_key

__all__ = [
    "ArrayModelCache",
    "create_array_state_key",
    "create_gain_pattern_key",
]

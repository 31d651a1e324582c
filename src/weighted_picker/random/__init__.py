"""Random source subsystem for weighted-picker.

Re-exports the ABC, name lookup, factory, and all built-in source
implementations::

    from weighted_picker.random import RandomSource, build_random_source
    from weighted_picker.random import SystemRandomSource, SeededRandomSource
"""

from weighted_picker.random.base import RandomSource
from weighted_picker.random.factory import build_random_source
from weighted_picker.random.fixed import FixedSequenceSource
from weighted_picker.random.registry import (
    available_sources,
    get_random_source_class,
    register_random_source,
)
from weighted_picker.random.seeded import SeededRandomSource
from weighted_picker.random.system import SystemRandomSource

__all__ = [
    "FixedSequenceSource",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "available_sources",
    "build_random_source",
    "get_random_source_class",
    "register_random_source",
]

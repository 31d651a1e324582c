"""Name-to-class lookup for the built-in random sources.

Source modules add themselves with ``@register_random_source("<name>")``
when imported; :mod:`weighted_picker.random.factory` imports them all, so
the lookup is complete once the factory has been imported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from weighted_picker.random.base import RandomSource

_SOURCES: dict[str, type[RandomSource]] = {}


def register_random_source(name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
    """Class decorator recording a source under *name* (``--source`` value).

    Raises:
        ValueError: If *name* is already taken by a different class.
    """

    def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
        existing = _SOURCES.get(name)
        if existing is not None and existing is not source_cls:
            raise ValueError(
                f"Random source name {name!r} already used by {existing.__name__}"
            )
        _SOURCES[name] = source_cls
        return source_cls

    return decorator


def get_random_source_class(name: str) -> type[RandomSource]:
    """Return the class registered as *name*.

    Raises:
        KeyError: If nothing is registered under *name*; the message lists
            the names that are.
    """
    try:
        return _SOURCES[name]
    except KeyError:
        raise KeyError(
            f"Unknown random source: {name!r}. Available: {', '.join(available_sources())}"
        ) from None


def available_sources() -> list[str]:
    """Registered source names, sorted."""
    return sorted(_SOURCES)

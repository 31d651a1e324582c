"""Build the configured random source."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from weighted_picker.exceptions import ConfigValidationError
from weighted_picker.random.registry import get_random_source_class

# Imported for their @register_random_source side effect.
from weighted_picker.random import seeded as _seeded  # noqa: F401
from weighted_picker.random import system as _system  # noqa: F401

if TYPE_CHECKING:
    from weighted_picker.config import PickerConfig
    from weighted_picker.random.base import RandomSource

logger = logging.getLogger("weighted_picker")


def _accepts_seed(cls: type) -> bool:
    """Check whether a source constructor takes a ``seed`` parameter.

    Args:
        cls: The class to inspect.

    Returns:
        True if ``seed`` appears in the constructor signature.
    """
    try:
        sig = inspect.signature(cls)
    except (ValueError, TypeError):
        return False
    return "seed" in sig.parameters


def build_random_source(config: PickerConfig) -> RandomSource:
    """Instantiate the source named by ``config.random_source_type``.

    The configured seed is passed to sources that accept one. A seed given
    for a source that cannot use it is ignored with a warning.

    Args:
        config: Picker configuration.

    Returns:
        A ready-to-use random source.

    Raises:
        ConfigValidationError: If the source name is not registered.
    """
    try:
        source_cls = get_random_source_class(config.random_source_type)
    except KeyError as exc:
        raise ConfigValidationError(exc.args[0]) from exc

    if _accepts_seed(source_cls):
        source = source_cls(seed=config.seed)  # type: ignore[call-arg]
    else:
        if config.seed is not None:
            logger.warning(
                "Random source %r does not take a seed; ignoring seed=%d",
                config.random_source_type,
                config.seed,
            )
        source = source_cls()

    logger.debug("Using random source %r", source.name)
    return source

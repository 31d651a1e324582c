"""Diagnostic logger for draw events.

Uses the standard ``logging`` module with the ``"weighted_picker"`` logger.
The chosen name itself is printed by the CLI; this module only reports how
it was chosen.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weighted_picker.config import PickerConfig
    from weighted_picker.logging.types import DrawRecord

logger = logging.getLogger("weighted_picker")


class DrawLogger:
    """Per-draw diagnostic logger.

    Log levels:
        ``"none"``: No output.

        ``"summary"``: One line with the chosen entry, its probability, and
        the drawn value.

        ``"full"``: JSON dump of all record fields.
    """

    def __init__(self, config: PickerConfig) -> None:
        self._log_level = config.log_level

    def log_draw(self, record: DrawRecord) -> None:
        """Log a single draw.

        Args:
            record: Immutable record of the draw.
        """
        if self._log_level == "summary":
            logger.info(
                "picked=%r index=%d prob=%.4f value=%.6f total=%.6g entries=%d source=%s%s",
                record.chosen_name,
                record.chosen_index,
                record.chosen_quality / record.total_quality,
                record.value,
                record.total_quality,
                record.num_entries,
                record.source,
                " [FALLBACK]" if record.fallback else "",
            )
        elif self._log_level == "full":
            logger.info("draw_record: %s", json.dumps(asdict(record)))

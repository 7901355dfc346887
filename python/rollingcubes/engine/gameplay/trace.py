"""Roll observer that writes each roll to the log."""

from __future__ import annotations

import logging

from rollingcubes.models.tray import RollEvent

logger = logging.getLogger(__name__)


def log_roll(event: RollEvent) -> None:
    logger.info(
        "Cube at (%d,%d) is rolled to %s", event.row, event.col, event.direction
    )
    logger.debug("Cube %s became %s", event.before, event.after)

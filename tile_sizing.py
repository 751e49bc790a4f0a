"""Square tile size for day cells, derived from the measured widget width."""

from __future__ import annotations

from typing import Optional

from calendar_logic import ConfigurationError
from logger import get_logger

logger = get_logger(__name__)

# Two paddings per day for a full week
PADDING_SLOTS = 14
DAY_PADDING_SIDES = 2
DAY_SIZE = 48

# Layout width not known yet (widget not measured)
TILE_SIZE_UNAVAILABLE = None


def tile_size(
    available_width: Optional[int],
    padding_per_side: int = DAY_PADDING_SIDES,
    padding_slots: int = PADDING_SLOTS,
    days_in_row: int = 7,
    max_tile_size: int = DAY_SIZE,
) -> Optional[int]:
    """Return the tile size, or ``TILE_SIZE_UNAVAILABLE`` before measurement.

    The tile is either *max_tile_size* or the width which fits the screen,
    whichever is smaller.  A measured width too narrow for the padding gives 0.
    """
    if days_in_row < 1:
        raise ConfigurationError(f"days_in_row must be positive, got {days_in_row!r}")
    if available_width is None or available_width <= 0:
        return TILE_SIZE_UNAVAILABLE

    width = available_width - padding_per_side * padding_slots
    width_per_tile = width // days_in_row
    size = max(0, min(width_per_tile, max_tile_size))
    logger.debug("WidthPerTile: %d, maxWidthPerTile: %d", width_per_tile, max_tile_size)
    logger.debug("width: %d, daysInRow: %d", available_width, days_in_row)
    return size

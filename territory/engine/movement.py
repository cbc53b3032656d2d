"""Single-step unit movement on the grid."""

import logging
from typing import Optional

from ..models.grid import Grid
from ..models.unit import Unit

logger = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def next_step(grid: Grid, unit: Unit, target_x: int, target_y: int) -> Optional[tuple[int, int]]:
    """Compute one orthogonal step from a unit toward a target position.

    The axis with the strictly larger distance is tried first; on a tie the
    vertical axis goes first. If the preferred step would leave the grid or
    there is nothing to close on that axis, the other axis is used.

    Args:
        grid: Grid the unit moves on
        unit: Unit to move
        target_x: Target X coordinate
        target_y: Target Y coordinate

    Returns:
        (x, y) of the next tile, or None if the unit cannot get closer
    """
    dx = target_x - unit.x
    dy = target_y - unit.y

    horizontal = (unit.x + _sign(dx), unit.y) if dx else None
    vertical = (unit.x, unit.y + _sign(dy)) if dy else None

    if abs(dx) > abs(dy):
        candidates = (horizontal, vertical)
    else:
        candidates = (vertical, horizontal)

    for step in candidates:
        if step is not None and grid.in_bounds(*step):
            return step
    return None


def move_unit(unit: Unit, x: int, y: int) -> None:
    """Place a unit on a new tile."""
    logger.debug(f"Unit {unit.id} ({unit.owner}) moves ({unit.x},{unit.y}) -> ({x},{y})")
    unit.x = x
    unit.y = y

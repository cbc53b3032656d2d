"""Final simulation result types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Outcome(str, Enum):
    """Final result label of a simulation."""

    RED_WINS = "red_wins"
    BLUE_WINS = "blue_wins"
    DRAW = "draw"

    @property
    def label(self) -> str:
        return {
            Outcome.RED_WINS: "Red wins",
            Outcome.BLUE_WINS: "Blue wins",
            Outcome.DRAW: "Draw",
        }[self]


@dataclass
class SimulationResult:
    """What a finished simulation reports.

    The outcome is always decided by tile count. The condition that
    actually ended the match is reported separately, so a base capture
    that leaves tile counts level shows up as condition "base_captured"
    with outcome DRAW.
    """

    result: Outcome
    turns: int
    log: list[str]
    condition: Optional[str]  # "majority", "base_captured", "elimination", "turn_limit"
    tile_counts: dict[str, int] = field(default_factory=dict)  # {"red": n, "blue": n, "neutral": n}
    level: int = 1
    seed: Optional[int] = None

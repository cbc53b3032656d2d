"""Unit combat resolution.

This module handles:
1. Damage calculation (level-scaled attack vs defense, with optional jitter)
2. Applying damage and destroying defenders
3. Capture credit when a defender dies on a tile the attacker does not own
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..models.game import Game
from ..models.unit import Unit
from ..utils.constants import ATTACK_JITTER, DAMAGE_JITTER
from ..utils.rng import GameRNG
from .capture import CaptureEvent, capture_after_kill


@dataclass
class CombatEvent:
    """Record of one attack.

    Attributes:
        turn: Turn the attack happened on
        attacker_id: ID of the attacking unit
        attacker_owner: Faction of the attacker
        defender_id: ID of the defending unit
        defender_owner: Faction of the defender
        damage: Damage dealt (always >= 1)
        defender_hp: Defender hp after the attack (may be negative)
        destroyed: Whether the defender died
        capture: Capture progress earned by the kill, if any
    """

    turn: int
    attacker_id: int
    attacker_owner: str
    defender_id: int
    defender_owner: str
    damage: int
    defender_hp: int
    destroyed: bool
    capture: Optional[CaptureEvent] = None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return math.floor(value + 0.5)


def calculate_damage(attacker: Unit, defender: Unit, rng: Optional[GameRNG] = None) -> int:
    """Calculate the damage of one attack.

    Formula:
        atk = base_atk + jitter(2) + floor(level * 0.5)
        def = base_def + floor(level * 0.4)
        damage = max(1, round(atk - def * 0.6 + jitter(1)))

    Args:
        attacker: Attacking unit
        defender: Defending unit
        rng: Source of jitter; None disables jitter entirely

    Returns:
        Damage dealt, never less than 1
    """
    attack_jitter = rng.jitter(ATTACK_JITTER) if rng is not None else 0
    damage_jitter = rng.jitter(DAMAGE_JITTER) if rng is not None else 0

    atk = attacker.base_atk + attack_jitter + math.floor(attacker.level * 0.5)
    defense = defender.base_def + math.floor(defender.level * 0.4)
    return max(1, round_half_up(atk - defense * 0.6 + damage_jitter))


def resolve_combat(game: Game, attacker: Unit, defender: Unit) -> CombatEvent:
    """Resolve an attack and log it.

    If the defender dies on a tile its attacker's faction does not own,
    the attacker's full capture rate is credited to that tile.

    Args:
        game: Current game state
        attacker: Attacking unit
        defender: Adjacent enemy unit

    Returns:
        CombatEvent describing the attack
    """
    damage = calculate_damage(attacker, defender, game.rng if game.jitter else None)
    defender.hp -= damage

    game.record(
        f"Turn {game.turn}: Unit {attacker.id} ({attacker.owner}) attacked "
        f"Unit {defender.id} ({defender.owner}) for {damage} dmg "
        f"(defender hp={max(0, defender.hp)})"
    )

    capture = None
    destroyed = not defender.is_alive
    if destroyed:
        game.record(f"Turn {game.turn}: Unit {defender.id} ({defender.owner}) destroyed.")
        tile = game.grid.tile_at(defender.x, defender.y)
        if tile is not None and tile.owner != attacker.owner:
            capture = capture_after_kill(game, attacker, tile)

    return CombatEvent(
        turn=game.turn,
        attacker_id=attacker.id,
        attacker_owner=attacker.owner,
        defender_id=defender.id,
        defender_owner=defender.owner,
        damage=damage,
        defender_hp=defender.hp,
        destroyed=destroyed,
        capture=capture,
    )

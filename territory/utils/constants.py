"""Simulation tuning constants."""

# Grid dimensions
DEFAULT_COLS = 10
DEFAULT_ROWS = 8

# Tiles
CAPTURE_THRESHOLD = 100
BASE_DEFENSE = 20
BASE_DEFENSE_BONUS = 30  # Extra defense on base tiles
CAPTURE_DECAY = 0.5  # Progress lost by every tile each turn

# Difficulty
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_UNIT_LEVEL = 10
BASE_MAX_TURNS = 300
MAX_TURNS_PER_LEVEL = 2

# Rosters
BASE_ROSTER_SIZE = 3
ROSTER_LEVEL_STEP = 15  # One extra unit per this many levels
SCOUT_MIN_LEVEL = 10
TANK_MIN_LEVEL = 30
UNIT_TYPES = ("infantry", "scout", "tank")

# Combat jitter bounds (inclusive, symmetric)
ATTACK_JITTER = 2
DAMAGE_JITTER = 1

# Factions
FACTION_IDS = ("red", "blue")
FACTION_NAMES = {"red": "Red", "blue": "Blue"}

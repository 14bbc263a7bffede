"""
StoneShooter - Configuration.

Display and audio settings load from a .env file next to this module (or
the process environment). Gameplay rules are fixed constants.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 720)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 1280)
FPS = _get_int('FPS', 60)  # ~17 ms per tick

# Audio
AUDIO_ENABLED = _get_bool('AUDIO_ENABLED', True)
MASTER_VOLUME = _get_float('MASTER_VOLUME', 1.0)

# Player
PLAYER_WIDTH = 50.0
PLAYER_HEIGHT = 50.0
PLAYER_SPEED = 10.0  # pixels per tick per unit of acceleration
PLAYER_BOTTOM_MARGIN = 50.0
PLAYER_FRAME_COUNT = 3
PLAYER_FRAME_LENGTH = 0.15  # seconds
STARTING_LIVES = 3

# Bullet
BULLET_WIDTH = 20.0
BULLET_HEIGHT = 40.0
BULLET_SPEED = 20.0  # pixels per tick, upward
BULLET_FRAME_COUNT = 4
BULLET_FRAME_LENGTH = 0.05

# Stone
STONE_WIDTH = 40.0
STONE_HEIGHT = 40.0
STONE_FRAME_COUNT = 4
STONE_FRAME_LENGTH = 0.2
EXPLOSION_FRAME_COUNT = 4
EXPLOSION_FRAME_LENGTH = 0.1
STONE_MIN_HEALTH = 1
STONE_MAX_HEALTH = 3
STONE_SPAWN_INTERVAL = 2.0  # seconds
STONE_SPAWN_MARGIN = 100  # spawn x in [0, width - margin)

# Audio cue volumes
SHOOT_VOLUME = 0.5
BULLET_EXPLOSION_VOLUME = 0.7
IMPACT_EXPLOSION_VOLUME = 1.0
GAME_OVER_VOLUME = 1.0

# Visual
BACKGROUND_COLOR = (0, 0, 0)
STAR_COUNT = 100
HUD_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)
GAME_OVER_TEXT = "GAME OVER"
RESTART_TEXT = "Tap to restart"


def stone_speed(health: int) -> float:
    """Fall speed for a stone spawned with `health` (tougher stones fall slower)."""
    return 10 - health + 5

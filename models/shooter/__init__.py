"""
Stone Shooter models.

Usage:
    >>> from models.shooter import FrameSnapshot, StoneState
"""

from .enums import (
    EventType,
    AudioCue,
    StoneState,
    ShooterInternalState,
)

from .models import (
    EntitySnapshot,
    PlayerSnapshot,
    BulletSnapshot,
    StoneSnapshot,
    FrameSnapshot,
)

__all__ = [
    'EventType',
    'AudioCue',
    'StoneState',
    'ShooterInternalState',
    'EntitySnapshot',
    'PlayerSnapshot',
    'BulletSnapshot',
    'StoneSnapshot',
    'FrameSnapshot',
]

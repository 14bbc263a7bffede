"""
Models library for the Stonefall project.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Rectangle)
- Shooter: Stone Shooter enums and render snapshots

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models import FrameSnapshot, AudioCue
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Rectangle,
)

# ============================================================================
# Stone Shooter models
# ============================================================================
from .shooter import (
    EventType,
    AudioCue,
    StoneState,
    ShooterInternalState,
    EntitySnapshot,
    PlayerSnapshot,
    BulletSnapshot,
    StoneSnapshot,
    FrameSnapshot,
)

__all__ = [
    # Primitives
    'Point2D',
    'Rectangle',
    # Stone Shooter
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

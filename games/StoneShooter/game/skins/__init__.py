"""StoneShooter skins."""

from .base import StoneShooterSkin
from .geometric import GeometricSkin

__all__ = ['StoneShooterSkin', 'GeometricSkin']

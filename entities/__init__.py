"""entities package – Combatant balls and their projectiles."""

from .ball import Ball
from .projectile import Projectile

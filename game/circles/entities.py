"""
Game entity dataclasses
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Player:
    """Stationary player circle, placed once at the arena centre"""
    x: float
    y: float
    radius: float = 30.0


@dataclass(eq=False)
class Projectile:
    """Player shot travelling in a straight line"""
    x: float
    y: float
    vx: float
    vy: float
    radius: float = 5.0
    handle: Optional[Any] = None  # render sink visual


@dataclass(eq=False)
class Enemy:
    """Enemy drifting toward where the player stood when it spawned"""
    x: float
    y: float
    vx: float
    vy: float
    radius: float = 15.0
    handle: Optional[Any] = None


Mover = Union[Projectile, Enemy]


def advance(entity: Mover) -> None:
    """Move an entity by one step of its velocity (fixed-rate clock, no dt)"""
    entity.x += entity.vx
    entity.y += entity.vy

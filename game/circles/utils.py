"""
Geometry helpers for the circle shooter
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def angle_to(from_x: float, from_y: float, to_x: float, to_y: float) -> float:
    """Angle in radians of the direction pointing from (from_x, from_y) to (to_x, to_y)"""
    return math.atan2(to_y - from_y, to_x - from_x)


def velocity_from_angle(angle: float, speed: float) -> Tuple[float, float]:
    """Split a heading and speed into (vx, vy)"""
    return speed * math.cos(angle), speed * math.sin(angle)


def circles_overlap(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles touch or overlap"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) <= (rr * rr)


def is_finite_point(x, y) -> bool:
    """True if both coordinates are finite numbers"""
    try:
        return math.isfinite(x) and math.isfinite(y)
    except TypeError:
        return False


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)

"""
Render sinks the simulation pushes visuals and positions into.

The simulation never draws anything itself. It asks a sink for a visual
handle when an entity is created, moves the handle after every tick, removes
it when the entity dies and finally asks for a frame to be presented.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple

Color = Tuple[int, int, int]

# Entity kinds understood by every sink
PLAYER = "player"
PROJECTILE = "projectile"
ENEMY = "enemy"

# Colors
PLAYER_COLOR: Color = (255, 255, 255)   # white
PROJECTILE_COLOR: Color = (0, 0, 255)   # blue
ENEMY_COLOR: Color = (255, 0, 0)        # red


class RenderSink(Protocol):
    def create_entity_visual(self, kind: str, radius: float, color: Color) -> Any: ...

    def set_position(self, handle: Any, x: float, y: float) -> None: ...

    def remove_visual(self, handle: Any) -> None: ...

    def present_frame(self) -> None: ...


class NullRenderSink:
    """Sink for headless runs (training, tests)"""

    def create_entity_visual(self, kind: str, radius: float, color: Color) -> Any:
        return None

    def set_position(self, handle: Any, x: float, y: float) -> None:
        pass

    def remove_visual(self, handle: Any) -> None:
        pass

    def present_frame(self) -> None:
        pass


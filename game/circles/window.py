"""
Arcade front end for the circle shooter.

Supplies the three things the simulation treats as external: the frame
clock (on_update), the spawn timer (arcade.schedule) and input
(on_mouse_press). Click anywhere to shoot toward the cursor.

Run:
    python -m game.circles.window
"""

from __future__ import annotations

import argparse
import random
from typing import Optional

import arcade

from .render import Color
from .simulation import Simulation, SimulationState


class ArcadeRenderSink:
    """Render sink keeping one arcade.SpriteCircle per entity in a SpriteList"""

    def __init__(self):
        self.sprites = arcade.SpriteList()

    def create_entity_visual(self, kind: str, radius: float, color: Color):
        sprite = arcade.SpriteCircle(int(round(radius)), color)
        self.sprites.append(sprite)
        return sprite

    def set_position(self, handle, x: float, y: float) -> None:
        handle.center_x = x
        handle.center_y = y

    def remove_visual(self, handle) -> None:
        handle.remove_from_sprite_lists()

    def present_frame(self) -> None:
        # Drawing happens in on_draw, right after on_update
        pass

    def draw(self) -> None:
        self.sprites.draw()


class ShooterWindow(arcade.Window):
    """Arcade window driving a Simulation"""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        frame_rate: int = 60,
        spawn_interval: float = 2.0,
        seed: Optional[int] = None,
        autoplay: bool = True,
        **sim_kwargs,
    ):
        super().__init__(width, height, "Circle Shooter", update_rate=1 / frame_rate)
        self.spawn_interval = spawn_interval
        # autoplay=False: someone else (ShooterEnv) owns the clock and input
        self.autoplay = autoplay

        # Colors
        self.BG = (0, 0, 0)
        self.HUD_C = (220, 220, 220)
        self.GAME_OVER_C = (255, 80, 80)

        self.sink = ArcadeRenderSink()
        self.sim: Optional[Simulation] = None

        if self.autoplay:
            self.attach(Simulation(
                width, height,
                sink=self.sink,
                rng=random.Random(seed),
                **sim_kwargs,
            ))
            arcade.schedule(self._spawn, self.spawn_interval)

    def attach(self, sim: Simulation):
        """Show sim in this window; sim must have been built with self.sink"""
        self.sim = sim
        sim.on_game_over(self._on_game_over)

    # ----------------------------
    # Clock / input
    # ----------------------------

    def _spawn(self, delta_time: float):
        self.sim.spawn_enemy()

    def on_update(self, delta_time: float):
        if self.autoplay and self.sim is not None:
            self.sim.tick()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if self.autoplay and self.sim is not None:
            self.sim.fire(x, y)

    def _on_game_over(self, state: SimulationState):
        arcade.unschedule(self._spawn)
        print(f"[ShooterWindow] Game Over! kills={state.kills} ticks={state.ticks}")

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        self.clear(self.BG)
        self.sink.draw()
        if self.sim is None:
            return

        state = self.sim.state
        txt = (f"Kills: {state.kills}  "
               f"Enemies: {len(state.enemies)}  "
               f"Shots: {state.fired}")
        arcade.draw_text(txt, 12, self.height - 24, self.HUD_C, 14)

        if state.is_over:
            arcade.draw_text(
                "Game Over!", self.width / 2, self.height / 2,
                self.GAME_OVER_C, 36, anchor_x="center", anchor_y="center",
            )

    def close(self):
        arcade.unschedule(self._spawn)
        if self.sim is not None:
            self.sim.close()
        super().close()


def main():
    parser = argparse.ArgumentParser(description="Play the circle shooter")
    parser.add_argument("--width", type=int, default=800, help="Arena width (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Arena height (default: 600)")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate (default: 60)")
    parser.add_argument(
        "--spawn-interval",
        type=float,
        default=2.0,
        help="Seconds between enemy spawns (default: 2.0)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    ShooterWindow(
        width=args.width,
        height=args.height,
        frame_rate=args.fps,
        spawn_interval=args.spawn_interval,
        seed=args.seed,
    )
    arcade.run()


if __name__ == "__main__":
    main()

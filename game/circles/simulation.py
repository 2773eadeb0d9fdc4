"""
Simulation core for the circle shooter
--------------------------------------
- Stationary player in the middle of the arena
- Enemies spawn off-screen and drift in a straight line toward the player
- Projectiles fired at an aim point destroy the first enemy they touch
- Any enemy touching the player ends the session

The core has no clock and no window. Whoever owns a Simulation calls tick()
at a fixed rate, spawn_enemy() on a fixed period and fire() on input.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .entities import Player, Projectile, Enemy, advance
from .render import (
    RenderSink,
    NullRenderSink,
    PLAYER,
    PROJECTILE,
    ENEMY,
    PLAYER_COLOR,
    PROJECTILE_COLOR,
    ENEMY_COLOR,
)
from .utils import angle_to, velocity_from_angle, circles_overlap, is_finite_point, vec_len


@dataclass
class SimulationState:
    """Everything that changes while a session runs"""
    player: Player
    projectiles: List[Projectile] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    is_over: bool = False

    # Counters
    ticks: int = 0
    kills: int = 0
    spawned: int = 0
    fired: int = 0


@dataclass
class TickReport:
    """What happened during a single tick"""
    kills: int = 0
    game_over: bool = False


GameOverListener = Callable[[SimulationState], None]


def _check_positive(name: str, value: float):
    try:
        ok = math.isfinite(value) and value > 0
    except TypeError:
        ok = False
    if not ok:
        raise ValueError(f"{name} must be a positive finite number, got {value!r}")


class Simulation:
    """One game session: owns the state, the render sink and the game-over listeners"""

    def __init__(
        self,
        width: float,
        height: float,
        sink: Optional[RenderSink] = None,
        rng: Optional[random.Random] = None,
        bullet_speed: float = 7.0,
        bullet_radius: float = 5.0,
        player_radius: float = 30.0,
        enemy_radius: float = 15.0,
        enemy_speed: float = 1.0,
    ):
        # Arena bounds are needed to place enemies off-screen
        _check_positive("width", width)
        _check_positive("height", height)
        _check_positive("bullet_speed", bullet_speed)
        _check_positive("bullet_radius", bullet_radius)
        _check_positive("player_radius", player_radius)
        _check_positive("enemy_radius", enemy_radius)
        _check_positive("enemy_speed", enemy_speed)

        self.width = width
        self.height = height
        self.bullet_speed = bullet_speed
        self.bullet_radius = bullet_radius
        self.enemy_radius = enemy_radius
        self.enemy_speed = enemy_speed

        self.sink: RenderSink = sink if sink is not None else NullRenderSink()
        self.rng = rng if rng is not None else random.Random()
        self._listeners: List[GameOverListener] = []

        player = Player(x=width * 0.5, y=height * 0.5, radius=player_radius)
        self.state = SimulationState(player=player)

        self._player_handle = self.sink.create_entity_visual(PLAYER, player.radius, PLAYER_COLOR)
        self.sink.set_position(self._player_handle, player.x, player.y)

    # ----------------------------
    # Properties
    # ----------------------------

    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    @property
    def spawn_distance(self) -> float:
        """Distance from the player at which enemies appear; always outside the visible arena"""
        return self.width / 2 + self.height / 2

    def on_game_over(self, listener: GameOverListener) -> None:
        """Subscribe to the (single) game-over notification"""
        self._listeners.append(listener)

    # ----------------------------
    # Commands
    # ----------------------------

    def spawn_enemy(self) -> Optional[Enemy]:
        """Create one enemy on the spawn ring, aimed at the player"""
        if self.state.is_over:
            return None

        player = self.state.player
        theta = self.rng.random() * math.pi * 2
        x = player.x + math.cos(theta) * self.spawn_distance
        y = player.y + math.sin(theta) * self.spawn_distance

        # Aimed once; enemies do not re-aim while they travel
        vx, vy = velocity_from_angle(angle_to(x, y, player.x, player.y), self.enemy_speed)

        enemy = Enemy(x=x, y=y, vx=vx, vy=vy, radius=self.enemy_radius)
        enemy.handle = self.sink.create_entity_visual(ENEMY, enemy.radius, ENEMY_COLOR)
        self.sink.set_position(enemy.handle, enemy.x, enemy.y)

        self.state.enemies.append(enemy)
        self.state.spawned += 1
        return enemy

    def fire(self, x: float, y: float) -> Optional[Projectile]:
        """Shoot from the player's edge toward the aim point (x, y)"""
        if self.state.is_over:
            return None
        if not is_finite_point(x, y):
            return None

        player = self.state.player
        rad = angle_to(player.x, player.y, x, y)
        vx, vy = velocity_from_angle(rad, self.bullet_speed)

        projectile = Projectile(
            x=player.x + math.cos(rad) * player.radius,
            y=player.y + math.sin(rad) * player.radius,
            vx=vx,
            vy=vy,
            radius=self.bullet_radius,
        )
        projectile.handle = self.sink.create_entity_visual(
            PROJECTILE, projectile.radius, PROJECTILE_COLOR
        )
        self.sink.set_position(projectile.handle, projectile.x, projectile.y)

        self.state.projectiles.append(projectile)
        self.state.fired += 1
        return projectile

    def tick(self) -> TickReport:
        """Advance everything one step and resolve collisions"""
        report = TickReport()

        if self.state.is_over:
            self.sink.present_frame()
            return report

        for p in self.state.projectiles:
            advance(p)
        self._drop_spent_projectiles()
        for e in self.state.enemies:
            advance(e)

        report.kills = self._handle_projectile_enemy_collisions()
        report.game_over = self._handle_enemy_player_collisions()

        self._sync_visuals()
        self.state.ticks += 1
        self.sink.present_frame()
        return report

    def close(self) -> None:
        """Tear down the session: drop every visual, entity and listener"""
        for p in self.state.projectiles:
            self.sink.remove_visual(p.handle)
        for e in self.state.enemies:
            self.sink.remove_visual(e.handle)
        if self._player_handle is not None:
            self.sink.remove_visual(self._player_handle)
            self._player_handle = None

        self.state.projectiles = []
        self.state.enemies = []
        self._listeners = []

    # ----------------------------
    # Collisions
    # ----------------------------

    def _drop_spent_projectiles(self):
        # Enemies never start farther out than spawn_distance and only move inward,
        # so a projectile past this reach can no longer hit anything.
        reach = self.spawn_distance + self.enemy_radius + self.bullet_radius
        player = self.state.player

        remaining = []
        for p in self.state.projectiles:
            if vec_len(p.x - player.x, p.y - player.y) > reach:
                self.sink.remove_visual(p.handle)
            else:
                remaining.append(p)
        self.state.projectiles = remaining

    def _handle_projectile_enemy_collisions(self) -> int:
        hit_projectiles = set()
        hit_enemies = set()

        for pi, p in enumerate(self.state.projectiles):
            for ei, e in enumerate(self.state.enemies):
                if ei in hit_enemies:
                    continue
                if circles_overlap(p.x, p.y, p.radius, e.x, e.y, e.radius):
                    # First enemy in list order wins
                    hit_projectiles.add(pi)
                    hit_enemies.add(ei)
                    break

        if not hit_enemies:
            return 0

        remaining_projectiles = []
        for pi, p in enumerate(self.state.projectiles):
            if pi in hit_projectiles:
                self.sink.remove_visual(p.handle)
            else:
                remaining_projectiles.append(p)

        remaining_enemies = []
        for ei, e in enumerate(self.state.enemies):
            if ei in hit_enemies:
                self.sink.remove_visual(e.handle)
            else:
                remaining_enemies.append(e)

        self.state.projectiles = remaining_projectiles
        self.state.enemies = remaining_enemies
        self.state.kills += len(hit_enemies)
        return len(hit_enemies)

    def _handle_enemy_player_collisions(self) -> bool:
        player = self.state.player
        for e in self.state.enemies:
            if circles_overlap(player.x, player.y, player.radius, e.x, e.y, e.radius):
                self.state.is_over = True
                for listener in list(self._listeners):
                    listener(self.state)
                return True
        return False

    def _sync_visuals(self):
        for p in self.state.projectiles:
            self.sink.set_position(p.handle, p.x, p.y)
        for e in self.state.enemies:
            self.sink.set_position(e.handle, e.x, e.y)

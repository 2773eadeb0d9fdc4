"""Shared fixtures: a render sink that records calls and a seeded simulation."""

import random

import pytest

from game.circles.simulation import Simulation


class RecordingSink:
    """Render sink that remembers every visual and call it sees"""

    def __init__(self):
        self.created = []
        self.live = {}
        self.removed = []
        self.frames = 0
        self._next = 0

    def create_entity_visual(self, kind, radius, color):
        self._next += 1
        handle = self._next
        self.created.append((kind, radius, color))
        self.live[handle] = (kind, None, None)
        return handle

    def set_position(self, handle, x, y):
        # Entities built directly in a test have no visual
        if handle not in self.live:
            return
        kind = self.live[handle][0]
        self.live[handle] = (kind, x, y)

    def remove_visual(self, handle):
        if handle in self.live:
            del self.live[handle]
            self.removed.append(handle)

    def present_frame(self):
        self.frames += 1


class FixedRandom:
    """Stands in for random.Random where a test needs a known spawn angle"""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def sim(sink):
    return Simulation(800, 600, sink=sink, rng=random.Random(1234))


@pytest.fixture
def fixed_random():
    return FixedRandom

# player_state.py

import numpy as np

from config import TRAIL_LENGTH, WINDOW_WIDTH, WINDOW_HEIGHT


class Trail:
    """Fixed-size ring buffer of recent player positions."""

    def __init__(self, capacity=TRAIL_LENGTH):
        self.capacity = capacity
        self.points = np.zeros((capacity, 2), dtype=float)
        self.head = 0

    def fill(self, x, y):
        self.points[:] = (x, y)
        self.head = 0

    def append(self, x, y):
        self.points[self.head] = (x, y)
        self.head = (self.head + 1) % self.capacity

    def newest_first(self):
        """Returns the buffered points ordered from the most recent write backwards."""
        order = (self.head - 1 - np.arange(self.capacity)) % self.capacity
        return [tuple(p) for p in self.points[order]]


class PlayerState:
    def __init__(self):
        # Position
        self.x = WINDOW_WIDTH / 2.0
        self.y = WINDOW_HEIGHT / 2.0

        # Velocity
        self.velocity_x = 0.0
        self.velocity_y = 0.0

        self.trail = Trail()
        self.trail.fill(self.x, self.y)

    def reset(self):
        """Centers the player, stops it and collapses the trail onto it."""
        self.x = WINDOW_WIDTH / 2.0
        self.y = WINDOW_HEIGHT / 2.0
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.trail.fill(self.x, self.y)

    @property
    def position(self):
        return (self.x, self.y)

# session.py

import random
from enum import Enum

import numpy as np

from config import (
    CONFETTI_GRAVITY,
    CONFETTI_LIFETIME,
    CONFETTI_SPREAD,
    NUM_CONFETTI,
    PLAYER_PROFILES,
)
from player_state import PlayerState


class SessionState(Enum):
    CONNECTING = 'connecting'
    TRANSITIONING = 'transitioning'
    PLAYER_SELECT = 'player_select'
    MAIN_MENU = 'main_menu'
    DIFFICULTY_SELECT = 'difficulty_select'
    BALANCE_HOLD = 'balance_hold'
    COIN_COLLECTOR = 'coin_collector'
    DODGE = 'dodge'
    WINNING = 'winning'


class GameType(Enum):
    BALANCE_HOLD = 'balance_hold'
    COIN_COLLECTOR = 'coin_collector'
    DODGE = 'dodge'


class Difficulty(Enum):
    EASY = 'easy'
    MEDIUM = 'medium'
    HARD = 'hard'


class Zone(Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


class Cue(Enum):
    SELECTION_CONFIRMED = 'selection_confirmed'
    TARGET_REACHED = 'target_reached'
    RESET = 'reset'
    COIN_COLLECTED = 'coin_collected'
    WIN = 'win'
    LOSS = 'loss'


class Confetti:
    """Particle burst shown while the session sits in the Winning state."""

    COLORS = [(95, 215, 11), (114, 187, 255), (166, 255, 166)]

    def __init__(self, count=NUM_CONFETTI):
        self.count = count
        self.clear()

    def clear(self):
        self.positions = np.zeros((self.count, 2), dtype=float)
        self.velocities = np.zeros((self.count, 2), dtype=float)
        self.lifetimes = np.zeros(self.count, dtype=float)
        self.colors = [self.COLORS[0]] * self.count

    def burst(self, x, y, rng):
        spread = int(CONFETTI_SPREAD)
        self.positions[:] = (x, y)
        for i in range(self.count):
            self.velocities[i] = (rng.randrange(spread) - spread / 2.0,
                                  rng.randrange(spread) - spread / 2.0)
            self.colors[i] = rng.choice(self.COLORS)
        self.lifetimes[:] = CONFETTI_LIFETIME

    def update(self, dt):
        alive = self.lifetimes > 0
        self.positions[alive] += self.velocities[alive] * dt
        self.velocities[alive, 1] += CONFETTI_GRAVITY * dt
        self.lifetimes[alive] -= dt

    def live_particles(self):
        return [
            {'x': float(p[0]), 'y': float(p[1]), 'color': c}
            for p, c, life in zip(self.positions, self.colors, self.lifetimes)
            if life > 0
        ]


class Session:
    """
    The single mutable record of a play session.

    Every mode engine and the state machine read and write through one Session
    object. Cues raised during a frame are queued on `cues` and drained by the
    game manager once the frame is complete.
    """

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.player = PlayerState()
        self.confetti = Confetti()
        self.cues = []
        self.state = SessionState.CONNECTING
        self.profile_index = None
        self.best_time = None
        self.total_wins = 0
        self.dodge_high_score = 0
        self.reset()

    def reset(self):
        """Drops the profile, menu choices and every per-mode counter."""
        self.profile_index = None
        self.best_time = None
        self.total_wins = 0
        self.dodge_high_score = 0
        self.reset_game()

    def reset_game(self):
        """Clears the game choice and scores while keeping the loaded profile."""
        self.selected_game = None
        self.difficulty = None
        self.goal = 0
        self.coins = 0
        self.mode_time = 0.0
        self.player.reset()
        self.confetti.clear()

    def emit(self, cue):
        self.cues.append(cue)

    def drain_cues(self):
        cues, self.cues = self.cues, []
        return cues

    @property
    def profile(self):
        if self.profile_index is None:
            return None
        return PLAYER_PROFILES[self.profile_index]

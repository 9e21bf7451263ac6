# balance_hold_game.py

import math

from config import (
    BH_GOALS,
    BH_GRACE_ZONE_RADIUS,
    BH_HOLD_RADIUS,
    BH_HOLD_TIME_REQUIRED,
    BH_TARGET_PULSE_SPEED,
    BH_TARGET_SPEEDS,
    COB_SCALE_GENERAL,
    GAME_OBJECT_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from game import Game
from helpers import calculate_distance, clamp, random_point
from input_module import trusted_cob
from motion import cob_to_screen, update_player_position
from session import Cue, SessionState


class Target:
    def __init__(self, x=0.0, y=0.0, velocity_x=0.0, velocity_y=0.0):
        self.x = x
        self.y = y
        self.velocity_x = velocity_x
        self.velocity_y = velocity_y

    @property
    def position(self):
        return (self.x, self.y)


class BalanceHoldGame(Game):
    """Keep the player inside a (possibly drifting) target until the hold bar fills."""

    def __init__(self, session):
        super().__init__(session)
        self.target = Target()
        self.hold_timer = 0.0
        self.pulse_timer = 0.0

    def reset(self):
        session = self.session
        session.player.reset()
        session.goal = BH_GOALS[session.difficulty.value]
        session.coins = 0
        session.mode_time = 0.0
        self.pulse_timer = 0.0
        self.spawn_target()

    def spawn_target(self):
        """Moves the target to a random spot and gives it the difficulty's drift speed."""
        rng = self.session.rng
        speed = BH_TARGET_SPEEDS[self.session.difficulty.value]
        self.target.x, self.target.y = random_point(
            rng, GAME_OBJECT_SIZE, GAME_OBJECT_SIZE, WINDOW_WIDTH, WINDOW_HEIGHT)
        self.target.velocity_x = speed if rng.randrange(2) == 0 else -speed
        self.target.velocity_y = speed if rng.randrange(2) == 0 else -speed
        self.hold_timer = 0.0

    def move_target(self, dt):
        target = self.target
        target.x += target.velocity_x * dt
        target.y += target.velocity_y * dt

        # Reflect only while heading further out, so a target that starts
        # inside the border band drifts back instead of jittering.
        border = BH_GRACE_ZONE_RADIUS
        if (target.x < border and target.velocity_x < 0) or \
                (target.x > WINDOW_WIDTH - border and target.velocity_x > 0):
            target.velocity_x *= -1
        if (target.y < border and target.velocity_y < 0) or \
                (target.y > WINDOW_HEIGHT - border and target.velocity_y > 0):
            target.velocity_y *= -1

    def in_zone(self):
        return calculate_distance(self.session.player.position, self.target.position) <= BH_HOLD_RADIUS

    @property
    def hold_progress(self):
        return clamp(self.hold_timer / BH_HOLD_TIME_REQUIRED, 0.0, 1.0)

    def update(self, sample, dt):
        session = self.session
        session.mode_time += dt
        self.pulse_timer += dt

        target_x, target_y = cob_to_screen(*trusted_cob(sample), COB_SCALE_GENERAL)
        update_player_position(session.player, target_x, target_y, dt)
        self.move_target(dt)

        if self.in_zone():
            self.hold_timer += dt
        else:
            self.hold_timer = 0.0
            session.emit(Cue.RESET)

        if self.hold_timer >= BH_HOLD_TIME_REQUIRED:
            session.coins += 1
            session.emit(Cue.TARGET_REACHED)
            if session.coins >= session.goal:
                return SessionState.WINNING
            self.spawn_target()
        return None

    def render_state(self):
        return {
            'target': self.target.position,
            'target_velocity': (self.target.velocity_x, self.target.velocity_y),
            'hold_radius': BH_HOLD_RADIUS,
            'hold_progress': self.hold_progress,
            'pulse_scale': 1.0 + 0.3 * math.sin(self.pulse_timer * BH_TARGET_PULSE_SPEED),
            'coins': self.session.coins,
            'goal': self.session.goal,
        }

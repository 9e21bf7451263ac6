# dodge_game.py

import logging

from config import (
    BLOCK_HEIGHT,
    BLOCK_INITIAL_SPEED,
    BLOCK_SPAWN_INTERVAL,
    BLOCK_SPAWN_INTERVAL_DECAY,
    BLOCK_SPAWN_INTERVAL_MIN,
    BLOCK_SPEED_INCREMENT,
    BLOCK_WIDTH,
    COB_SCALE_DODGE,
    DEAD_ZONE,
    GAME_OBJECT_SIZE,
    MAX_DODGE_BLOCKS,
    MIN_TOTAL_WEIGHT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from game import Game
from helpers import centered_rect, rects_intersect
from motion import cob_to_screen, update_player_position
from session import SessionState

logger = logging.getLogger(__name__)


class DodgeBlock:
    def __init__(self):
        self.x = 0.0
        self.y = 0.0
        self.speed = 0.0
        self.active = False

    @property
    def rect(self):
        return (int(self.x), int(self.y), BLOCK_WIDTH, BLOCK_HEIGHT)


class DodgeGame(Game):
    """Endless mode: blocks slide in from the right, faster and more often the longer you last."""

    records_win = False

    def __init__(self, session, store=None):
        super().__init__(session)
        self.store = store
        self.blocks = [DodgeBlock() for _ in range(MAX_DODGE_BLOCKS)]
        self.reset_blocks()

    def reset_blocks(self):
        for block in self.blocks:
            block.active = False
        self.spawn_timer = 0.0
        self.block_speed = BLOCK_INITIAL_SPEED
        self.spawn_interval = BLOCK_SPAWN_INTERVAL
        self.score = 0

    def reset(self):
        self.session.player.reset()
        self.session.mode_time = 0.0
        self.reset_blocks()

    def spawn_block(self):
        """Drops a new block just off the right edge; does nothing when the pool is full."""
        for block in self.blocks:
            if not block.active:
                block.active = True
                block.x = float(WINDOW_WIDTH + BLOCK_WIDTH)
                block.y = float(self.session.rng.randrange(WINDOW_HEIGHT - BLOCK_HEIGHT))
                block.speed = self.block_speed
                return block
        return None

    def has_input(self, sample):
        if sample is None or sample.total_weight <= MIN_TOTAL_WEIGHT:
            return False
        return abs(sample.x_cob) > DEAD_ZONE or abs(sample.y_cob) > DEAD_ZONE

    def record_dodge(self):
        session = self.session
        self.score += 1
        if self.score > session.dodge_high_score:
            session.dodge_high_score = self.score
            if self.store is not None and session.profile is not None:
                self.store.write_high_score(session.profile, session.dodge_high_score)

    def update(self, sample, dt):
        session = self.session
        session.mode_time += dt

        if self.has_input(sample):
            target_x, target_y = cob_to_screen(sample.x_cob, sample.y_cob, COB_SCALE_DODGE)
            update_player_position(session.player, target_x, target_y, dt)

        player_rect = centered_rect(session.player.x, session.player.y, GAME_OBJECT_SIZE)
        for block in self.blocks:
            if not block.active:
                continue
            block.speed = self.block_speed
            block.x -= block.speed * dt
            if block.x + BLOCK_WIDTH < 0:
                block.active = False
                self.record_dodge()
                continue
            if rects_intersect(block.rect, player_rect):
                logger.info("Hit by a block after dodging %d", self.score)
                return SessionState.WINNING

        self.spawn_timer += dt
        if self.spawn_timer >= self.spawn_interval:
            self.spawn_block()
            self.spawn_timer = 0.0

        self.block_speed += BLOCK_SPEED_INCREMENT * dt
        self.spawn_interval = max(BLOCK_SPAWN_INTERVAL_MIN,
                                  self.spawn_interval - BLOCK_SPAWN_INTERVAL_DECAY * dt)
        return None

    def render_state(self):
        return {
            'blocks': [block.rect for block in self.blocks if block.active],
            'score': self.score,
            'high_score': self.session.dodge_high_score,
            'block_speed': self.block_speed,
        }

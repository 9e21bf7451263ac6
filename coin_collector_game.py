# coin_collector_game.py

import logging

from config import (
    CC_COIN_TIMER,
    CC_GOALS,
    COB_SCALE_GENERAL,
    COIN_PICKUP_FACTOR,
    COIN_RADIUS,
    COIN_SAFE_MARGIN,
    COIN_SPAWN_MIN_DIST_PLAYER,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from game import Game
from helpers import calculate_distance, random_point
from input_module import trusted_cob
from motion import cob_to_screen, update_player_position
from session import Cue, Difficulty, SessionState

logger = logging.getLogger(__name__)


class Coin:
    def __init__(self):
        self.x = 0.0
        self.y = 0.0
        self.active = False


class CoinCollectorGame(Game):
    """Collect coins one at a time; on Hard each coin must be reached before a countdown runs out."""

    def __init__(self, session):
        super().__init__(session)
        self.coins = []
        self.coin_timer = None

    def reset(self):
        session = self.session
        session.player.reset()
        session.goal = CC_GOALS[session.difficulty.value]
        session.coins = 0
        session.mode_time = 0.0
        self.coins = [Coin() for _ in range(session.goal)]
        self.spawn_coin(0)
        self.coin_timer = CC_COIN_TIMER if session.difficulty == Difficulty.HARD else None

    def spawn_coin(self, index):
        """Activates pool slot `index` somewhere away from the edges and from the player."""
        if index >= len(self.coins):
            return
        player = self.session.player
        while True:
            x, y = random_point(self.session.rng, COIN_SAFE_MARGIN, COIN_SAFE_MARGIN,
                                WINDOW_WIDTH, WINDOW_HEIGHT)
            if calculate_distance((x, y), player.position) > COIN_SPAWN_MIN_DIST_PLAYER:
                break
        coin = self.coins[index]
        coin.x, coin.y = x, y
        coin.active = True

    def update(self, sample, dt):
        session = self.session
        session.mode_time += dt

        target_x, target_y = cob_to_screen(*trusted_cob(sample), COB_SCALE_GENERAL)
        update_player_position(session.player, target_x, target_y, dt)

        if self.coin_timer is not None:
            self.coin_timer -= dt
            if self.coin_timer <= 0:
                logger.info("Time's up! Returning to menu.")
                return SessionState.MAIN_MENU

        pickup_radius = COIN_RADIUS * COIN_PICKUP_FACTOR
        for i, coin in enumerate(self.coins):
            if not coin.active:
                continue
            if calculate_distance(session.player.position, (coin.x, coin.y)) > pickup_radius:
                continue
            coin.active = False
            session.coins += 1
            session.emit(Cue.COIN_COLLECTED)
            if session.coins >= session.goal:
                return SessionState.WINNING
            self.spawn_coin(i + 1)
            if self.coin_timer is not None:
                self.coin_timer = CC_COIN_TIMER
            break
        return None

    def active_coins(self):
        return [(c.x, c.y) for c in self.coins if c.active]

    def render_state(self):
        return {
            'coins_on_field': self.active_coins(),
            'coin_radius': COIN_RADIUS,
            'coin_timer': self.coin_timer,
            'coins': self.session.coins,
            'goal': self.session.goal,
        }

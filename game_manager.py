# game_manager.py

import logging
import time

from balance_hold_game import BalanceHoldGame
from coin_collector_game import CoinCollectorGame
from config import (
    DEBUG_INTERVAL,
    FRAME_TIME,
    INACTIVITY_TIMEOUT_SECONDS,
    MIN_TOTAL_WEIGHT,
    TRANSITION_DURATION,
    TRANSITION_SHAKE_MAX,
    WIN_ANIMATION_DURATION,
)
from dodge_game import DodgeGame
from input_module import BalanceSample, SensorUnavailable
from score_store import ScoreStore
from selection import SelectionDebouncer
from session import Cue, Difficulty, GameType, Session, SessionState, Zone

logger = logging.getLogger(__name__)

GAME_STATES = {
    GameType.BALANCE_HOLD: SessionState.BALANCE_HOLD,
    GameType.COIN_COLLECTOR: SessionState.COIN_COLLECTOR,
    GameType.DODGE: SessionState.DODGE,
}


class GameManager:
    """
    Runs the session state machine one frame at a time.

    Connecting -> Transitioning -> PlayerSelect -> MainMenu -> (DifficultySelect)
    -> one of the three games -> Winning -> PlayerSelect. Losing the board, or
    nobody standing on it for too long, drops any menu or game back to
    Connecting.
    """

    def __init__(self, sensor, store=None, session=None, cue_listeners=(), frame_listeners=()):
        self.sensor = sensor
        self.store = store or ScoreStore()
        self.session = session or Session()
        self.cue_listeners = list(cue_listeners)
        self.frame_listeners = list(frame_listeners)

        # -- Menus --
        self.menus = {
            SessionState.PLAYER_SELECT: SelectionDebouncer({Zone.LEFT: 0, Zone.CENTER: 1, Zone.RIGHT: 2}),
            SessionState.MAIN_MENU: SelectionDebouncer({
                Zone.LEFT: GameType.BALANCE_HOLD,
                Zone.CENTER: GameType.DODGE,
                Zone.RIGHT: GameType.COIN_COLLECTOR,
            }),
            SessionState.DIFFICULTY_SELECT: SelectionDebouncer({
                Zone.LEFT: Difficulty.EASY,
                Zone.CENTER: Difficulty.MEDIUM,
                Zone.RIGHT: Difficulty.HARD,
            }),
        }
        self.games = self.create_games()
        self.finished_game = None

        # -- Timers --
        self.state_time = 0.0
        self.inactive_time = 0.0
        self.total_weight = 0.0
        self.last_sample = None
        self.frame_count = 0
        self.running = False

    def create_games(self):
        return {
            SessionState.BALANCE_HOLD: BalanceHoldGame(self.session),
            SessionState.COIN_COLLECTOR: CoinCollectorGame(self.session),
            SessionState.DODGE: DodgeGame(self.session, self.store),
        }

    @property
    def state(self):
        return self.session.state

    # --------- transitions ---------
    def enter_state(self, new_state):
        if new_state != self.session.state:
            logger.info("State %s -> %s", self.session.state.value, new_state.value)
        self.session.state = new_state
        self.state_time = 0.0
        for menu in self.menus.values():
            menu.reset()

    def reset_all(self):
        """Zeroes the session, every menu and every game."""
        self.session.reset()
        self.games = self.create_games()
        self.finished_game = None
        self.inactive_time = 0.0
        self.total_weight = 0.0
        self.last_sample = None

    def disconnect(self, reason):
        logger.info("%s. Returning to connecting screen.", reason)
        self.sensor.release()
        self.reset_all()
        self.enter_state(SessionState.CONNECTING)

    def load_profile(self, index):
        session = self.session
        session.profile_index = index
        session.best_time = self.store.read_best_time(session.profile)
        session.total_wins = self.store.read_win_count(session.profile)
        logger.info("Loaded %s: best time %s, %d wins",
                    session.profile['name'], session.best_time, session.total_wins)

    def start_game(self, game_type):
        session = self.session
        session.selected_game = game_type
        state = GAME_STATES[game_type]
        if game_type == GameType.DODGE:
            session.dodge_high_score = self.store.read_high_score(session.profile) if session.profile else 0
        self.games[state].reset()
        self.enter_state(state)

    def finish_game(self, game):
        """Books the result of a finished round and starts the celebration."""
        session = self.session
        if game.records_win:
            win_time = session.mode_time
            logger.info("%s won in %.2fs", session.profile['name'] if session.profile else "Player", win_time)
            if session.best_time is None or win_time < session.best_time:
                session.best_time = win_time
                if session.profile is not None:
                    self.store.write_best_time(session.profile, win_time)
            session.total_wins += 1
            if session.profile is not None:
                self.store.write_win_count(session.profile, session.total_wins)
            session.emit(Cue.WIN)
        else:
            session.emit(Cue.LOSS)
        session.confetti.burst(session.player.x, session.player.y, session.rng)
        self.finished_game = game
        self.enter_state(SessionState.WINNING)

    # --------- per-frame ---------
    def read_sensor(self):
        sample = self.sensor.poll()
        if sample is None:
            # Nothing new this frame: keep the last weight, drop the lean.
            return BalanceSample(0.0, 0.0, self.total_weight)
        self.total_weight = sample.total_weight
        return sample

    def update(self, dt):
        session = self.session
        self.state_time += dt

        sample = None
        if session.state not in (SessionState.CONNECTING, SessionState.TRANSITIONING):
            try:
                sample = self.read_sensor()
            except SensorUnavailable as e:
                self.disconnect(f"Balance board lost ({e})")
                self.dispatch_cues()
                return

            if self.total_weight < MIN_TOTAL_WEIGHT:
                self.inactive_time += dt
                if self.inactive_time > INACTIVITY_TIMEOUT_SECONDS:
                    self.disconnect("Inactivity timeout")
                    self.dispatch_cues()
                    return
            else:
                self.inactive_time = 0.0
        self.last_sample = sample

        state = session.state
        if state == SessionState.CONNECTING:
            if self.sensor.connect():
                self.enter_state(SessionState.TRANSITIONING)

        elif state == SessionState.TRANSITIONING:
            if self.state_time >= TRANSITION_DURATION:
                self.enter_state(SessionState.PLAYER_SELECT)

        elif state == SessionState.PLAYER_SELECT:
            choice = self.menus[state].update(sample, dt, session)
            if choice is not None:
                self.load_profile(choice)
                self.enter_state(SessionState.MAIN_MENU)

        elif state == SessionState.MAIN_MENU:
            choice = self.menus[state].update(sample, dt, session)
            if choice == GameType.DODGE:
                self.start_game(choice)
            elif choice is not None:
                session.selected_game = choice
                self.enter_state(SessionState.DIFFICULTY_SELECT)

        elif state == SessionState.DIFFICULTY_SELECT:
            choice = self.menus[state].update(sample, dt, session)
            if choice is not None:
                session.difficulty = choice
                self.start_game(session.selected_game)

        elif state in self.games:
            game = self.games[state]
            next_state = game.update(sample, dt)
            if next_state == SessionState.WINNING:
                self.finish_game(game)
            elif next_state == SessionState.MAIN_MENU:
                session.reset_game()
                self.enter_state(SessionState.MAIN_MENU)

        elif state == SessionState.WINNING:
            session.confetti.update(dt)
            if self.state_time >= WIN_ANIMATION_DURATION:
                self.reset_all()
                self.enter_state(SessionState.PLAYER_SELECT)

        self.dispatch_cues()

    def dispatch_cues(self):
        for cue in self.session.drain_cues():
            for listener in self.cue_listeners:
                listener(cue)

    def shake_intensity(self):
        if self.session.state != SessionState.TRANSITIONING:
            return 0.0
        progress = min(self.state_time / TRANSITION_DURATION, 1.0)
        if progress < 0.5:
            return progress * 2.0 * TRANSITION_SHAKE_MAX
        return (1.0 - progress) * 2.0 * TRANSITION_SHAKE_MAX

    def snapshot(self):
        """Everything the presentation layer needs to draw the current frame."""
        session = self.session
        snap = {
            'state': session.state.value,
            'player': session.player.position,
            'trail': session.player.trail.newest_first(),
            'total_weight': self.total_weight,
            'profile': session.profile['name'] if session.profile else None,
            'selected_game': session.selected_game.value if session.selected_game else None,
            'difficulty': session.difficulty.value if session.difficulty else None,
            'coins': session.coins,
            'goal': session.goal,
            'best_time': session.best_time,
            'total_wins': session.total_wins,
            'dodge_high_score': session.dodge_high_score,
        }

        menu = self.menus.get(session.state)
        if menu is not None:
            candidate = menu.candidate_value
            snap['selection'] = {
                'candidate': getattr(candidate, 'value', candidate),
                'progress': menu.progress,
            }

        if session.state == SessionState.TRANSITIONING:
            snap['shake_intensity'] = self.shake_intensity()
        elif session.state in self.games:
            snap['mode'] = self.games[session.state].render_state()
        elif session.state == SessionState.WINNING:
            snap['confetti'] = session.confetti.live_particles()
            if self.finished_game is not None:
                snap['mode'] = self.finished_game.render_state()
        return snap

    # --------- main loop ---------
    def run(self):
        self.running = True
        last_frame_time = time.time()
        try:
            while self.running:
                frame_start = time.time()
                dt = frame_start - last_frame_time
                last_frame_time = frame_start

                self.update(dt)
                if self.frame_listeners:
                    snap = self.snapshot()
                    for listener in self.frame_listeners:
                        listener(snap)

                self.frame_count += 1
                if self.frame_count % DEBUG_INTERVAL == 0 and self.last_sample is not None:
                    logger.debug("x_cob=%.2f y_cob=%.2f weight=%.2f fps=%.1f",
                                 self.last_sample.x_cob, self.last_sample.y_cob,
                                 self.total_weight, 1.0 / dt if dt > 0 else 0.0)

                elapsed = time.time() - frame_start
                if elapsed < FRAME_TIME:
                    time.sleep(FRAME_TIME - elapsed)
        except KeyboardInterrupt:
            logger.info("Interrupted, shutting down.")
        finally:
            self.running = False
            self.sensor.release()

    def stop(self):
        self.running = False

# score_store.py

import logging
import os

from config import DATA_DIR

logger = logging.getLogger(__name__)


class ScoreStore:
    """
    Keeps each player's records as one small text file per value.

    Files are named after the profile, e.g. `player 1_score.txt` for the best
    time. A missing or unreadable file means there is no record yet. Writes
    never raise: a failure is logged and reported by returning False.
    """

    BEST_TIME_FILE = 'score.txt'
    WIN_COUNT_FILE = 'wins.txt'
    HIGH_SCORE_FILE = 'dodge_score.txt'

    def __init__(self, data_dir=DATA_DIR):
        self.data_dir = data_dir

    def profile_path(self, profile, base_filename):
        return os.path.join(self.data_dir, f"{profile['name'].lower()}_{base_filename}")

    def _read(self, path, cast):
        try:
            with open(path, 'r') as f:
                return cast(f.read().strip())
        except (OSError, ValueError):
            return None

    def _write(self, path, text):
        try:
            with open(path, 'w') as f:
                f.write(text)
        except OSError as e:
            logger.warning("Failed to write %s: %s", path, e)
            return False
        return True

    def read_best_time(self, profile):
        best = self._read(self.profile_path(profile, self.BEST_TIME_FILE), float)
        if best is None or best < 0:
            return None
        return best

    def write_best_time(self, profile, seconds):
        return self._write(self.profile_path(profile, self.BEST_TIME_FILE), f"{seconds:.2f}")

    def read_win_count(self, profile):
        return self._read(self.profile_path(profile, self.WIN_COUNT_FILE), int) or 0

    def write_win_count(self, profile, wins):
        return self._write(self.profile_path(profile, self.WIN_COUNT_FILE), str(wins))

    def read_high_score(self, profile):
        return self._read(self.profile_path(profile, self.HIGH_SCORE_FILE), int) or 0

    def write_high_score(self, profile, score):
        return self._write(self.profile_path(profile, self.HIGH_SCORE_FILE), str(score))

import logging
import os

from config import PLAYER_PROFILES
from score_store import ScoreStore

PROFILE = PLAYER_PROFILES[1]


def test_missing_records_read_as_empty(store):
    assert store.read_best_time(PROFILE) is None
    assert store.read_win_count(PROFILE) == 0
    assert store.read_high_score(PROFILE) == 0


def test_records_are_kept_per_profile(store, tmp_path):
    assert store.write_best_time(PROFILE, 12.346)
    assert store.write_win_count(PROFILE, 4)
    assert store.write_high_score(PROFILE, 17)

    assert (tmp_path / 'player 2_score.txt').read_text() == '12.35'
    assert store.read_best_time(PROFILE) == 12.35
    assert store.read_win_count(PROFILE) == 4
    assert store.read_high_score(PROFILE) == 17
    assert store.read_win_count(PLAYER_PROFILES[0]) == 0


def test_corrupt_or_negative_records_are_ignored(store, tmp_path):
    (tmp_path / 'player 2_wins.txt').write_text('lots')
    (tmp_path / 'player 2_score.txt').write_text('-1.00')
    assert store.read_win_count(PROFILE) == 0
    assert store.read_best_time(PROFILE) is None


def test_failed_write_is_logged_not_raised(tmp_path, caplog):
    store = ScoreStore(data_dir=os.path.join(str(tmp_path), 'missing'))
    with caplog.at_level(logging.WARNING, logger='score_store'):
        assert store.write_win_count(PROFILE, 3) is False
    assert 'Failed to write' in caplog.text

# main.py

import logging
import os

from game_manager import GameManager
from input_module import BalanceBoardInput
from score_store import ScoreStore
from sound_cues import SoundCues


def main():
    logging.basicConfig(
        level=os.environ.get('BOARDPOWER_LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    sounds = SoundCues()
    manager = GameManager(BalanceBoardInput(), store=ScoreStore(), cue_listeners=[sounds])
    try:
        manager.run()
    finally:
        sounds.close()


if __name__ == '__main__':
    main()

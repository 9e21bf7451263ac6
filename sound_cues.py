# sound_cues.py

import logging
import os

import pygame

from config import ASSET_DIR
from session import Cue

logger = logging.getLogger(__name__)

CUE_SOUNDS = {
    Cue.SELECTION_CONFIRMED: ('select.mp3', 0.6),
    Cue.TARGET_REACHED: ('target.wav', 0.6),
    Cue.RESET: ('reset.wav', 0.4),
    Cue.COIN_COLLECTED: ('coin.mp3', 0.5),
    Cue.WIN: ('win.mp3', 0.7),
    Cue.LOSS: ('reset.wav', 0.6),
}


class SoundCues:
    """Plays a short sound for each session cue. Runs silently if audio is unavailable."""

    def __init__(self, asset_dir=ASSET_DIR):
        self.sounds = {}
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Sound init failed: %s. Running without sound.", e)
            return

        for cue, (filename, volume) in CUE_SOUNDS.items():
            path = os.path.join(asset_dir, 'sounds', filename)
            if not os.path.exists(path):
                logger.warning("Missing sound file %s", path)
                continue
            try:
                sound = pygame.mixer.Sound(path)
            except pygame.error as e:
                logger.warning("Could not load %s: %s", path, e)
                continue
            sound.set_volume(volume)
            self.sounds[cue] = sound

    def __call__(self, cue):
        sound = self.sounds.get(cue)
        if sound is None:
            return
        if cue in (Cue.WIN, Cue.LOSS):
            pygame.mixer.stop()
        elif sound.get_num_channels() > 0:
            # still playing from an earlier frame
            return
        sound.play()

    def close(self):
        if pygame.mixer.get_init():
            pygame.mixer.quit()

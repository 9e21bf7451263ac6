# selection.py

from config import (
    MENU_SELECT_TIME_REQUIRED,
    MIN_TOTAL_WEIGHT,
    SELECT_CENTER_RADIUS,
    SELECT_LEFT_THRESHOLD,
    SELECT_RIGHT_THRESHOLD,
)
from session import Cue, Zone


def zone_for(sample,
             left=SELECT_LEFT_THRESHOLD,
             right=SELECT_RIGHT_THRESHOLD,
             center=SELECT_CENTER_RADIUS):
    """Classifies a balance sample into a left/center/right lean, or None."""
    if sample is None or sample.total_weight <= MIN_TOTAL_WEIGHT:
        return None
    if sample.x_cob < left:
        return Zone.LEFT
    if abs(sample.x_cob) < center:
        return Zone.CENTER
    if sample.x_cob > right:
        return Zone.RIGHT
    return None


class SelectionDebouncer:
    """
    Picks one of three options after the player leans towards it long enough.

    `choices` maps each Zone to the value committed for it. `update` returns
    that value on the frame the dwell completes and None otherwise.
    """

    def __init__(self, choices, hold_time=MENU_SELECT_TIME_REQUIRED):
        self.choices = dict(choices)
        self.hold_time = hold_time
        self.reset()

    def reset(self):
        self.candidate = None
        self.dwell_time = 0.0

    def update(self, sample, dt, session=None):
        zone = zone_for(sample)
        if zone != self.candidate:
            self.candidate = zone
            self.dwell_time = 0.0
        if self.candidate is None:
            return None

        self.dwell_time += dt
        if self.dwell_time < self.hold_time:
            return None

        self.dwell_time = 0.0
        if session is not None:
            session.emit(Cue.SELECTION_CONFIRMED)
        return self.choices[self.candidate]

    @property
    def candidate_value(self):
        if self.candidate is None:
            return None
        return self.choices[self.candidate]

    @property
    def progress(self):
        return min(self.dwell_time / self.hold_time, 1.0)

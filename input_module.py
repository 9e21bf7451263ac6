# input_module.py

import logging
import select
from collections import namedtuple

from evdev import InputDevice, ecodes, list_devices

from config import (
    BOARD_DEVICE,
    BOARD_DEVICE_NAME,
    DEAD_ZONE,
    MIN_TOTAL_WEIGHT,
    POLL_TIMEOUT_MS,
    POLL_TIMEOUT_THRESHOLD,
)

logger = logging.getLogger(__name__)

BalanceSample = namedtuple('BalanceSample', ['x_cob', 'y_cob', 'total_weight'])

# hid-wiimote reports the four load cells on the hat axes.
CELL_CODES = {
    ecodes.ABS_HAT0X: 'top_right',
    ecodes.ABS_HAT0Y: 'bottom_right',
    ecodes.ABS_HAT1X: 'top_left',
    ecodes.ABS_HAT1Y: 'bottom_left',
}


class SensorUnavailable(IOError):
    """The balance board is missing or stopped answering."""


class SensorTimeout(SensorUnavailable):
    """Too many polls in a row came back empty."""


def normalize_cells(top_left, top_right, bottom_left, bottom_right, dead_zone=DEAD_ZONE):
    """
    Turns four raw load-cell readings into a BalanceSample.

    Each raw reading is scaled down by 100 first. The weight is the scaled sum
    brought back up by 100; the center of balance is the right-minus-left and
    front-minus-back imbalance, also times 100. Readings within the dead zone
    snap to zero. Below the minimum weight nobody is standing on the board and
    the center of balance is reported as zero.
    """
    tl, tr = top_left / 100.0, top_right / 100.0
    bl, br = bottom_left / 100.0, bottom_right / 100.0
    total_weight = (tl + tr + bl + br) * 100.0
    if total_weight <= MIN_TOTAL_WEIGHT:
        return BalanceSample(0.0, 0.0, total_weight)

    x_cob = (tr + br - tl - bl) * 100.0
    y_cob = (tl + tr - bl - br) * 100.0
    if abs(x_cob) < dead_zone:
        x_cob = 0.0
    if abs(y_cob) < dead_zone:
        y_cob = 0.0
    return BalanceSample(x_cob, y_cob, total_weight)


def trusted_cob(sample):
    """Returns the sample's center of balance, or (0, 0) when it cannot be trusted."""
    if sample is None or sample.total_weight <= MIN_TOTAL_WEIGHT:
        return 0.0, 0.0
    return sample.x_cob, sample.y_cob


class BalanceBoardInput:
    def __init__(self, device_path=BOARD_DEVICE, poll_timeout=POLL_TIMEOUT_MS / 1000.0,
                 timeout_threshold=POLL_TIMEOUT_THRESHOLD):
        self.device_path = device_path
        self.poll_timeout = poll_timeout
        self.timeout_threshold = timeout_threshold
        self.device = None
        self.empty_polls = 0
        self.cells = dict.fromkeys(CELL_CODES.values(), 0)

    def find_device(self):
        if self.device_path:
            return self.device_path
        for path in list_devices():
            try:
                device = InputDevice(path)
            except OSError as e:
                logger.debug("Skipping %s: %s", path, e)
                continue
            name = device.name
            device.close()
            if name == BOARD_DEVICE_NAME:
                return path
        return None

    def connect(self):
        """Opens the balance board. Returns False when it is not there yet."""
        try:
            path = self.find_device()
            if path is None:
                logger.debug("No balance board found. Is it powered on and synced?")
                return False
            self.device = InputDevice(path)
        except OSError as e:
            logger.warning("Failed to open balance board: %s", e)
            self.device = None
            return False

        self.empty_polls = 0
        self.cells = dict.fromkeys(CELL_CODES.values(), 0)
        logger.info("Balance board connected at %s", path)
        return True

    def poll(self):
        """
        Waits up to the poll timeout for a reading.

        Returns a BalanceSample when a full report arrived and None when nothing
        did. Raises SensorUnavailable if the board is gone and SensorTimeout
        after too many empty polls in a row.
        """
        if self.device is None:
            raise SensorUnavailable("No balance board connected")

        try:
            readable, _, _ = select.select([self.device.fd], [], [], self.poll_timeout)
        except (OSError, ValueError) as e:
            self.release()
            raise SensorUnavailable(f"Poll failed: {e}") from e

        if not readable:
            self.empty_polls += 1
            if self.empty_polls >= self.timeout_threshold:
                self.release()
                raise SensorTimeout("Board timeout")
            return None

        self.empty_polls = 0
        got_report = False
        try:
            for event in self.device.read():
                if event.type == ecodes.EV_ABS and event.code in CELL_CODES:
                    self.cells[CELL_CODES[event.code]] = event.value
                elif event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    got_report = True
        except BlockingIOError:
            pass
        except OSError as e:
            self.release()
            raise SensorUnavailable(f"Read failed: {e}") from e

        if not got_report:
            return None

        cells = self.cells
        logger.debug("BB RAW: TL=%d TR=%d BL=%d BR=%d", cells['top_left'], cells['top_right'],
                     cells['bottom_left'], cells['bottom_right'])
        return normalize_cells(cells['top_left'], cells['top_right'],
                               cells['bottom_left'], cells['bottom_right'])

    def release(self):
        if self.device is not None:
            try:
                self.device.close()
            except OSError:
                pass
            self.device = None

from collections import namedtuple

import pytest
from evdev import ecodes

import input_module
from input_module import (
    BalanceBoardInput,
    BalanceSample,
    SensorTimeout,
    SensorUnavailable,
    normalize_cells,
    trusted_cob,
)

Event = namedtuple('Event', ['type', 'code', 'value'])


class FakeDevice:
    fd = 7

    def __init__(self, events=(), error=None):
        self.events = list(events)
        self.error = error
        self.closed = False

    def read(self):
        if self.error is not None:
            raise self.error
        events, self.events = self.events, []
        if not events:
            raise BlockingIOError()
        return iter(events)

    def close(self):
        self.closed = True


def board_with(monkeypatch, device, readable=True, threshold=100):
    monkeypatch.setattr(input_module.select, 'select',
                        lambda r, w, x, timeout: (list(r) if readable else [], [], []))
    board = BalanceBoardInput(device_path='/dev/input/fake', timeout_threshold=threshold)
    board.device = device
    return board


def test_even_stance_has_no_lean():
    sample = normalize_cells(1000, 1000, 1000, 1000)
    assert sample == BalanceSample(0.0, 0.0, 4000.0)


def test_lean_right_and_forward():
    right = normalize_cells(top_left=500, top_right=2000, bottom_left=500, bottom_right=2000)
    assert right.x_cob == pytest.approx(3000.0)
    assert right.y_cob == 0.0

    forward = normalize_cells(top_left=2000, top_right=2000, bottom_left=500, bottom_right=500)
    assert forward.y_cob == pytest.approx(3000.0)
    assert forward.x_cob == 0.0


def test_dead_zone_snaps_small_lean_to_zero():
    sample = normalize_cells(top_left=950, top_right=1050, bottom_left=950, bottom_right=1050)
    assert sample.x_cob == 0.0
    assert sample.total_weight == pytest.approx(4000.0)


def test_light_load_reports_no_lean():
    sample = normalize_cells(top_left=0, top_right=1500, bottom_left=0, bottom_right=400)
    assert sample.total_weight == pytest.approx(1900.0)
    assert (sample.x_cob, sample.y_cob) == (0.0, 0.0)


def test_trusted_cob():
    assert trusted_cob(None) == (0.0, 0.0)
    assert trusted_cob(BalanceSample(900.0, -500.0, 2000.0)) == (0.0, 0.0)
    assert trusted_cob(BalanceSample(900.0, -500.0, 2001.0)) == (900.0, -500.0)


def test_poll_builds_sample_on_sync_report(monkeypatch):
    device = FakeDevice([
        Event(ecodes.EV_ABS, ecodes.ABS_HAT1X, 500),
        Event(ecodes.EV_ABS, ecodes.ABS_HAT0X, 2000),
        Event(ecodes.EV_ABS, ecodes.ABS_HAT1Y, 500),
        Event(ecodes.EV_ABS, ecodes.ABS_HAT0Y, 2000),
        Event(ecodes.EV_SYN, ecodes.SYN_REPORT, 0),
    ])
    board = board_with(monkeypatch, device)

    sample = board.poll()

    assert sample.total_weight == pytest.approx(5000.0)
    assert sample.x_cob == pytest.approx(3000.0)
    assert board.empty_polls == 0


def test_poll_without_report_returns_none(monkeypatch):
    board = board_with(monkeypatch, FakeDevice([Event(ecodes.EV_ABS, ecodes.ABS_HAT0X, 10)]))
    assert board.poll() is None


def test_repeated_empty_polls_time_out(monkeypatch):
    device = FakeDevice()
    board = board_with(monkeypatch, device, readable=False, threshold=3)

    assert board.poll() is None
    assert board.poll() is None
    with pytest.raises(SensorTimeout):
        board.poll()
    assert device.closed
    assert board.device is None


def test_read_error_means_board_is_gone(monkeypatch):
    device = FakeDevice(error=OSError(19, 'No such device'))
    board = board_with(monkeypatch, device)
    with pytest.raises(SensorUnavailable):
        board.poll()
    assert device.closed


def test_poll_before_connect_raises():
    with pytest.raises(SensorUnavailable):
        BalanceBoardInput().poll()


def test_connect_without_board(monkeypatch):
    monkeypatch.setattr(input_module, 'list_devices', lambda: [])
    board = BalanceBoardInput(device_path=None)
    assert board.connect() is False
    assert board.device is None


class NamedDevice:
    def __init__(self, name):
        self.name = name
        self.fd = 9

    def close(self):
        pass


def test_connect_skips_unreadable_devices(monkeypatch):
    def open_device(path):
        if path == '/dev/input/event0':
            raise PermissionError(13, 'Permission denied')
        if path == '/dev/input/event1':
            return NamedDevice('AT Translated Set 2 keyboard')
        return NamedDevice('Nintendo Wii Remote Balance Board')

    monkeypatch.setattr(input_module, 'list_devices',
                        lambda: ['/dev/input/event0', '/dev/input/event1', '/dev/input/event2'])
    monkeypatch.setattr(input_module, 'InputDevice', open_device)
    board = BalanceBoardInput(device_path=None)

    assert board.find_device() == '/dev/input/event2'
    assert board.connect() is True
    assert board.device.name == 'Nintendo Wii Remote Balance Board'

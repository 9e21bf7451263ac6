import random
from collections import deque

import pytest

from input_module import BalanceSample
from score_store import ScoreStore
from session import Session

STANDING = BalanceSample(0.0, 0.0, 2500.0)


class FakeSensor:
    def __init__(self, sample=STANDING, connect_result=True):
        self.sample = sample
        self.queue = deque()
        self.connect_result = connect_result
        self.error = None
        self.connects = 0
        self.releases = 0

    def connect(self):
        self.connects += 1
        return self.connect_result

    def poll(self):
        if self.error is not None:
            raise self.error
        if self.queue:
            return self.queue.popleft()
        return self.sample

    def release(self):
        self.releases += 1


@pytest.fixture
def session():
    return Session(rng=random.Random(1234))


@pytest.fixture
def sensor():
    return FakeSensor()


@pytest.fixture
def store(tmp_path):
    return ScoreStore(data_dir=str(tmp_path))

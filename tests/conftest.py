from collections import deque

import numpy as np
import pytest


class FakeKeyboard:
    """
    Клавиатура по сценарию: каждый вызов handle_input забирает одну пачку
    байт целиком, следующая пачка становится доступна только после этого.
    """

    def __init__(self, *batches):
        self.batches = deque(deque(b) for b in batches)
        self.current = self.batches.popleft() if self.batches else deque()
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True

    def kbhit(self):
        if self.current:
            return True
        self.current = self.batches.popleft() if self.batches else deque()
        return False

    def getch(self):
        return self.current.popleft()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def fake_keyboard():
    return FakeKeyboard

"""
Чтение клавиатуры без блокировки.

Клавиатура отдаёт байты (kbhit / getch). Расширенные клавиши (стрелки, F1..F12)
приходят двумя байтами: префикс 0 или 224 и скан-код, итоговый код = 256 + скан-код.
В POSIX-терминале стрелки приходят как ESC [ A, их приводим к тому же виду.
"""
import os
import sys
import select
from collections import deque
from config import (
    KEY_ESCAPE, KEY_W, KEY_A, KEY_S, KEY_D,
    KEY_UP, KEY_LEFT, KEY_DOWN, KEY_RIGHT,
    EXTENDED_PREFIXES, EXTENDED_OFFSET,
    UP, DOWN, LEFT, RIGHT, NO_DIRECTION,
    PAUSED, RUNNING, OVER,
)

# Клавиша -> направление (строчные и заглавные WASD, стрелки)
KEY_DIRECTIONS = {
    KEY_UP: UP, KEY_W: UP, ord('W'): UP,
    KEY_LEFT: LEFT, KEY_A: LEFT, ord('A'): LEFT,
    KEY_DOWN: DOWN, KEY_S: DOWN, ord('S'): DOWN,
    KEY_RIGHT: RIGHT, KEY_D: RIGHT, ord('D'): RIGHT,
}


class GameInput:
    """Общее состояние ввода: куда ползём, пауза, идёт ли игра"""

    def __init__(self):
        self.direction = NO_DIRECTION
        self.paused = True
        self.running = True

    @property
    def phase(self):
        if not self.running:
            return OVER
        return PAUSED if self.paused else RUNNING

    def stop(self):
        """Конец игры (больше не возвращаемся)"""
        self.running = False


def get_key(keyboard):
    """Одна клавиша; для расширенных дочитываем второй байт"""
    c = keyboard.getch()
    if c in EXTENDED_PREFIXES:
        c = EXTENDED_OFFSET + keyboard.getch()
    return c


def handle_input(game_input, keyboard):
    """
    Разбираем все нажатия, накопившиеся с прошлого хода.
    Каждая клавиша перезаписывает состояние, так что побеждает последняя.
    """
    while keyboard.kbhit():
        key = get_key(keyboard)

        if key == KEY_ESCAPE:
            game_input.paused = True
        elif key in KEY_DIRECTIONS:
            game_input.paused = False
            game_input.direction = KEY_DIRECTIONS[key]
        # остальные клавиши игнорируем


class PosixKeyboard:
    """Терминал Linux/macOS: cbreak-режим на время игры"""

    # Последний байт ESC-последовательности стрелки -> скан-код
    ARROWS = {ord('A'): 72, ord('B'): 80, ord('C'): 77, ord('D'): 75}
    ARROW_PREFIX = 224

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.fd = self.stream.fileno()
        self.pending = deque()
        self.carry = b''  # недочитанная ESC-последовательность
        self.old_settings = None

    def __enter__(self):
        import termios
        import tty
        if os.isatty(self.fd):
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.old_settings is not None:
            import termios
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def kbhit(self):
        if not self.pending:
            if select.select([self.fd], [], [], 0)[0]:
                self._fill()
            elif self.carry:
                # Продолжение так и не пришло
                self._flush()
        return bool(self.pending)

    def getch(self):
        # Только после kbhit: префикс 224 всегда лежит в очереди вместе со скан-кодом
        return self.pending.popleft()

    def _fill(self):
        data = os.read(self.fd, 64)
        if not data:
            self._flush()
            return
        codes, self.carry = self.translate(self.carry + data)
        self.pending.extend(codes)

    def _flush(self):
        # Одиночный ESC без продолжения - это клавиша Escape
        if self.carry == bytes([KEY_ESCAPE]):
            self.pending.append(KEY_ESCAPE)
        self.carry = b''

    @classmethod
    def translate(cls, data):
        """
        Байты терминала -> (коды в формате get_key, недочитанный хвост).

        Хвост - начатая ESC-последовательность в конце data, её дочитываем
        при следующем чтении. Сырые байты 0 и 224 выбрасываем, иначе
        get_key примет их за префикс и будет ждать второй байт.
        """
        codes = []
        i = 0
        while i < len(data):
            b = data[i]
            if b == KEY_ESCAPE:
                if i + 1 == len(data):
                    return codes, data[i:]
                if data[i + 1] in (ord('['), ord('O')):
                    # ESC [ X: ищем конечный байт последовательности
                    j = i + 2
                    while j < len(data) and not 0x40 <= data[j] <= 0x7E:
                        j += 1
                    if j == len(data):
                        return codes, data[i:]
                    if j == i + 2 and data[j] in cls.ARROWS:
                        codes.extend([cls.ARROW_PREFIX, cls.ARROWS[data[j]]])
                    # прочие последовательности (F-клавиши и т.п.) пропускаем
                    i = j + 1
                    continue
            if b not in EXTENDED_PREFIXES:
                codes.append(b)
            i += 1
        return codes, b''


class WindowsKeyboard:
    """Консоль Windows: msvcrt сам отдаёт префикс 0/224"""

    def __init__(self):
        import msvcrt
        self._msvcrt = msvcrt

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return None

    def kbhit(self):
        return bool(self._msvcrt.kbhit())

    def getch(self):
        return ord(self._msvcrt.getch())


def open_keyboard():
    """Клавиатура для текущей платформы"""
    if os.name == 'nt':
        return WindowsKeyboard()
    return PosixKeyboard()

"""
Змейка в терминале.

Использование:
    python play.py

Управление: WASD или стрелки, ESC - пауза.
"""
import sys
import time
import numpy as np
from env import SnakeEnv, clamp_board_size
from keys import GameInput, handle_input, open_keyboard
from render import to_begin_of_screen, print_board, print_banner, print_game_over
from config import (
    BOARD_ROWS, BOARD_COLS, BASE_TICK_MS, MIN_TICK_MS, SPEED_STEP_MS, PAUSE_POLL_MS
)


def tick_interval(score):
    """Пауза между ходами в мс: чем больше очков, тем быстрее"""
    return max(MIN_TICK_MS, BASE_TICK_MS - score * SPEED_STEP_MS)


class SnakePlayer:
    def __init__(self, board_size=(BOARD_ROWS, BOARD_COLS), rng=None, keyboard=None,
                 sleep=None, out=None):
        self.board_size = clamp_board_size(*board_size)
        # Сид от времени, если генератор не передали
        self.rng = rng if rng is not None else np.random.default_rng(time.time_ns())
        self.keyboard = keyboard
        self.sleep = sleep or time.sleep
        self.out = out or sys.stdout

        self.input = GameInput()
        self.env = None

    def draw(self):
        to_begin_of_screen(self.out)
        print_board(self.env.grid, self.env.get_score(), self.out)

    def play(self):
        """Игровой цикл до столкновения. Возвращает итоговый счёт."""
        print_banner(self.board_size, self.out)

        self.env = SnakeEnv(self.board_size, self.rng)
        self.draw()

        while self.input.running:
            handle_input(self.input, self.keyboard)

            if self.input.paused:
                self.sleep(PAUSE_POLL_MS / 1000)
                continue

            if not self.env.step(self.input.direction):
                self.input.stop()
                print_game_over(self.env.get_score(), self.out)
                break

            self.draw()
            self.sleep(tick_interval(self.env.get_score()) / 1000)

        return self.env.get_score()


def main():
    keyboard = open_keyboard()
    player = SnakePlayer(keyboard=keyboard)

    try:
        with keyboard:
            player.play()
    except KeyboardInterrupt:
        # Ctrl+C: терминал уже восстановлен
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())

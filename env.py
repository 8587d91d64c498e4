"""
Состояние игры: поле, змейка, еда, очки.

Матрица поля (numpy, int8):
  0 = пусто
  1 = тело змейки
  2 = еда

Координаты везде (строка, столбец), голова змейки - snake[0].
"""
import numpy as np
from config import BOARD_ROWS, BOARD_COLS, MIN_BOARD_SIZE, EMPTY, BODY, FOOD


def clamp_board_size(rows, cols):
    """Поле не меньше MIN_BOARD_SIZE x MIN_BOARD_SIZE"""
    return max(MIN_BOARD_SIZE, int(rows)), max(MIN_BOARD_SIZE, int(cols))


def in_bounds(pos, board_size):
    rows, cols = board_size
    return 0 <= pos[0] < rows and 0 <= pos[1] < cols


def build_grid(board_size, snake, food):
    """
    Свежая матрица поля: тело змейки + еда (если она на поле).
    Исходные данные не меняются.
    """
    grid = np.zeros(board_size, dtype=np.int8)

    for r, c in snake:
        grid[r, c] = BODY

    if food is not None and in_bounds(food, board_size):
        grid[food[0], food[1]] = FOOD

    return grid


def generate_food(grid, board_size, rng):
    """
    Случайная пустая клетка для еды.

    Берём случайную клетку, пока не попадём в пустую, но не больше
    rows * cols попыток. Если не нашли - места нет, возвращаем None.
    """
    rows, cols = board_size
    for _ in range(rows * cols):
        pos = (int(rng.integers(rows)), int(rng.integers(cols)))
        if grid[pos[0], pos[1]] == EMPTY:
            return pos
    return None


class SnakeEnv:
    """Змейка на поле фиксированного размера"""

    def __init__(self, board_size=None, rng=None, snake=None, food=None, score=0):
        self.board_size = clamp_board_size(*(board_size or (BOARD_ROWS, BOARD_COLS)))
        self.rng = rng if rng is not None else np.random.default_rng()

        if snake is None:
            self.reset()
        else:
            # Готовое состояние (для тестов)
            self.snake = [tuple(p) for p in snake]
            self.food = food
            self.score = score
            self.done = False
            self.grid = build_grid(self.board_size, self.snake, self.food)

    def reset(self):
        """Новая игра: голова и еда в случайных клетках"""
        rows, cols = self.board_size
        self.snake = [(int(self.rng.integers(rows)), int(self.rng.integers(cols)))]
        self.score = 0
        self.done = False

        grid = build_grid(self.board_size, self.snake, None)
        self.food = generate_food(grid, self.board_size, self.rng)
        self.grid = build_grid(self.board_size, self.snake, self.food)

    def step(self, direction):
        """
        Один ход в направлении direction.

        Столкновение проверяется по матрице с прошлого хода (self.grid),
        а не по текущему телу. True - ход сделан, False - столкновение
        (змейка, еда и очки остаются как были).
        """
        if self.done:
            return False

        head_r, head_c = self.snake[0]
        new_head = (head_r + direction[0], head_c + direction[1])

        # Стена
        if not in_bounds(new_head, self.board_size):
            self.done = True
            return False

        cell = self.grid[new_head[0], new_head[1]]

        if cell == FOOD:
            # Растём: хвост не убираем
            self.score += 1
            self.food = generate_food(self.grid, self.board_size, self.rng)
            self.snake.insert(0, new_head)
        elif cell == EMPTY:
            self.snake.pop()
            self.snake.insert(0, new_head)
        else:
            # Тело
            self.done = True
            return False

        self.grid = build_grid(self.board_size, self.snake, self.food)
        return True

    def get_score(self):
        return self.score


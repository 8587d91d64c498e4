"""
Вывод игры в терминал: рамка с полем, счёт, Game Over.
"""
import sys
from config import (
    EMPTY, BODY, FOOD, EMPTY_CHAR, SNAKE_CHAR, FOOD_CHAR, BORDER_H, BORDER_V, BANNER
)

CELL_CHARS = {EMPTY: EMPTY_CHAR, BODY: SNAKE_CHAR, FOOD: FOOD_CHAR}


def to_begin_of_screen(file=None):
    """Курсор в начало экрана (ANSI), старый кадр затирается новым"""
    file = file or sys.stdout
    print(file=file)
    file.write("\033[H\033[3J")
    file.flush()


def format_board(grid, score):
    _, cols = grid.shape
    border = BORDER_H * (cols + 2)

    lines = [border]
    for row in grid:
        lines.append(BORDER_V + ''.join(CELL_CHARS[int(c)] for c in row) + BORDER_V)
    lines.append(border)
    lines.append(f"Score: {score}")
    lines.append("")
    return '\n'.join(lines) + '\n'


def print_board(grid, score, file=None):
    file = file or sys.stdout
    print(format_board(grid, score), end="", file=file)


def print_banner(board_size, file=None):
    """Подсказка по управлению, один раз перед игрой"""
    file = file or sys.stdout
    indent = ' ' * (board_size[1] + 3)
    for line in BANNER:
        print(indent + line, file=file)
    print(file=file)


def print_game_over(score, file=None):
    file = file or sys.stdout
    print(file=file)
    print("Game Over!", file=file)
    print(f"Final Score: {score}", file=file)
    print(file=file)

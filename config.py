# Настройки игры
# Поле 7x11 (строки x столбцы), меньше 3x3 не бывает
BOARD_ROWS = 7
BOARD_COLS = 11
MIN_BOARD_SIZE = 3

# Коды клеток в матрице поля
EMPTY = 0
BODY = 1
FOOD = 2

# Символы для вывода в терминал
EMPTY_CHAR = ' '
SNAKE_CHAR = '*'
FOOD_CHAR = '@'
BORDER_H = '-'
BORDER_V = '|'

# Направления (строка, столбец)
UP = (-1, 0)
DOWN = (1, 0)
LEFT = (0, -1)
RIGHT = (0, 1)
NO_DIRECTION = (0, 0)  # до первого нажатия

# Скорость (мс на ход), ускоряется с каждым очком
BASE_TICK_MS = 400
MIN_TICK_MS = 200
SPEED_STEP_MS = 5
PAUSE_POLL_MS = 50

# Коды клавиш
KEY_ESCAPE = 27
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
EXTENDED_PREFIXES = (0, 224)
EXTENDED_OFFSET = 256
KEY_UP = 328      # 256 + 72
KEY_LEFT = 331    # 256 + 75
KEY_RIGHT = 333   # 256 + 77
KEY_DOWN = 336    # 256 + 80

# Фазы игры
PAUSED = 'paused'
RUNNING = 'running'
OVER = 'over'

# Подсказка перед первым кадром
BANNER = (
    "Hit a key -- ESC key pause",
    "Move -- WASD",
)

import random
import logging
import numpy as np
from config import *
from utils import *

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    One episode of grid snake.

    step() never leaves the game dead: a collision resets the world before
    returning (-1, True), so the caller never calls reset() after a terminal
    step. Counting deaths is up to the caller.
    """

    def __init__(self, grid_size=GRID_SIZE, start_length=START_LENGTH,
                 fruit_attempts=FRUIT_PLACEMENT_ATTEMPTS, rng=None):
        if grid_size < 3:
            raise ValueError(f"grid_size must be at least 3, got {grid_size}")
        if start_length < 1:
            raise ValueError(f"start_length must be at least 1, got {start_length}")
        if fruit_attempts < 1:
            raise ValueError(f"fruit_attempts must be at least 1, got {fruit_attempts}")
        self.grid_size = grid_size
        self.start_length = start_length
        self.fruit_attempts = fruit_attempts
        self.rng = rng if rng is not None else random
        self.reset()

    def reset(self):
        self.head = (self.grid_size // 2, self.grid_size // 2)
        self.direction = RIGHT
        self.snake = [self.head]  # tail..head
        self.target_length = self.start_length
        self.place_fruit()
        self.alive = True
        self.steps_since_fruit = 0
        return self.get_state()

    @property
    def score(self):
        return self.target_length - self.start_length

    def place_fruit(self):
        # can land on the snake when the board is nearly full
        for _ in range(self.fruit_attempts):
            fruit = (self.rng.randrange(self.grid_size), self.rng.randrange(self.grid_size))
            if fruit not in self.snake:
                self.fruit = fruit
                return fruit
        logger.warning(f"No free cell found in {self.fruit_attempts} tries, fruit falls back to {FRUIT_FALLBACK}")
        self.fruit = FRUIT_FALLBACK
        return self.fruit

    def in_bounds(self, cell):
        return 0 <= cell[0] < self.grid_size and 0 <= cell[1] < self.grid_size

    def is_danger(self, cell):
        return not self.in_bounds(cell) or cell in self.snake

    def step(self, action):
        self.direction = rotate(self.direction, action)
        new_head = rel_to_abs(self.head, self.direction)

        if not self.in_bounds(new_head):
            return self._die('wall')

        # the tail only moves off when nothing grows this step
        will_grow = new_head == self.fruit
        tail_vacates = not will_grow and len(self.snake) >= self.target_length
        body = self.snake[1:] if tail_vacates else self.snake
        if new_head in body:
            return self._die('self')

        self.snake.append(new_head)
        self.head = new_head

        if will_grow:
            self.target_length += 1
            self.place_fruit()
            self.steps_since_fruit = 0
            return FRUIT_REWARD, False

        while len(self.snake) > self.target_length:
            self.snake.pop(0)
        self.steps_since_fruit += 1
        return MOVE_REWARD, False

    def _die(self, cause):
        logger.debug(f"Death by {cause} collision at {self.head} heading {DIRECTION_NAMES[self.direction]}, length={len(self.snake)}")
        self.alive = False
        self.reset()
        return DEATH_REWARD, True

    def get_state(self):
        # danger ahead/left/right, heading one-hot, fruit left/right/up/down
        head = self.head
        dangers = [int(self.is_danger(rel_to_abs(head, offset))) for offset in relative_offsets(self.direction)]
        heading = [int(self.direction == d) for d in DIRECTIONS]

        fx = unit(self.fruit[0] - head[0])
        fy = unit(self.fruit[1] - head[1])
        fruit = [int(fx < 0), int(fx > 0), int(fy < 0), int(fy > 0)]

        return np.array(dangers + heading + fruit, dtype=np.int8)

    def get_render_data(self):
        return self.snake, self.fruit

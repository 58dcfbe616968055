import numpy as np

UP = (0, -1)
RIGHT = (1, 0)
DOWN = (0, 1)
LEFT = (-1, 0)

# order matters for left/right rotation
DIRECTIONS = [UP, RIGHT, DOWN, LEFT]
DIRECTION_NAMES = {UP: 'up', RIGHT: 'right', DOWN: 'down', LEFT: 'left'}

# relative actions
STRAIGHT = 0
TURN_LEFT = 1
TURN_RIGHT = 2
ACTIONS = [STRAIGHT, TURN_LEFT, TURN_RIGHT]
ACTION_NAMES = ['STRAIGHT', 'LEFT', 'RIGHT']
ROTATION = {STRAIGHT: 0, TURN_LEFT: -1, TURN_RIGHT: 1}

# danger ahead/left/right, heading one-hot, fruit left/right/up/down
STATE_SIZE = 11


def unit(x):
    if x == 0:
        return 0
    if x < 0:
        return -1
    return 1


def rel_to_abs(head, rel_direction):
    return tuple(h + d for h, d in zip(head, rel_direction))


def check_action(action):
    # bools and floats hash equal to ints, so check the type first
    if isinstance(action, bool) or not isinstance(action, (int, np.integer)) or action not in ROTATION:
        raise ValueError(f"Invalid action {action!r}, expected one of {ACTIONS}")
    return action


def rotate(direction, action):
    idx = DIRECTIONS.index(direction)
    return DIRECTIONS[(idx + ROTATION[check_action(action)]) % 4]


def is_reversal(direction, new_direction):
    return rel_to_abs(direction, new_direction) == (0, 0)


def relative_offsets(direction):
    """Offsets for the cells ahead, left and right of a heading."""
    return direction, rotate(direction, TURN_LEFT), rotate(direction, TURN_RIGHT)

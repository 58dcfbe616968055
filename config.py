import json

# Grid
GRID_SIZE = 20  # tiles per side
START_LENGTH = 3
FRUIT_PLACEMENT_ATTEMPTS = 1000
FRUIT_FALLBACK = (0, 0)

# Rewards
FRUIT_REWARD = 1
DEATH_REWARD = -1
MOVE_REWARD = 0

# Q-learning parameters
ALPHA = 0.1  # learning rate
GAMMA = 0.9  # discount factor
EPSILON = 1.0  # exploration start
EPSILON_MIN = 0.05
EPSILON_DECAY = 0.9995  # applied once per update

# Training speed
LOOPS_PER_TICK = 1200  # steps per tick while training, no rendering
TICKS = 100
PRINT_EVERY = 10  # ticks

# Visual run
VISUAL_FPS = 12
PLAY_FPS = 10

# Screen dimensions
WIDTH = 400  # window side, rounded down to whole cells

# Colors
BLACK = (0, 0, 0)
RED = (255, 51, 51)
GREEN = (88, 214, 141)

GAME_KEYS = {'grid_size', 'start_length', 'fruit_attempts'}
AGENT_KEYS = {'alpha', 'gamma', 'epsilon', 'epsilon_min', 'epsilon_decay'}
DRIVER_KEYS = {'ticks', 'loops_per_tick', 'print_every', 'fps'}


def load_config(path):
    """
    Read hyperparameter overrides from a JSON file.

    Returns (game_kwargs, agent_kwargs, driver_kwargs), each holding only the
    keys present in the file.
    """
    with open(path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must hold a JSON object")

    unknown = set(data) - GAME_KEYS - AGENT_KEYS - DRIVER_KEYS
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {sorted(unknown)}")

    game_kwargs = {k: v for k, v in data.items() if k in GAME_KEYS}
    agent_kwargs = {k: v for k, v in data.items() if k in AGENT_KEYS}
    driver_kwargs = {k: v for k, v in data.items() if k in DRIVER_KEYS}
    return game_kwargs, agent_kwargs, driver_kwargs

import os
import pickle
import random
import logging
from config import *
from utils import ACTIONS, STATE_SIZE, check_action

logger = logging.getLogger(__name__)


def initialize_q_table():
    return {}


def state_key(state):
    if len(state) != STATE_SIZE:
        raise ValueError(f"State vector must have {STATE_SIZE} features, got {len(state)}")
    if any(x not in (0, 1) for x in state):
        raise ValueError(f"State features must be 0 or 1, got {list(state)}")
    return tuple(int(x) for x in state)


class QLearningAgent:
    """
    Tabular Q-learning over the 11-feature snake state.

    The table maps a state key to [q_straight, q_left, q_right], created at
    zero on first visit. Epsilon decays once per update() call, so the decay
    speed follows step throughput rather than episode count.
    """

    def __init__(self, alpha=ALPHA, gamma=GAMMA, epsilon=EPSILON, epsilon_min=EPSILON_MIN,
                 epsilon_decay=EPSILON_DECAY, rng=None):
        if not 0 < alpha <= 1:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        if not 0 <= gamma <= 1:
            raise ValueError(f"gamma must be in [0, 1], got {gamma}")
        if not 0 <= epsilon_min <= epsilon <= 1:
            raise ValueError(f"need 0 <= epsilon_min <= epsilon <= 1, got {epsilon_min}, {epsilon}")
        if not 0 < epsilon_decay <= 1:
            raise ValueError(f"epsilon_decay must be in (0, 1], got {epsilon_decay}")
        self.alpha = alpha
        self.gamma = gamma
        self.epsilon_start = epsilon
        self.epsilon_min = epsilon_min
        self.epsilon_decay = epsilon_decay
        self.rng = rng if rng is not None else random
        self.reset()

    def reset(self):
        self.q_table = initialize_q_table()
        self.epsilon = self.epsilon_start
        self.updates = 0

    def ensure_entry(self, key):
        if key not in self.q_table:
            self.q_table[key] = [0.0 for _ in ACTIONS]
        return self.q_table[key]

    def greedy_action(self, state):
        values = self.ensure_entry(state_key(state))
        best = max(values)
        candidates = [a for a in ACTIONS if values[a] == best]
        return self.rng.choice(candidates)

    def choose_action(self, state):
        key = state_key(state)
        self.ensure_entry(key)
        if self.rng.random() < self.epsilon:
            return self.rng.choice(ACTIONS)  # explore
        return self.greedy_action(state)  # exploit

    def update(self, state, action, reward, next_state):
        check_action(action)
        key, next_key = state_key(state), state_key(next_state)
        values = self.ensure_entry(key)
        next_values = self.ensure_entry(next_key)

        best_next = max(next_values)
        target = reward + self.gamma * best_next
        values[action] += self.alpha * (target - values[action])

        self.epsilon = max(self.epsilon_min, self.epsilon * self.epsilon_decay)
        self.updates += 1
        return values[action]

    def save(self, path):
        directory = os.path.dirname(path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        data = {
            'q_table': self.q_table,
            'epsilon': self.epsilon,
            'updates': self.updates,
        }
        with open(path, 'wb') as f:
            pickle.dump(data, f)
        logger.info(f"Saved Q-table with {len(self.q_table)} states to {path}")

    def load(self, path):
        with open(path, 'rb') as f:
            data = pickle.load(f)
        if not isinstance(data, dict) or not {'q_table', 'epsilon', 'updates'} <= set(data):
            raise ValueError(f"{path} is not a Q-table checkpoint")
        self.q_table = data['q_table']
        self.epsilon = data['epsilon']
        self.updates = data['updates']
        logger.info(f"Loaded Q-table with {len(self.q_table)} states from {path}, epsilon={self.epsilon:.4f}")

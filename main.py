import argparse
import logging
import random
import time
import pygame
from snake_game import SnakeGame
from qlearning import QLearningAgent
from config import *
from utils import *

log_format = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


class TrainingStats:
    """Counters derived from the (reward, done) signals of each step."""

    def __init__(self):
        self.wins = 0
        self.deaths = 0
        self.episodes = 0  # finished training ticks
        self.steps = 0

    def record(self, reward, done):
        self.steps += 1
        if reward > 0:
            self.wins += 1
        if done:
            self.deaths += 1

    def __repr__(self):
        return f"<TrainingStats wins={self.wins} deaths={self.deaths} episodes={self.episodes} steps={self.steps}>"


def run_step(game, agent, stats=None):
    state = game.get_state()
    action = agent.choose_action(state)
    reward, done = game.step(action)
    next_state = game.get_state()

    agent.update(state, action, reward, next_state)

    if stats is not None:
        stats.record(reward, done)
    return action, reward, done


def train_snake(game=None, agent=None, ticks=TICKS, loops_per_tick=LOOPS_PER_TICK, stats=None, print_every=PRINT_EVERY):
    game = game if game is not None else SnakeGame()
    agent = agent if agent is not None else QLearningAgent()
    stats = stats if stats is not None else TrainingStats()

    last_print_time = time.time()
    step_counter = 0

    for tick in range(ticks):
        for _ in range(loops_per_tick):
            run_step(game, agent, stats)
        stats.episodes += 1
        step_counter += loops_per_tick

        if print_every and (tick + 1) % print_every == 0:
            now = time.time()
            time_passed = max(now - last_print_time, 1e-9)
            last_print_time = now
            print(f"Episode {tick + 1}/{ticks}, steps/s={step_counter/time_passed:8.0f}")
            print(f"Wins={stats.wins} deaths={stats.deaths} states={len(agent.q_table)} length={len(game.snake)}")
            print(f"Epsilon: {agent.epsilon:1.4f}")
            step_counter = 0

    return game, agent, stats


def watch_snake(game=None, agent=None, fps=VISUAL_FPS, max_frames=None, stats=None):
    # imported here so training never opens a window
    from renderer import Renderer, KEY_TO_DIRECTION

    game = game if game is not None else SnakeGame()
    agent = agent if agent is not None else QLearningAgent()
    stats = stats if stats is not None else TrainingStats()

    renderer = Renderer(game.grid_size)
    clock = pygame.time.Clock()

    frames = 0
    running = True
    while running and (max_frames is None or frames < max_frames):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    agent.reset()
                    print("Agent reset")
                elif event.key in KEY_TO_DIRECTION:
                    game.direction = KEY_TO_DIRECTION[event.key]
        if not running:
            break

        action, reward, done = run_step(game, agent, stats)
        if done:
            print(f"Death #{stats.deaths}, wins so far: {stats.wins}")

        snake, fruit = game.get_render_data()
        renderer.render(snake, fruit)
        renderer.set_caption(f"Snake Q-learning | wins {stats.wins} deaths {stats.deaths} episodes {stats.episodes} | {ACTION_NAMES[action]}")

        frames += 1
        clock.tick(fps)

    renderer.close()
    return game, agent, stats


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, help="Path to a JSON file with hyperparameter overrides")
    common.add_argument("--load", type=str, help="Q-table checkpoint to start from")
    common.add_argument("--save", type=str, help="Where to write the Q-table when done")
    common.add_argument("--fresh", action="store_true", help="Ignore --load and start from an empty table")
    common.add_argument("--seed", type=int, help="Seed for the game and agent random generators")
    common.add_argument("--log-level", type=str, default="INFO", help="Logging level")

    parser = argparse.ArgumentParser(description="Tabular Q-learning snake")
    commands = parser.add_subparsers(dest="command", required=True)

    train = commands.add_parser("train", parents=[common], help="Fast training, no rendering")
    train.add_argument("--ticks", type=int, default=None, help="Number of training ticks")
    train.add_argument("--loops-per-tick", type=int, default=None, help="Steps per training tick")
    train.add_argument("--print-every", type=int, default=None, help="Ticks between progress prints")

    watch = commands.add_parser("watch", parents=[common], help="Render every step while learning")
    watch.add_argument("--fps", type=int, default=None, help="Frames per second")
    watch.add_argument("--frames", type=int, default=None, help="Stop after this many frames")

    commands.add_parser("play", help="Play with the arrow keys")
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)

    if args.command == "play":
        from snake_game_player import play_snake_game
        play_snake_game()
        return None

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format=log_format)

    game_kwargs, agent_kwargs, driver_kwargs = ({}, {}, {})
    if args.config:
        game_kwargs, agent_kwargs, driver_kwargs = load_config(args.config)

    if args.seed is not None:
        game_kwargs['rng'] = random.Random(args.seed)
        agent_kwargs['rng'] = random.Random(args.seed + 1)

    game = SnakeGame(**game_kwargs)
    agent = QLearningAgent(**agent_kwargs)
    if args.load and not args.fresh:
        agent.load(args.load)

    if args.command == "train":
        game, agent, stats = train_snake(
            game, agent,
            ticks=pick(args.ticks, driver_kwargs, 'ticks', TICKS),
            loops_per_tick=pick(args.loops_per_tick, driver_kwargs, 'loops_per_tick', LOOPS_PER_TICK),
            print_every=pick(args.print_every, driver_kwargs, 'print_every', PRINT_EVERY),
        )
    else:
        game, agent, stats = watch_snake(
            game, agent,
            fps=pick(args.fps, driver_kwargs, 'fps', VISUAL_FPS),
            max_frames=args.frames,
        )

    print(f"Done: wins={stats.wins} deaths={stats.deaths} episodes={stats.episodes} states={len(agent.q_table)}")

    if args.save:
        agent.save(args.save)
    return stats


def pick(flag, overrides, key, default):
    if flag is not None:
        return flag
    return overrides.get(key, default)


if __name__ == "__main__":
    cli()

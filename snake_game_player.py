import pygame
from snake_game import SnakeGame
from renderer import Renderer, KEY_TO_DIRECTION
from config import *
from utils import *


def play_snake_game(fps=PLAY_FPS):
    game = SnakeGame()
    renderer = Renderer(game.grid_size, caption='Snake Game - Player')
    clock = pygame.time.Clock()

    while True:
        frame_direction = game.direction
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                renderer.close()
                return
            elif event.type == pygame.KEYDOWN and event.key in KEY_TO_DIRECTION:
                new_direction = KEY_TO_DIRECTION[event.key]
                # no reversing into the neck, even after an earlier key this frame
                if not is_reversal(frame_direction, new_direction):
                    game.direction = new_direction

        score = game.score
        reward, done = game.step(STRAIGHT)
        if done:
            print(f"Game Over! Score: {score}")
        elif reward > 0:
            print(f"Score: {game.score}")

        snake, fruit = game.get_render_data()
        renderer.render(snake, fruit)
        clock.tick(fps)


if __name__ == "__main__":
    play_snake_game()

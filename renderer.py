import pygame
from config import *
from utils import UP, RIGHT, DOWN, LEFT

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
}


class Renderer:
    def __init__(self, grid_size=GRID_SIZE, caption='Snake Q-learning'):
        pygame.init()
        self.grid_size = grid_size
        self.cell_size = max(1, WIDTH // grid_size)
        size = self.cell_size * grid_size
        self.screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption(caption)

    def render(self, snake, fruit):
        self.screen.fill(BLACK)

        # leave a 1px gap between tiles
        tile = self.cell_size - 1
        pygame.draw.rect(self.screen, RED, pygame.Rect(fruit[0] * self.cell_size, fruit[1] * self.cell_size, tile, tile))
        for segment in snake:
            pygame.draw.rect(self.screen, GREEN, pygame.Rect(segment[0] * self.cell_size, segment[1] * self.cell_size, tile, tile))

        pygame.display.flip()

    def set_caption(self, text):
        pygame.display.set_caption(text)

    def close(self):
        pygame.quit()

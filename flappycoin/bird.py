"""The player's bird."""

import pygame

from .constants import BIRD_SIZE, BLACK, GRAVITY, JUMP_FORCE, WINDOW_HEIGHT, YELLOW


class Bird:
    """A bird that falls under gravity and jumps on demand."""

    def __init__(self):
        self.x = 100.0
        self.y = float(WINDOW_HEIGHT // 2)
        self.velocity = 0.0

    def update(self):
        """Apply gravity for one frame and keep the bird inside the window."""
        self.velocity += GRAVITY
        self.y += self.velocity
        self.y = min(max(self.y, 0.0), float(WINDOW_HEIGHT - BIRD_SIZE))

    def jump(self):
        self.velocity = JUMP_FORCE

    @property
    def center(self):
        return int(self.x) + BIRD_SIZE // 2, int(self.y) + BIRD_SIZE // 2

    def draw(self, surface):
        cx, cy = self.center
        pygame.draw.circle(surface, YELLOW, (cx, cy), BIRD_SIZE // 2)
        pygame.draw.circle(surface, BLACK, (cx + 5, cy - 5), 3)
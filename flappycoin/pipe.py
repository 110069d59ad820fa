"""Pipe pairs that scroll towards the bird."""

import random

import pygame

from .coin import Coin
from .constants import (
    BIRD_SIZE, GREEN, MAX_DIFFICULTY_REDUCTION, MIN_GAP, MIN_PIPE_HEIGHT,
    PIPE_BORDER_COLOR, PIPE_GAP_MAX, PIPE_GAP_MIN, PIPE_SPEED, PIPE_WIDTH,
    WINDOW_HEIGHT,
)


class Pipe:
    """A top and bottom pipe with a random gap holding a coin."""

    def __init__(self, start_x, current_score=0, rng=None):
        rng = rng if rng is not None else random.Random()
        self.x = start_x
        self.passed = False

        reduction = min(current_score * 3, MAX_DIFFICULTY_REDUCTION)
        gap_min = max(PIPE_GAP_MIN - reduction, MIN_GAP)
        gap_max = max(PIPE_GAP_MAX - reduction, gap_min + 20)
        self.gap_size = rng.randint(gap_min, gap_max)

        max_top = WINDOW_HEIGHT - self.gap_size - MIN_PIPE_HEIGHT
        self.top_height = rng.randint(MIN_PIPE_HEIGHT, max_top)
        self.bottom_y = self.top_height + self.gap_size
        self.init_coin()

    def init_coin(self):
        """Place a fresh coin in the middle of the gap."""
        self.coin = Coin(
            float(self.x + PIPE_WIDTH // 2),
            float(self.top_height + self.gap_size // 2),
        )

    def update(self):
        self.x -= PIPE_SPEED
        self.coin.x -= PIPE_SPEED

    def draw(self, surface):
        top = pygame.Rect(self.x, 0, PIPE_WIDTH, self.top_height)
        bottom = pygame.Rect(self.x, self.bottom_y, PIPE_WIDTH, WINDOW_HEIGHT - self.bottom_y)
        for rect in (top, bottom):
            pygame.draw.rect(surface, GREEN, rect)
            pygame.draw.rect(surface, PIPE_BORDER_COLOR, rect, 2)
        self.coin.draw(surface)

    def is_off_screen(self):
        return self.x + PIPE_WIDTH < 0

    def check_collision(self, bird):
        """True if the bird overlaps either pipe."""
        if bird.x + BIRD_SIZE > self.x and bird.x < self.x + PIPE_WIDTH:
            return bird.y < self.top_height or bird.y + BIRD_SIZE > self.bottom_y
        return False
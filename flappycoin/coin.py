"""Collectable coins placed in pipe gaps."""

import math
from dataclasses import dataclass, field

import pygame

from .constants import (
    BIRD_SIZE, COIN_BORDER, COIN_DETAIL, COIN_GOLD, COIN_SHINE, COIN_SIZE,
)


@dataclass
class Coin:
    """A coin centred on (x, y)."""

    x: float
    y: float
    collected: bool = field(default=False, init=False)

    def draw(self, surface):
        if self.collected:
            return
        cx, cy = int(self.x), int(self.y)
        pygame.draw.circle(surface, COIN_GOLD, (cx, cy), COIN_SIZE // 2)
        pygame.draw.circle(surface, COIN_SHINE, (cx - 2, cy - 2), COIN_SIZE // 3)
        pygame.draw.circle(surface, COIN_BORDER, (cx, cy), COIN_SIZE // 2, 3)
        pygame.draw.circle(surface, COIN_DETAIL, (cx, cy), COIN_SIZE // 3, 1)

    def check_collision(self, bird):
        """True if the bird touches this coin and it has not been collected."""
        if self.collected:
            return False
        dx = bird.x + BIRD_SIZE // 2 - self.x
        dy = bird.y + BIRD_SIZE // 2 - self.y
        return math.hypot(dx, dy) < BIRD_SIZE // 2 + COIN_SIZE // 2

    def is_off_screen(self):
        return self.x + COIN_SIZE < 0
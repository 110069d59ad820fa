"""Game state, rules and rendering."""

import random

import pygame

from .audio import AudioManager
from .bird import Bird
from .constants import (
    BACKGROUND_VOLUME, BIRD_SIZE, BLACK, MAX_LEVEL, PIPE_INTERVAL, RED, SKY_COLOR,
    WHITE, WINDOW_HEIGHT, WINDOW_WIDTH,
)
from .pipe import Pipe


class Game:
    """One play session: bird, pipes, score and state flags."""

    def __init__(self, audio=None, rng=None):
        self.audio = audio if audio is not None else AudioManager()
        self.rng = rng if rng is not None else random.Random()
        self.bird = Bird()
        self.pipes = []
        self.score = 0
        self.game_over = False
        self.game_started = False
        self.pipe_timer = 0
        self._fonts = {}
        self.init_audio()

    def add_pipe(self):
        self.pipes.append(Pipe(WINDOW_WIDTH, self.score, self.rng))

    def update(self):
        """Advance the world one frame while a game is running."""
        if not self.game_started or self.game_over:
            return
        self.bird.update()
        for pipe in self.pipes:
            pipe.update()
            if pipe.check_collision(self.bird):
                self.game_over = True
            if pipe.coin.check_collision(self.bird):
                pipe.coin.collected = True
                self.score += 1
                self.play_coin_sound()
        self.pipes = [pipe for pipe in self.pipes if not pipe.is_off_screen()]
        if self.bird.y <= 0 or self.bird.y >= WINDOW_HEIGHT - BIRD_SIZE:
            self.game_over = True

    def difficulty_level(self):
        return min(self.score // 3 + 1, MAX_LEVEL)

    def draw(self, surface):
        surface.fill(SKY_COLOR)
        for i in range(5):
            pygame.draw.circle(surface, WHITE, (100 + i * 150, 80), 20)
            pygame.draw.circle(surface, WHITE, (120 + i * 150, 70), 25)
            pygame.draw.circle(surface, WHITE, (140 + i * 150, 80), 20)

        for pipe in self.pipes:
            pipe.draw(surface)
        self.bird.draw(surface)

        self._text(surface, f"Score: {self.score}", 30, WHITE, (20, 20))
        if self.game_started and not self.game_over and self.score > 0:
            self._text(surface, f"Level: {self.difficulty_level()}", 20, WHITE, (20, 60))

        cx, cy = WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2
        if not self.game_started:
            self._text(surface, "Flappy Bird", 40, BLACK, (cx - 150, cy - 100))
            self._text(surface, "Press SPACE to start", 20, BLACK, (cx - 100, cy - 50))
            self._text(surface, "Press SPACE to jump", 20, BLACK, (cx - 120, cy - 20))
            self._text(surface, "Collect coins to score!", 20, BLACK, (cx - 100, cy + 10))
        if self.game_over:
            self._text(surface, "Game Over!", 50, RED, (cx - 120, cy - 50))
            self._text(surface, "Press R to restart", 20, RED, (cx - 100, cy))
            self._text(surface, "Press ESC to exit", 20, RED, (cx - 80, cy + 30))

    def restart(self):
        self.bird = Bird()
        self.pipes = []
        self.score = 0
        self.game_over = False
        self.game_started = False

    def init_audio(self):
        self.audio.play_background_music()
        self.audio.set_volume(BACKGROUND_VOLUME)

    def play_coin_sound(self):
        self.audio.play_coin_sound()

    def handle_key(self, key):
        """React to a key press; return False when the player asks to quit."""
        if key == pygame.K_SPACE:
            if not self.game_started:
                self.game_started = True
            if not self.game_over:
                self.bird.jump()
        elif key == pygame.K_r:
            if self.game_over:
                self.restart()
        elif key == pygame.K_ESCAPE:
            return False
        return True

    def tick(self):
        """Run one frame of logic, spawning pipes on a fixed interval."""
        self.update()
        if self.game_started and not self.game_over:
            self.pipe_timer += 1
            if self.pipe_timer >= PIPE_INTERVAL:
                self.add_pipe()
                self.pipe_timer = 0

    def _font(self, size):
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, surface, text, size, color, pos):
        surface.blit(self._font(size).render(text, True, color), pos)
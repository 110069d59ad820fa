"""Window, event loop and command line entry point."""

import argparse
import random
from pathlib import Path

import pygame

from .audio import AudioManager
from .constants import FRAME_RATE, SKY_COLOR, WINDOW_HEIGHT, WINDOW_WIDTH
from .game import Game


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="flappycoin", description="Flap between pipes and collect coins."
    )
    parser.add_argument("--music", type=Path, default=None, help="looping background music file")
    parser.add_argument("--coin-sound", type=Path, default=None, help="sound played on coin pickup")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe placement")
    return parser.parse_args(argv)


def _run(screen, game, clock):
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and not game.handle_key(event.key):
                return
        game.tick()
        game.draw(screen)
        pygame.display.flip()
        clock.tick(FRAME_RATE)


def main(argv=None):
    """Open the game window and play until the player quits."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Flappy Bird")
        screen.fill(SKY_COLOR)
        audio = AudioManager(args.music, args.coin_sound)
        game = Game(audio, random.Random(args.seed))
        try:
            _run(screen, game, pygame.time.Clock())
        finally:
            audio.stop_background_music()
    finally:
        pygame.quit()
    return 0
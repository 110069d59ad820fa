import random

import pygame
import pytest

from flappycoin.bird import Bird
from flappycoin.constants import (
    BIRD_SIZE, COIN_SHINE, GREEN, MAX_DIFFICULTY_REDUCTION, MIN_GAP,
    MIN_PIPE_HEIGHT, PIPE_BORDER_COLOR, PIPE_GAP_MAX, PIPE_GAP_MIN, PIPE_SPEED,
    PIPE_WIDTH, WHITE, WINDOW_HEIGHT, WINDOW_WIDTH,
)
from flappycoin.pipe import Pipe


def _fixed_pipe(x=200, top=200, gap=200):
    pipe = Pipe(x, 0, random.Random(0))
    pipe.top_height = top
    pipe.gap_size = gap
    pipe.bottom_y = top + gap
    pipe.init_coin()
    return pipe


@pytest.mark.parametrize("seed", range(30))
def test_easy_gap_bounds(seed):
    pipe = Pipe(WINDOW_WIDTH, 0, random.Random(seed))
    assert PIPE_GAP_MIN <= pipe.gap_size <= PIPE_GAP_MAX


@pytest.mark.parametrize("seed", range(30))
def test_hardest_gap_bounds(seed):
    pipe = Pipe(WINDOW_WIDTH, 1000, random.Random(seed))
    assert MIN_GAP <= pipe.gap_size <= PIPE_GAP_MAX - MAX_DIFFICULTY_REDUCTION


@pytest.mark.parametrize("score", [0, 3, 7, 13, 14, 50])
@pytest.mark.parametrize("seed", range(15))
def test_geometry_invariants(score, seed):
    pipe = Pipe(WINDOW_WIDTH, score, random.Random(seed))
    assert MIN_PIPE_HEIGHT <= pipe.top_height <= WINDOW_HEIGHT - pipe.gap_size - MIN_PIPE_HEIGHT
    assert pipe.bottom_y == pipe.top_height + pipe.gap_size
    assert pipe.x == WINDOW_WIDTH
    assert pipe.passed is False
    assert pipe.coin.x == WINDOW_WIDTH + PIPE_WIDTH // 2
    assert pipe.coin.y == pipe.top_height + pipe.gap_size // 2
    assert pipe.coin.collected is False


def test_same_seed_same_pipe():
    a = Pipe(WINDOW_WIDTH, 4, random.Random(42))
    b = Pipe(WINDOW_WIDTH, 4, random.Random(42))
    assert (a.gap_size, a.top_height) == (b.gap_size, b.top_height)


def test_difficulty_never_widens_gaps():
    easy = max(Pipe(0, 0, random.Random(s)).gap_size for s in range(50))
    hard = max(Pipe(0, 20, random.Random(s)).gap_size for s in range(50))
    assert hard <= easy


def test_update_moves_pipe_and_coin():
    pipe = _fixed_pipe()
    coin_x = pipe.coin.x
    pipe.update()
    assert pipe.x == 200 - PIPE_SPEED
    assert pipe.coin.x == coin_x - PIPE_SPEED


def test_off_screen_boundary():
    pipe = _fixed_pipe(x=-PIPE_WIDTH)
    assert pipe.is_off_screen() is False
    pipe.x = -PIPE_WIDTH - 1
    assert pipe.is_off_screen() is True


def test_init_coin_resets_coin():
    pipe = _fixed_pipe()
    pipe.coin.collected = True
    pipe.x = 300
    pipe.init_coin()
    assert pipe.coin.collected is False
    assert pipe.coin.x == 300 + PIPE_WIDTH // 2


def _bird(x, y):
    bird = Bird()
    bird.x = x
    bird.y = y
    return bird


def test_collision_with_top_pipe():
    assert _fixed_pipe().check_collision(_bird(210, 100)) is True


def test_collision_with_bottom_pipe():
    assert _fixed_pipe().check_collision(_bird(210, 380)) is True


def test_no_collision_inside_gap():
    assert _fixed_pipe().check_collision(_bird(210, 250)) is False


def test_no_collision_outside_horizontal_range():
    pipe = _fixed_pipe()
    assert pipe.check_collision(_bird(200 + PIPE_WIDTH, 100)) is False
    assert pipe.check_collision(_bird(200 - BIRD_SIZE, 100)) is False


def test_draw_pipes_and_coin():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill(WHITE)
    pipe = _fixed_pipe(x=100, top=200, gap=200)
    pipe.draw(surface)
    assert tuple(surface.get_at((140, 100)))[:3] == GREEN
    assert tuple(surface.get_at((140, 500)))[:3] == GREEN
    assert tuple(surface.get_at((100, 100)))[:3] == PIPE_BORDER_COLOR
    assert tuple(surface.get_at((140, 250)))[:3] == WHITE
    assert tuple(surface.get_at((140, 300)))[:3] == COIN_SHINE
"""Background music and sound effects."""

from pathlib import Path

import pygame

from .constants import DEFAULT_VOLUME


class AudioManager:
    """Plays looping background music and one-shot coin sounds from files."""

    def __init__(self, music_path=None, coin_path=None):
        self.music_path = music_path
        self.coin_path = coin_path
        self.background_music_playing = False
        self.volume = DEFAULT_VOLUME

    def play_background_music(self):
        self.stop_background_music()
        self.play_sound(self.music_path, True)
        self.background_music_playing = True

    def stop_background_music(self):
        if self.background_music_playing:
            if pygame.mixer.get_init():
                pygame.mixer.music.stop()
                pygame.mixer.music.unload()
            self.background_music_playing = False

    def play_coin_sound(self):
        return self.play_sound(self.coin_path, False)

    def play_sound(self, path, loop=False):
        """Start playing an audio file; return whether playback began."""
        if path is None or not Path(path).is_file():
            return False
        if not self._ensure_mixer():
            return False
        loops = -1 if loop else 0
        try:
            if path == self.music_path:
                pygame.mixer.music.load(str(path))
                pygame.mixer.music.play(loops)
            else:
                pygame.mixer.Sound(str(path)).play(loops)
        except pygame.error:
            return False
        return True

    def set_volume(self, volume):
        """Set the volume, clamped to 0-100, and apply it to playing music."""
        self.volume = max(0, min(100, volume))
        if self.background_music_playing and pygame.mixer.get_init():
            pygame.mixer.music.set_volume(self.volume / 100)

    @staticmethod
    def _ensure_mixer():
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error:
            return False
        return True
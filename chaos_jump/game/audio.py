# chaos_jump/game/audio.py
from __future__ import annotations
import logging
from typing import Dict, List, Tuple
import numpy as np
import pygame
from .config import SAMPLE_RATE, SOUND_VOLUME

logger = logging.getLogger(__name__)


class NullAudio:
    """Silent sink for headless runs."""
    def play_sound(self, frequency: float, duration: float):
        pass


class RecordingAudio:
    """Keeps every requested cue; handy for tests and env info dicts."""
    def __init__(self):
        self.cues: List[Tuple[float, float]] = []

    def play_sound(self, frequency: float, duration: float):
        self.cues.append((float(frequency), float(duration)))


def synth_tone(frequency: float, duration: float,
               sample_rate: int = SAMPLE_RATE, volume: float = SOUND_VOLUME) -> np.ndarray:
    """
    Sine tone with an exponential fade from `volume` to volume/10 over `duration`.
    Returns int16 samples, shape (n,).
    """
    n = max(1, int(sample_rate * duration))
    t = np.arange(n, dtype=np.float32) / sample_rate
    envelope = volume * np.power(0.1, t / max(duration, 1e-6))
    wave = np.sin(2.0 * np.pi * frequency * t) * envelope
    return (wave * 32767).astype(np.int16)


class ToneAudio:
    """
    pygame.mixer tone player, muted by default. Tones are synthesized once per
    (frequency, duration) pair and cached.
    """
    def __init__(self, muted: bool = True):
        self.muted = muted
        self._cache: Dict[Tuple[float, float], pygame.mixer.Sound] = {}
        self._ready = False

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def _ensure_mixer(self) -> bool:
        if self._ready or pygame.mixer.get_init():
            self._ready = True
            return True
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as e:
            logger.warning("audio disabled, mixer init failed: %s", e)
            self.muted = True
            return False
        self._ready = True
        return True

    def play_sound(self, frequency: float, duration: float):
        if self.muted or not self._ensure_mixer():
            return
        key = (float(frequency), float(duration))
        sound = self._cache.get(key)
        if sound is None:
            # synthesize at the live mixer format; pygame.init() may have opened
            # the mixer before us with its own rate and channel count
            rate, _, channels = pygame.mixer.get_init() or (SAMPLE_RATE, -16, 1)
            samples = synth_tone(frequency, duration, sample_rate=rate)
            if channels > 1:
                samples = np.repeat(samples[:, None], channels, axis=1)
            sound = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
            self._cache[key] = sound
        sound.play()

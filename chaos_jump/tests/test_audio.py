# chaos_jump/tests/test_audio.py
import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from chaos_jump.game.audio import RecordingAudio, ToneAudio, synth_tone
from chaos_jump.game.config import SAMPLE_RATE, SOUND_VOLUME


def test_synth_tone_shape_and_envelope():
    samples = synth_tone(440.0, 0.1)
    assert samples.dtype == np.int16
    assert samples.shape == (int(SAMPLE_RATE * 0.1),)
    peak = int(np.abs(samples).max())
    assert 0 < peak <= int(SOUND_VOLUME * 32767) + 1
    # fades out: last tenth is quieter than the first tenth
    n = len(samples) // 10
    assert np.abs(samples[-n:]).max() < np.abs(samples[:n]).max()


def test_tone_audio_muted_by_default():
    audio = ToneAudio()
    assert audio.muted
    audio.play_sound(880.0, 0.5)   # must not touch the mixer
    assert not audio._ready
    assert audio.toggle_mute() is False
    assert audio.toggle_mute() is True


def test_recording_audio_keeps_cues():
    audio = RecordingAudio()
    audio.play_sound(440, 0.1)
    audio.play_sound(220, 0.3)
    assert audio.cues == [(440.0, 0.1), (220.0, 0.3)]


def test_tone_length_follows_live_mixer_rate():
    """pygame.init() may open the mixer at its own rate before ToneAudio does."""
    pygame.mixer.quit()
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2)
    except pygame.error as e:
        pytest.skip(f"no audio device: {e}")
    try:
        audio = ToneAudio(muted=False)
        for freq, dur in ((440.0, 0.1), (220.0, 0.3), (880.0, 0.5)):
            audio.play_sound(freq, dur)
            sound = audio._cache[(freq, dur)]
            assert abs(sound.get_length() - dur) < 1e-3, f"{freq} Hz cue lasts {sound.get_length()}"
    finally:
        pygame.mixer.quit()

import numpy as np
import pygame
from config import START_TONE, EAT_TONE, DIE_TONE, SOUND_VOLUME


def tone_samples(freq=440, duration=0.12, volume=0.2, sample_rate=44100, channels=2):
    """Build int16 samples for a sine tone with a short fade in and out."""
    count = int(sample_rate * duration)
    t = np.linspace(0, duration, count, False)
    wave = np.sin(2 * np.pi * freq * t)

    env = np.ones_like(wave)
    attack = min(count, int(0.01 * sample_rate))
    release = min(count - attack, int(0.03 * sample_rate))
    if attack:
        env[:attack] = np.linspace(0, 1, attack)
    if release:
        env[-release:] = np.linspace(1, 0, release)

    wave = (wave * env * volume * (2**15 - 1)).astype(np.int16)
    if channels == 1:
        return wave
    return np.column_stack([wave] * channels)


def make_tone(freq, duration=0.12, volume=SOUND_VOLUME):
    """Generate a pygame Sound matching the mixer's current format."""
    sample_rate, _, channels = pygame.mixer.get_init()
    samples = tone_samples(freq, duration, volume, sample_rate, channels)
    return pygame.sndarray.make_sound(np.ascontiguousarray(samples))


def load_sounds():
    """Return the game's sound effects, or an empty dict when no mixer is available."""
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return {
            'start': make_tone(START_TONE, 0.12),
            'eat': make_tone(EAT_TONE, 0.10),
            'die': make_tone(DIE_TONE, 0.28),
        }
    except Exception as e:
        print(f"Warning: audio unavailable ({e}). Running without sound.")
        return {}

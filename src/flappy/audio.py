"""
audio.py: Sound effects for the four game events, synthesized at startup.
"""

import logging
import math
import sqlite3
from array import array
from typing import Dict, Optional

import pygame

from .constants import MUTED_KEY, SOUND_FLAP, SOUND_SCORE, SOUND_HIT, SOUND_DIE

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050


class SilentAudio:
    """Consumer that drops every event. The engine default when no audio is given."""
    muted = True

    def play(self, name: str):
        pass

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted


def _wave(kind: str, phase: float) -> float:
    """One sample of a unit waveform; phase is measured in cycles."""
    frac = phase % 1.0
    if kind == "square":
        return 1.0 if frac < 0.5 else -1.0
    if kind == "sawtooth":
        return 2.0 * frac - 1.0
    return math.sin(2 * math.pi * frac)


def synth_tone(start_freq: float, duration: float, kind: str = "sine", volume: float = 0.3,
               end_freq: Optional[float] = None, delay: float = 0.0,
               sample_rate: int = SAMPLE_RATE) -> list:
    """
    Float samples for a tone whose gain decays exponentially to 0.01.
    With end_freq the pitch sweeps exponentially over the duration.
    """
    end_freq = end_freq or start_freq
    total = int(sample_rate * duration)
    samples = [0.0] * int(sample_rate * delay)
    phase = 0.0
    for i in range(total):
        t = i / total
        freq = start_freq * (end_freq / start_freq) ** t
        gain = volume * (0.01 / volume) ** t
        samples.append(gain * _wave(kind, phase))
        phase += freq / sample_rate
    return samples


def _mix(*tracks: list) -> list:
    length = max(len(t) for t in tracks)
    out = [0.0] * length
    for track in tracks:
        for i, value in enumerate(track):
            out[i] += value
    return out


def event_samples(sample_rate: int = SAMPLE_RATE) -> Dict[str, list]:
    """The float sample buffers for every sound event."""
    return {
        SOUND_FLAP: synth_tone(400, 0.1, "sine", 0.2, sample_rate=sample_rate),
        # Two-tone ding
        SOUND_SCORE: _mix(
            synth_tone(523.25, 0.2, "sine", 0.3, sample_rate=sample_rate),
            synth_tone(659.25, 0.2, "sine", 0.3, delay=0.1, sample_rate=sample_rate),
        ),
        SOUND_HIT: synth_tone(200, 0.15, "square", 0.3, sample_rate=sample_rate),
        # Descending tone
        SOUND_DIE: synth_tone(400, 0.5, "sawtooth", 0.3, end_freq=100, sample_rate=sample_rate),
    }


class AudioManager:
    """
    Plays the flap/score/hit/die effects through pygame.mixer.

    Failures never reach the caller: a missing or broken mixer just means
    silence. The mute preference is persisted through the given storage.
    """

    def __init__(self, storage=None, muted: Optional[bool] = None):
        self.storage = storage
        # An explicit muted overrides the stored preference for this session only
        self.muted = self._load_muted() if muted is None else muted
        self.sounds: Dict[str, pygame.mixer.Sound] = {}

    def _load_muted(self) -> bool:
        if self.storage is None:
            return False
        try:
            return self.storage.get(MUTED_KEY) == "true"
        except sqlite3.Error as e:
            logger.warning("Could not read mute preference: %s", e)
            return False

    def load(self):
        """Initializes the mixer if needed and builds the effect buffers."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            sample_rate, _, channels = pygame.mixer.get_init()
        except (pygame.error, TypeError) as e:
            logger.info("Audio unavailable, continuing silently: %s", e)
            return

        for name, samples in event_samples(sample_rate).items():
            pcm = array("h")
            for value in samples:
                int_sample = int(max(-1.0, min(1.0, value)) * 32767)
                pcm.extend([int_sample] * channels)
            try:
                self.sounds[name] = pygame.mixer.Sound(buffer=pcm.tobytes())
            except pygame.error as e:
                logger.warning("Could not create %s sound: %s", name, e)

    def play(self, name: str):
        if self.muted:
            return
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            logger.debug("Audio playback failed: %s", e)

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.storage is not None:
            try:
                self.storage.set(MUTED_KEY, "true" if self.muted else "false")
            except sqlite3.Error as e:
                logger.warning("Could not save mute preference: %s", e)
        return self.muted

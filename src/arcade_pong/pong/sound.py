# pylint: disable=no-member
"""
Sound effects and background music.
Both are synthesised into small .wav files the first time the game runs.
"""

import os
import math
import wave
import struct
from typing import Sequence
import pygame
from arcade_pong.pong import constants
from arcade_pong.logger.logger import logger


def write_tones(
    path: str,
    frequencies: Sequence[float],
    duration_ms: int,
    volume: float,
    sample_rate: int = constants.SOUND_SAMPLE_RATE,
):
    """
    Write one sine tone per frequency, each fading out over duration_ms,
    as a 16-bit mono .wav file
    """
    samples_per_tone = int(sample_rate * duration_ms / 1000)
    frames = bytearray()
    for frequency in frequencies:
        for i in range(samples_per_tone):
            amplitude = volume * (1 - i / samples_per_tone)
            sample = amplitude * math.sin(2 * math.pi * frequency * i / sample_rate)
            frames += struct.pack("<h", int(sample * 32767))

    with wave.open(path, "wb") as wav_file:
        wav_file.setnchannels(1)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(bytes(frames))


class SoundManager:
    """
    Plays the looping background track and the bounce effect.
    Any failure to create, load or play the sounds is left to the caller.
    """

    def __init__(self, assets_dir: str = constants.ASSETS_DIR):
        os.makedirs(assets_dir, exist_ok=True)
        self.effect_path = os.path.join(assets_dir, constants.SOUND_EFFECT_FILE_NAME)
        self.music_path = os.path.join(assets_dir, constants.MUSIC_FILE_NAME)

        if not os.path.exists(self.effect_path):
            logger.info(f"Generating {self.effect_path}")
            write_tones(
                self.effect_path,
                [constants.SOUND_EFFECT_FREQUENCY],
                constants.SOUND_EFFECT_DURATION_MS,
                constants.SOUND_EFFECT_VOLUME,
            )
        if not os.path.exists(self.music_path):
            logger.info(f"Generating {self.music_path}")
            write_tones(
                self.music_path,
                constants.MUSIC_NOTES,
                constants.MUSIC_NOTE_DURATION_MS,
                constants.MUSIC_VOLUME,
            )

        if not pygame.mixer.get_init():
            pygame.mixer.init()
        self.effect = pygame.mixer.Sound(self.effect_path)
        pygame.mixer.music.load(self.music_path)

    def start_music(self):
        """Loop the background track forever"""
        pygame.mixer.music.play(loops=-1)

    def play_effect(self):
        """Play the bounce effect, possibly over a previous one"""
        self.effect.play()

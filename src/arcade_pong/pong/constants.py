"""
Constants used by the Pong game
"""

import os

# Command line
ARG_HARD = "hard"

# Screen
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
SCREEN_CAPTION = "Arcade Pong"
SCREEN_CAPTION_HARD = "Arcade Pong (hard)"
FPS = 60

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 220, 0)

# Score text
GAME_FONT_SIZE = 48
SCORE_TOP_MARGIN = 10

# Paddles
PADDLE_WIDTH = 10
PADDLE_HEIGHT = 80
PADDLE_MARGIN = 20  # distance between a paddle's center and its side of the screen
PADDLE_SPEED = 5  # per tick

# Ball
BALL_SIZE = 10
BALL_SPEEDS_X = (3, 4, 5)  # per tick
BALL_SPEEDS_Y = (1, 2, 3)  # per tick
SERVE_DELAY_SECONDS = 1.0
SPEED_RAMP_SECONDS = 15  # the ball gains one base speed every this many seconds
PADDLE_HIT_BALL_WEIGHT = 3  # vertical velocity is blended 3:1 with the paddle's

# A point is scored once the ball is this far outside the screen
SCORE_BOUNDS = (-SCREEN_WIDTH / 2, SCREEN_WIDTH * 3 / 2)

# Computer player
AI_RESAMPLE_PROBABILITY = 0.1

# Sound
ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
SOUND_SAMPLE_RATE = 44100
SOUND_EFFECT_FILE_NAME = "beep.wav"
SOUND_EFFECT_FREQUENCY = 440
SOUND_EFFECT_DURATION_MS = 60
SOUND_EFFECT_VOLUME = 0.4
MUSIC_FILE_NAME = "music.wav"
MUSIC_NOTES = (220, 277, 330, 277, 247, 294, 370, 294)  # Hz
MUSIC_NOTE_DURATION_MS = 250
MUSIC_VOLUME = 0.15

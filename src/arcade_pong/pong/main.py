"""
Starting point of the Arcade Pong game
"""

import argparse
from arcade_pong.pong.arcade_pong_game import ArcadePongGame
from arcade_pong.pong import constants


def main():
    """
    Starting point of Arcade Pong game
    """

    parser = argparse.ArgumentParser(description="Play Pong against the computer")

    parser.add_argument(
        f"--{constants.ARG_HARD}",
        action="store_true",
        help="Computer predicts where the ball will land instead of chasing it",
    )

    args = parser.parse_args()
    game = ArcadePongGame(hard=args.hard)
    try:
        game.run()
    finally:
        game.close()


if __name__ == "__main__":
    main()

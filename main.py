"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame
"""

import logging

from neonsnake.config import LOG_LEVEL, LOG_FORMAT
from neonsnake.controller import GameController


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    GameController().run()


if __name__ == "__main__":
    main()

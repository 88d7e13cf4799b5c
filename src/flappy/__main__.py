#!/usr/bin/env python3
"""
Command-line entry point: python -m flappy
"""

import argparse
import logging
import sys

from .constants import DB_FILE, RENDER_FPS
from .flappy_client import create_client


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy", description="Play Flappy Bird.")
    parser.add_argument("--db", default=DB_FILE, help="settings/best score database file")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="target frame rate")
    parser.add_argument("--mute", action="store_true", help="start without sound")
    parser.add_argument("--log-level", default="warning",
                        choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    client = create_client(args.db, fps=args.fps, mute=args.mute)
    if client is None:
        print("Could not start the game. Exiting.")
        return 1
    print("Space / Up / Click = Flap | M = Mute | Esc = Quit")
    try:
        client.run()
    except KeyboardInterrupt:
        client.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())

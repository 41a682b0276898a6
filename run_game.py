#!/usr/bin/env python3
"""Play Reversi in the terminal."""
import argparse
import logging
import random
import sys
from typing import List, Optional

from reversi.console import QuitGame, build_players, play_game


def main(argv: Optional[List[str]] = None) -> int:
    names = sorted(build_players())
    parser = argparse.ArgumentParser(description="Play Reversi in the terminal")
    parser.add_argument("dark", choices=names, help="Player for dark, moves first")
    parser.add_argument("light", choices=names, help="Player for light")
    parser.add_argument("--seed", type=int, help="Seed for the random player")
    parser.add_argument(
        "--verbose", action="store_true", help="Log every move and pass"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    players = build_players(rng)
    try:
        play_game(players[args.dark], players[args.light])
    except QuitGame as exc:
        logging.getLogger(__name__).info("%s quit the game", exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())

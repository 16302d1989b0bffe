"""Entry point for playing the two-player tank duel."""

import argparse
import logging

from tank_duel.pygame import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Tank Duel - local two-player arcade")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    parser.add_argument("--fps", type=int, default=60, help="frame rate cap (default: 60)")
    parser.add_argument("--seed", type=int, default=None, help="seed for explosion effects")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    run_pygame(fps=args.fps, seed=args.seed)


if __name__ == "__main__":
    main()

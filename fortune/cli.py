"""Command line entry point.

Usage examples:
    fortune-teller                     # open the window
    fortune-teller --console 5         # print five fortunes, no window
    fortune-teller --console 5 --seed 42
    fortune-teller --image my_ball.png --log-level DEBUG
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, DEFAULT_IMAGE
from .logging_utils import setup_logging
from .selector import Selector

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fortune-teller", description="Read your fortune, never the same one twice in a row")
    parser.add_argument("--console", type=int, metavar="N", help="Print N fortunes to stdout instead of opening the window")
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source for a reproducible sequence")
    parser.add_argument("--image", default=str(DEFAULT_IMAGE), help="Path to the title image")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def print_fortunes(selector: Selector, count: int, out=None) -> None:
    out = out or sys.stdout
    for _ in range(count):
        out.write(selector.next_fortune() + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.console is not None and args.console < 0:
        parser.error("--console must be zero or more")

    setup_logging(getattr(logging, args.log_level))
    config = AppConfig(image_path=args.image, seed=args.seed)

    if args.console is not None:
        selector = Selector.from_seed(config.seed) if config.seed is not None else Selector()
        print_fortunes(selector, args.console)
        return 0

    # tkinter is only needed for the window
    from ui_app.app import FortuneTellerApp

    logger.info("Starting %s", config.title)
    FortuneTellerApp(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

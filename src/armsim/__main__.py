"""Command line entry point: ``python -m armsim`` or ``armsim``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from armsim.config import ArmSimConfig, ViewerConfig
from armsim.session import ArmSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="armsim", description="Interactive 4-DOF robot arm simulator."
    )
    parser.add_argument("--fps", type=int, default=ViewerConfig.fps, help="Simulation rate")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument(
        "--headless",
        type=float,
        metavar="SECONDS",
        default=None,
        help="Run a scripted demo for SECONDS without a window and print the final state",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.fps <= 0:
        logger.error("--fps must be greater than 0, got %d", args.fps)
        return 2

    config = ArmSimConfig(viewer=ViewerConfig(fps=args.fps))
    session = ArmSession(config)

    if args.headless is not None:
        from armsim.headless import print_summary, run_headless

        print_summary(run_headless(session, args.headless, args.fps))
        return 0

    from armsim.viewer import ArmViewer

    try:
        ArmViewer(session).run()
    except KeyboardInterrupt:
        logger.info("Viewer interrupted by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Run the morning slide rotation against the Vestaboard or the emulator."""

from __future__ import annotations

import argparse
import logging

from schoolboard.config import load_config
from schoolboard.data.scheduler import TickScheduler
from schoolboard.data.slides import build_deck
from schoolboard.display import EmulatorBoard, VestaboardBoard
from schoolboard.logging_setup import configure_logging
from schoolboard.logic.session import BoardSession

logger = logging.getLogger("schoolboard.run_board")


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Path to the YAML config file",
    )
    parser.add_argument(
        "--output",
        choices=["vestaboard", "emulator"],
        default="vestaboard",
        help="Board output target",
    )
    parser.add_argument(
        "--frame-path",
        default="emulator_output/board.png",
        help="PNG written by the emulator output",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    log_path = configure_logging(config.log)

    if args.output == "vestaboard":
        if not config.board.api_key:
            parser.error("VESTABOARD_API_KEY is not set")
        sink = VestaboardBoard(config.board.api_key)
    else:
        sink = EmulatorBoard(args.frame_path)

    session = BoardSession(
        sink,
        build_deck(config),
        config.service.window,
        config.board.slides,
        force_service_time=config.service.force_service_time,
        weekdays_only=config.service.weekdays_only,
    )
    scheduler = TickScheduler(session, config.board.poll_interval_seconds)
    logger.info(
        "Serving %s-%s to %s, logging to %s",
        config.service.window.start,
        config.service.window.end,
        args.output,
        log_path,
    )

    try:
        scheduler.run_forever()
    except KeyboardInterrupt:
        scheduler.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

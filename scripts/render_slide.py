"""Render one slide to a PNG without touching the real board."""

from __future__ import annotations

import argparse
from datetime import datetime

from schoolboard.config import load_config
from schoolboard.data.slides import build_deck
from schoolboard.display import EmulatorBoard
from schoolboard.logic.rotator import SlideKind
from schoolboard.rendering import layout_to_text


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("slide", choices=[kind.value for kind in SlideKind])
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--output", default="emulator_output/slide.png")
    parser.add_argument(
        "--at",
        help="Render as if the local time were this ISO timestamp",
    )
    args = parser.parse_args()

    now = datetime.fromisoformat(args.at) if args.at else datetime.now()
    deck = build_deck(load_config(args.config))
    board = EmulatorBoard(args.output)
    board.write(deck.render(SlideKind(args.slide), now))

    print(layout_to_text(board.layout), flush=True)
    print("slide_saved", {"slide": args.slide, "path": args.output}, flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

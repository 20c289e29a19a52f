"""
Run with: python -m dialview
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from PySide6.QtWidgets import QMainWindow

from dialview.app.application import VISIBLE_APP_NAME, create_app
from dialview.config import DEFAULT_OFF_COLOR, DEFAULT_ON_COLOR
from dialview.logging_config import setup_logging
from dialview.view.dial_widget import DialWidget

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dialview", description="Show an interactive four-position dial.")
    parser.add_argument("--on-color", default=DEFAULT_ON_COLOR, help="fill color for positions 1-3")
    parser.add_argument("--off-color", default=DEFAULT_OFF_COLOR, help="fill color for position 0")
    parser.add_argument("--size", nargs=2, type=int, default=(600, 600), metavar=("W", "H"),
                        help="initial window size in pixels")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


class MainWindow(QMainWindow):
    def __init__(self, dial: DialWidget) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.dial = dial
        self.setCentralWidget(dial)
        dial.selection_changed.connect(self._on_selection_changed)

    def _on_selection_changed(self, index: int) -> None:
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - {index}")
        logger.info(f"Dial position: {index}")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Build the dial; bad colors are reported before any window shows up
    try:
        dial = DialWidget(on_color=args.on_color, off_color=args.off_color)
    except ValueError as e:
        logger.error(f"Invalid dial configuration: {e}")
        return 2

    window = MainWindow(dial)
    window.resize(*args.size)
    window.show()

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

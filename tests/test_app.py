"""Tests for the application entry point and logging setup."""
import logging

from dialview.app.main import build_parser, main
from dialview.logging_config import setup_logging


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.on_color == "cyan"
        assert args.off_color == "gray"
        assert tuple(args.size) == (600, 600)
        assert args.debug is False

    def test_colors_and_size(self):
        args = build_parser().parse_args(["--on-color", "#00aa88", "--size", "300", "200", "--debug"])
        assert args.on_color == "#00aa88"
        assert args.size == [300, 200]
        assert args.debug is True


def test_main_rejects_bad_color(qapp):
    assert main(["--off-color", "definitely-not-a-color"]) == 2


class TestSetupLogging:
    def test_no_duplicate_handlers(self):
        setup_logging(level=logging.DEBUG)
        setup_logging(level=logging.DEBUG)
        logger = logging.getLogger("dialview")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "dial.log"
        setup_logging(level=logging.INFO, log_file=str(log_file))
        logging.getLogger("dialview.test").info("hello dial")
        for handler in logging.getLogger("dialview").handlers:
            handler.flush()
        assert "hello dial" in log_file.read_text(encoding="utf-8")
        for handler in logging.getLogger("dialview").handlers:
            handler.close()
        logging.getLogger("dialview").handlers.clear()

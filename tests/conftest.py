import os

# Qt must run headless in CI; set before PySide6 creates the application
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


class RecordingSurface:
    """DrawSurface that stores the commands it receives."""

    def __init__(self):
        self.commands = []

    def draw_circle(self, x, y, radius, style):
        self.commands.append(("circle", x, y, radius, style))

    def draw_text(self, text, x, y, style):
        self.commands.append(("text", text, x, y, style))


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    from dialview.app.application import create_app
    return create_app([])

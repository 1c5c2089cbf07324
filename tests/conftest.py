import os

import pytest

from teleopdash.config import NavigationConfig
from teleopdash.controller.engine import NavigationEngine

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeSurface:
    """Records attach/detach calls instead of grabbing a real pointer."""

    def __init__(self, fail_on_attach: bool = False):
        self.attached = []
        self.events = []
        self.fail_on_attach = fail_on_attach

    def attach(self, capture):
        self.events.append(("attach", capture.name))
        if self.fail_on_attach:
            raise RuntimeError("surface gone")
        self.attached.append(capture)

    def detach(self, capture):
        self.events.append(("detach", capture.name))
        if capture in self.attached:
            self.attached.remove(capture)


@pytest.fixture
def config():
    return NavigationConfig()


@pytest.fixture
def engine(config):
    return NavigationEngine(config)


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture(scope="session")
def qt_app():
    """One QApplication for the session; widgets and signals both need it."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def failing_surface():
    return FakeSurface(fail_on_attach=True)

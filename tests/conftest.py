import io

import pytest
from rich.console import Console

from radixtool import main as radix_main


class Captured:
    def __init__(self):
        self.out = io.StringIO()
        self.err = io.StringIO()

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def consoles(monkeypatch):
    """Swap the CLI consoles for plain, wide, colourless in-memory ones."""
    captured = Captured()
    monkeypatch.setattr(
        radix_main, "console", Console(file=captured.out, width=200, color_system=None)
    )
    monkeypatch.setattr(
        radix_main, "err_console", Console(file=captured.err, width=200, color_system=None)
    )
    return captured

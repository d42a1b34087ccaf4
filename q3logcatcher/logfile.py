"""Feed a whole console log file to a catcher."""

from __future__ import annotations

import os
from pathlib import Path

from q3logcatcher.catcher import Catcher


class LogfileClient:
    """Reads a log file once and hands its contents to a catcher."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        try:
            os.stat(path)
        except FileNotFoundError:
            raise FileNotFoundError(f"file {path} does not exist") from None
        except OSError:
            pass
        self.path = Path(path)

    def run(self, catcher: Catcher) -> None:
        """Process the whole file with the catcher."""
        catcher.process(self.path.read_bytes())
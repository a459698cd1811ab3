import logging
import os
import pathlib
from typing import Protocol

from include_shader import util
from include_shader.tempfile import AtomicWriteFile

logger = logging.getLogger(__name__)


class PathTracker(Protocol):
    """Receives every file an expansion reads, for change tracking."""

    def register(self, path: pathlib.Path) -> None: ...


class NullTracker:
    """
    Tracker for hosts without change tracking.

    Clean rebuilds stay correct, but a build that caches the expansion will
    not notice edits to included files.
    """

    _warned: bool

    def __init__(self) -> None:
        self._warned = False

    def register(self, path: pathlib.Path) -> None:
        if not self._warned:
            logger.debug(
                "Path tracking is disabled, changes to included files may not "
                "trigger a rebuild"
            )
            self._warned = True


class RecordingTracker:
    paths: list[pathlib.Path]

    def __init__(self) -> None:
        self.paths = []

    def register(self, path: pathlib.Path) -> None:
        if path not in self.paths:
            self.paths.append(path)


class DepfileTracker(RecordingTracker):
    """
    Collects dependencies and writes them as a Make/Ninja depfile.
    """

    target: str
    depfile: pathlib.Path

    def __init__(self, target: str | os.PathLike, depfile: str | os.PathLike) -> None:
        super().__init__()
        self.target = str(target)
        self.depfile = pathlib.Path(depfile)

    def format(self):
        return util.format_depfile(self.target, self.paths)

    def write(self):
        content = self.format()
        self.depfile.parent.mkdir(parents=True, exist_ok=True)

        # Readers never see a half-written depfile.
        with AtomicWriteFile(self.depfile, "w", encoding="utf-8") as f:
            f.write(content)

        logger.debug(f"Wrote {len(self.paths)} dependencies to {self.depfile}")
        return self.depfile

import logging
import os
import pathlib

from .errors import PathNotFound

logger = logging.getLogger(__name__)


def resolve(include_path: str | os.PathLike, base_dir: str | os.PathLike) -> pathlib.Path:
    """
    Resolves an include path to a canonical file path.

    Absolute paths are only canonicalized, relative ones are joined onto
    `base_dir` first. Raises `PathNotFound` if the result is not an existing
    regular file.
    """
    path = pathlib.Path(include_path)
    if not path.is_absolute():
        path = pathlib.Path(base_dir) / path

    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathNotFound(
            f'Failed to resolve path "{path}": {e}', include_path=str(include_path)
        ) from e

    if not resolved.is_file():
        raise PathNotFound(
            f'Failed to resolve path "{path}": not a file',
            include_path=str(include_path),
        )

    return resolved


class PathResolver:
    """
    Picks the base directory for each include.

    With `relative_to_including_file` every include is resolved against the
    directory of the file containing it, otherwise against `root`.
    """

    root: pathlib.Path
    relative_to_including_file: bool

    def __init__(
        self,
        root: str | os.PathLike = None,
        relative_to_including_file: bool = True,
    ) -> None:
        self.root = pathlib.Path(root if root is not None else os.getcwd()).absolute()
        self.relative_to_including_file = relative_to_including_file

    def base_dir_for(self, including_file: pathlib.Path):
        if self.relative_to_including_file:
            return including_file.parent
        return self.root

    def resolve_entry(self, entry_path: str | os.PathLike):
        return resolve(entry_path, self.root)

    def resolve_include(self, include_path: str, including_file: pathlib.Path):
        base_dir = self.base_dir_for(including_file)
        resolved = resolve(include_path, base_dir)
        logger.debug(f'Resolved "{include_path}" from {including_file} to {resolved}')
        return resolved

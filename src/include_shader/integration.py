import os
import pathlib

from .config import IncludeConfig
from .expander import Expander, ExpansionResult
from .resolver import PathResolver
from .tracking import NullTracker, PathTracker


def _make_expander(
    config: IncludeConfig, tracker: PathTracker, call_site: str | os.PathLike
):
    if config.track_path and tracker is not None:
        active_tracker = tracker
    else:
        active_tracker = NullTracker()

    resolver = PathResolver(config.root, config.relative_path)
    entry_resolver = resolver
    if config.relative_path and call_site is not None:
        entry_resolver = PathResolver(
            pathlib.Path(call_site).absolute().parent, config.relative_path
        )
    return Expander(resolver, active_tracker, config.encoding), entry_resolver


def include_shader_result(
    path: str | os.PathLike,
    config: IncludeConfig = None,
    tracker: PathTracker = None,
    call_site: str | os.PathLike = None,
) -> ExpansionResult:
    """
    Expands a shader file the way a build step would.

    By default `path` and every include are located relative to `config.root`.
    With `config.relative_path` the entry file is located relative to
    `call_site` (the file asking for the shader) and each include relative to
    the file containing it. Dependencies reach `tracker` only if
    `config.track_path` is set.
    """
    if config is None:
        config = IncludeConfig()

    expander, entry_resolver = _make_expander(config, tracker, call_site)
    entry_path = entry_resolver.resolve_entry(path)
    return expander.expand(entry_path)


def include_shader(
    path: str | os.PathLike,
    config: IncludeConfig = None,
    tracker: PathTracker = None,
    call_site: str | os.PathLike = None,
) -> str:
    return include_shader_result(path, config, tracker, call_site).text

import logging
import os
import pathlib
from dataclasses import dataclass, field

from .dependency_graph import DependencyGraph, DependencySet
from .directive import scan_directives
from .errors import CyclicInclude, PathNotFound, ReadError
from .resolver import PathResolver
from .tracking import NullTracker, PathTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpansionResult:
    text: str
    dependencies: tuple[pathlib.Path, ...]
    # Not part of equality or the hash.
    graph: DependencyGraph = field(compare=False)


class _ExpansionContext:
    """State of a single `expand` call. Never shared between calls."""

    visiting: list[pathlib.Path]
    dependencies: DependencySet
    graph: DependencyGraph
    contents: dict[pathlib.Path, str]

    def __init__(self) -> None:
        self.visiting = []
        self.dependencies = DependencySet()
        self.graph = DependencyGraph()
        self.contents = {}


class Expander:
    resolver: PathResolver
    tracker: PathTracker
    encoding: str

    def __init__(
        self,
        resolver: PathResolver = None,
        tracker: PathTracker = None,
        encoding: str = "utf-8",
    ) -> None:
        self.resolver = resolver or PathResolver()
        self.tracker = tracker or NullTracker()
        self.encoding = encoding

    def expand(self, entry_path: str | os.PathLike):
        """
        Flattens `entry_path` and all files it includes into a single text.

        Relative entry paths are resolved against the resolver's root.
        """
        path = self.resolver.resolve_entry(entry_path)
        context = _ExpansionContext()
        context.graph.add_vertex(path)

        text = self._expand_file(path, context)

        logger.debug(f"Expanded {path} with {len(context.dependencies)} dependencies")
        return ExpansionResult(text, context.dependencies.to_tuple(), context.graph)

    def _expand_file(self, path: pathlib.Path, context: _ExpansionContext) -> str:
        if path in context.visiting:
            first = context.visiting.index(path)
            raise CyclicInclude(context.visiting[first:] + [path])

        context.visiting.append(path)
        if context.dependencies.add(path):
            self.tracker.register(path)

        text = self._load(path, context)
        directives = scan_directives(text, path)

        parts: list[str] = []
        position = 0
        for directive in directives:
            try:
                include_path = self.resolver.resolve_include(directive.path, path)
            except PathNotFound as e:
                raise PathNotFound(
                    f'Failed to include "{directive.path}": {e}',
                    path,
                    directive.line,
                    directive.path,
                ) from e

            context.graph.add_edge(path, include_path)
            try:
                included = self._expand_file(include_path, context)
            except CyclicInclude as e:
                if e.file is None:
                    raise CyclicInclude(
                        e.cycle, path, directive.line, directive.path
                    ) from None
                raise

            parts.append(text[position : directive.start])
            parts.append(included)
            position = directive.end
        parts.append(text[position:])

        context.visiting.pop()
        return "".join(parts)

    def _load(self, path: pathlib.Path, context: _ExpansionContext) -> str:
        if path in context.contents:
            return context.contents[path]

        try:
            with open(path, encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Failed to read file: {e}", path) from e

        context.contents[path] = text
        return text


def expand(
    entry_path: str | os.PathLike,
    root: str | os.PathLike = None,
    relative_to_including_file: bool = True,
    tracker: PathTracker = None,
    encoding: str = "utf-8",
):
    resolver = PathResolver(root, relative_to_including_file)
    return Expander(resolver, tracker, encoding).expand(entry_path)

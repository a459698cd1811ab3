import pathlib
from collections.abc import Iterator


class DependencySet:
    """
    Ordered set of canonical paths in first-visit order.
    """

    _paths: dict[pathlib.Path, None]

    def __init__(self) -> None:
        self._paths = {}

    def add(self, path: pathlib.Path) -> bool:
        """Returns True if the path was not in the set yet."""
        if path in self._paths:
            return False
        self._paths[path] = None
        return True

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[pathlib.Path]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def to_tuple(self):
        return tuple(self._paths)


class DependencyGraph:
    """
    Directed graph of include edges, `includer -> included`.

    Edges and vertices keep the order in which they were first seen, so two
    runs over the same files produce identical graphs.
    """

    graph: dict[pathlib.Path, dict[pathlib.Path, None]]

    def __init__(self) -> None:
        self.graph = {}

    def add_vertex(self, vertex: pathlib.Path):
        self.graph.setdefault(vertex, {})

    def add_edge(self, a: pathlib.Path, b: pathlib.Path):
        self.graph.setdefault(a, {})[b] = None
        self.add_vertex(b)

    def vertices(self):
        return list(self.graph)

    def edges(self):
        return [(a, b) for a, children in self.graph.items() for b in children]

    def includes_of(self, vertex: pathlib.Path):
        return list(self.graph.get(vertex, ()))

    def included_by(self, vertex: pathlib.Path):
        return [a for a, children in self.graph.items() if vertex in children]

    def dependents_of(self, vertex: pathlib.Path):
        """
        Returns every file that transitively includes `vertex`, i.e. the files
        whose flattened output changes when `vertex` changes.
        """
        found: dict[pathlib.Path, None] = {}
        queue = [vertex]
        while queue:
            current = queue.pop(0)
            for parent in self.included_by(current):
                if parent not in found and parent != vertex:
                    found[parent] = None
                    queue.append(parent)
        return list(found)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyGraph):
            return NotImplemented
        return self.edges() == other.edges() and self.vertices() == other.vertices()

import pathlib


class IncludeError(Exception):
    """
    Base class for every error raised while expanding includes.
    """

    file: pathlib.Path | None
    line: int | None
    include_path: str | None

    def __init__(
        self,
        message: str,
        file: pathlib.Path = None,
        line: int = None,
        include_path: str = None,
    ) -> None:
        self.file = file
        self.line = line
        self.include_path = include_path
        super().__init__(self._format(message))

    def _format(self, message: str):
        if self.file is None:
            return message
        location = str(self.file)
        if self.line is not None:
            location += f":{self.line}"
        return f"{location}: {message}"


class PathNotFound(IncludeError):
    pass


class ReadError(IncludeError):
    pass


class MalformedDirective(IncludeError):
    pass


class CyclicInclude(IncludeError):
    cycle: list[pathlib.Path]

    def __init__(
        self,
        cycle: list[pathlib.Path],
        file: pathlib.Path = None,
        line: int = None,
        include_path: str = None,
    ) -> None:
        self.cycle = list(cycle)
        super().__init__(
            "Circular dependency detected: " + " -> ".join(str(p) for p in cycle),
            file,
            line,
            include_path,
        )

import pathlib
import re
from dataclasses import dataclass

from include_shader import util
from .errors import MalformedDirective

# "#include" as a whole word starts a directive line, whatever follows it.
DIRECTIVE_PREFIX_RE = re.compile(r"#include(?![A-Za-z0-9_])")
DIRECTIVE_RE = re.compile(r'#include[ \t]+"(?P<path>[^"]+)"[ \t]*$')


@dataclass(frozen=True)
class IncludeDirective:
    path: str
    line: int
    start: int
    end: int


def is_directive_line(line: str) -> bool:
    return DIRECTIVE_PREFIX_RE.match(line.lstrip()) is not None


def scan_directives(text: str, file: pathlib.Path = None) -> list[IncludeDirective]:
    """
    Returns all include directives in `text`, in source order.

    Recognition is line oriented and does not know about comments or string
    literals of the shader language, so a directive inside a block comment is
    still expanded.
    """
    directives: list[IncludeDirective] = []
    offset = 0
    for line_number, line in enumerate(util.split_lines(text), 1):
        content = util.strip_line_ending(line)
        stripped = content.lstrip()
        indent = len(content) - len(stripped)

        if is_directive_line(stripped):
            match = DIRECTIVE_RE.match(stripped)
            if match is None:
                raise MalformedDirective(
                    f"Malformed include directive: {stripped.rstrip()!r}, "
                    'expected #include "path"',
                    file,
                    line_number,
                )
            start = offset + indent
            # The directive token ends at the closing quote, trailing blanks stay.
            end = start + match.end("path") + 1
            directives.append(
                IncludeDirective(match.group("path"), line_number, start, end)
            )

        offset += len(line)
    return directives

import os
import pathlib
import re


def split_lines(text: str) -> list[str]:
    """Splits on \\n, \\r\\n and \\r only, keeping the line endings."""
    return re.findall(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+$", text)


def strip_line_ending(line: str):
    return line.rstrip("\r\n")


def escape_depfile_path(path: str | os.PathLike):
    # Make and Ninja both read backslash-escaped spaces and "#", and "$$" for "$".
    path = str(path)
    path = path.replace("$", "$$")
    path = re.sub(r"([ #])", r"\\\1", path)
    return path


def format_depfile(target: str | os.PathLike, dependencies: list[pathlib.Path]):
    lines = [escape_depfile_path(target) + ":"]
    lines.extend(" " + escape_depfile_path(dep) for dep in dependencies)
    return " \\\n".join(lines) + "\n"

import contextlib, tempfile, os


@contextlib.contextmanager
def AtomicWriteFile(path: str | os.PathLike, mode: str = "w", **kwargs):
    """
    Context manager yielding a temporary file next to `path` that replaces
    `path` when the block exits without an error. The temporary file is
    always removed.
    """
    kwargs["delete"] = False
    kwargs.setdefault("dir", os.path.dirname(os.path.abspath(path)))
    kwargs.setdefault("suffix", ".tmp")
    file = tempfile.NamedTemporaryFile(mode, **kwargs)
    try:
        yield file
        file.close()
        os.replace(file.name, path)
    finally:
        file.close()
        with contextlib.suppress(FileNotFoundError):
            os.remove(file.name)

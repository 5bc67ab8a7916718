"""Find test files below a path."""

from collections.abc import Iterator
from pathlib import Path

from phpt_runner.errors import InvalidPathError

TEST_FILE_EXTENSION = "phpt"


def walk(path: str) -> Iterator[str]:
    """Return the files below path.

    A regular file yields only itself. A directory is descended recursively,
    lazily, visiting entries in name order so repeated runs see the same order.

    Raises:
        InvalidPathError: If path is neither a file nor a directory, or a
            directory below it cannot be read while iterating

    """
    root = Path(path)
    if root.is_file():
        return iter((path,))
    if root.is_dir():
        return _walk_tree(root)
    raise InvalidPathError(f"Invalid path '{path}'")


def _walk_tree(root: Path) -> Iterator[str]:
    for dirpath, dirnames, filenames in root.walk(on_error=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            yield str(dirpath / filename)


def _raise_walk_error(error: OSError) -> None:
    raise InvalidPathError(
        f"Cannot read directory '{error.filename}': {error.strerror}"
    ) from error


def is_test_file(path: str) -> bool:
    """Check if the final path segment has the test file extension."""
    _, dot, extension = Path(path).name.rpartition(".")
    return bool(dot) and extension == TEST_FILE_EXTENSION


def output_basename(path: str) -> str:
    """Derive where the actual/expected output of a test is kept.

    The final extension is stripped and the file is moved into a sibling
    ``output`` directory: ``a/b/c.phpt`` becomes ``a/b/output/c``.
    """
    parent, sep, filename = path.rpartition("/")
    stem, dot, _ = filename.rpartition(".")
    if dot and stem:
        filename = stem
    if sep:
        return f"{parent}/output/{filename}"
    return f"output/{filename}"

"""Locating data folders and reading text resources."""

from pathlib import Path


def find_folder(folder_name, start=None):
    """Search ``start`` (default: the working directory) and its ancestors for a folder.

    Returns ``(path, True)`` for the first match, or ``(start, False)`` when
    none is found. The filesystem root itself is not searched.
    """
    origin = (Path.cwd() if start is None else Path(start)).absolute()
    for directory in (origin, *origin.parents):
        if directory.parent == directory:
            break
        candidate = directory / folder_name
        if candidate.is_dir():
            return candidate, True
    return origin, False


def load_file_to_string(path):
    """Return the text of a file, or an empty string if it cannot be read."""
    try:
        return Path(path).read_text()
    except OSError:
        return ""
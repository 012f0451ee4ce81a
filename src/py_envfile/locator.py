"""Find an env file in a directory.

Only the direct entries of one directory are considered; there is no
walking up to parent directories and no recursion into subdirectories.
The first regular file whose name matches exactly wins.  Directory
iteration order is whatever the operating system returns, so if two
entries could match (they can't on a sane filesystem) the winner is not
deterministic.
"""

from pathlib import Path

DEFAULT_FILENAME = ".env"


def find_env_file(filename: str = DEFAULT_FILENAME, directory: Path | None = None) -> Path | None:
    """Return the path of *filename* inside *directory*, or None.

    Args:
        filename: Exact file name to look for.
        directory: Directory to scan; the current working directory
            (read at call time) when None.

    Returns:
        The matching path, or None when there is no match, the name is
        empty, or the directory cannot be listed.

    """
    if not filename:
        return None
    root = directory if directory is not None else Path.cwd()
    try:
        entries = list(root.iterdir())
    except OSError:
        return None
    for entry in entries:
        if entry.name == filename and entry.is_file():
            return entry
    return None

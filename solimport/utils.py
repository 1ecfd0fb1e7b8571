import os
from pathlib import Path
from typing import Iterator, Optional, Union

def normalize_path(path: str) -> str:
    """
    Returns a canonical absolute POSIX path.
    On Windows, it ensures the drive letter is consistently lowercased so that
    the same file always prints the same way.
    """
    if not path:
        return ""

    path_str = Path(path).resolve().as_posix()

    if os.name == 'nt' and len(path_str) > 1 and path_str[1] == ':':
        path_str = path_str[0].lower() + path_str[1:]

    return path_str

def iter_ancestors(start: Union[str, Path], stop_at: Optional[Union[str, Path]] = None) -> Iterator[Path]:
    """
    Yields `start` followed by each of its parents, ending at the filesystem root.

    If `stop_at` is given and `start` lies inside it, the walk ends after
    yielding `stop_at` itself. A `stop_at` that does not contain `start` is ignored.
    Every call returns a fresh generator.
    """
    current = Path(start).resolve()
    boundary = None
    if stop_at is not None:
        root = Path(stop_at).resolve()
        if current == root or root in current.parents:
            boundary = root

    while True:
        yield current
        if current == boundary:
            return
        parent = current.parent
        # Path('/').parent == Path('/')
        if parent == current:
            return
        current = parent

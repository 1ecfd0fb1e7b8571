import hashlib
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from .config import REMAPPING_SOURCES
from .config_loader import ConfigLoader
from .models import Remapping

logger = logging.getLogger(__name__)

Signature = Tuple[Optional[Tuple[int, int, str]], ...]

def apply_remappings(remappings: Iterable[Remapping], path: str) -> str:
    """
    Rewrites `path` with the first remapping whose prefix occurs anywhere in it.

    Matching is substring containment and the substitution replaces every
    occurrence of the prefix. Later remappings are never consulted once one
    matches.
    """
    for remapping in remappings:
        if remapping.prefix in path:
            return path.replace(remapping.prefix, remapping.target)
    return path

def merge_remappings(line_based: Sequence[Remapping], toml_based: Sequence[Remapping]) -> Tuple[Remapping, ...]:
    """remappings.txt entries come first, then foundry.toml ones. Duplicates are kept."""
    return tuple(line_based) + tuple(toml_based)

class RemappingIndex:
    """
    Memoizes the merged remappings of each directory.

    An entry is reused only while the directory's remappings.txt and
    foundry.toml keep the same modification time, size and content hash.
    """

    def __init__(self, loader: Optional[ConfigLoader] = None):
        self.loader = loader or ConfigLoader()
        self._cache: Dict[str, Tuple[Signature, Tuple[Remapping, ...]]] = {}

    def remappings_for(self, directory: Union[str, Path]) -> Tuple[Remapping, ...]:
        directory = Path(directory)
        key = str(directory)
        signature = self._signature(directory)

        cached = self._cache.get(key)
        if cached and cached[0] == signature:
            return cached[1]

        if any(stamp is not None for stamp in signature):
            remappings = merge_remappings(
                self.loader.read_line_mappings(directory),
                self.loader.read_toml_remappings(directory),
            )
        else:
            remappings = ()

        if remappings:
            logger.debug(f"Loaded {len(remappings)} remappings from {directory}")
        self._cache[key] = (signature, remappings)
        return remappings

    def clear(self):
        self._cache.clear()

    @staticmethod
    def _signature(directory: Path) -> Signature:
        stamps = []
        for name in REMAPPING_SOURCES:
            try:
                path = directory / name
                stat = path.stat()
                # mtime granularity can hide a same-size rewrite
                digest = hashlib.sha256(path.read_bytes()).hexdigest()
                stamps.append((stat.st_mtime_ns, stat.st_size, digest))
            except (OSError, ValueError):
                stamps.append(None)
        return tuple(stamps)

from abc import ABC, abstractmethod
from typing import Iterator, Optional
from pathlib import Path

from ..utils import iter_ancestors

class ImportResolver(ABC):
    """
    Abstract base class for one import resolution strategy.
    Responsible for mapping an import string (e.g. "forge-std/Test.sol")
    seen in a file under `directory` to a physical file on disk.
    """

    name: str = "base"

    @abstractmethod
    def try_resolve(self, directory: Path, import_path: str, project_root: Optional[Path] = None) -> Optional[str]:
        """
        Resolves an import string to an absolute file path.

        Args:
            directory: The directory of the file containing the import.
            import_path: The import string without quotes
                         (e.g. "./Token.sol", "@openzeppelin/contracts/token/ERC20/ERC20.sol").
            project_root: Optional upper bound for upward searches.

        Returns:
            Absolute path to the resolved file, or None if this strategy finds nothing.
        """
        pass

    @staticmethod
    def _ancestors(directory: Path, project_root: Optional[Path] = None) -> Iterator[Path]:
        return iter_ancestors(directory, stop_at=project_root)

    @staticmethod
    def _join(directory: Path, *parts: str) -> Path:
        """Joins `parts` under `directory`. Leading '/' is dropped so no part can escape it."""
        return directory.joinpath(*(part.lstrip("/\\") for part in parts))

    @staticmethod
    def _probe(candidate: Path) -> Optional[str]:
        """Returns the absolute path of `candidate` if it is an existing regular file."""
        try:
            if candidate.is_file():
                return str(candidate.resolve())
        except (OSError, ValueError):
            # Names too long, embedded NUL bytes, permission errors...
            pass
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

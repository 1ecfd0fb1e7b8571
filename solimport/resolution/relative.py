from pathlib import Path
from typing import Optional
from .base import ImportResolver

class RelativeImportResolver(ImportResolver):
    """
    Resolves imports relative to the importing file's directory
    (import "./Token.sol", import "../interfaces/IERC20.sol", import "Token.sol").
    Single lookup, no upward search.
    """

    name = "relative"

    def try_resolve(self, directory: Path, import_path: str, project_root: Optional[Path] = None) -> Optional[str]:
        return self._probe(self._join(directory, import_path))

from pathlib import Path
from typing import Optional
from ..config import NODE_MODULES_DIR
from .base import ImportResolver

class NpmImportResolver(ImportResolver):
    """
    Resolves package imports installed with npm/yarn
    (import "@openzeppelin/contracts/access/Ownable.sol").
    Looks in node_modules/ of the importing directory, then of each parent.
    """

    name = "npm"

    def try_resolve(self, directory: Path, import_path: str, project_root: Optional[Path] = None) -> Optional[str]:
        for ancestor in self._ancestors(directory, project_root):
            resolved = self._probe(self._join(ancestor, NODE_MODULES_DIR, import_path))
            if resolved:
                return resolved
        return None

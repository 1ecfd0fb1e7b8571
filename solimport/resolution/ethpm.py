from pathlib import Path
from typing import Optional
from ..config import INSTALLED_CONTRACTS_DIR, ETHPM_CONTRACTS_DIR
from .base import ImportResolver

class EthPMImportResolver(ImportResolver):
    """
    Resolves packages installed by Truffle's EthPM.
    EthPM keeps sources under installed_contracts/<package>/contracts/, so
    "owned/owned.sol" is looked up as installed_contracts/owned/contracts/owned.sol
    in the importing directory and each of its parents.
    """

    name = "ethpm"

    def try_resolve(self, directory: Path, import_path: str, project_root: Optional[Path] = None) -> Optional[str]:
        rewritten = self.rewrite(import_path)
        for ancestor in self._ancestors(directory, project_root):
            resolved = self._probe(self._join(ancestor, INSTALLED_CONTRACTS_DIR, rewritten))
            if resolved:
                return resolved
        return None

    @staticmethod
    def rewrite(import_path: str) -> str:
        """Inserts the contracts/ directory after the package name. Paths without '/' are unchanged."""
        return import_path.replace("/", f"/{ETHPM_CONTRACTS_DIR}/", 1)

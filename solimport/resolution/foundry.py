import logging
from pathlib import Path
from typing import Optional
from ..config import FOUNDRY_LIB_DIR, FOUNDRY_SRC_DIR
from ..remapping import RemappingIndex, apply_remappings
from .base import ImportResolver

logger = logging.getLogger(__name__)

class FoundryImportResolver(ImportResolver):
    """
    Resolves Foundry imports.
    Handles:
    - Remappings from remappings.txt and foundry.toml (forge-std/=lib/forge-std/src/)
    - The default library layout (forge-std/Test.sol -> lib/forge-std/src/Test.sol)

    Each directory from the importing one up to the root is tried in turn, using
    only the remappings declared in that directory.
    """

    name = "foundry"

    def __init__(self, remapping_index: Optional[RemappingIndex] = None):
        self.remapping_index = remapping_index or RemappingIndex()

    def try_resolve(self, directory: Path, import_path: str, project_root: Optional[Path] = None) -> Optional[str]:
        for ancestor in self._ancestors(directory, project_root):
            # 1. Remapped path
            remappings = self.remapping_index.remappings_for(ancestor)
            remapped = apply_remappings(remappings, import_path)
            resolved = self._probe(self._join(ancestor, remapped))
            if resolved:
                if remapped != import_path:
                    logger.debug(f"Remapped {import_path} -> {remapped} in {ancestor}")
                return resolved

            # 2. Default lib/<name>/src/ layout
            resolved = self._resolve_default_lib(ancestor, import_path)
            if resolved:
                return resolved
        return None

    def _resolve_default_lib(self, directory: Path, import_path: str) -> Optional[str]:
        segments = [s for s in import_path.split("/") if s]
        if len(segments) < 2:
            return None

        lib_name, rest = segments[0], segments[1:]
        return self._probe(directory.joinpath(FOUNDRY_LIB_DIR, lib_name, FOUNDRY_SRC_DIR, *rest))

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union
from .models import ImportResolution
from .resolver import ImportPathResolver

logger = logging.getLogger(__name__)

class ImportLinker:
    """Resolves every import of a source file against one shared resolver."""

    def __init__(self, resolver: Optional[ImportPathResolver] = None):
        self.resolver = resolver or ImportPathResolver()

    def resolve_all(self, source_file: Union[str, Path], import_paths: Iterable[str], project_root: Optional[Union[str, Path]] = None) -> List[ImportResolution]:
        results = []
        seen = set()
        for import_path in import_paths:
            # The same import may be repeated (e.g. once per imported symbol)
            if import_path in seen:
                continue
            seen.add(import_path)

            outcome = self.resolver.resolve_detailed(source_file, import_path, project_root)
            if not outcome.found:
                logger.info(f"Unresolved import '{import_path}' in {source_file}")
            results.append(outcome)
        return results

    def link_imports(self, source_file: Union[str, Path], import_paths: Iterable[str], project_root: Optional[Union[str, Path]] = None) -> Dict[str, Optional[str]]:
        """Maps each import path to its resolved file (None when unresolved)."""
        return {
            r.import_path: r.resolved
            for r in self.resolve_all(source_file, import_paths, project_root)
        }

    def unresolved(self, source_file: Union[str, Path], import_paths: Iterable[str], project_root: Optional[Union[str, Path]] = None) -> List[str]:
        return [
            r.import_path
            for r in self.resolve_all(source_file, import_paths, project_root)
            if not r.found
        ]

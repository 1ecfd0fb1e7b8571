import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .config_loader import ConfigLoader
from .models import ImportResolution
from .remapping import RemappingIndex
from .resolution.base import ImportResolver
from .resolution.relative import RelativeImportResolver
from .resolution.npm import NpmImportResolver
from .resolution.ethpm import EthPMImportResolver
from .resolution.foundry import FoundryImportResolver

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

def default_strategies(config_loader: Optional[ConfigLoader] = None) -> List[ImportResolver]:
    """The standard chain: relative, npm, EthPM, then Foundry."""
    return [
        RelativeImportResolver(),
        NpmImportResolver(),
        EthPMImportResolver(),
        FoundryImportResolver(RemappingIndex(config_loader)),
    ]

class ImportPathResolver:
    """
    Entry point for Solidity import resolution.

    Strategies are tried in order and the first one that finds an existing file
    wins. An import that no strategy can place resolves to None; that is the
    normal outcome for unresolved imports, not an error.
    """

    def __init__(self, strategies: Optional[Sequence[ImportResolver]] = None, config_loader: Optional[ConfigLoader] = None):
        self.strategies: List[ImportResolver] = (
            list(strategies) if strategies is not None else default_strategies(config_loader)
        )

    def resolve(self, source_file: PathLike, import_path: str, project_root: Optional[PathLike] = None) -> Optional[str]:
        """
        Args:
            source_file: "/path/to/project/src/Token.sol"
            import_path: "forge-std/Test.sol" or "./IToken.sol" (no quotes)
            project_root: Optional directory where upward searches stop

        Returns:
            Absolute path of the imported file, or None.
        """
        return self.resolve_detailed(source_file, import_path, project_root).resolved

    def resolve_detailed(self, source_file: PathLike, import_path: str, project_root: Optional[PathLike] = None) -> ImportResolution:
        """Like resolve(), but also reports which strategy matched."""
        outcome = ImportResolution(import_path=import_path or "")
        if not import_path:
            return outcome

        directory = Path(source_file).parent
        root = Path(project_root) if project_root is not None else None

        for strategy in self.strategies:
            resolved = strategy.try_resolve(directory, import_path, root)
            if resolved:
                logger.debug(f"{source_file}: '{import_path}' -> {resolved} ({strategy.name})")
                return ImportResolution(import_path=import_path, resolved=resolved, strategy=strategy.name)

        logger.debug(f"{source_file}: '{import_path}' not found")
        return outcome

    def resolve_literal(self, source_file: PathLike, literal: str, project_root: Optional[PathLike] = None) -> Optional[str]:
        """
        Resolves an import string literal as written in source, quotes included
        ('"forge-std/Test.sol"'). The first and last characters are dropped.
        """
        if len(literal) < 2:
            return None
        return self.resolve(source_file, literal[1:-1], project_root)

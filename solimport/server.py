import sys
import logging
import builtins
import traceback
from pathlib import Path
from typing import List, Optional
from fastmcp import FastMCP

# --- STDOUT FORTRESS ---
_original_print = builtins.print

def safe_print(*args, **kwargs):
    if 'file' not in kwargs or kwargs['file'] is None or kwargs['file'] == sys.stdout:
        kwargs['file'] = sys.stderr
    _original_print(*args, **kwargs)

from .config import LOG_DIR, LOG_LEVEL, PROJECT_ROOT
from .config_loader import ConfigLoader
from .linker import ImportLinker
from .resolver import ImportPathResolver
from .utils import normalize_path

try:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_dir = LOG_DIR
except OSError:
    # Fallback to local
    log_dir = PROJECT_ROOT / ".solimport" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

# Configure logging to file
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.FileHandler(log_dir / "server.log", encoding='utf-8'),
        logging.StreamHandler(sys.stderr)
    ]
)
logger = logging.getLogger("server")

# Initialize components
mcp = FastMCP("Solidity Import Resolver")
config_loader = ConfigLoader()
resolver = ImportPathResolver(config_loader=config_loader)
linker = ImportLinker(resolver)

def _describe_source(source_file: str) -> Optional[str]:
    """Returns an error message when the importing file's directory does not exist."""
    if not source_file:
        return "Error: source_file is required."
    directory = Path(source_file).resolve().parent
    if not directory.is_dir():
        return f"Error: Directory {directory} does not exist."
    return None

def resolve_import_impl(source_file: str, import_path: str, root_path: Optional[str] = None) -> str:
    try:
        error = _describe_source(source_file)
        if error:
            return error

        outcome = resolver.resolve_detailed(source_file, import_path, root_path)
        if not outcome.found:
            return f"Import '{import_path}' could not be resolved from {normalize_path(source_file)}."
        return f"{normalize_path(outcome.resolved)} (via {outcome.strategy})"
    except Exception as e:
        logger.error(f"resolve_import failed: {e}\n{traceback.format_exc()}")
        return f"Error resolving import: {e}"

def resolve_imports_impl(source_file: str, import_paths: List[str], root_path: Optional[str] = None) -> str:
    try:
        error = _describe_source(source_file)
        if error:
            return error
        if not import_paths:
            return "No imports given."

        lines = []
        missing = 0
        for outcome in linker.resolve_all(source_file, import_paths, root_path):
            if outcome.found:
                lines.append(f"  - {outcome.import_path} -> {normalize_path(outcome.resolved)} ({outcome.strategy})")
            else:
                missing += 1
                lines.append(f"  - {outcome.import_path} -> NOT FOUND")

        summary = f"Resolved {len(lines) - missing}/{len(lines)} imports of {normalize_path(source_file)}:"
        return "\n".join([summary] + lines)
    except Exception as e:
        logger.error(f"resolve_imports failed: {e}\n{traceback.format_exc()}")
        return f"Error resolving imports: {e}"

def show_remappings_impl(directory: str = ".") -> str:
    try:
        target = Path(directory).resolve()
        if not target.is_dir():
            return f"Error: Directory {target} does not exist."

        remappings = config_loader.read_line_mappings(target) + config_loader.read_toml_remappings(target)
        if not remappings:
            return f"No remappings declared in {target.as_posix()}."

        lines = [f"  {i}. {r} ({r.origin})" for i, r in enumerate(remappings, start=1)]
        return f"Remappings for {target.as_posix()} (first match wins):\n" + "\n".join(lines)
    except Exception as e:
        logger.error(f"show_remappings failed: {e}\n{traceback.format_exc()}")
        return f"Error reading remappings: {e}"

@mcp.tool()
async def resolve_import(source_file: str, import_path: str, root_path: Optional[str] = None) -> str:
    """
    Finds the file a Solidity import statement refers to.

    Tries, in order: a path relative to the importing file, node_modules/,
    EthPM installed_contracts/, and Foundry remappings / lib/<name>/src/.

    Args:
        source_file: The .sol file containing the import.
        import_path: The import string without quotes (e.g. "forge-std/Test.sol").
        root_path: Optional project root; upward searches stop there.
    """
    return resolve_import_impl(source_file, import_path, root_path)

@mcp.tool()
async def resolve_imports(source_file: str, import_paths: List[str], root_path: Optional[str] = None) -> str:
    """
    Resolves all imports of one Solidity file and reports the ones that are missing.

    Args:
        source_file: The .sol file containing the imports.
        import_paths: The import strings without quotes.
        root_path: Optional project root; upward searches stop there.
    """
    return resolve_imports_impl(source_file, import_paths, root_path)

@mcp.tool()
async def show_remappings(directory: str = ".") -> str:
    """
    Lists the remappings declared in a directory's remappings.txt and foundry.toml,
    in the order they are applied.

    Args:
        directory: Directory holding remappings.txt / foundry.toml.
    """
    return show_remappings_impl(directory)

if __name__ == "__main__":
    # Apply stdout protection only when running as a server
    builtins.print = safe_print
    mcp.run()

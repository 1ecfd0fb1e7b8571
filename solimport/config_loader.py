import re
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import tomli

from .config import REMAPPINGS_FILE, FOUNDRY_CONFIG_FILE, FOUNDRY_PROFILE
from .models import Remapping

logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"[\r\n]+")

TomlLoads = Callable[[str], Dict[str, Any]]

class ConfigLoader:
    """
    Reads Foundry remapping declarations from a single directory.

    Two sources are supported:
    - remappings.txt: one `prefix=target` per line
    - foundry.toml: the `profile.default.remappings` string array

    Nothing here raises. A missing file, unreadable bytes, invalid TOML or a
    malformed entry all degrade to "no remappings" for that entry or file.
    """

    def __init__(self, toml_loads: TomlLoads = tomli.loads):
        self._toml_loads = toml_loads

    def read_line_mappings(self, directory: Union[str, Path]) -> List[Remapping]:
        content = self._read_text(Path(directory) / REMAPPINGS_FILE)
        if content is None:
            return []

        remappings = []
        for line in _LINE_SPLIT.split(content):
            parts = line.split("=")
            if len(parts) != 2:
                if line.strip():
                    logger.debug(f"Skipping malformed remapping line in {directory}: {line!r}")
                continue
            prefix, target = parts[0].strip(), parts[1].strip()
            if not prefix or not target:
                logger.debug(f"Skipping incomplete remapping line in {directory}: {line!r}")
                continue
            remappings.append(Remapping(prefix=prefix, target=target, origin=REMAPPINGS_FILE))
        return remappings

    def read_toml_remappings(self, directory: Union[str, Path]) -> List[Remapping]:
        config_path = Path(directory) / FOUNDRY_CONFIG_FILE
        content = self._read_text(config_path)
        if content is None:
            return []

        try:
            data = self._toml_loads(content)
        except ValueError as e:
            # tomli.TOMLDecodeError is a ValueError
            logger.warning(f"Ignoring invalid {config_path}: {e}")
            return []

        entries = self._lookup(data, "profile", FOUNDRY_PROFILE, "remappings")
        if not isinstance(entries, list):
            return []

        remappings = []
        for entry in entries:
            if not isinstance(entry, str):
                continue
            # e.g. "forge-std/=lib/forge-std/src/"
            parts = entry.strip('"').split("=")
            if len(parts) != 2 or not parts[0].strip():
                logger.debug(f"Skipping malformed remapping in {config_path}: {entry!r}")
                continue
            remappings.append(
                Remapping(prefix=parts[0].strip(), target=parts[1].strip(), origin=FOUNDRY_CONFIG_FILE)
            )
        return remappings

    @staticmethod
    def _lookup(data: Any, *keys: str) -> Any:
        for key in keys:
            if not isinstance(data, dict):
                return None
            data = data.get(key)
        return data

    @staticmethod
    def _read_text(path: Path) -> Optional[str]:
        try:
            if not path.is_file():
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return None
